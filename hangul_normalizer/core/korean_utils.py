"""
Korean Jamo (자모) Decomposition Utilities

Expands precomposed Hangul syllables into their constituent compatibility jamos.
"""

from typing import Tuple

# Hangul Unicode Constants
HANGUL_BASE = 0xAC00  # '가'
HANGUL_END = 0xD7A3   # '힣'

# Hangul Compatibility Jamo block (ㄱ..ㅣ)
COMPAT_JAMO_START = 0x3131  # 'ㄱ'
COMPAT_JAMO_END = 0x3163    # 'ㅣ'

JUNGSUNG_COUNT = 21
JONGSUNG_COUNT = 28
SYLLABLES_PER_CHOSUNG = JUNGSUNG_COUNT * JONGSUNG_COUNT  # 588

# 초성 (Initial consonants) - 19 characters
CHOSUNG_LIST = (
    'ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ',
    'ㅅ', 'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
)

# 중성 (Medial vowels) - 21 characters
JUNGSUNG_LIST = (
    'ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ', 'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ',
    'ㅙ', 'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ', 'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ', 'ㅣ'
)

# 종성 (Final consonants) - 28 characters (0 = no final consonant)
JONGSUNG_LIST = (
    '', 'ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ', 'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ', 'ㄻ',
    'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ', 'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ', 'ㅆ', 'ㅇ',
    'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
)


def is_hangul_syllable(char: str) -> bool:
    """Check if a character is a complete Hangul syllable."""
    if len(char) != 1:
        return False
    return HANGUL_BASE <= ord(char) <= HANGUL_END


def is_compat_jamo(char: str) -> bool:
    """Check if a character is a compatibility consonant or vowel letter (ㄱ..ㅣ)."""
    if len(char) != 1:
        return False
    return COMPAT_JAMO_START <= ord(char) <= COMPAT_JAMO_END


def decompose_syllable(syllable: str) -> Tuple[str, str, str]:
    """
    Decompose a single Hangul syllable into its jamos.

    Args:
        syllable: A single Hangul character (e.g., '힣')

    Returns:
        Tuple of (초성, 중성, 종성). 종성 is empty string if no final consonant.
        Non-syllables come back as (syllable, '', '').

    Example:
        decompose_syllable('힣') -> ('ㅎ', 'ㅣ', 'ㅎ')
        decompose_syllable('가') -> ('ㄱ', 'ㅏ', '')
    """
    if not is_hangul_syllable(syllable):
        return (syllable, '', '')

    offset = ord(syllable) - HANGUL_BASE
    cho_idx = offset // SYLLABLES_PER_CHOSUNG
    jung_idx = (offset - cho_idx * SYLLABLES_PER_CHOSUNG) // JONGSUNG_COUNT
    jong_idx = offset - cho_idx * SYLLABLES_PER_CHOSUNG - jung_idx * JONGSUNG_COUNT

    return (CHOSUNG_LIST[cho_idx], JUNGSUNG_LIST[jung_idx], JONGSUNG_LIST[jong_idx])


def decompose(text: str) -> str:
    """
    Expand every Hangul syllable in text into a jamo sequence.

    Each syllable becomes 초성 + 중성 (+ 종성 when present); everything else,
    including jamos that are already decomposed, is kept as-is.

    Example:
        decompose('가힣 뷁') -> 'ㄱㅏㅎㅣㅎ ㅂㅞㄺ'
    """
    jamos = []
    for char in text:
        if is_hangul_syllable(char):
            cho, jung, jong = decompose_syllable(char)
            jamos.append(cho)
            jamos.append(jung)
            if jong:
                jamos.append(jong)
        else:
            jamos.append(char)
    return ''.join(jamos)
