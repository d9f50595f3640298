"""
Hangul Text Normalization Pipeline

Stages run in a fixed order, each one optional:
    filter_chars -> derepeat -> collapse_whitespace -> decompose
"""

from dataclasses import dataclass
from typing import List, Optional

from hangul_normalizer.core.korean_utils import decompose, is_compat_jamo, is_hangul_syllable


# Punctuation and whitespace that survive filtering
ALLOWED_SYMBOLS = frozenset("~!?.,():;*/=+-[] \n")


def is_allowed_char(char: str) -> bool:
    """Check if a character is on the allow-list of the character filter."""
    if char in ALLOWED_SYMBOLS:
        return True
    if 'a' <= char <= 'z' or 'A' <= char <= 'Z' or '0' <= char <= '9':
        return True
    return is_compat_jamo(char) or is_hangul_syllable(char)


def filter_chars(text: str, replacement: str) -> str:
    """
    Replace every character outside the allow-list with `replacement`.

    Each disallowed character gets its own copy of the replacement; runs are not merged.

    Example:
        filter_chars('가#&z', '?') -> '가??z'
    """
    return ''.join(char if is_allowed_char(char) else replacement for char in text)


def derepeat(text: str, max_repeat: int) -> str:
    """
    Keep at most `max_repeat` consecutive copies of the same character.

    Runs are purely positional: any different character, whitespace included,
    starts a new run. With max_repeat=0 every character is dropped.

    Example:
        derepeat('아아아아아 음음', 3) -> '아아아 음음'
    """
    kept = []
    last_char: Optional[str] = None
    repeat = 0
    for char in text:
        if char == last_char:
            repeat += 1
        else:
            repeat = 0
            last_char = char
        if repeat < max_repeat:
            kept.append(char)
    return ''.join(kept)


def collapse_whitespace(text: str) -> str:
    """
    Trim text and collapse each whitespace run to its first character.

    Tabs inside a run are always kept.

    Example:
        collapse_whitespace('   가     나  다 라    ') -> '가 나 다 라'
    """
    kept = []
    last_was_space = False
    for char in text.strip():
        is_space = char.isspace()
        if is_space and last_was_space:
            if char == '\t':
                kept.append(char)
            continue
        kept.append(char)
        last_was_space = is_space
    return ''.join(kept)


@dataclass(frozen=True)
class NormalizeConfig:
    """
    Options for `normalize`. Every stage is disabled by default.

    filter_replacement: enables the character filter when not None
    max_repeat: enables repetition collapsing when not None (0 drops everything)
    """
    decompose_syllables: bool = False
    filter_replacement: Optional[str] = None
    max_repeat: Optional[int] = None
    collapse_whitespace: bool = False

    def __post_init__(self):
        if self.max_repeat is not None and self.max_repeat < 0:
            raise ValueError(f"max_repeat must be >= 0, got {self.max_repeat}")

    def enabled_stages(self) -> List[str]:
        """Names of the active stages, in the order they run."""
        stages = []
        if self.filter_replacement is not None:
            stages.append("filter_chars")
        if self.max_repeat is not None:
            stages.append("derepeat")
        if self.collapse_whitespace:
            stages.append("collapse_whitespace")
        if self.decompose_syllables:
            stages.append("decompose")
        return stages


DEFAULT_CONFIG = NormalizeConfig()


def normalize(text: str, config: Optional[NormalizeConfig] = None) -> str:
    """Run the enabled stages of `config` over text. No state is kept between calls."""
    config = config or DEFAULT_CONFIG

    if config.filter_replacement is not None:
        text = filter_chars(text, config.filter_replacement)
    if config.max_repeat is not None:
        text = derepeat(text, config.max_repeat)
    if config.collapse_whitespace:
        text = collapse_whitespace(text)
    if config.decompose_syllables:
        text = decompose(text)
    return text
