"""
Test Korean Jamo Utilities
"""
from hangul_normalizer.core.korean_utils import (
    CHOSUNG_LIST, JUNGSUNG_LIST, JONGSUNG_LIST,
    decompose, decompose_syllable,
    is_compat_jamo, is_hangul_syllable
)


def test_tables():
    print("Testing jamo tables...")
    assert len(CHOSUNG_LIST) == 19
    assert len(JUNGSUNG_LIST) == 21
    assert len(JONGSUNG_LIST) == 28
    assert JONGSUNG_LIST[0] == '', "Index 0 means no final consonant"
    print("✓ Jamo tables passed!")


def test_syllable_decomposition():
    print("\nTesting syllable decomposition...")

    test_cases = [
        ('가', ('ㄱ', 'ㅏ', '')),
        ('힣', ('ㅎ', 'ㅣ', 'ㅎ')),
        ('한', ('ㅎ', 'ㅏ', 'ㄴ')),
        ('글', ('ㄱ', 'ㅡ', 'ㄹ')),
        ('뷁', ('ㅂ', 'ㅞ', 'ㄺ')),
        ('과', ('ㄱ', 'ㅘ', '')),
        ('a', ('a', '', '')),
        ('ㄱ', ('ㄱ', '', '')),
    ]

    for syllable, expected in test_cases:
        result = decompose_syllable(syllable)
        assert result == expected, f"Failed: {syllable} -> {result}, expected {expected}"
    print("✓ Syllable decomposition passed!")


def test_character_classes():
    print("\nTesting character classes...")

    assert is_hangul_syllable('가') and is_hangul_syllable('힣')
    assert not is_hangul_syllable('ㄱ')
    assert not is_hangul_syllable('가나'), "Only single characters qualify"
    assert not is_hangul_syllable(chr(0xD7A4)), "One past '힣' is not a syllable"

    assert is_compat_jamo('ㄱ') and is_compat_jamo('ㅎ') and is_compat_jamo('ㅏ') and is_compat_jamo('ㅣ')
    assert not is_compat_jamo('ㆍ'), "Archaic jamo are outside ㄱ..ㅣ"
    assert not is_compat_jamo('가')
    assert not is_compat_jamo('a')
    print("✓ Character classes passed!")


def test_text_decomposition():
    print("\nTesting text decomposition...")

    test_cases = [
        ('가힣 뷁 ab123킼ㄱㄴㄷ', 'ㄱㅏㅎㅣㅎ ㅂㅞㄺ ab123ㅋㅣㅋㄱㄴㄷ'),
        ('사과', 'ㅅㅏㄱㅘ'),
        ('컴퓨터', 'ㅋㅓㅁㅍㅠㅌㅓ'),
        ('', ''),
        ('no hangul!', 'no hangul!'),
    ]

    for text, expected in test_cases:
        result = decompose(text)
        print(f"  {text!r} -> {result!r}")
        assert result == expected, f"Failed: {text} -> {result}, expected {expected}"
    print("✓ Text decomposition passed!")


def test_decomposition_idempotent():
    print("\nTesting decomposition idempotence...")

    for text in ['가힣 뷁 ab123킼ㄱㄴㄷ', '프로그래밍', '대한민국 만세!!']:
        once = decompose(text)
        assert decompose(once) == once, f"Decomposing twice changed {text}"
    print("✓ Idempotence passed!")


def test_every_syllable_expands_to_two_or_three_jamos():
    for code in range(0xAC00, 0xD7A4):
        jamos = decompose(chr(code))
        assert len(jamos) in (2, 3), f"U+{code:04X} -> {jamos!r}"
        assert all(is_compat_jamo(j) for j in jamos), f"U+{code:04X} -> {jamos!r}"


if __name__ == "__main__":
    print("=" * 50)
    print("Korean Jamo Utilities Test Suite")
    print("=" * 50)

    test_tables()
    test_syllable_decomposition()
    test_character_classes()
    test_text_decomposition()
    test_decomposition_idempotent()
    test_every_syllable_expands_to_two_or_three_jamos()

    print("\n" + "=" * 50)
    print("✨ All tests passed!")
    print("=" * 50)
