"""Configurable normalization pipeline for Korean (Hangul) text."""

from hangul_normalizer.core.korean_utils import decompose
from hangul_normalizer.core.normalizer import (
    NormalizeConfig,
    collapse_whitespace,
    derepeat,
    filter_chars,
    normalize,
)

__version__ = "1.0.0"

__all__ = [
    "NormalizeConfig",
    "collapse_whitespace",
    "decompose",
    "derepeat",
    "filter_chars",
    "normalize",
]
