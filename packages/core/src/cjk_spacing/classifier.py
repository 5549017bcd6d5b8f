from __future__ import annotations

from bisect import bisect_right
from typing import Tuple

# Inclusive code-point ranges of scripts written without inter-word spaces.
# Supplementary-plane blocks (emoji, CJK extension B and later) are left out.
CJK_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x2000, 0x206F),  # General Punctuation
    (0x2E80, 0x2EDF),  # CJK Radicals Supplement, Kangxi Radicals
    # CJK Symbols and Punctuation, Hiragana, Katakana, Bopomofo, Hangul
    # Compatibility Jamo, Kanbun, CJK Strokes, Enclosed CJK, CJK Compatibility,
    # CJK Unified Ideographs Extension A, Yijing Hexagrams, CJK Unified Ideographs
    (0x3000, 0x9FFF),
    (0xAC00, 0xD7FF),  # Hangul Syllables, Hangul Jamo Extended-B
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0xFE30, 0xFE6F),  # CJK Compatibility Forms, Small Form Variants
    (0xFF00, 0xFFEE),  # Halfwidth and Fullwidth Forms
)

_RANGE_STARTS = tuple(low for low, _ in CJK_RANGES)


def is_cjk(ch: str) -> bool:
    """Return True if the single character `ch` falls in a CJK range."""
    cp = ord(ch)
    i = bisect_right(_RANGE_STARTS, cp) - 1
    return i >= 0 and cp <= CJK_RANGES[i][1]


def ends_with_cjk(text: str) -> bool:
    return bool(text) and is_cjk(text[-1])


def starts_with_cjk(text: str) -> bool:
    return bool(text) and is_cjk(text[0])
