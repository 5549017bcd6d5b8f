"""Join CJK lines that markdown source splits with soft line breaks."""

from .classifier import CJK_RANGES, ends_with_cjk, is_cjk, starts_with_cjk
from .engine import JoinError, join_cjk_spacing

__all__ = [
    "CJK_RANGES",
    "JoinError",
    "ends_with_cjk",
    "is_cjk",
    "join_cjk_spacing",
    "starts_with_cjk",
]
