"""Utilities package for the SONV-112 screening engine."""

from .cache import get_cache, cache_result, clear_cache
from .rounding import round_half_up, compute_percentage, resolve_zone
from .answer_validator import is_valid_answer_value, validate_answer_map
from .codec import encode, decode, build_share_fragment, parse_share_fragment

__all__ = [
    "get_cache",
    "cache_result",
    "clear_cache",
    "round_half_up",
    "compute_percentage",
    "resolve_zone",
    "is_valid_answer_value",
    "validate_answer_map",
    "encode",
    "decode",
    "build_share_fragment",
    "parse_share_fragment",
]
