"""
Deterministic rounding utilities.

This module provides the round_half_up function, percentage computation and
zone resolution to ensure consistent, reproducible scoring across all runs.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from models.schemas import Zone


def round_half_up(value: float) -> int:
    """
    Round a number to an integer using "round half up" strategy.

    This ensures deterministic rounding where 0.5 always rounds up,
    avoiding Python's default banker's rounding.

    Args:
        value: Number to round

    Returns:
        Rounded integer

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(3.5)
        4
        >>> round_half_up(2.4)
        2
    """
    # Convert to Decimal for precise rounding
    d = Decimal(str(value))
    return int(d.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_percentage(score: int, max_score: int) -> int:
    """
    Convert a raw score into a percentage of the maximum.

    Formula:
        percentage = round_half_up(100 × score / max_score), clamped to 0-100

    Examples:
        >>> compute_percentage(9, 16)   # 56.25
        56
        >>> compute_percentage(1, 8)    # 12.5
        13
        >>> compute_percentage(0, 56)
        0
    """
    if max_score <= 0:
        return 0

    percentage = round_half_up(100 * score / max_score)
    return max(0, min(100, percentage))


def resolve_zone(percentage: int, zones: Sequence[Zone]) -> Zone:
    """
    Map a percentage to its zone.

    Zones are validated to partition 0-100, so exactly one zone matches any
    integer in range; out-of-range values are clamped first.

    Raises:
        ValueError: If no zone matches (zones do not cover the value)
    """
    clamped = max(0, min(100, percentage))
    for zone in zones:
        if zone.contains(clamped):
            return zone
    raise ValueError(f"No zone covers percentage {clamped}")
