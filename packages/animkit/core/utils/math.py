"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b.

    The endpoints are returned exactly so that t=0 and t=1 never drift.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor, not clamped

    Returns:
        Interpolated value
    """
    if t == 0.0:
        return float(a)
    if t == 1.0:
        return float(b)
    return float(a) + (float(b) - float(a)) * t


def round_half_away_from_zero(x: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's built-in round() uses banker's rounding; interpolated integers
    use this instead so that 2.5 -> 3 and -2.5 -> -3.

    Example:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
    """
    return int(math.copysign(math.floor(abs(x) + 0.5), x))
