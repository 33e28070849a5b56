"""Linear interpolation functions for the built-in value kinds.

Every function has the signature ``(a, b, t) -> value`` and propagates
absence: if either endpoint is None the result is None. Integers (including
colour channels) are rounded half away from zero.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import numpy as np

from animkit.core.interpolation.types import Color, Point, Size
from animkit.core.utils.math import clamp, lerp, round_half_away_from_zero

T = TypeVar("T")

LerpFunction = Callable[[Any, Any, float], Any]


def lerp_float(a: float | None, b: float | None, t: float) -> float | None:
    """Interpolate two floats.

    Example:
        >>> lerp_float(0.0, 10.0, 0.5)
        5.0
        >>> lerp_float(None, 10.0, 0.5) is None
        True
    """
    if a is None or b is None:
        return None
    return lerp(a, b, t)


def lerp_int(a: int | None, b: int | None, t: float) -> int | None:
    """Interpolate two ints, rounding half away from zero.

    Example:
        >>> lerp_int(0, 5, 0.5)
        3
    """
    if a is None or b is None:
        return None
    return round_half_away_from_zero(lerp(a, b, t))


def lerp_point(a: Point | None, b: Point | None, t: float) -> Point | None:
    if a is None or b is None:
        return None
    return Point(x=lerp(a.x, b.x, t), y=lerp(a.y, b.y, t))


def lerp_size(a: Size | None, b: Size | None, t: float) -> Size | None:
    if a is None or b is None:
        return None
    return Size(width=lerp(a.width, b.width, t), height=lerp(a.height, b.height, t))


def _lerp_channel(a: int, b: int, t: float) -> int:
    return clamp(round_half_away_from_zero(lerp(a, b, t)), 0, 255)


def lerp_color(a: Color | None, b: Color | None, t: float) -> Color | None:
    """Interpolate two colours channel by channel (R, G, B, A independently).

    Channels are clamped to [0, 255], so overshooting curves saturate instead
    of failing validation.
    """
    if a is None or b is None:
        return None
    return Color(
        red=_lerp_channel(a.red, b.red, t),
        green=_lerp_channel(a.green, b.green, t),
        blue=_lerp_channel(a.blue, b.blue, t),
        alpha=_lerp_channel(a.alpha, b.alpha, t),
    )


def lerp_array(a: np.ndarray | None, b: np.ndarray | None, t: float) -> np.ndarray | None:
    """Interpolate two numpy arrays elementwise.

    Raises:
        ValueError: If the arrays have different shapes.
    """
    if a is None or b is None:
        return None
    if a.shape != b.shape:
        raise ValueError(f"Cannot interpolate arrays of shape {a.shape} and {b.shape}")
    if t == 0.0:
        return a.copy()
    if t == 1.0:
        return b.copy()
    return a + (b - a) * t


def lerp_arithmetic(a: Any, b: Any, t: float) -> Any:
    """Fallback for types that support ``+``, ``-`` and scalar ``*``."""
    if a is None or b is None:
        return None
    if t == 0.0:
        return a
    if t == 1.0:
        return b
    return a + (b - a) * t


def non_null(fn: Callable[[T | None, T | None, float], T | None]) -> Callable[[T, T, float], T]:
    """Wrap a nullable interpolator for endpoints that are never absent.

    Raises:
        ValueError: From the returned function, if the result is None.
    """

    def _non_null_lerp(a: T, b: T, t: float) -> T:
        result = fn(a, b, t)
        if result is None:
            raise ValueError(f"{getattr(fn, '__name__', fn)!s} returned None for {a!r} and {b!r}")
        return result

    _non_null_lerp.__name__ = f"non_null_{getattr(fn, '__name__', 'lerp')}"
    return _non_null_lerp
