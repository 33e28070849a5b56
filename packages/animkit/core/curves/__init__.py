"""Easing curves and interval remapping."""

from animkit.core.curves.easing import (
    Curves,
    EasingFunction,
    flipped,
    get_easing,
    linear,
    resolve_curve,
)
from animkit.core.curves.interval import IntervalCurve, remap

__all__ = [
    "Curves",
    "EasingFunction",
    "IntervalCurve",
    "flipped",
    "get_easing",
    "linear",
    "remap",
    "resolve_curve",
]
