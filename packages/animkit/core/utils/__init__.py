"""Shared utilities for animkit."""

from animkit.core.utils.math import clamp, lerp, round_half_away_from_zero

__all__ = [
    "clamp",
    "lerp",
    "round_half_away_from_zero",
]
