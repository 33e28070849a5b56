"""Value interpolation: built-in value types, lerp functions and the registry."""

from animkit.core.interpolation.functions import (
    LerpFunction,
    lerp_arithmetic,
    lerp_array,
    lerp_color,
    lerp_float,
    lerp_int,
    lerp_point,
    lerp_size,
    non_null,
)
from animkit.core.interpolation.registry import (
    Interpolatable,
    InterpolatorRegistry,
    default_registry,
)
from animkit.core.interpolation.types import Color, Point, Size

__all__ = [
    "Color",
    "Interpolatable",
    "InterpolatorRegistry",
    "LerpFunction",
    "Point",
    "Size",
    "default_registry",
    "lerp_arithmetic",
    "lerp_array",
    "lerp_color",
    "lerp_float",
    "lerp_int",
    "lerp_point",
    "lerp_size",
    "non_null",
]
