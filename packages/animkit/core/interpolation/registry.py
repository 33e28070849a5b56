"""Type-indexed registry of interpolation functions."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

import numpy as np

from animkit.core.errors import UnsupportedInterpolationError
from animkit.core.interpolation.functions import (
    LerpFunction,
    lerp_arithmetic,
    lerp_array,
    lerp_color,
    lerp_float,
    lerp_int,
    lerp_point,
    lerp_size,
)
from animkit.core.interpolation.types import Color, Point, Size

logger = logging.getLogger(__name__)


@runtime_checkable
class Interpolatable(Protocol):
    """Values that can be interpolated algebraically as ``a + (b - a) * t``.

    Types satisfying this protocol (e.g. ``decimal.Decimal``, vector classes)
    need no registered interpolator.
    """

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...


def _lerp_none(a: Any, b: Any, t: float) -> None:
    return None


class InterpolatorRegistry:
    """Registry mapping value types to interpolation functions.

    Lookups walk the value type's MRO, so a subclass of a registered type
    uses its parent's interpolator. ``bool`` is excluded from that walk:
    interpolating flags as integers is never what the caller meant.

    Example:
        >>> registry = default_registry()
        >>> registry.lerp(0.0, 10.0, 0.5)
        5.0
    """

    def __init__(self) -> None:
        self._registry: dict[type, LerpFunction] = {}

    def register(self, value_type: type, fn: LerpFunction, *, replace: bool = False) -> None:
        """Register the interpolator for a value type.

        Raises:
            ValueError: If the type is already registered and replace is False.
        """
        if value_type in self._registry and not replace:
            raise ValueError(f"Interpolator for '{value_type.__qualname__}' already registered")
        self._registry[value_type] = fn

    def get(self, value_type: type) -> LerpFunction | None:
        """Return the registered interpolator for a type, or None."""
        if value_type is bool:
            return self._registry.get(bool)
        for base in value_type.__mro__:
            fn = self._registry.get(base)
            if fn is not None:
                return fn
        return None

    def __contains__(self, value_type: type) -> bool:
        return self.get(value_type) is not None

    def resolve(self, a: Any, b: Any) -> LerpFunction:
        """Pick the interpolator for a pair of endpoint values.

        The value kind is taken from the first endpoint that is not None. If
        both endpoints are None, the result is always None.

        Raises:
            UnsupportedInterpolationError: If the type has neither a
                registered interpolator nor arithmetic operators.
        """
        sample = a if a is not None else b
        if sample is None:
            return _lerp_none

        value_type = type(sample)
        fn = self.get(value_type)
        if fn is not None:
            return fn

        if value_type is not bool and isinstance(sample, Interpolatable):
            logger.debug(f"Using arithmetic interpolation for {value_type.__qualname__}")
            return lerp_arithmetic

        raise UnsupportedInterpolationError(value_type)

    def lerp(self, a: Any, b: Any, t: float) -> Any:
        """Interpolate two values using the interpolator for their type."""
        if a is None or b is None:
            return None
        return self.resolve(a, b)(a, b, t)


def default_registry() -> InterpolatorRegistry:
    """Create a registry preloaded with the built-in value kinds."""
    registry = InterpolatorRegistry()
    registry.register(float, lerp_float)
    registry.register(int, lerp_int)
    registry.register(Point, lerp_point)
    registry.register(Size, lerp_size)
    registry.register(Color, lerp_color)
    registry.register(np.ndarray, lerp_array)
    return registry
