"""Animatable bindings: two endpoint values plus an interpolation function."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import numpy as np

from animkit.core.interpolation.registry import InterpolatorRegistry, default_registry

T = TypeVar("T")

_DEFAULT_REGISTRY = default_registry()


def values_equal(a: Any, b: Any) -> bool:
    """Compare two endpoint values, elementwise for numpy arrays."""
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


def _hash_key(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.shape, tuple(value.ravel().tolist())
    return value


@dataclass(frozen=True, eq=False)
class AnimatableValue(Generic[T]):
    """A pure function of progress between a start and an end value.

    ``t`` is not clamped, so curves that overshoot [0, 1] extrapolate when
    the interpolation function supports it.

    Equality and hashing compare numpy array endpoints elementwise.

    Attributes:
        start: Value at t=0.
        end: Value at t=1.
        lerp: Interpolation function ``(a, b, t) -> value``.

    Example:
        >>> binding = AnimatableValue(start=0.0, end=100.0, lerp=lambda a, b, t: a + (b - a) * t)
        >>> binding.evaluate(0.5)
        50.0
    """

    start: T
    end: T
    lerp: Callable[[T, T, float], T]

    @classmethod
    def of(
        cls,
        start: T,
        end: T,
        lerp: Callable[[T, T, float], T] | None = None,
        registry: InterpolatorRegistry | None = None,
    ) -> AnimatableValue[T]:
        """Bind two values, resolving the interpolator from a registry if needed.

        Raises:
            UnsupportedInterpolationError: If no lerp is given and the value
                type has no registered or arithmetic interpolation.
        """
        if lerp is None:
            lerp = (registry or _DEFAULT_REGISTRY).resolve(start, end)
        return cls(start=start, end=end, lerp=lerp)

    def evaluate(self, t: float) -> T:
        return self.lerp(self.start, self.end, t)

    def transform(self, t: float) -> T:
        return self.evaluate(t)

    def __call__(self, t: float) -> T:
        return self.evaluate(t)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnimatableValue):
            return NotImplemented
        return (
            self.lerp == other.lerp
            and values_equal(self.start, other.start)
            and values_equal(self.end, other.end)
        )

    def __hash__(self) -> int:
        return hash((_hash_key(self.start), _hash_key(self.end), self.lerp))

    def reversed(self) -> AnimatableValue[T]:
        """Return the binding with start and end swapped."""
        return AnimatableValue(start=self.end, end=self.start, lerp=self.lerp)

    def __repr__(self) -> str:
        return f"AnimatableValue({self.start!r}, {self.end!r})"
