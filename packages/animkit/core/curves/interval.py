"""Interval remapping of animation progress.

An interval restricts a curve to a sub-range of an animation's total duration:
progress before the interval's start maps to 0, progress after its end maps
to 1, and progress in between is rescaled linearly (and optionally eased).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from animkit.core.curves.easing import EasingFunction
from animkit.core.errors import InvalidIntervalError
from animkit.core.utils.math import clamp

_ZERO = timedelta(0)


def _validate_fractions(start: float, end: float) -> None:
    if start < 0.0 or end > 1.0:
        raise InvalidIntervalError(
            f"Interval bounds must lie within [0, 1], got start={start}, end={end}"
        )
    if end <= start:
        raise InvalidIntervalError(
            f"Interval end must be greater than start, got start={start}, end={end}"
        )


def remap(
    progress: float,
    start: float | None = None,
    end: float | None = None,
    easing: EasingFunction | None = None,
) -> float:
    """Map global progress onto the local progress of a sub-interval.

    Args:
        progress: Global progress, nominally in [0, 1].
        start: Interval start as a fraction of the whole (default 0).
        end: Interval end as a fraction of the whole (default 1).
        easing: Optional curve applied to the local progress.

    Returns:
        Local progress in [0, 1], eased when an easing function is given.

    Raises:
        InvalidIntervalError: If the bounds are degenerate, inverted or
            outside [0, 1].

    Example:
        >>> remap(0.5, 0.25, 0.75)
        0.5
        >>> remap(0.1, 0.25, 0.75)
        0.0
    """
    start_fraction = 0.0 if start is None else start
    end_fraction = 1.0 if end is None else end
    _validate_fractions(start_fraction, end_fraction)
    return _remap_fractions(progress, start_fraction, end_fraction, easing)


def _remap_fractions(
    progress: float,
    start_fraction: float,
    end_fraction: float,
    easing: EasingFunction | None,
) -> float:
    local = clamp((progress - start_fraction) / (end_fraction - start_fraction), 0.0, 1.0)
    if easing is not None:
        return easing(local)
    return local


@dataclass(frozen=True)
class IntervalCurve:
    """A curve active only between two points in time of a longer animation.

    Attributes:
        duration: Total duration of the animation the interval belongs to.
        start: Offset at which the interval starts (None means 0).
        end: Offset at which the interval ends (None means ``duration``).
        curve: Optional easing applied within the interval.

    Example:
        >>> interval = IntervalCurve(
        ...     duration=timedelta(seconds=10),
        ...     start=timedelta(seconds=2),
        ...     end=timedelta(seconds=8),
        ... )
        >>> interval(0.1), interval(0.9)
        (0.0, 1.0)
    """

    duration: timedelta
    start: timedelta | None = None
    end: timedelta | None = None
    curve: EasingFunction | None = None

    def __post_init__(self) -> None:
        if self.duration <= _ZERO:
            raise InvalidIntervalError(f"Interval duration must be positive, got {self.duration}")
        if self.start is not None and self.start < _ZERO:
            raise InvalidIntervalError(f"Interval start must not be negative, got {self.start}")
        if self.end is not None and self.end > self.duration:
            raise InvalidIntervalError(
                f"Interval end {self.end} exceeds the total duration {self.duration}"
            )
        _validate_fractions(self.start_fraction, self.end_fraction)

    @classmethod
    def delayed(
        cls,
        duration: timedelta,
        start_delay: timedelta | None = None,
        end_delay: timedelta | None = None,
    ) -> IntervalCurve:
        """Build an interval that pads an animation with leading/trailing delays.

        The total duration grows by both delays, so ``duration`` is the length
        of the active part.

        Example:
            >>> interval = IntervalCurve.delayed(
            ...     duration=timedelta(seconds=5),
            ...     start_delay=timedelta(seconds=2),
            ...     end_delay=timedelta(seconds=1),
            ... )
            >>> interval.start_fraction, interval.end_fraction
            (0.25, 0.875)
        """
        total = duration
        if start_delay is not None:
            total += start_delay
        if end_delay is not None:
            total += end_delay
        return cls(
            duration=total,
            start=start_delay,
            end=total - end_delay if end_delay is not None else None,
        )

    @property
    def start_fraction(self) -> float:
        if self.start is None:
            return 0.0
        return self.start / self.duration

    @property
    def end_fraction(self) -> float:
        if self.end is None:
            return 1.0
        return self.end / self.duration

    def transform(self, t: float) -> float:
        return _remap_fractions(t, self.start_fraction, self.end_fraction, self.curve)

    def __call__(self, t: float) -> float:
        return self.transform(t)

    def __repr__(self) -> str:
        return f"IntervalCurve(start: {self.start}, end: {self.end}, duration: {self.duration})"
