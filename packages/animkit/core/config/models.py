"""Configuration models for animation controllers."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from animkit.core.animation.repeat import RepeatMode
from animkit.core.curves.easing import linear, resolve_curve
from animkit.core.curves.interval import IntervalCurve


class AnimationConfig(BaseModel):
    """Timing, easing and repeat settings for an AnimationController.

    Immutable after creation; use ``updated()`` to derive a changed copy.
    Curves may be given as names (``"ease_in_quad"``) or callables, and
    durations as timedeltas or seconds.

    Example:
        >>> config = AnimationConfig(duration=0.3, curve="ease_out_cubic", mode="ping_pong")
        >>> config.duration
        datetime.timedelta(microseconds=300000)
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    duration: timedelta = Field(
        default=timedelta(seconds=1), description="Duration of a start → end pass"
    )

    reverse_duration: timedelta | None = Field(
        default=None, description="Duration of an end → start pass (defaults to duration)"
    )

    curve: Callable[[float], float] = Field(
        default=linear, description="Easing applied while moving forward"
    )

    reverse_curve: Callable[[float], float] | None = Field(
        default=None, description="Easing applied while moving backward (defaults to curve)"
    )

    mode: RepeatMode = Field(default=RepeatMode.ONCE, description="Repeat policy")

    interval: IntervalCurve | None = Field(
        default=None, description="Optional sub-interval applied before the curve"
    )

    autoplay: bool = Field(default=False, description="Start the controller on construction")

    @model_validator(mode="before")
    @classmethod
    def _build_interval(cls, data: Any) -> Any:
        """Build an IntervalCurve from a mapping, defaulting to the config duration."""
        if not isinstance(data, dict) or not isinstance(data.get("interval"), dict):
            return data

        spec = dict(data["interval"])
        duration = _to_timedelta(spec.pop("duration", data.get("duration", timedelta(seconds=1))))
        start_delay = spec.pop("start_delay", None)
        end_delay = spec.pop("end_delay", None)
        curve = spec.pop("curve", None)
        start = spec.pop("start", None)
        end = spec.pop("end", None)
        if spec:
            raise ValueError(f"Unknown interval keys: {sorted(spec)}")

        if start_delay is not None or end_delay is not None:
            if start is not None or end is not None:
                raise ValueError("Interval takes either start/end or start_delay/end_delay")
            interval = IntervalCurve.delayed(
                duration=duration,
                start_delay=_to_timedelta(start_delay),
                end_delay=_to_timedelta(end_delay),
            )
        else:
            interval = IntervalCurve(
                duration=duration,
                start=_to_timedelta(start),
                end=_to_timedelta(end),
            )

        if curve is not None:
            interval = IntervalCurve(
                duration=interval.duration,
                start=interval.start,
                end=interval.end,
                curve=resolve_curve(curve),
            )
        return {**data, "interval": interval}

    @field_validator("curve", "reverse_curve", mode="before")
    @classmethod
    def _resolve_curve(cls, value: Any) -> Any:
        if value is None:
            return None
        return resolve_curve(value)

    @field_validator("duration", "reverse_duration")
    @classmethod
    def _check_positive(cls, value: timedelta | None) -> timedelta | None:
        if value is not None and value <= timedelta(0):
            raise ValueError(f"Duration must be positive, got {value}")
        return value

    @property
    def effective_reverse_duration(self) -> timedelta:
        return self.reverse_duration or self.duration

    @property
    def effective_reverse_curve(self) -> Callable[[float], float]:
        return self.reverse_curve or self.curve

    def updated(self, **changes: Any) -> AnimationConfig:
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate({**dict(self), **changes})


def _to_timedelta(value: Any) -> timedelta | None:
    if value is None or isinstance(value, timedelta):
        return value
    return timedelta(seconds=float(value))
