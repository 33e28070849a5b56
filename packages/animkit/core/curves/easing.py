"""Named easing curves backed by easing-functions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, TypeGuard

from easing_functions import (
    BackEaseIn,
    BackEaseInOut,
    BackEaseOut,
    BounceEaseIn,
    BounceEaseInOut,
    BounceEaseOut,
    CubicEaseIn,
    CubicEaseInOut,
    CubicEaseOut,
    ElasticEaseIn,
    ElasticEaseInOut,
    ElasticEaseOut,
    QuadEaseIn,
    QuadEaseInOut,
    QuadEaseOut,
    SineEaseIn,
    SineEaseInOut,
    SineEaseOut,
)

EasingFunction = Callable[[float], float]


class _EaseMethodEasing(Protocol):
    def ease(self, t: float) -> float: ...


def _has_ease(e: Any) -> TypeGuard[_EaseMethodEasing]:
    return hasattr(e, "ease")


_EASING_DEFAULTS: dict[str, float] = {
    "start": 0.0,
    "end": 1.0,
    "duration": 1.0,
}


class Curves(str, Enum):
    """Identifiers for built-in easing curves."""

    LINEAR = "linear"

    EASE_IN_SINE = "ease_in_sine"
    EASE_OUT_SINE = "ease_out_sine"
    EASE_IN_OUT_SINE = "ease_in_out_sine"

    EASE_IN_QUAD = "ease_in_quad"
    EASE_OUT_QUAD = "ease_out_quad"
    EASE_IN_OUT_QUAD = "ease_in_out_quad"

    EASE_IN_CUBIC = "ease_in_cubic"
    EASE_OUT_CUBIC = "ease_out_cubic"
    EASE_IN_OUT_CUBIC = "ease_in_out_cubic"

    # Back curves overshoot [0, 1]
    EASE_IN_BACK = "ease_in_back"
    EASE_OUT_BACK = "ease_out_back"
    EASE_IN_OUT_BACK = "ease_in_out_back"

    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    BOUNCE_IN_OUT = "bounce_in_out"

    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    ELASTIC_IN_OUT = "elastic_in_out"


_EASING_CLASSES: dict[Curves, type[Any]] = {
    Curves.EASE_IN_SINE: SineEaseIn,
    Curves.EASE_OUT_SINE: SineEaseOut,
    Curves.EASE_IN_OUT_SINE: SineEaseInOut,
    Curves.EASE_IN_QUAD: QuadEaseIn,
    Curves.EASE_OUT_QUAD: QuadEaseOut,
    Curves.EASE_IN_OUT_QUAD: QuadEaseInOut,
    Curves.EASE_IN_CUBIC: CubicEaseIn,
    Curves.EASE_OUT_CUBIC: CubicEaseOut,
    Curves.EASE_IN_OUT_CUBIC: CubicEaseInOut,
    Curves.EASE_IN_BACK: BackEaseIn,
    Curves.EASE_OUT_BACK: BackEaseOut,
    Curves.EASE_IN_OUT_BACK: BackEaseInOut,
    Curves.BOUNCE_IN: BounceEaseIn,
    Curves.BOUNCE_OUT: BounceEaseOut,
    Curves.BOUNCE_IN_OUT: BounceEaseInOut,
    Curves.ELASTIC_IN: ElasticEaseIn,
    Curves.ELASTIC_OUT: ElasticEaseOut,
    Curves.ELASTIC_IN_OUT: ElasticEaseInOut,
}


@dataclass(frozen=True, eq=False)
class NamedCurve:
    """An easing function with a stable name.

    Instances are cached per name by get_easing(), so identity comparison is
    enough to tell two curves apart.
    """

    name: str
    fn: EasingFunction

    def __call__(self, t: float) -> float:
        return self.transform(t)

    def transform(self, t: float) -> float:
        # Curves are pinned at the endpoints regardless of backend rounding.
        if t == 0.0:
            return 0.0
        if t == 1.0:
            return 1.0
        return self.fn(t)

    def __repr__(self) -> str:
        return f"Curves.{self.name}"


@dataclass(frozen=True)
class FlippedCurve:
    """The mirror image of a curve: ``1 - curve(1 - t)``.

    An ease-in curve flipped becomes the matching ease-out curve.
    """

    curve: EasingFunction

    def __call__(self, t: float) -> float:
        return 1.0 - self.curve(1.0 - t)

    def __repr__(self) -> str:
        return f"{self.curve!r}.flipped"


def _make_easing(easing_cls: type[Any]) -> EasingFunction:
    obj = easing_cls(**_EASING_DEFAULTS)

    if _has_ease(obj):
        return obj.ease

    if not callable(obj):
        raise TypeError(f"{type(obj).__name__} is not callable and has no .ease(t)")
    return obj


def _linear(t: float) -> float:
    return t


def _build_curves() -> dict[Curves, NamedCurve]:
    curves = {Curves.LINEAR: NamedCurve(name=Curves.LINEAR.value, fn=_linear)}
    for curve_id, easing_cls in _EASING_CLASSES.items():
        curves[curve_id] = NamedCurve(name=curve_id.value, fn=_make_easing(easing_cls))
    return curves


_CURVES = _build_curves()

linear: NamedCurve = _CURVES[Curves.LINEAR]


def get_easing(curve: str | Curves) -> NamedCurve:
    """Look up a built-in easing curve by name.

    Args:
        curve: A Curves member or its string value (e.g. "ease_in_quad").

    Returns:
        The cached curve for that name.

    Raises:
        ValueError: If the name is unknown.

    Example:
        >>> get_easing("linear")(0.25)
        0.25
        >>> get_easing("ease_in_quad") is get_easing(Curves.EASE_IN_QUAD)
        True
    """
    try:
        return _CURVES[Curves(curve)]
    except ValueError as exc:
        known = ", ".join(c.value for c in Curves)
        raise ValueError(f"Unknown easing curve '{curve}'. Known curves: {known}") from exc


def flipped(curve: EasingFunction) -> EasingFunction:
    """Return the curve mirrored around the centre (``1 - curve(1 - t)``).

    Flipping a flipped curve returns the original curve.
    """
    if isinstance(curve, FlippedCurve):
        return curve.curve
    return FlippedCurve(curve=curve)


def resolve_curve(curve: str | Curves | EasingFunction | None) -> EasingFunction:
    """Resolve a curve reference to a callable, defaulting to linear."""
    if curve is None:
        return linear
    if isinstance(curve, str):
        return get_easing(curve)
    if not callable(curve):
        raise TypeError(f"Easing curve must be a name or a callable, got {type(curve).__name__}")
    return curve
