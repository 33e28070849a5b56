"""Exceptions raised by the animation engine."""


class AnimkitError(Exception):
    """Base exception for animkit errors."""

    pass


class InvalidIntervalError(AnimkitError, ValueError):
    """Raised when an interval has degenerate, inverted or out-of-range bounds.

    Always raised while the interval is being constructed, never while it is
    being evaluated.
    """

    pass


class UnsupportedInterpolationError(AnimkitError, TypeError):
    """Raised when no interpolation strategy exists for a value type."""

    def __init__(self, value_type: type) -> None:
        self.value_type = value_type
        super().__init__(
            f"Cannot interpolate values of type {value_type.__qualname__!r}: no interpolator "
            "is registered and the type does not support +, - and scalar *. "
            "You must provide a custom lerp function."
        )


class ControllerDisposedError(AnimkitError, RuntimeError):
    """Raised when a disposed controller is ticked or started."""

    pass


class InvalidTransitionError(AnimkitError):
    """Raised when a boundary event is impossible for the current repeat mode."""

    pass
