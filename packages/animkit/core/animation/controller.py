"""Animation progression controller.

The controller turns elapsed time into progress, resolves boundary events
through a RepeatStateMachine, eases the progress, and evaluates the active
AnimatableValue. It is driven entirely from outside: either by calling
``tick(elapsed)`` directly or by subscribing to an injected TimeSource.

Example:
    >>> controller = AnimationController(0.0, 10.0, AnimationConfig(duration=1.0))
    >>> controller.start()
    >>> controller.tick(timedelta(milliseconds=500))
    5.0
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Generic, TypeVar

from animkit.core.animation.binding import AnimatableValue, values_equal
from animkit.core.animation.clock import Subscription, TimeSource
from animkit.core.animation.repeat import (
    BoundaryAction,
    BoundaryEvent,
    BoundaryTransition,
    Direction,
    RepeatMode,
    RepeatStateMachine,
)
from animkit.core.config.models import AnimationConfig
from animkit.core.errors import ControllerDisposedError
from animkit.core.interpolation.registry import InterpolatorRegistry
from animkit.core.utils.logging import get_logger

logger = logging.getLogger(__name__)

T = TypeVar("T")

ValueListener = Callable[[Any], object]

# Sentinel for "argument not given" where None is a legitimate value.
_UNSET: Any = object()


class AnimationStatus(str, Enum):
    """Status reported to status listeners."""

    DISMISSED = "dismissed"  # stopped at progress 0
    FORWARD = "forward"  # running toward progress 1
    REVERSE = "reverse"  # running toward progress 0
    COMPLETED = "completed"  # stopped at progress 1


@dataclass(frozen=True)
class ProgressionState:
    """Snapshot of a controller's progression."""

    progress: float
    direction: Direction
    is_active: bool


class AnimationController(Generic[T]):
    """Drives a value between two endpoints over time.

    Features:
    - Repeat policies (once, repeat, reverse, ping-pong) via RepeatStateMachine
    - Separate forward/reverse durations and curves
    - Optional interval remapping before the curve
    - Reconfiguration without value discontinuity
    - Synchronous value, status and completion callbacks

    Not thread-safe: all methods must be called from the thread that owns the
    time source.
    """

    def __init__(
        self,
        start: T,
        end: T,
        config: AnimationConfig | None = None,
        *,
        lerp: Callable[[T, T, float], T] | None = None,
        registry: InterpolatorRegistry | None = None,
        on_complete: Callable[[T], object] | None = None,
        time_source: TimeSource | None = None,
        label: str | None = None,
    ):
        """Initialize controller.

        Args:
            start: Value at progress 0
            end: Value at progress 1
            config: Timing, easing and repeat settings (defaults to a 1s linear
                one-shot animation)
            lerp: Explicit interpolation function; resolved from the registry
                when omitted
            registry: Interpolator registry used when lerp is omitted
            on_complete: Called with the current value whenever progress
                reaches 1 while moving forward
            time_source: Optional tick provider subscribed to while running
            label: Optional name added to log records

        Raises:
            UnsupportedInterpolationError: If no lerp is given and the value
                type cannot be interpolated
        """
        self._config = config or AnimationConfig()
        self._lerp_override = lerp
        self._registry = registry
        self._binding: AnimatableValue[T] = AnimatableValue.of(start, end, lerp, registry)
        # Transitional binding used after reconfiguration until the next boundary.
        self._segment: AnimatableValue[T] | None = None

        self._machine = RepeatStateMachine(self._config.mode)
        self._progress = self._machine.origin_progress
        self._active = False
        self._disposed = False
        self._last_elapsed = timedelta(0)

        self._time_source = time_source
        self._subscription: Subscription | None = None

        self._listeners: list[ValueListener] = []
        self._status_listeners: list[Callable[[AnimationStatus], object]] = []
        self._on_complete = on_complete

        self._logger = get_logger(__name__, animation=label) if label else logger
        self._value: T = self._compute_value()

        if self._config.autoplay:
            self.start()

    @classmethod
    def implicit(
        cls,
        value: T,
        *,
        initial_value: T | None = None,
        config: AnimationConfig | None = None,
        **kwargs: Any,
    ) -> AnimationController[T]:
        """Create a one-shot controller that animates toward ``value``.

        With an initial value the controller starts animating from it right
        away. Without one it rests at ``value`` until ``animate_to`` is called.
        Remaining keyword arguments are passed to the constructor.
        """
        config = config or AnimationConfig()
        if config.mode is not RepeatMode.ONCE:
            config = config.updated(mode=RepeatMode.ONCE)

        if initial_value is None:
            controller = cls(value, value, config.updated(autoplay=False), **kwargs)
            controller._progress = 1.0
            controller._value = controller._compute_value()
            return controller

        controller = cls(initial_value, value, config, **kwargs)
        controller.start()
        return controller

    # ========== PROPERTIES ==========

    @property
    def value(self) -> T:
        return self._value

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def direction(self) -> Direction:
        return self._machine.direction

    @property
    def mode(self) -> RepeatMode:
        return self._machine.mode

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def config(self) -> AnimationConfig:
        return self._config

    @property
    def binding(self) -> AnimatableValue[T]:
        """The configured start → end binding."""
        return self._binding

    @property
    def segment(self) -> AnimatableValue[T]:
        """The binding currently producing values."""
        return self._segment or self._binding

    @property
    def state(self) -> ProgressionState:
        return ProgressionState(
            progress=self._progress,
            direction=self._machine.direction,
            is_active=self._active,
        )

    @property
    def status(self) -> AnimationStatus:
        if not self._active:
            if self._progress == 0.0:
                return AnimationStatus.DISMISSED
            if self._progress == 1.0:
                return AnimationStatus.COMPLETED
        if self._machine.direction is Direction.FORWARD:
            return AnimationStatus.FORWARD
        return AnimationStatus.REVERSE

    @property
    def transition_history(self) -> list[BoundaryTransition]:
        return self._machine.get_transition_history()

    # ========== LISTENERS ==========

    def add_listener(self, listener: ValueListener) -> None:
        """Call ``listener(value)`` whenever the value changes."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ValueListener) -> None:
        self._listeners.remove(listener)

    def add_status_listener(self, listener: Callable[[AnimationStatus], object]) -> None:
        """Call ``listener(status)`` on start and on every boundary."""
        self._status_listeners.append(listener)

    def remove_status_listener(self, listener: Callable[[AnimationStatus], object]) -> None:
        self._status_listeners.remove(listener)

    # ========== LIFECYCLE ==========

    def start(self) -> None:
        """Begin advancing progress. Does nothing if already running.

        A completed one-shot animation restarts from the beginning. Elapsed
        time passed to ``tick`` counts from this call.

        Raises:
            ControllerDisposedError: If the controller was disposed
        """
        self._check_not_disposed("start")
        if self._active:
            return

        if self._machine.mode is RepeatMode.ONCE and self._progress >= 1.0:
            self._progress = self._machine.origin_progress
            self._segment = None

        self._active = True
        self._last_elapsed = timedelta(0)
        if self._time_source is not None:
            self._subscription = self._time_source.subscribe(self.tick)

        self._logger.debug(
            f"Animation started: mode={self._machine.mode.value}, "
            f"direction={self._machine.direction.value}, progress={self._progress:.3f}"
        )
        self._set_value(self._compute_value())
        self._notify_status(self.status)

    def stop(self) -> None:
        """Halt progress, keeping the current value."""
        if not self._active:
            return
        self._active = False
        self._release_subscription()
        self._logger.debug(f"Animation stopped at progress {self._progress:.3f}")

    def reset(self) -> None:
        """Stop and return to the mode's starting point with the configured binding."""
        self._check_not_disposed("reset")
        self.stop()
        self._machine.reset()
        self._progress = self._machine.origin_progress
        self._segment = None
        self._last_elapsed = timedelta(0)
        self._set_value(self._compute_value())

    def dispose(self) -> None:
        """Release the time source and listeners. Safe to call more than once."""
        if self._disposed:
            return
        self.stop()
        self._listeners.clear()
        self._status_listeners.clear()
        self._on_complete = None
        self._disposed = True
        self._logger.debug("Animation disposed")

    # ========== PROGRESSION ==========

    def tick(self, elapsed: timedelta) -> T:
        """Advance to ``elapsed`` (time since ``start()``) and return the value.

        Value listeners run first, then status listeners for each boundary
        crossed, then ``on_complete`` for each forward completion.

        Raises:
            ControllerDisposedError: If the controller was disposed
            ValueError: If elapsed is earlier than the previous tick
        """
        self._check_not_disposed("tick")
        if elapsed < self._last_elapsed:
            raise ValueError(
                f"Elapsed time must not decrease (previous={self._last_elapsed}, got={elapsed})"
            )
        delta = elapsed - self._last_elapsed
        self._last_elapsed = elapsed

        if not self._active:
            return self._value

        transitions = self._advance(delta.total_seconds())
        self._set_value(self._compute_value())

        for transition in transitions:
            if transition.event is BoundaryEvent.COMPLETED:
                self._notify_status(AnimationStatus.COMPLETED)
            else:
                self._notify_status(AnimationStatus.DISMISSED)
            if transition.keeps_running and transition.action is BoundaryAction.SWITCH:
                self._notify_status(self.status)

        if self._on_complete is not None:
            for transition in transitions:
                if transition.fires_completion:
                    self._on_complete(self._value)

        return self._value

    def _advance(self, remaining: float) -> list[BoundaryTransition]:
        transitions: list[BoundaryTransition] = []
        while remaining > 0.0 and self._active:
            forward = self._machine.direction is Direction.FORWARD
            duration = (
                self._config.duration if forward else self._config.effective_reverse_duration
            ).total_seconds()
            target = self._machine.target_progress()
            time_to_boundary = abs(target - self._progress) * duration

            if remaining < time_to_boundary:
                step = remaining / duration
                self._progress += step if forward else -step
                break

            remaining -= time_to_boundary
            self._progress = target
            transitions.append(self._reach_boundary())
        return transitions

    def _reach_boundary(self) -> BoundaryTransition:
        if self._machine.direction is Direction.FORWARD:
            event = BoundaryEvent.COMPLETED
        else:
            event = BoundaryEvent.DISMISSED
        transition = self._machine.on_boundary(event)

        # Both bindings agree at the boundary, so the configured one takes over.
        self._segment = None

        if transition.action is BoundaryAction.STOP:
            self.stop()
        elif transition.restart_progress is not None:
            self._progress = transition.restart_progress
        return transition

    # ========== RECONFIGURATION ==========

    def reconfigure(
        self,
        *,
        start: T = _UNSET,
        end: T = _UNSET,
        lerp: Callable[[T, T, float], T] | None = _UNSET,
        **config_changes: Any,
    ) -> None:
        """Change values, interpolation or config without a jump in value.

        The current value is captured and a transitional segment is bound from
        it to the current target (end when moving forward, start when moving
        backward). The segment restarts at its origin; at the next boundary
        the configured binding takes over again.

        A stopped controller whose start, end and lerp are unchanged keeps its
        progress and only re-evaluates the value, so a finished run still
        reports completion. Changing the mode of a stopped controller moves it
        to the new mode's starting point.

        Args:
            start: New start value
            end: New end value
            lerp: New explicit interpolation function (None to use the registry)
            **config_changes: AnimationConfig fields to replace (duration,
                reverse_duration, curve, reverse_curve, mode, interval)

        Raises:
            ControllerDisposedError: If the controller was disposed
            ValidationError: If the config changes are invalid
            UnsupportedInterpolationError: If the new values cannot be
                interpolated
        """
        self._check_not_disposed("reconfigure")

        # Validate everything before mutating anything.
        config = self._config.updated(**config_changes) if config_changes else self._config
        lerp_override = self._lerp_override if lerp is _UNSET else lerp
        new_start = self._binding.start if start is _UNSET else start
        new_end = self._binding.end if end is _UNSET else end
        binding = AnimatableValue.of(new_start, new_end, lerp_override, self._registry)

        captured = self._value
        values_changed = (
            lerp_override is not self._lerp_override
            or not values_equal(binding.start, self._binding.start)
            or not values_equal(binding.end, self._binding.end)
        )
        mode_changed = config.mode is not self._machine.mode
        self._config = config
        self._lerp_override = lerp_override
        self._binding = binding
        self._machine.set_mode(config.mode)

        if not self._active and not values_changed:
            # A stopped controller keeps its place; a new mode starts a fresh run.
            if mode_changed:
                self._progress = self._machine.origin_progress
                self._segment = None
        elif self._machine.direction is Direction.FORWARD:
            self._segment = AnimatableValue(start=captured, end=binding.end, lerp=binding.lerp)
            self._progress = 0.0
        else:
            self._segment = AnimatableValue(start=binding.start, end=captured, lerp=binding.lerp)
            self._progress = 1.0

        self._logger.debug(
            f"Animation reconfigured: segment={self.segment!r}, mode={config.mode.value}, "
            f"config changes={sorted(config_changes)}"
        )
        self._set_value(self._compute_value())

    def animate_to(self, value: T) -> None:
        """Retarget a one-shot animation to ``value`` from wherever it is now."""
        self.reconfigure(end=value)
        self.start()

    # ========== INTERNALS ==========

    def _eased_progress(self) -> float:
        forward = self._machine.direction is Direction.FORWARD
        curve = self._config.curve if forward else self._config.effective_reverse_curve
        interval = self._config.interval

        if self._machine.swaps_endpoints:
            # Ease along the end -> start run, then map back onto progress.
            t = 1.0 - self._progress
            if interval is not None:
                t = interval(t)
            return 1.0 - curve(t)

        t = self._progress
        if interval is not None:
            t = interval(t)
        return curve(t)

    def _compute_value(self) -> T:
        return self.segment.evaluate(self._eased_progress())

    def _set_value(self, value: T) -> None:
        changed = not values_equal(value, self._value)
        self._value = value
        if changed:
            for listener in list(self._listeners):
                listener(value)

    def _notify_status(self, status: AnimationStatus) -> None:
        for listener in list(self._status_listeners):
            listener(status)

    def _release_subscription(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def _check_not_disposed(self, operation: str) -> None:
        if self._disposed:
            raise ControllerDisposedError(f"Cannot {operation} a disposed AnimationController")
