"""Repeat/reverse state machine for progress boundaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from animkit.core.errors import InvalidTransitionError

logger = logging.getLogger(__name__)


class RepeatMode(str, Enum):
    """How an animation behaves when progress reaches 0 or 1.

    ONCE plays start -> end and stops. REPEAT restarts start -> end forever.
    REVERSE plays end -> start forever. PING_PONG alternates start -> end ->
    start. PING_PONG_REVERSE alternates the same way beginning at end.
    """

    ONCE = "once"
    REPEAT = "repeat"
    REVERSE = "reverse"
    PING_PONG = "ping_pong"
    PING_PONG_REVERSE = "ping_pong_reverse"


class Direction(str, Enum):
    """Direction of travel through progress."""

    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def opposite(self) -> Direction:
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD


class BoundaryEvent(str, Enum):
    """A progress boundary being reached."""

    COMPLETED = "completed"  # progress reached 1 moving forward
    DISMISSED = "dismissed"  # progress reached 0 moving backward


class BoundaryAction(str, Enum):
    """What happens after a boundary event."""

    STOP = "stop"
    RESTART = "restart"  # jump back to the opposite boundary, same direction
    SWITCH = "switch"  # turn around, progress unchanged


@dataclass(frozen=True)
class BoundaryTransition:
    """Record of one boundary event and the resulting transition."""

    event: BoundaryEvent
    action: BoundaryAction
    from_direction: Direction
    to_direction: Direction
    restart_progress: float | None = None

    @property
    def fires_completion(self) -> bool:
        """Whether this boundary counts as a forward completion."""
        return self.event is BoundaryEvent.COMPLETED and self.from_direction is Direction.FORWARD

    @property
    def keeps_running(self) -> bool:
        return self.action is not BoundaryAction.STOP


class RepeatStateMachine:
    """Decides direction and looping at progress boundaries.

    Backward travel plays the configured binding from end to start, so the
    reverse modes start at progress 1 and still interpolate between the
    configured start and end values. Those modes treat the end to start pass
    as their primary run: curves are eased along that run, which mirrors them
    relative to progress (see ``swaps_endpoints``).

    Example:
        >>> machine = RepeatStateMachine(RepeatMode.PING_PONG)
        >>> machine.on_boundary(BoundaryEvent.COMPLETED).to_direction
        <Direction.BACKWARD: 'backward'>
    """

    VALID_TRANSITIONS: dict[tuple[RepeatMode, BoundaryEvent], BoundaryAction] = {
        (RepeatMode.ONCE, BoundaryEvent.COMPLETED): BoundaryAction.STOP,
        (RepeatMode.REPEAT, BoundaryEvent.COMPLETED): BoundaryAction.RESTART,
        (RepeatMode.REVERSE, BoundaryEvent.DISMISSED): BoundaryAction.RESTART,
        (RepeatMode.PING_PONG, BoundaryEvent.COMPLETED): BoundaryAction.SWITCH,
        (RepeatMode.PING_PONG, BoundaryEvent.DISMISSED): BoundaryAction.SWITCH,
        (RepeatMode.PING_PONG_REVERSE, BoundaryEvent.COMPLETED): BoundaryAction.SWITCH,
        (RepeatMode.PING_PONG_REVERSE, BoundaryEvent.DISMISSED): BoundaryAction.SWITCH,
    }

    INITIAL_DIRECTIONS: dict[RepeatMode, Direction] = {
        RepeatMode.ONCE: Direction.FORWARD,
        RepeatMode.REPEAT: Direction.FORWARD,
        RepeatMode.REVERSE: Direction.BACKWARD,
        RepeatMode.PING_PONG: Direction.FORWARD,
        RepeatMode.PING_PONG_REVERSE: Direction.BACKWARD,
    }

    SWAPPED_MODES: frozenset[RepeatMode] = frozenset(
        {RepeatMode.REVERSE, RepeatMode.PING_PONG_REVERSE}
    )

    def __init__(self, mode: RepeatMode = RepeatMode.ONCE):
        """Initialize state machine.

        Args:
            mode: Repeat policy
        """
        self.mode = RepeatMode(mode)
        self.direction = self.INITIAL_DIRECTIONS[self.mode]
        self.history: list[BoundaryTransition] = []

    @property
    def initial_direction(self) -> Direction:
        return self.INITIAL_DIRECTIONS[self.mode]

    @property
    def swaps_endpoints(self) -> bool:
        """Whether the mode runs end -> start as its primary pass."""
        return self.mode in self.SWAPPED_MODES

    @property
    def origin_progress(self) -> float:
        """Progress at which a fresh run of this mode begins."""
        return 0.0 if self.initial_direction is Direction.FORWARD else 1.0

    def target_progress(self, direction: Direction | None = None) -> float:
        """The boundary the given (or current) direction travels toward."""
        direction = direction or self.direction
        return 1.0 if direction is Direction.FORWARD else 0.0

    def can_handle(self, event: BoundaryEvent) -> bool:
        """Check whether the event is possible in the current mode and direction."""
        if self.direction is Direction.FORWARD:
            expected = BoundaryEvent.COMPLETED
        else:
            expected = BoundaryEvent.DISMISSED
        return event is expected and (self.mode, event) in self.VALID_TRANSITIONS

    def on_boundary(self, event: BoundaryEvent) -> BoundaryTransition:
        """Apply a boundary event and return the resulting transition.

        Args:
            event: The boundary that progress reached

        Returns:
            The recorded transition

        Raises:
            InvalidTransitionError: If the boundary cannot be reached in the
                current mode and direction
        """
        if not self.can_handle(event):
            raise InvalidTransitionError(
                f"Invalid boundary event: {event.value} while moving {self.direction.value} "
                f"in mode {self.mode.value}"
            )

        action = self.VALID_TRANSITIONS[(self.mode, event)]
        from_direction = self.direction
        restart_progress: float | None = None

        if action is BoundaryAction.SWITCH:
            self.direction = from_direction.opposite
        elif action is BoundaryAction.RESTART:
            restart_progress = 0.0 if event is BoundaryEvent.COMPLETED else 1.0

        transition = BoundaryTransition(
            event=event,
            action=action,
            from_direction=from_direction,
            to_direction=self.direction,
            restart_progress=restart_progress,
        )
        self.history.append(transition)

        logger.debug(
            f"Boundary {event.value} in mode {self.mode.value}: {action.value} "
            f"({from_direction.value} → {self.direction.value})"
        )
        return transition

    def set_mode(self, mode: RepeatMode) -> None:
        """Switch repeat policy.

        The direction is kept when the mode does not change and reset to the
        new mode's initial direction otherwise.
        """
        mode = RepeatMode(mode)
        if mode is self.mode:
            return
        logger.debug(f"Repeat mode {self.mode.value} → {mode.value}")
        self.mode = mode
        self.direction = self.initial_direction

    def reset(self) -> None:
        """Reset to the initial direction and clear history."""
        self.direction = self.initial_direction
        self.history.clear()

    def get_transition_history(self) -> list[BoundaryTransition]:
        """Get transition history.

        Returns:
            Copy of the recorded boundary transitions
        """
        return self.history.copy()
