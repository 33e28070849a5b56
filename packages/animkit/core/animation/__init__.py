"""Animation bindings, repeat policies and time sources.

The controller lives in ``animkit.core.animation.controller``; it depends on
``animkit.core.config``, which in turn imports the repeat policies from here.
"""

from animkit.core.animation.binding import AnimatableValue
from animkit.core.animation.clock import ManualTimeSource, Subscription, TimeSource
from animkit.core.animation.repeat import (
    BoundaryAction,
    BoundaryEvent,
    BoundaryTransition,
    Direction,
    RepeatMode,
    RepeatStateMachine,
)

__all__ = [
    "AnimatableValue",
    "BoundaryAction",
    "BoundaryEvent",
    "BoundaryTransition",
    "Direction",
    "ManualTimeSource",
    "RepeatMode",
    "RepeatStateMachine",
    "Subscription",
    "TimeSource",
]
