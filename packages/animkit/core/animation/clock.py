"""Time sources that drive controllers.

A time source owns the frame loop; the engine never schedules anything
itself. Each subscriber receives the elapsed time since it subscribed, which
never decreases.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[timedelta], object]


class Subscription(Protocol):
    """Handle returned by TimeSource.subscribe."""

    def cancel(self) -> None:
        """Stop delivering ticks. Safe to call more than once."""
        ...


class TimeSource(Protocol):
    """Protocol for frame/tick providers."""

    def subscribe(self, callback: TickCallback) -> Subscription:
        """Deliver ``callback(elapsed)`` on every tick until cancelled."""
        ...


class ManualSubscription:
    """Subscription to a ManualTimeSource."""

    def __init__(self, source: ManualTimeSource, callback: TickCallback) -> None:
        self._source = source
        self.callback = callback
        self.elapsed = timedelta(0)
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._source._remove(self)


class ManualTimeSource:
    """Time source advanced explicitly by the owner of the frame loop.

    Example:
        >>> source = ManualTimeSource()
        >>> seen = []
        >>> sub = source.subscribe(seen.append)
        >>> source.advance(timedelta(milliseconds=16))
        >>> seen
        [datetime.timedelta(microseconds=16000)]
    """

    def __init__(self) -> None:
        self._subscriptions: list[ManualSubscription] = []
        self.now = timedelta(0)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, callback: TickCallback) -> ManualSubscription:
        subscription = ManualSubscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def advance(self, delta: timedelta) -> None:
        """Move time forward and deliver one tick to every subscriber.

        Raises:
            ValueError: If delta is negative.
        """
        if delta < timedelta(0):
            raise ValueError(f"Time cannot move backwards (delta={delta})")
        self.now += delta
        # Callbacks may cancel subscriptions while we iterate.
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.elapsed += delta
                subscription.callback(subscription.elapsed)

    def _remove(self, subscription: ManualSubscription) -> None:
        self._subscriptions.remove(subscription)
        logger.debug(f"Subscription cancelled ({len(self._subscriptions)} remaining)")
