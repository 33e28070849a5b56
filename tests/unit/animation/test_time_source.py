"""Tests for ManualTimeSource."""

from __future__ import annotations

from datetime import timedelta

import pytest

from animkit.core.animation.clock import ManualTimeSource, TimeSource


class TestManualTimeSource:
    """Tests for subscription and tick delivery."""

    def test_satisfies_protocol(self) -> None:
        source: TimeSource = ManualTimeSource()
        assert hasattr(source, "subscribe")

    def test_delivers_cumulative_elapsed(self) -> None:
        source = ManualTimeSource()
        seen: list[timedelta] = []
        source.subscribe(seen.append)

        source.advance(timedelta(milliseconds=10))
        source.advance(timedelta(milliseconds=20))

        assert seen == [timedelta(milliseconds=10), timedelta(milliseconds=30)]
        assert source.now == timedelta(milliseconds=30)

    def test_elapsed_counts_from_subscription(self) -> None:
        source = ManualTimeSource()
        source.advance(timedelta(seconds=5))
        seen: list[timedelta] = []
        source.subscribe(seen.append)

        source.advance(timedelta(seconds=1))
        assert seen == [timedelta(seconds=1)]

    def test_cancel_stops_delivery(self) -> None:
        source = ManualTimeSource()
        seen: list[timedelta] = []
        subscription = source.subscribe(seen.append)

        subscription.cancel()
        subscription.cancel()
        source.advance(timedelta(seconds=1))

        assert seen == []
        assert source.subscriber_count == 0

    def test_cancel_during_tick(self) -> None:
        source = ManualTimeSource()
        seen: list[str] = []

        def first(elapsed: timedelta) -> None:
            seen.append("first")
            second_sub.cancel()

        source.subscribe(first)
        second_sub = source.subscribe(lambda elapsed: seen.append("second"))

        source.advance(timedelta(seconds=1))
        assert seen == ["first"]

    def test_negative_delta_raises(self) -> None:
        with pytest.raises(ValueError, match="backwards"):
            ManualTimeSource().advance(timedelta(seconds=-1))
