"""Tests for interval remapping."""

from __future__ import annotations

from datetime import timedelta

import pytest

from animkit.core.curves.easing import Curves, get_easing
from animkit.core.curves.interval import IntervalCurve, remap
from animkit.core.errors import InvalidIntervalError


def seconds(value: float) -> timedelta:
    return timedelta(seconds=value)


@pytest.fixture
def middle_interval() -> IntervalCurve:
    """Interval covering 2s..8s of a 10s animation."""
    return IntervalCurve(duration=seconds(10), start=seconds(2), end=seconds(8))


class TestRemap:
    """Tests for the remap function."""

    def test_before_interval_is_zero(self) -> None:
        for t in (0.0, 0.1, 0.2):
            assert remap(t, 0.2, 0.8) == 0.0

    def test_after_interval_is_one(self) -> None:
        for t in (0.8, 0.9, 1.0):
            assert remap(t, 0.2, 0.8) == 1.0

    def test_strictly_increasing_inside_interval(self) -> None:
        samples = [remap(0.2 + i * 0.06, 0.2, 0.8) for i in range(1, 10)]
        assert all(b > a for a, b in zip(samples, samples[1:], strict=False))

    def test_midpoint(self) -> None:
        assert remap(0.5, 0.2, 0.8) == pytest.approx(0.5, abs=0.01)

    def test_defaults_cover_whole_range(self) -> None:
        assert remap(0.3) == pytest.approx(0.3)

    def test_easing_applied_to_local_progress(self) -> None:
        ease_in = get_easing(Curves.EASE_IN_QUAD)
        assert remap(0.5, 0.0, 1.0, ease_in) == pytest.approx(0.25)

    def test_degenerate_interval_raises(self) -> None:
        with pytest.raises(InvalidIntervalError, match="greater than start"):
            remap(0.5, 0.4, 0.4)

    def test_inverted_interval_raises(self) -> None:
        with pytest.raises(InvalidIntervalError):
            remap(0.5, 0.8, 0.2)

    def test_out_of_range_bounds_raise(self) -> None:
        with pytest.raises(InvalidIntervalError, match="within"):
            remap(0.5, -0.1, 0.5)


class TestIntervalCurve:
    """Tests for IntervalCurve."""

    def test_transform_within_interval(self, middle_interval: IntervalCurve) -> None:
        assert middle_interval.transform(0.0) == 0.0
        assert middle_interval.transform(0.2) == 0.0
        assert middle_interval.transform(0.5) == pytest.approx(0.5, abs=0.01)
        assert middle_interval.transform(0.8) == 1.0
        assert middle_interval.transform(1.0) == 1.0

    def test_callable(self, middle_interval: IntervalCurve) -> None:
        assert middle_interval(0.9) == 1.0

    def test_curve_applied_inside_interval(self) -> None:
        interval = IntervalCurve(
            duration=seconds(10),
            start=seconds(2),
            end=seconds(8),
            curve=get_easing(Curves.EASE_IN_QUAD),
        )
        value = interval(0.5)
        assert 0.0 < value < 1.0
        assert value < 0.5

    def test_open_bounds_default_to_full_duration(self) -> None:
        interval = IntervalCurve(duration=seconds(4))
        assert interval.start_fraction == 0.0
        assert interval.end_fraction == 1.0
        assert interval(0.25) == pytest.approx(0.25)

    def test_only_start(self) -> None:
        interval = IntervalCurve(duration=seconds(4), start=seconds(1))
        assert interval(0.25) == 0.0
        assert interval(1.0) == 1.0

    def test_degenerate_interval_raises_at_construction(self) -> None:
        with pytest.raises(InvalidIntervalError):
            IntervalCurve(duration=seconds(10), start=seconds(5), end=seconds(5))

    def test_inverted_interval_raises_at_construction(self) -> None:
        with pytest.raises(InvalidIntervalError):
            IntervalCurve(duration=seconds(10), start=seconds(6), end=seconds(4))

    def test_end_beyond_duration_raises(self) -> None:
        with pytest.raises(InvalidIntervalError, match="exceeds"):
            IntervalCurve(duration=seconds(10), end=seconds(11))

    def test_negative_start_raises(self) -> None:
        with pytest.raises(InvalidIntervalError, match="negative"):
            IntervalCurve(duration=seconds(10), start=seconds(-1))

    def test_zero_duration_raises(self) -> None:
        with pytest.raises(InvalidIntervalError, match="positive"):
            IntervalCurve(duration=timedelta(0))

    def test_invalid_interval_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            IntervalCurve(duration=seconds(1), start=seconds(1))


class TestDelayed:
    """Tests for IntervalCurve.delayed."""

    def test_both_delays(self) -> None:
        interval = IntervalCurve.delayed(
            duration=seconds(5),
            start_delay=seconds(2),
            end_delay=seconds(1),
        )
        assert interval.start == seconds(2)
        assert interval.end == seconds(7)
        assert interval.duration == seconds(8)

    def test_start_delay_only(self) -> None:
        interval = IntervalCurve.delayed(duration=seconds(3), start_delay=seconds(1))
        assert interval.start == seconds(1)
        assert interval.end is None
        assert interval.duration == seconds(4)
        assert interval(0.25) == 0.0

    def test_no_delays(self) -> None:
        interval = IntervalCurve.delayed(duration=seconds(3))
        assert interval == IntervalCurve(duration=seconds(3))


class TestEquality:
    """Tests for equality, hashing and repr."""

    def test_identical_intervals_are_equal(self) -> None:
        a = IntervalCurve(duration=seconds(10), start=seconds(2), end=seconds(8))
        b = IntervalCurve(duration=seconds(10), start=seconds(2), end=seconds(8))
        assert a == b
        assert hash(a) == hash(b)

    def test_same_named_curve_is_equal(self) -> None:
        a = IntervalCurve(duration=seconds(10), curve=get_easing("ease_in_sine"))
        b = IntervalCurve(duration=seconds(10), curve=get_easing("ease_in_sine"))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_bounds_are_unequal(self) -> None:
        a = IntervalCurve(duration=seconds(10), start=seconds(2), end=seconds(8))
        b = IntervalCurve(duration=seconds(10), start=seconds(3), end=seconds(7))
        assert a != b

    def test_different_curves_are_unequal(self) -> None:
        a = IntervalCurve(duration=seconds(10), curve=get_easing("ease_in_sine"))
        b = IntervalCurve(duration=seconds(10), curve=get_easing("ease_out_sine"))
        assert a != b

    def test_repr(self) -> None:
        interval = IntervalCurve(duration=seconds(10), start=seconds(2), end=seconds(8))
        assert repr(interval) == "IntervalCurve(start: 0:00:02, end: 0:00:08, duration: 0:00:10)"
