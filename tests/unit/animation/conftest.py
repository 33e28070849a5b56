"""Fixtures for animation tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from animkit.core.animation.clock import ManualTimeSource
from animkit.core.animation.controller import AnimationController
from animkit.core.config.models import AnimationConfig


@pytest.fixture
def time_source() -> ManualTimeSource:
    return ManualTimeSource()


@pytest.fixture
def make_controller() -> Callable[..., AnimationController]:
    """Build a 0.0 → 10.0 controller with a one-second duration by default."""

    def _make(start: object = 0.0, end: object = 10.0, **kwargs: object) -> AnimationController:
        config_fields = {
            key: kwargs.pop(key)
            for key in list(kwargs)
            if key in AnimationConfig.model_fields
        }
        config_fields.setdefault("duration", 1.0)
        return AnimationController(start, end, AnimationConfig(**config_fields), **kwargs)

    return _make
