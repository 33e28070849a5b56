"""Shared pytest fixtures for animkit tests."""

from __future__ import annotations

import pytest

from animkit.core.interpolation.registry import InterpolatorRegistry, default_registry


@pytest.fixture
def registry() -> InterpolatorRegistry:
    """A default registry that tests may mutate freely."""
    return default_registry()
