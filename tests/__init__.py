"""Test suite for animkit.

Test Structure:
- unit/: Unit tests for individual components
  - curves/: Easing curves and interval remapping
  - interpolation/: Lerp functions, value types and the interpolator registry
  - animation/: Bindings, repeat state machine, time sources and the controller
  - config/: AnimationConfig and the JSON/YAML loader
  - utils/: Math and logging helpers
- integration/: Config-driven controllers running on a time source
- conftest.py: Shared fixtures
"""
