"""Configuration management for animkit."""

from animkit.core.config.loader import detect_format, load_animation_config, load_config
from animkit.core.config.models import AnimationConfig

__all__ = [
    "AnimationConfig",
    "detect_format",
    "load_animation_config",
    "load_config",
]
