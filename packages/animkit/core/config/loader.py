"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from animkit.core.config.models import AnimationConfig

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("fade.json")
        'json'
        >>> detect_format("fade.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary (empty for an empty YAML file)

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root in {path} must be a mapping, got {type(content).__name__}")
    return content


def load_animation_config(path: str | Path, section: str | None = None) -> AnimationConfig:
    """Load and validate an animation configuration.

    Args:
        path: Path to config file (.json, .yaml, or .yml)
        section: Optional top-level key holding the animation settings, for
            files that describe several animations

    Returns:
        Validated AnimationConfig

    Raises:
        FileNotFoundError: If config file does not exist
        KeyError: If section is given but missing
        ValidationError: If the settings are invalid

    Example:
        >>> config = load_animation_config("animations.yaml", section="fade_in")
    """
    raw_config = load_config(path)
    if section is not None:
        if section not in raw_config:
            raise KeyError(f"Section '{section}' not found in {path}")
        raw_config = raw_config[section]

    config = AnimationConfig.model_validate(raw_config)
    logger.debug(f"Loaded animation config from {path}: mode={config.mode.value}")
    return config
