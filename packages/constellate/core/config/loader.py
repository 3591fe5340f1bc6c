"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from constellate.core.config.models import AppConfig

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "CONSTELLATE_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("constellate.json")
        'json'
        >>> detect_format("constellate.yml")
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
    """Load and return raw configuration dictionary.

    Format is auto-detected from the file extension.

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


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file at the default path falls back to defaults; an explicit
    path must exist. The CONSTELLATE_LOG_LEVEL environment variable
    overrides the configured log level.

    Args:
        path: Path to app config file, or None for AppConfig.default_path()

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        default = AppConfig.default_path()
        config = AppConfig.model_validate(load_config(default)) if default.exists() else AppConfig()
    else:
        config = AppConfig.model_validate(load_config(path))

    return _apply_env_overrides(config)


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    level = os.getenv(LOG_LEVEL_ENV_VAR)
    if not level:
        return config

    logger.debug(f"Loaded log level from {LOG_LEVEL_ENV_VAR}")
    logging_config = config.logging.model_validate(
        {**config.logging.model_dump(), "level": level.upper()}
    )
    return config.model_copy(update={"logging": logging_config})
