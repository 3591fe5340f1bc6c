"""Configuration management for Constellate."""

from constellate.core.config.loader import (
    detect_format,
    load_app_config,
    load_config,
)
from constellate.core.config.models import (
    AppConfig,
    GridSettings,
    HelixSettings,
    LayoutSettings,
    LoggingConfig,
    SphereSettings,
    TableSettings,
    TetrahedronSettings,
)

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_app_config",
    # App-level config
    "AppConfig",
    "LoggingConfig",
    # Layout settings
    "LayoutSettings",
    "TableSettings",
    "GridSettings",
    "SphereSettings",
    "HelixSettings",
    "TetrahedronSettings",
]
