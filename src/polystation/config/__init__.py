"""Configuration management for polystation.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ReaderConfig: Point file parsing settings
- OutputConfig: Result formatting settings
- LoggingConfig: Logging settings
- PolystationSettings: Main application settings
"""

from polystation.config.settings import (
    LoggingConfig,
    OutputConfig,
    PolystationSettings,
    ReaderConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "PolystationSettings",
    "ReaderConfig",
    "get_default_settings",
]
