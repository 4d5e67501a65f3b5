"""Configuration management for contourkit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- OutputConfig: Result formatting and normalization settings
- LoggingConfig: Logging settings
- ContourKitSettings: Main application settings
"""

from contourkit.config.settings import (
    ContourKitSettings,
    LoggingConfig,
    OutputConfig,
    get_default_settings,
)

__all__ = [
    "ContourKitSettings",
    "LoggingConfig",
    "OutputConfig",
    "get_default_settings",
]
