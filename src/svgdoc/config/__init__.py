"""Configuration management for svgdoc.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Indentation and document framing settings
- LoggingConfig: Logging settings
- SvgDocSettings: Main application settings
"""

from svgdoc.config.settings import (
    LoggingConfig,
    RenderConfig,
    SvgDocSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "RenderConfig",
    "SvgDocSettings",
    "get_default_settings",
]
