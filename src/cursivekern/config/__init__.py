"""Configuration management for cursivekern.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Distance and collision geometry settings
- KerningConfig: Kerning solver settings
- RoleConfig: Glyph-name role rules for the font-data layer
- LoggingConfig: Logging settings
- CursiveKernSettings: Main application settings
"""

from cursivekern.config.settings import (
    CursiveKernSettings,
    GeometryConfig,
    KerningConfig,
    LoggingConfig,
    RoleConfig,
    UnsupportedPolicy,
    get_default_settings,
)

__all__ = [
    "CursiveKernSettings",
    "GeometryConfig",
    "KerningConfig",
    "LoggingConfig",
    "RoleConfig",
    "UnsupportedPolicy",
    "get_default_settings",
]
