"""Utility functions for cursivekern.

This module provides logging setup and spacing statistics.
"""

from cursivekern.utils.logging import (
    SpacingLogger,
    SpacingStats,
    configure_console_logging,
    configure_logging,
)

__all__ = [
    "SpacingLogger",
    "SpacingStats",
    "configure_console_logging",
    "configure_logging",
]
