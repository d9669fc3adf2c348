"""Utility functions for svgdoc.

This module provides logging setup and render statistics tracking.
"""

from svgdoc.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
