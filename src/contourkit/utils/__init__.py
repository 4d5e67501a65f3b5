"""Utility functions for contourkit.

This module provides logging setup and run statistics.
"""

from contourkit.utils.logging import RunStats, configure_logging

__all__ = [
    "RunStats",
    "configure_logging",
]
