"""Command-line interface for contourkit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Per-contour area and winding tables
- Nearest-boundary distance queries
- Winding normalization of contour files
"""

from contourkit.cli.app import cli, main

__all__ = ["cli", "main"]
