"""Contour file I/O.

This module handles reading and writing JSON contour files.

Key classes:
- ContourReader: Load contours from a file
- ContourWriter: Save contours to a file
"""

from contourkit.io.reader import ContourReader
from contourkit.io.writer import ContourWriter

__all__ = [
    "ContourReader",
    "ContourWriter",
]
