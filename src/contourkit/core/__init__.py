"""Core algorithms for contourkit.

All functions are designed to be:
- Stateless (safe to call from any thread)
- Pure (no side effects)
- Total (degenerate input gives a defined result, never an error)

Key functions:
- area_signed: Signed contour area using the shoelace formula
- winding: Clockwise or counter-clockwise classification
- distance_sq: Squared distance from a point to a segment
- distance_to_point_sq: Squared distance from a point to a contour boundary
- with_winding: Reverse a contour to reach a requested winding
"""

from contourkit.core.geometry import (
    area_signed,
    distance_to_point_sq,
    winding,
    with_winding,
)
from contourkit.domain.segment import distance_sq

__all__ = [
    "area_signed",
    "distance_sq",
    "distance_to_point_sq",
    "winding",
    "with_winding",
]
