"""Domain models for contourkit.

This module contains the value types the geometry kernel works on. All
models are:

- Immutable (frozen dataclasses)
- Serializable to plain dictionaries for JSON files
- Generic over the coordinate number type

Key classes:
- Point: A 2D cartesian point
- Segment: An ordered pair of points
- OpenContour / ClosedContour: The two contour variants
- Winding: Clockwise or counter-clockwise
"""

from contourkit.domain.contour import (
    ClosedContour,
    Contour,
    OpenContour,
    Winding,
    contour_from_dict,
    iter_points_closing,
    iter_segments,
    make_contour,
)
from contourkit.domain.point import CartesianPoint2d, Point
from contourkit.domain.scalar import Ordering, Scalar, partial_cmp
from contourkit.domain.segment import Segment, distance_sq

__all__: list[str] = [
    # Enums
    "Ordering",
    "Winding",
    # Protocols
    "CartesianPoint2d",
    "Scalar",
    # Core types
    "ClosedContour",
    "Contour",
    "OpenContour",
    "Point",
    "Segment",
    # Functions
    "contour_from_dict",
    "distance_sq",
    "iter_points_closing",
    "iter_segments",
    "make_contour",
    "partial_cmp",
]
