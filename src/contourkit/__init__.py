"""contourkit - Signed area, winding and boundary distance for planar contours.

contourkit is a small geometry kernel over open polylines and closed polygon
boundaries. It computes a contour's signed area, classifies its winding, and
finds the squared distance from a point to its nearest boundary segment.

Example:
    >>> from contourkit import ClosedContour, Point, area_signed, winding
    >>> triangle = ClosedContour([Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)])
    >>> area_signed(triangle)
    0.5
    >>> winding(triangle).value
    'counter_clockwise'
"""

__version__ = "0.1.0"

from contourkit.core import (  # noqa: E402
    area_signed,
    distance_sq,
    distance_to_point_sq,
    winding,
    with_winding,
)
from contourkit.domain import (  # noqa: E402
    ClosedContour,
    Contour,
    OpenContour,
    Point,
    Segment,
    Winding,
    iter_points_closing,
    iter_segments,
    make_contour,
    partial_cmp,
)

__all__ = [
    "ClosedContour",
    "Contour",
    "OpenContour",
    "Point",
    "Segment",
    "Winding",
    "__version__",
    "area_signed",
    "distance_sq",
    "distance_to_point_sq",
    "iter_points_closing",
    "iter_segments",
    "make_contour",
    "partial_cmp",
    "winding",
    "with_winding",
]
