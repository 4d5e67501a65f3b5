"""Geometric operations on contours.

This module provides the measurements built on top of a contour's boundary
walk:
- Signed area (shoelace formula)
- Winding direction
- Squared distance from a point to the nearest boundary segment
- Winding normalization

All functions are pure and work with any coordinate number type that
supports arithmetic and ordering. Every function is total: degenerate
contours give well-defined results instead of raising.
"""

from functools import cmp_to_key
from typing import Any

from contourkit.domain import (
    CartesianPoint2d,
    Contour,
    Winding,
    iter_points_closing,
    iter_segments,
    make_contour,
    partial_cmp,
)
from contourkit.domain.scalar import ONE, ZERO
from contourkit.domain.segment import distance_sq


def area_signed(contour: Contour) -> Any:
    """Calculate signed area of a contour using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    The closing walk is traversed once, pairwise. An open contour is measured
    without its closing edge.

    Args:
        contour: The contour to measure

    Returns:
        Signed area in square units. Returns exactly ``0`` when the walk has
        fewer than two points.

    Examples:
        >>> from contourkit.domain import ClosedContour, Point
        >>> area_signed(ClosedContour([Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)]))
        0.5
        >>> area_signed(ClosedContour([Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 0.0)]))
        -0.5
    """
    walk = iter_points_closing(contour)
    prev = next(walk, None)
    if prev is None:
        return ZERO

    area = ZERO
    for point in walk:
        area = area + prev.x * point.y - point.x * prev.y
        prev = point

    return area / (ONE + ONE)


def winding(contour: Contour) -> Winding:
    """Determine the winding direction of a contour.

    Zero-area contours (empty, single point, collinear) are reported as
    clockwise. A NaN area is not ``<= 0`` and is reported as
    counter-clockwise, for ``Decimal`` as well as ``float``.

    Args:
        contour: The contour to classify

    Returns:
        Winding.COUNTER_CLOCKWISE for positive area, otherwise Winding.CLOCKWISE
    """
    return _winding_of_area(area_signed(contour))


def distance_to_point_sq(contour: Contour, point: CartesianPoint2d) -> Any | None:
    """Squared distance from a point to the closest segment of a contour.

    Values that cannot be ordered against each other (NaN for instance)
    are treated as equal, and the earlier one is kept.

    Args:
        contour: The contour to search
        point: The query point

    Returns:
        Minimum squared distance over all boundary segments, or None if the
        contour has no segments
    """
    return min(
        (distance_sq(segment, point) for segment in iter_segments(contour)),
        key=cmp_to_key(partial_cmp),
        default=None,
    )


def with_winding(contour: Contour, target: Winding) -> Contour:
    """Return a contour of the same kind with the requested winding.

    Contours already wound as requested are returned unchanged; others are
    rebuilt with their points reversed. Zero-area contours are always
    returned unchanged.

    Args:
        contour: The contour to normalize
        target: Desired winding direction

    Returns:
        The same contour, or a reversed copy
    """
    area = area_signed(contour)
    if area == ZERO or _winding_of_area(area) == target:
        return contour
    return make_contour(reversed(contour.points), closed=contour.is_closed)


def _winding_of_area(area: Any) -> Winding:
    try:
        clockwise = area <= ZERO
    except ArithmeticError:
        # Decimal NaN refuses ordering
        clockwise = False
    return Winding.CLOCKWISE if clockwise else Winding.COUNTER_CLOCKWISE
