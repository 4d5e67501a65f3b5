"""Straight boundary segment between two points."""

from dataclasses import dataclass
from typing import Any

from contourkit.domain.point import CartesianPoint2d
from contourkit.domain.scalar import ONE, ZERO, clamp


@dataclass(frozen=True, slots=True)
class Segment:
    """An ordered pair of points: ``a`` is the start, ``b`` the end.

    Attributes:
        a: Start point
        b: End point
    """

    a: CartesianPoint2d
    b: CartesianPoint2d

    def distance_to_point_sq(self, point: CartesianPoint2d) -> Any:
        """Squared distance from ``point`` to the closest point of this segment."""
        return distance_sq(self, point)


def distance_sq(segment: Segment, point: CartesianPoint2d) -> Any:
    """Squared distance from a point to a line segment.

    Projects the point onto the segment's line, clamps the projection
    parameter into ``[0, 1]`` so the closest point stays on the segment, and
    measures from there. A zero-length segment falls back to the distance
    to its start point.

    Args:
        segment: The segment to measure against
        point: The query point

    Returns:
        Squared Euclidean distance, in the coordinates' own number type

    Examples:
        >>> from contourkit.domain.point import Point
        >>> distance_sq(Segment(Point(0.0, 0.0), Point(2.0, 0.0)), Point(1.0, 1.0))
        1.0
    """
    a, b = segment.a, segment.b
    dx = b.x - a.x
    dy = b.y - a.y

    px = point.x - a.x
    py = point.y - a.y

    if dx == ZERO and dy == ZERO:
        return px * px + py * py

    # t = dot(point - a, d) / dot(d, d)
    t = (px * dx + py * dy) / (dx * dx + dy * dy)
    t = clamp(t, ZERO, ONE)

    ex = point.x - (a.x + t * dx)
    ey = point.y - (a.y + t * dy)
    return ex * ex + ey * ey
