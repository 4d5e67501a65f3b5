"""Core geometric types for contour representation.

This module defines the contour variants and their boundary walks:
- OpenContour: A polyline with no edge between its last and first point
- ClosedContour: A polygon boundary closed by an implicit last-to-first edge
- Contour: Union of the two variants
- Winding: Enum for contour winding direction

Both variants are immutable. Boundary walks are generators, so they are
computed on demand and restarted by calling the function again.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, TypeAlias

from contourkit.domain.point import CartesianPoint2d, Point
from contourkit.domain.segment import Segment


class Winding(str, Enum):
    """Contour winding direction.

    With the y axis pointing up:
    - Counter-clockwise contours have positive signed area
    - Clockwise contours have negative signed area

    Contours with zero area count as clockwise.
    """

    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


@dataclass(frozen=True, slots=True)
class OpenContour:
    """A polyline: consecutive points are joined, the ends are not.

    Attributes:
        points: Ordered points of the polyline
    """

    points: tuple[CartesianPoint2d, ...]
    is_closed: ClassVar[bool] = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def iter_points_closing(self) -> Iterator[CartesianPoint2d]:
        """Iterate over the boundary walk (see :func:`iter_points_closing`)."""
        return iter_points_closing(self)

    def iter_segments(self) -> Iterator[Segment]:
        """Iterate over the boundary segments (see :func:`iter_segments`)."""
        return iter_segments(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return _contour_to_dict(self)


@dataclass(frozen=True, slots=True)
class ClosedContour:
    """A polygon boundary: the last point is joined back to the first.

    Attributes:
        points: Ordered points of the boundary, without a repeated first point
    """

    points: tuple[CartesianPoint2d, ...]
    is_closed: ClassVar[bool] = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def iter_points_closing(self) -> Iterator[CartesianPoint2d]:
        """Iterate over the boundary walk (see :func:`iter_points_closing`)."""
        return iter_points_closing(self)

    def iter_segments(self) -> Iterator[Segment]:
        """Iterate over the boundary segments (see :func:`iter_segments`)."""
        return iter_segments(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return _contour_to_dict(self)


Contour: TypeAlias = OpenContour | ClosedContour


def make_contour(points: Iterable[CartesianPoint2d], closed: bool) -> Contour:
    """Build an open or closed contour from points.

    Args:
        points: Ordered contour points
        closed: Whether the last point connects back to the first

    Returns:
        ClosedContour if ``closed`` else OpenContour
    """
    if closed:
        return ClosedContour(tuple(points))
    return OpenContour(tuple(points))


def iter_points_closing(contour: Contour) -> Iterator[CartesianPoint2d]:
    """Walk the contour's points so that the walk ends where it closes.

    An open contour yields its points unchanged. A closed contour yields its
    points followed by the first point again, so pairing consecutive items
    also produces the closing edge.

    Args:
        contour: Contour to walk

    Yields:
        Points of the walk, in order
    """
    points = contour.points
    yield from points
    if contour.is_closed and points:
        yield points[0]


def iter_segments(contour: Contour) -> Iterator[Segment]:
    """Iterate over consecutive point pairs of the closing walk.

    Open contours with ``n`` points give ``n - 1`` segments, closed contours
    give ``n``. Fewer than two points in the walk give none.

    Args:
        contour: Contour to walk

    Yields:
        Boundary segments, in order
    """
    walk = iter_points_closing(contour)
    prev = next(walk, None)
    if prev is None:
        return
    for point in walk:
        yield Segment(prev, point)
        prev = point


def _contour_to_dict(contour: Contour) -> dict[str, Any]:
    return {
        "kind": "closed" if contour.is_closed else "open",
        "points": [_point_to_dict(p) for p in contour.points],
    }


def _point_to_dict(point: CartesianPoint2d) -> dict[str, Any]:
    if isinstance(point, Point):
        return point.to_dict()
    return {"x": point.x, "y": point.y}


def contour_from_dict(data: dict[str, Any]) -> Contour:
    """Deserialize a contour from dictionary.

    Points may be given either as ``{"x": ..., "y": ...}`` objects or as
    ``[x, y]`` pairs.

    Args:
        data: Dictionary with ``kind`` ("open" or "closed") and ``points``

    Returns:
        OpenContour or ClosedContour

    Raises:
        ValueError: If ``kind`` is unknown or a point is malformed
        KeyError: If a required field is missing
    """
    kind = data["kind"]
    if kind not in ("open", "closed"):
        raise ValueError(f"Unknown contour kind: {kind!r}")
    points = [_point_from_data(p) for p in data["points"]]
    return make_contour(points, closed=kind == "closed")


def _point_from_data(data: Any) -> Point:
    if isinstance(data, dict):
        point = Point.from_dict(data)
    elif isinstance(data, (list, tuple)) and len(data) == 2:
        point = Point(data[0], data[1])
    else:
        raise ValueError(f"Malformed point: {data!r}")
    _check_coordinate(point.x)
    _check_coordinate(point.y)
    return point


def _check_coordinate(value: Any) -> None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Coordinate is not a number: {value!r}")
