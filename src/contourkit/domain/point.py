"""Planar point type."""

from dataclasses import dataclass
from typing import Any, Protocol


class CartesianPoint2d(Protocol):
    """Anything with ``x`` and ``y`` coordinates.

    Kernel operations only read these two attributes, so callers may pass
    their own point types instead of :class:`Point`.
    """

    @property
    def x(self) -> Any: ...

    @property
    def y(self) -> Any: ...


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D cartesian space.

    Immutable and hashable; two points are equal when their coordinates are.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: Any
    y: Any

    def to_tuple(self) -> tuple[Any, Any]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])
