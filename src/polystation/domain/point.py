"""Core point type for polyline geometry.

This module defines the fundamental value type used throughout polystation:
- Point: An immutable 2D point with integer coordinates
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in the 2D Cartesian plane.

    Immutable and hashable for use in sets/dicts. Points compare equal when
    both coordinates are equal.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: int
    y: int

    def distance_to(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point.

        Coordinates are Python integers, so the squared differences never
        overflow regardless of magnitude.

        Args:
            other: The target point

        Returns:
            Distance between the two points (0.0 for equal points)

        Examples:
            >>> Point(0, 0).distance_to(Point(3, 4))
            5.0
        """
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

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
        return cls(x=int(data["x"]), y=int(data["y"]))
