"""Line segment type with cached geometry.

A Segment is a single straight piece of a polyline. Its length and its
axis-aligned bounding box are derived once at construction; the segment is
immutable afterwards.
"""

import math
from dataclasses import dataclass, field

from polystation.domain.point import Point


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned box spanning the two endpoints of a segment.

    Attributes:
        x_min: Smallest x coordinate
        x_max: Largest x coordinate
        y_min: Smallest y coordinate
        y_max: Largest y coordinate
    """

    x_min: int
    x_max: int
    y_min: int
    y_max: int

    @classmethod
    def spanning(cls, p1: Point, p2: Point) -> "BoundingBox":
        """Create the smallest box enclosing two points."""
        return cls(
            x_min=min(p1.x, p2.x),
            x_max=max(p1.x, p2.x),
            y_min=min(p1.y, p2.y),
            y_max=max(p1.y, p2.y),
        )

    def contains(self, p: Point) -> bool:
        """Check whether a point lies inside the box, edges included."""
        return self.x_min <= p.x <= self.x_max and self.y_min <= p.y <= self.y_max

    def squared_distance_to(self, p: Point) -> int:
        """Squared distance from a point to the nearest point of the box.

        Returns:
            0 if the point is inside or on the box, otherwise dx² + dy²
            using per-axis clamped distances
        """
        dx = max(0, self.x_min - p.x, p.x - self.x_max)
        dy = max(0, self.y_min - p.y, p.y - self.y_max)
        return dx * dx + dy * dy


@dataclass(frozen=True, slots=True)
class Segment:
    """A straight line segment between two points.

    Attributes:
        start: First endpoint
        end: Second endpoint
        length: Euclidean length, 0.0 for a degenerate segment (start == end)
        bounding_box: Axis-aligned box spanning both endpoints
    """

    start: Point
    end: Point
    length: float = field(init=False, repr=False, compare=False)
    bounding_box: BoundingBox = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", self.start.distance_to(self.end))
        object.__setattr__(self, "bounding_box", BoundingBox.spanning(self.start, self.end))

    @property
    def is_degenerate(self) -> bool:
        """True when both endpoints coincide."""
        return self.start == self.end

    def contains_projection(self, p: Point) -> bool:
        """Check whether the orthogonal projection of a point falls on the segment.

        The point is projected onto the infinite line through the endpoints
        with the parametric form t = dot(p - start, end - start) / |end - start|².
        The projection is contained when 0 <= t <= 1. The comparison is done on
        the integer numerator and denominator, so endpoint projections are exact.

        A degenerate segment has no projection interval and never contains a
        projection, not even of its own point.

        Args:
            p: The point to project

        Returns:
            True if the projection lies between start and end (inclusive)
        """
        abx = self.end.x - self.start.x
        aby = self.end.y - self.start.y
        length_squared = abx * abx + aby * aby
        if length_squared == 0:
            return False

        dot = (p.x - self.start.x) * abx + (p.y - self.start.y) * aby
        return 0 <= dot <= length_squared

    def squared_distance_to_bounding_box(self, p: Point) -> float:
        """Squared distance from a point to this segment's bounding box.

        This is a cheap lower bound on the true distance to the segment and is
        only meant as a pre-filter or ordering key.

        Args:
            p: The point to measure from

        Returns:
            0.0 if the point lies inside or on the box, otherwise the squared
            distance to the nearest point of the box
        """
        if self.bounding_box.contains(p):
            return 0.0
        return float(self.bounding_box.squared_distance_to(p))

    def distance_to(self, p: Point) -> float:
        """Perpendicular distance from a point to the infinite line through the segment.

        Uses the implicit line form A·x + B·y + C = 0 with
        A = end.y - start.y, B = start.x - end.x and
        C = end.x·start.y - start.x·end.y.

        This is a segment distance only when contains_projection(p) holds.
        A degenerate segment defines no line; the distance to its single point
        is returned instead.

        Args:
            p: The point to measure from

        Returns:
            Distance from the point to the line
        """
        a = self.end.y - self.start.y
        b = self.start.x - self.end.x
        c = self.end.x * self.start.y - self.start.x * self.end.y

        norm_squared = a * a + b * b
        if norm_squared == 0:
            return p.distance_to(self.start)

        return abs(a * p.x + b * p.y + c) / math.sqrt(norm_squared)
