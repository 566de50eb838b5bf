"""Polyline representation.

A Path is an ordered chain of connected segments built from a sequence of
vertices, together with the running (cumulative) length at the end of each
segment. Paths are read-only after construction and can be shared between
concurrent queries.
"""

from collections.abc import Iterable, Iterator

from polystation.domain.point import Point
from polystation.domain.segment import Segment


class Path:
    """An ordered chain of segments (a polyline).

    For n input points the path holds max(0, n - 1) segments, pairing
    consecutive points. Fewer than two points give an empty path.

    Example:
        path = Path([Point(0, 0), Point(0, 3), Point(4, 3)])
        path.segment_count            # 2
        path.cumulative_length_at(1)  # 7.0
    """

    __slots__ = ("_point_count", "_segments", "_cumulative")

    def __init__(self, points: Iterable[Point]) -> None:
        """Build the segments and cumulative lengths.

        Args:
            points: Ordered vertices of the polyline
        """
        vertices = list(points)

        segments: list[Segment] = []
        cumulative: list[float] = []
        total = 0.0
        for start, end in zip(vertices, vertices[1:]):
            segment = Segment(start, end)
            total += segment.length
            segments.append(segment)
            cumulative.append(total)

        self._point_count = len(vertices)
        self._segments: tuple[Segment, ...] = tuple(segments)
        self._cumulative: tuple[float, ...] = tuple(cumulative)

    @classmethod
    def from_tuples(cls, pairs: Iterable[tuple[int, int]]) -> "Path":
        """Build a path from plain (x, y) pairs."""
        return cls(Point(x, y) for x, y in pairs)

    @property
    def point_count(self) -> int:
        """Number of vertices the path was built from."""
        return self._point_count

    @property
    def segment_count(self) -> int:
        """Number of segments in the path."""
        return len(self._segments)

    @property
    def segments(self) -> tuple[Segment, ...]:
        """All segments, in order."""
        return self._segments

    @property
    def total_length(self) -> float:
        """Length of the whole polyline (0.0 for an empty path)."""
        return self._cumulative[-1] if self._cumulative else 0.0

    def segment_at(self, index: int) -> Segment | None:
        """Get the segment at an index.

        Negative indices are out of range; they do not count from the end.

        Args:
            index: Zero-based segment index

        Returns:
            The segment, or None if index is outside [0, segment_count)
        """
        if index < 0 or index >= len(self._segments):
            return None
        return self._segments[index]

    def cumulative_length_at(self, index: int) -> float | None:
        """Get the polyline length up to and including a segment.

        Args:
            index: Zero-based segment index

        Returns:
            Sum of the lengths of segments 0..index, or None if index is
            outside [0, segment_count)
        """
        if index < 0 or index >= len(self._cumulative):
            return None
        return self._cumulative[index]

    def is_empty(self) -> bool:
        """Check if the path has no segments."""
        return not self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __repr__(self) -> str:
        return f"Path(segments={len(self._segments)}, length={self.total_length:g})"
