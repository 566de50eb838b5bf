"""Offset and station search along a polyline.

This module finds, for a query point, the single best segment of a path that
the point projects onto, and derives the point's offset and station from it.

Segments are ranked by the squared distance from the point to their bounding
boxes, which avoids square roots for most candidates. Exact perpendicular
distances are only computed when two candidate boxes both contain the point,
or once at the end for the winning segment.
"""

import math
from enum import Enum, auto

from polystation.domain import Path, Point, SearchResult, Segment


class DistanceState(Enum):
    """What is known about the current best segment's distance.

    - UNSET: no candidate yet
    - BOX_KNOWN: only the bounding-box distance is known, exact distance pending
    - EXACT_KNOWN: the exact perpendicular distance has been computed
    """

    UNSET = auto()
    BOX_KNOWN = auto()
    EXACT_KNOWN = auto()


class Locator:
    """Finds the offset and station of points relative to a path.

    The locator keeps no state between calls, so a single instance (and a
    single path) can serve any number of queries.

    Example:
        path = Path.from_tuples([(0, 0), (10, 0)])
        result = Locator().find(path, Point(4, 3))
        # result.offset == 3.0, result.station == 4.0
    """

    def find(self, path: Path, p: Point) -> SearchResult:
        """Find the offset and station of a point.

        Only segments whose projection interval contains the point are
        candidates. Among them the smallest bounding-box distance wins. When
        two candidate boxes both contain the point (distance 0) the exact
        perpendicular distances decide, and equal distances keep the earlier
        segment.

        Candidates with equal non-zero box distances are not compared further:
        the earlier one is kept even if a later one is closer.

        Args:
            path: The polyline to search
            p: The query point

        Returns:
            A valid SearchResult, or SearchResult.invalid() when the point
            projects onto no segment
        """
        best_index: int | None = None
        best_box = math.inf
        best_exact = math.inf
        state = DistanceState.UNSET

        for i, segment in enumerate(path):
            if not segment.contains_projection(p):
                continue

            box = segment.squared_distance_to_bounding_box(p)
            if box > best_box:
                continue

            if box < best_box:
                best_index = i
                best_box = box
                state = DistanceState.BOX_KNOWN
                continue

            if box == 0:
                if state is DistanceState.BOX_KNOWN:
                    best_exact = path.segments[best_index].distance_to(p)
                    state = DistanceState.EXACT_KNOWN

                exact = segment.distance_to(p)
                if exact < best_exact:
                    best_index = i
                    best_box = 0.0
                    best_exact = exact

        if best_index is None:
            return SearchResult.invalid()

        best = path.segments[best_index]
        offset = best.distance_to(p) if state is DistanceState.BOX_KNOWN else best_exact
        station = _prior_length(path, best_index) + _along_distance(best, p, offset)
        return SearchResult(offset=offset, station=station, is_valid=True)


def _along_distance(segment: Segment, p: Point, offset: float) -> float:
    """Distance from the segment start to the foot of the perpendicular.

    Uses the right triangle formed by the start point, the query point and
    the foot; rounding can push the radicand slightly below zero.
    """
    to_start = p.distance_to(segment.start)
    return math.sqrt(max(0.0, to_start * to_start - offset * offset))


def _prior_length(path: Path, index: int) -> float:
    """Polyline length before the segment at index."""
    prior = path.cumulative_length_at(index - 1)
    return prior if prior is not None else 0.0


_default_locator = Locator()


def find_offset_and_station(path: Path, p: Point) -> SearchResult:
    """Find the offset and station of a point using a shared Locator.

    Args:
        path: The polyline to search
        p: The query point

    Returns:
        The search result
    """
    return _default_locator.find(path, p)
