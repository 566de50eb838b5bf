"""Unit tests for the offset/station locator."""

import math
from unittest.mock import patch

import pytest

from polystation.core import Locator, find_offset_and_station
from polystation.domain import Path, Point, Segment


@pytest.fixture
def locator() -> Locator:
    """Create a locator."""
    return Locator()


@pytest.fixture
def straight_path() -> Path:
    """A single horizontal segment from (0, 0) to (10, 0)."""
    return Path.from_tuples([(0, 0), (10, 0)])


class TestLocatorScenarios:
    """Reference scenarios for offset and station."""

    def test_point_above_single_segment(self, locator: Locator, straight_path: Path):
        """Test a point above the middle of a single segment."""
        result = locator.find(straight_path, Point(4, 3))

        assert result.is_valid
        assert result.offset == pytest.approx(3.0)
        assert result.station == pytest.approx(4.0)

    def test_point_with_no_valid_projection(self, locator: Locator, straight_path: Path):
        """Test a point beyond the end of the polyline."""
        result = locator.find(straight_path, Point(15, 5))

        assert not result.is_valid

    def test_point_closest_to_second_segment(self, locator: Locator):
        """Test a point that only projects onto the second segment."""
        path = Path.from_tuples([(0, 0), (5, 0), (5, 5)])

        result = locator.find(path, Point(7, 3))

        assert result.is_valid
        assert result.offset == pytest.approx(2.0)
        assert result.station == pytest.approx(8.0)

    def test_point_equidistant_to_two_segments(self, locator: Locator):
        """Test that the earlier segment wins an exact tie."""
        path = Path.from_tuples([(0, 0), (10, 0), (10, 10)])

        result = locator.find(path, Point(8, 2))

        assert result.is_valid
        assert result.offset == pytest.approx(2.0)
        assert result.station == pytest.approx(8.0)

    def test_single_point_path(self, locator: Locator):
        """Test that a path without segments never yields a result."""
        path = Path([Point(0, 0)])

        assert path.segment_count == 0
        for p in (Point(0, 0), Point(1, 1), Point(-5, 3)):
            assert not locator.find(path, p).is_valid

    def test_empty_path(self, locator: Locator):
        """Test that an empty path never yields a result."""
        assert not locator.find(Path([]), Point(0, 0)).is_valid


class TestLocatorEdgeCases:
    """Edge cases around endpoints, points on the line and degenerate segments."""

    def test_point_on_segment(self, locator: Locator, straight_path: Path):
        """Test a point lying on the segment."""
        result = locator.find(straight_path, Point(6, 0))

        assert result.is_valid
        assert result.offset == pytest.approx(0.0)
        assert result.station == pytest.approx(6.0)

    def test_projection_at_segment_start(self, locator: Locator, straight_path: Path):
        """Test a point projecting exactly onto the start point."""
        result = locator.find(straight_path, Point(0, 4))

        assert result.is_valid
        assert result.offset == pytest.approx(4.0)
        assert result.station == pytest.approx(0.0)

    def test_projection_at_segment_end(self, locator: Locator, straight_path: Path):
        """Test a point projecting exactly onto the end point."""
        result = locator.find(straight_path, Point(10, -3))

        assert result.is_valid
        assert result.offset == pytest.approx(3.0)
        assert result.station == pytest.approx(10.0)

    def test_query_at_vertex(self, locator: Locator):
        """Test a point exactly on an inner vertex."""
        path = Path.from_tuples([(0, 0), (5, 0), (5, 5)])

        result = locator.find(path, Point(5, 0))

        assert result.is_valid
        assert result.offset == 0.0
        assert result.station == pytest.approx(5.0)

    def test_degenerate_segments_are_ignored(self, locator: Locator):
        """Test that repeated vertices neither match nor shift the station."""
        path = Path.from_tuples([(0, 0), (0, 0), (10, 0), (10, 0), (10, 10)])

        result = locator.find(path, Point(12, 6))

        assert result.is_valid
        assert result.offset == pytest.approx(2.0)
        assert result.station == pytest.approx(16.0)

    def test_only_degenerate_segments(self, locator: Locator):
        """Test a path made only of repeated points."""
        path = Path.from_tuples([(3, 3), (3, 3), (3, 3)])

        assert not locator.find(path, Point(3, 3)).is_valid

    def test_station_uses_previous_cumulative_length(self, locator: Locator):
        """Test the station on a later segment of a longer polyline."""
        path = Path.from_tuples([(0, 0), (0, 3), (4, 3), (4, 13)])

        result = locator.find(path, Point(6, 8))

        assert result.is_valid
        assert result.offset == pytest.approx(2.0)
        assert result.station == pytest.approx(3.0 + 4.0 + 5.0)

    def test_diagonal_segment(self, locator: Locator):
        """Test offset and station on a diagonal segment."""
        path = Path.from_tuples([(0, 0), (4, 4)])

        result = locator.find(path, Point(4, 0))

        assert result.is_valid
        assert result.offset == pytest.approx(math.sqrt(8))
        assert result.station == pytest.approx(math.sqrt(8))

    def test_large_coordinates(self, locator: Locator):
        """Test that large integer coordinates do not overflow."""
        big = 2**40
        path = Path.from_tuples([(0, 0), (big, 0)])

        result = locator.find(path, Point(big // 2, 1000))

        assert result.is_valid
        assert result.offset == pytest.approx(1000.0)
        assert result.station == pytest.approx(big / 2)


class TestLocatorSelection:
    """Tests for candidate selection and tie-breaking."""

    def test_smaller_box_distance_wins(self, locator: Locator):
        """Test that the candidate with the nearer bounding box is chosen."""
        # Two parallel horizontal segments joined by a vertical one
        path = Path.from_tuples([(0, 0), (10, 0), (10, 10), (0, 10)])

        result = locator.find(path, Point(4, 8))

        assert result.is_valid
        assert result.offset == pytest.approx(2.0)
        # 10 + 10 along the first two segments, then 6 back along the third
        assert result.station == pytest.approx(26.0)

    def test_exact_distance_breaks_zero_box_tie(self, locator: Locator):
        """Test that exact distances decide when both boxes contain the point."""
        # (4, 8) lies inside the boxes of both segments
        path = Path.from_tuples([(0, 0), (10, 10), (0, 6)])

        result = locator.find(path, Point(4, 8))

        assert result.is_valid
        # Segment 1 (10,10)->(0,6) is closer than the diagonal
        assert result.offset == pytest.approx(4 / math.sqrt(116))
        assert result.station == pytest.approx(
            10 * math.sqrt(2) + math.sqrt(40 - 16 / 116)
        )

    def test_equal_exact_distance_keeps_earlier_segment(self, locator: Locator):
        """Test that an exact tie inside both boxes keeps the lower index."""
        path = Path.from_tuples([(0, 0), (10, 10), (20, 0)])

        result = locator.find(path, Point(10, 8))

        assert result.is_valid
        assert result.offset == pytest.approx(math.sqrt(2))
        # Station on segment 0, before the apex at 10*sqrt(2)
        assert result.station == pytest.approx(9 * math.sqrt(2))

    def test_nonzero_box_tie_keeps_earlier_segment(self, locator: Locator):
        """Equal non-zero box distances keep the earlier segment.

        Segment 0 is the diagonal (0,0)->(10,10); segment 2 is the vertical
        (20,10)->(20,-5). From (15,0) both boxes are 25 away, but the true
        distance to the diagonal line is about 10.6 against 5 for the
        vertical one. The earlier segment is kept all the same.
        """
        path = Path.from_tuples([(0, 0), (10, 10), (20, 10), (20, -5)])
        p = Point(15, 0)
        first = path.segment_at(0)
        third = path.segment_at(2)
        assert first.contains_projection(p) and third.contains_projection(p)
        assert first.squared_distance_to_bounding_box(p) == 25.0
        assert third.squared_distance_to_bounding_box(p) == 25.0

        result = locator.find(path, p)

        assert result.is_valid
        assert result.offset == pytest.approx(first.distance_to(p))
        assert result.offset > third.distance_to(p)

    def test_non_projecting_segments_never_measured(self, locator: Locator):
        """Test that exact distances are only computed for projecting segments."""
        path = Path.from_tuples([(0, 0), (10, 0), (10, 10), (20, 10)])
        p = Point(5, 3)
        measured: list[Segment] = []
        original = Segment.distance_to

        def spy(self: Segment, point: Point) -> float:
            measured.append(self)
            return original(self, point)

        with patch.object(Segment, "distance_to", spy):
            result = locator.find(path, p)

        assert result.is_valid
        assert measured
        assert all(segment.contains_projection(p) for segment in measured)

    def test_exact_distance_deferred_for_single_candidate(self, locator: Locator):
        """Test that the exact distance is computed once for a lone candidate."""
        path = Path.from_tuples([(0, 0), (10, 0)])
        calls = []
        original = Segment.distance_to

        def spy(self: Segment, point: Point) -> float:
            calls.append(point)
            return original(self, point)

        with patch.object(Segment, "distance_to", spy):
            locator.find(path, Point(4, 3))

        assert len(calls) == 1


class TestLocatorProperties:
    """Properties that hold for every query."""

    @pytest.mark.parametrize(
        "p",
        [Point(4, 3), Point(15, 5), Point(7, 3), Point(8, 2), Point(-3, -3)],
    )
    def test_find_is_idempotent(self, locator: Locator, p: Point):
        """Test that repeated queries give identical results."""
        path = Path.from_tuples([(0, 0), (10, 0), (10, 10), (5, 5)])

        first = locator.find(path, p)
        second = locator.find(path, p)

        assert first.is_valid == second.is_valid
        if first.is_valid:
            assert first.offset == second.offset
            assert first.station == second.station

    def test_station_within_path_length(self, locator: Locator):
        """Test that stations fall between 0 and the total length."""
        path = Path.from_tuples([(0, 0), (7, 2), (9, 11), (-4, 6), (0, -3)])

        for x in range(-6, 14, 3):
            for y in range(-5, 14, 3):
                result = locator.find(path, Point(x, y))
                if result.is_valid:
                    assert 0.0 <= result.station <= path.total_length + 1e-9
                    assert result.offset >= 0.0

    def test_shared_path_across_locators(self, straight_path: Path):
        """Test that the module-level helper matches a fresh locator."""
        p = Point(4, 3)
        assert find_offset_and_station(straight_path, p) == Locator().find(straight_path, p)
