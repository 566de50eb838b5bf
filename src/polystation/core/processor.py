"""Orchestration of point loading and offset/station queries.

This module ties the ingestion layer, the geometric core and logging
together for callers such as the CLI.

Key components:
- StationProcessor: Loads a polyline from a point file and answers queries
"""

import time
from collections.abc import Iterable
from pathlib import Path as FilePath

from polystation.config import PolystationSettings
from polystation.core.locator import Locator
from polystation.domain import Path, Point, SearchResult
from polystation.exceptions import EmptyPolylineError, StrictModeError
from polystation.io import ParseDiagnostic, PointReader
from polystation.utils import QueryLogger, QueryStats, configure_logging


class StationProcessor:
    """Loads polylines and computes offset/station for query points.

    Example:
        settings = PolystationSettings()
        processor = StationProcessor(settings)
        path, diagnostics = processor.load_path(FilePath("vertices.csv"))
        result = processor.query(path, Point(160, -50))
    """

    def __init__(self, settings: PolystationSettings, quiet: bool = False) -> None:
        """Initialize the processor.

        Args:
            settings: Application settings
            quiet: Suppress console log output except errors
        """
        self.settings = settings
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        self.query_logger = QueryLogger(self.logger)
        self.locator = Locator()

    def load_path(self, file_path: FilePath) -> tuple[Path, list[ParseDiagnostic]]:
        """Read a point file and build the polyline.

        Args:
            file_path: Path to the point file

        Returns:
            Tuple of (path, diagnostics) where diagnostics lists every
            skipped line

        Raises:
            PointFileError: If the file cannot be read
            StrictModeError: If strict reading is enabled and a line was skipped
            EmptyPolylineError: If no valid point was found
        """
        source = str(file_path)
        result = PointReader(file_path, self.settings.reader).read()

        for diagnostic in result.diagnostics:
            self.query_logger.log_diagnostic(source, diagnostic)

        if self.settings.reader.strict and result.has_diagnostics:
            raise StrictModeError(source, len(result.diagnostics))

        if not result.points:
            raise EmptyPolylineError(source)

        path = Path(result.points)
        self.query_logger.log_path_loaded(
            source=source,
            point_count=path.point_count,
            segment_count=path.segment_count,
            total_length=path.total_length,
        )
        return path, result.diagnostics

    def query(self, path: Path, point: Point) -> SearchResult:
        """Compute the offset and station of a single point.

        Args:
            path: The polyline to search
            point: The query point

        Returns:
            The search result
        """
        start_time = time.perf_counter()
        result = self.locator.find(path, point)
        duration_ms = (time.perf_counter() - start_time) * 1000
        self.query_logger.log_query(point, result, duration_ms)
        return result

    def query_many(self, path: Path, points: Iterable[Point]) -> list[SearchResult]:
        """Compute offset and station for several points, in order."""
        return [self.query(path, point) for point in points]

    @property
    def stats(self) -> QueryStats:
        """Statistics for the queries answered so far."""
        return self.query_logger.stats
