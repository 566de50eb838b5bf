"""Logging utilities for Polystation."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from polystation.domain import Point, SearchResult
from polystation.io.diagnostics import ParseDiagnostic

_HANDLER_MARK = "_polystation_handler"


@dataclass
class QueryStats:
    """Statistics from a querying session."""

    query_count: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    skipped_lines: int = 0
    query_times_ms: list[float] = field(default_factory=list)

    @property
    def avg_query_time_ms(self) -> float | None:
        """Average time per query, None before the first query."""
        if not self.query_times_ms:
            return None
        return sum(self.query_times_ms) / len(self.query_times_ms)


def _install(handler: logging.Handler, root_logger: logging.Logger) -> None:
    setattr(handler, _HANDLER_MARK, True)
    root_logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _install(file_handler, root_logger)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _install(console_handler, root_logger)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polystation")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class QueryLogger:
    """Logger for tracking loaded paths, skipped lines and query results."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = QueryStats()

    def log_path_loaded(
        self,
        source: str,
        point_count: int,
        segment_count: int,
        total_length: float,
    ) -> None:
        """Log a polyline built from a point file."""
        self._logger.info(
            "Path loaded",
            source=source,
            points=point_count,
            segments=segment_count,
            length=round(total_length, 6),
        )

    def log_diagnostic(self, source: str, diagnostic: ParseDiagnostic) -> None:
        """Log a skipped line."""
        self._logger.warning(
            "Line skipped",
            source=source,
            line=diagnostic.line_number,
            kind=diagnostic.kind.value,
            content=diagnostic.content,
        )
        self._stats.skipped_lines += 1

    def log_query(self, point: Point, result: SearchResult, duration_ms: float) -> None:
        """Log an answered query."""
        if result.is_valid:
            self._logger.debug(
                "Query answered",
                x=point.x,
                y=point.y,
                offset=result.offset,
                station=result.station,
                duration_ms=round(duration_ms, 4),
            )
            self._stats.valid_count += 1
        else:
            self._logger.debug(
                "No qualifying segment",
                x=point.x,
                y=point.y,
                duration_ms=round(duration_ms, 4),
            )
            self._stats.invalid_count += 1
        self._stats.query_count += 1
        self._stats.query_times_ms.append(duration_ms)

    @property
    def stats(self) -> QueryStats:
        """Get current session statistics."""
        return self._stats
