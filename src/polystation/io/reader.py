"""Point reader for loading polyline vertices.

This module provides the PointReader class for loading two-column
delimited text files into domain points, and the pure parsing helpers
it is built on.

Malformed lines never abort reading; they are skipped and reported as
ParseDiagnostic entries alongside the parsed points.
"""

from collections.abc import Iterable
from pathlib import Path

from polystation.config import ReaderConfig
from polystation.domain import Point
from polystation.exceptions import PointFileError, PointParseError
from polystation.io.diagnostics import DiagnosticKind, ParseDiagnostic, PointReadResult


def _parse_int(text: str) -> int | None:
    """Parse a base-10 integer with optional sign and surrounding whitespace."""
    text = text.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    return int(text)


def parse_point(text: str, delimiter: str = ",") -> Point:
    """Parse a single "x,y" string into a point.

    Args:
        text: Text holding two integers separated by the delimiter
        delimiter: Column separator

    Returns:
        The parsed point

    Raises:
        PointParseError: If the text does not hold exactly two integers
    """
    values = text.split(delimiter)
    if len(values) != 2:
        raise PointParseError(
            text, f"expected 2 values separated by '{delimiter}', got {len(values)}"
        )

    x = _parse_int(values[0])
    y = _parse_int(values[1])
    if x is None or y is None:
        raise PointParseError(text, "coordinates must be integers")

    return Point(x, y)


def parse_points(lines: Iterable[str], config: ReaderConfig | None = None) -> PointReadResult:
    """Parse points from lines of delimited text.

    Each line must hold at least two fields; the first two are the x and y
    coordinates and any further columns are ignored.

    Args:
        lines: Lines of text, with or without line terminators
        config: Reader settings (defaults to comma separated, no header)

    Returns:
        PointReadResult with the parsed points and one diagnostic per
        skipped line
    """
    config = config or ReaderConfig()
    result = PointReadResult()

    for line_number, raw in enumerate(lines, start=1):
        if line_number == 1 and config.skip_header:
            continue

        line = raw.rstrip("\r\n")
        if not line.strip():
            result.diagnostics.append(
                ParseDiagnostic(
                    line_number=line_number,
                    kind=DiagnosticKind.EMPTY_LINE,
                    content=line,
                    message=f"line {line_number} is empty and was skipped",
                )
            )
            continue

        values = line.split(config.delimiter)
        if len(values) < 2:
            result.diagnostics.append(
                ParseDiagnostic(
                    line_number=line_number,
                    kind=DiagnosticKind.MISSING_VALUES,
                    content=line,
                    message=(
                        f"invalid format at line {line_number}: "
                        f"expected 2 values, got {len(values)}"
                    ),
                )
            )
            continue

        x = _parse_int(values[0])
        y = _parse_int(values[1])
        if x is None or y is None:
            result.diagnostics.append(
                ParseDiagnostic(
                    line_number=line_number,
                    kind=DiagnosticKind.NON_NUMERIC,
                    content=line,
                    message=f"non-numeric values at line {line_number}",
                )
            )
            continue

        result.points.append(Point(x, y))

    return result


class PointReader:
    """Loads polyline vertices from a delimited text file.

    Example:
        reader = PointReader(Path("vertices.csv"))
        result = reader.read()
        for diagnostic in result.diagnostics:
            print(diagnostic.message)
        path = Path(result.points)
    """

    def __init__(self, file_path: Path, config: ReaderConfig | None = None) -> None:
        """Initialize the point reader.

        Args:
            file_path: Path to the point file
            config: Reader settings
        """
        self._file_path = file_path
        self._config = config or ReaderConfig()

    @property
    def file_path(self) -> Path:
        """Path of the file being read."""
        return self._file_path

    def read(self) -> PointReadResult:
        """Read and parse the whole file.

        Returns:
            Parsed points and diagnostics

        Raises:
            PointFileError: If the file is missing, is not a regular file, or
                cannot be read or decoded
        """
        if not self._file_path.exists():
            raise PointFileError(str(self._file_path), "file not found")
        if not self._file_path.is_file():
            raise PointFileError(str(self._file_path), "not a regular file")

        try:
            with self._file_path.open(encoding=self._config.encoding, newline="") as handle:
                return parse_points(handle, self._config)
        except PermissionError as e:
            raise PointFileError(str(self._file_path), "access denied") from e
        except UnicodeDecodeError as e:
            raise PointFileError(str(self._file_path), f"cannot decode as {self._config.encoding}") from e
        except OSError as e:
            raise PointFileError(str(self._file_path), str(e)) from e
