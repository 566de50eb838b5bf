"""Exception hierarchy for Polystation.

The geometric core never raises; these errors belong to the ingestion and
command-line layers.
"""


class PolystationError(Exception):
    """Base exception for all Polystation errors."""

    pass


class InputError(PolystationError):
    """Errors related to reading polyline or query input."""

    pass


class PointFileError(InputError):
    """Error opening or reading a point file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read point file '{path}': {reason}")


class PointParseError(InputError):
    """Text could not be parsed as an integer point."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid point '{text}': {reason}")


class EmptyPolylineError(InputError):
    """No usable vertex could be read from a point file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No valid point found in '{path}'")


class StrictModeError(InputError):
    """Malformed lines were found while strict reading was requested."""

    def __init__(self, path: str, diagnostic_count: int) -> None:
        self.path = path
        self.diagnostic_count = diagnostic_count
        plural = "line" if diagnostic_count == 1 else "lines"
        super().__init__(
            f"Strict mode: {diagnostic_count} malformed {plural} in '{path}'"
        )
