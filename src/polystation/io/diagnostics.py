"""Parse diagnostics reported while reading point files."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from polystation.domain import Point


class DiagnosticKind(str, Enum):
    """Why a line of a point file was skipped."""

    EMPTY_LINE = "empty_line"
    MISSING_VALUES = "missing_values"
    NON_NUMERIC = "non_numeric"


@dataclass(frozen=True, slots=True)
class ParseDiagnostic:
    """A skipped line of a point file.

    Attributes:
        line_number: 1-based line number in the source
        kind: Reason the line was skipped
        content: The raw line, without its line terminator
        message: Human-readable description
    """

    line_number: int
    kind: DiagnosticKind
    content: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "line": self.line_number,
            "kind": self.kind.value,
            "content": self.content,
            "message": self.message,
        }


@dataclass
class PointReadResult:
    """Points parsed from a source, with the lines that were skipped.

    Attributes:
        points: Parsed vertices in source order
        diagnostics: One entry per skipped line
    """

    points: list[Point] = field(default_factory=list)
    diagnostics: list[ParseDiagnostic] = field(default_factory=list)

    @property
    def has_diagnostics(self) -> bool:
        """True when at least one line was skipped."""
        return bool(self.diagnostics)

    def count(self, kind: DiagnosticKind) -> int:
        """Number of diagnostics of a given kind."""
        return sum(1 for d in self.diagnostics if d.kind is kind)
