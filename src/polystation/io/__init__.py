"""Point I/O layer for polystation.

This module handles reading polyline vertices from delimited text files.
It is an ingestion collaborator of the geometric core: the core only ever
sees a ready-made sequence of points.

Key classes:
- PointReader: Load a point file into points plus diagnostics
- PointReadResult: Parsed points and skipped-line diagnostics
- ParseDiagnostic: A single skipped line
"""

from polystation.io.diagnostics import DiagnosticKind, ParseDiagnostic, PointReadResult
from polystation.io.reader import PointReader, parse_point, parse_points

__all__ = [
    "DiagnosticKind",
    "ParseDiagnostic",
    "PointReadResult",
    "PointReader",
    "parse_point",
    "parse_points",
]
