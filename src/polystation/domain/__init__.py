"""Domain models for polystation.

This module contains the geometric value types used by the locator. All
models are immutable once constructed:

- Point: A 2D point with integer coordinates
- BoundingBox: Axis-aligned box around a segment
- Segment: A straight segment with cached length and bounding box
- Path: An ordered chain of segments with cumulative lengths
- SearchResult: Offset/station answer for a query point
"""

from polystation.domain.path import Path
from polystation.domain.point import Point
from polystation.domain.result import SearchResult
from polystation.domain.segment import BoundingBox, Segment

__all__: list[str] = [
    "BoundingBox",
    "Path",
    "Point",
    "SearchResult",
    "Segment",
]
