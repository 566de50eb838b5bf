"""Search result returned by the locator."""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Offset and station of a query point relative to a polyline.

    When is_valid is False no segment accepted the point's projection and
    offset/station carry no meaning (they are NaN).

    Attributes:
        offset: Perpendicular distance to the selected segment
        station: Distance along the polyline to the projection of the point
        is_valid: Whether a qualifying segment was found
    """

    offset: float
    station: float
    is_valid: bool = True

    @classmethod
    def invalid(cls) -> "SearchResult":
        """Result for a point with no qualifying segment."""
        return cls(offset=math.nan, station=math.nan, is_valid=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with offset, station and is_valid; offset and station
            are None for an invalid result
        """
        if not self.is_valid:
            return {"offset": None, "station": None, "is_valid": False}
        return {"offset": self.offset, "station": self.station, "is_valid": True}
