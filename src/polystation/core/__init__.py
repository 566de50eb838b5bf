"""Core algorithms for polystation.

This module contains the offset/station search and its orchestration:

- Locator: Finds the best segment for a query point and derives offset
  and station from it
- find_offset_and_station: Module-level shortcut using a shared Locator
- StationProcessor: Loads a polyline from a file, answers queries and
  records statistics

The locator is stateless and pure; a Path can be shared by any number of
concurrent queries.
"""

from polystation.core.locator import DistanceState, Locator, find_offset_and_station
from polystation.core.processor import StationProcessor

__all__ = [
    "DistanceState",
    "Locator",
    "StationProcessor",
    "find_offset_and_station",
]
