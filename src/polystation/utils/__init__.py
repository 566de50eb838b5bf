"""Utility functions for polystation.

This module provides utility functions including:

- Logging setup and configuration
- Query statistics collection
"""

from polystation.utils.logging import (
    QueryLogger,
    QueryStats,
    configure_logging,
)

__all__ = [
    "QueryLogger",
    "QueryStats",
    "configure_logging",
]
