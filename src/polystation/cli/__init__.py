"""Command-line interface for polystation.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Batch queries with repeated --point options
- Interactive prompt loop when no point is given
- Verbose/quiet output modes
- Detailed reporting of skipped input lines
"""

from polystation.cli.app import cli

__all__ = ["cli"]
