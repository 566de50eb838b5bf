"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polystation.domain import Point, SearchResult
from polystation.io import ParseDiagnostic

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Polystation[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_path_info(
    file_path: str,
    point_count: int,
    segment_count: int,
    total_length: float,
    skipped: int,
) -> None:
    """Print a summary of the loaded polyline.

    Args:
        file_path: Path to the point file
        point_count: Number of vertices read
        segment_count: Number of segments built
        total_length: Total polyline length
        skipped: Number of lines skipped
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(file_path)
    console.print(line1)
    console.print(
        f"  {point_count:,} points {SYM_DOT} {segment_count:,} segments "
        f"{SYM_DOT} length {total_length:,.4f}"
    )
    if skipped:
        plural = "line" if skipped == 1 else "lines"
        console.print(f"  [yellow]{skipped} {plural} skipped[/yellow]")


def print_diagnostics(diagnostics: list[ParseDiagnostic], limit: int = 20) -> None:
    """Print skipped lines as a table.

    Args:
        diagnostics: Diagnostics to show
        limit: Maximum number of rows
    """
    if not diagnostics:
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Line", justify="right")
    table.add_column("Reason")
    table.add_column("Content", overflow="fold")
    for diagnostic in diagnostics[:limit]:
        table.add_row(
            str(diagnostic.line_number),
            diagnostic.kind.value.replace("_", " "),
            Text(repr(diagnostic.content)),
        )
    console.print(table)
    if len(diagnostics) > limit:
        console.print(f"  ... +{len(diagnostics) - limit} more")


def format_result(result: SearchResult, precision: int) -> str:
    """Format a search result as plain text.

    Args:
        result: The search result
        precision: Number of decimal places

    Returns:
        "Offset = ..., Station = ..." or a not-found message
    """
    if not result.is_valid:
        return "No offset and station found"
    return f"Offset = {result.offset:.{precision}f}, Station = {result.station:.{precision}f}"


def print_result(point: Point, result: SearchResult, precision: int) -> None:
    """Print the answer for one query point.

    Args:
        point: The query point
        result: Its search result
        precision: Number of decimal places
    """
    line = Text(f"  ({point.x}, {point.y}) ")
    if result.is_valid:
        line.append(SYM_OK, style="green")
        line.append(f" {format_result(result, precision)}")
    else:
        line.append(SYM_ERR, style="yellow")
        line.append(f" {format_result(result, precision)}", style="yellow")
    console.print(line)


def print_summary(queries: int, valid: int, invalid: int, avg_time_ms: float | None) -> None:
    """Print the session summary.

    Args:
        queries: Number of queries answered
        valid: Queries with a result
        invalid: Queries without a qualifying segment
        avg_time_ms: Average time per query in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    invalid_style = "yellow" if invalid > 0 else "green"
    console.print(
        f"  {queries} queries {SYM_DOT} {valid} found {SYM_DOT} "
        f"[{invalid_style}]{invalid} not found[/{invalid_style}]"
    )
    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.3f}ms avg")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
