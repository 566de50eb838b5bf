"""CLI application entry point for polystation.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from polystation import __version__
from polystation.cli.output import (
    console,
    format_result,
    print_diagnostics,
    print_error,
    print_header,
    print_path_info,
    print_result,
    print_step,
    print_summary,
)
from polystation.config import (
    LoggingConfig,
    OutputConfig,
    PolystationSettings,
    ReaderConfig,
)
from polystation.core import StationProcessor
from polystation.domain import Path as Polyline
from polystation.domain import Point, SearchResult
from polystation.exceptions import (
    EmptyPolylineError,
    PointFileError,
    PointParseError,
    PolystationError,
    StrictModeError,
)
from polystation.io import parse_point

QUIT_WORDS = ("q", "quit", "exit")

# Create the Typer app
app = typer.Typer(
    name="polystation",
    help="Compute the offset and station of points relative to a polyline.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polystation[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def locate(
    points_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a text file with one 'x,y' polyline vertex per line",
            show_default=False,
        ),
    ],
    point: Annotated[
        list[str] | None,
        typer.Option(
            "--point",
            "-p",
            help="Query point as 'x,y' (repeatable; prompts interactively if omitted)",
        ),
    ] = None,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Decimal places for offset and station (0-12)",
            min=0,
            max=12,
        ),
    ] = 4,
    delimiter: Annotated[
        str,
        typer.Option(
            "--delimiter",
            "-d",
            help="Column separator used in the points file and query points",
        ),
    ] = ",",
    skip_header: Annotated[
        bool,
        typer.Option(
            "--skip-header",
            help="Ignore the first line of the points file",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail if any line of the points file is malformed",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute the offset and station of points relative to a polyline.

    The polyline is read from POINTS_FILE, one vertex per line. Lines that are
    empty or malformed are skipped (see --strict).

    Example:
        polystation vertices.csv --point 160,-50

    Without --point, query points are read interactively until an empty
    line or 'q'.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        settings = PolystationSettings(
            reader=ReaderConfig(
                delimiter=delimiter,
                skip_header=skip_header,
                strict=strict,
            ),
            output=OutputConfig(precision=precision),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
            ),
        )
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        # Parse query points up front so a typo fails before any work
        queries = [parse_point(text, delimiter) for text in point or []]

        processor = StationProcessor(settings, quiet=quiet)

        if not quiet:
            print_step("Loading polyline")

        path, diagnostics = processor.load_path(points_file)

        if not quiet:
            print_path_info(
                file_path=str(points_file),
                point_count=path.point_count,
                segment_count=path.segment_count,
                total_length=path.total_length,
                skipped=len(diagnostics),
            )
            if verbose:
                print_diagnostics(diagnostics)

        if queries:
            if not quiet:
                print_step("Locating")
            for query in queries:
                _emit(query, processor.query(path, query), precision, quiet)
        else:
            _interactive_loop(processor, path, delimiter, precision, quiet)

        if not quiet:
            stats = processor.stats
            print_summary(
                queries=stats.query_count,
                valid=stats.valid_count,
                invalid=stats.invalid_count,
                avg_time_ms=stats.avg_query_time_ms,
            )

    except PointParseError as e:
        print_error(f"Invalid query point: {e.text}", details=e.reason)
        raise typer.Exit(code=1)
    except PointFileError as e:
        print_error(f"Could not read points file: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except EmptyPolylineError as e:
        print_error(str(e), details="The file must hold at least one 'x,y' line.")
        raise typer.Exit(code=1)
    except StrictModeError as e:
        print_error(str(e), details="Run without --strict to skip malformed lines.")
        raise typer.Exit(code=1)
    except PolystationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code


def _emit(query: Point, result: SearchResult, precision: int, quiet: bool) -> None:
    """Print one answer, plain in quiet mode."""
    if quiet:
        typer.echo(format_result(result, precision))
    else:
        print_result(query, result, precision)


def _interactive_loop(
    processor: StationProcessor,
    path: Polyline,
    delimiter: str,
    precision: int,
    quiet: bool,
) -> None:
    """Prompt for query points until an empty line, 'q' or end of input.

    Args:
        processor: Processor answering the queries
        path: The loaded polyline
        delimiter: Separator between x and y
        precision: Number of decimal places
        quiet: Plain output
    """
    if not quiet:
        print_step("Enter query points as x,y (empty line or 'q' to quit)")

    while True:
        try:
            text = typer.prompt("Point", default="", show_default=False)
        except typer.Abort:
            break

        text = text.strip()
        if not text or text.lower() in QUIT_WORDS:
            break

        try:
            query = parse_point(text, delimiter)
        except PointParseError as e:
            print_error(str(e))
            continue

        _emit(query, processor.query(path, query), precision, quiet)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
