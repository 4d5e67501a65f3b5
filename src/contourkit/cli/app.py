"""CLI application entry point for contourkit.

This module provides the main CLI interface using Typer.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

import structlog
import typer
from pydantic import ValidationError

from contourkit import __version__
from contourkit.cli.output import (
    console,
    print_contour_table,
    print_distance_table,
    print_error,
    print_file_info,
    print_header,
    print_step,
    print_success,
)
from contourkit.config import ContourKitSettings, LoggingConfig, OutputConfig
from contourkit.core import area_signed, distance_to_point_sq, winding, with_winding
from contourkit.domain import Contour, Point, Winding, iter_segments, partial_cmp
from contourkit.domain.scalar import Ordering
from contourkit.exceptions import ContourKitError
from contourkit.io import ContourReader, ContourWriter
from contourkit.utils import RunStats, configure_logging

# Create the Typer app
app = typer.Typer(
    name="contourkit",
    help="Measure signed area, winding and boundary distance of planar contours.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Options shared by all commands."""

    settings: ContourKitSettings
    quiet: bool = False
    logger: structlog.stdlib.BoundLogger | None = None
    stats: RunStats = field(default_factory=RunStats)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]contourkit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Decimal places shown for areas and distances (0-15)",
            min=0,
            max=15,
        ),
    ] = 6,
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
    """Measure signed area, winding and boundary distance of planar contours."""
    try:
        settings = ContourKitSettings(
            output=OutputConfig(precision=precision),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(settings=settings, quiet=quiet, logger=logger)


@app.command()
def info(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to JSON contour file", show_default=False),
    ],
) -> None:
    """Show signed area and winding of every contour in a file."""
    state: CliState = ctx.obj
    output = state.settings.output

    if not state.quiet:
        print_header(__version__)
        print_step("Loading contours")

    contours = _load_contours(input_file, state)

    if not state.quiet:
        closed_count = sum(1 for c in contours if c.is_closed)
        print_file_info(str(input_file), len(contours), closed_count)
        print_step("Measuring")

    rows = []
    for index, contour in enumerate(contours):
        rows.append(
            (
                str(index),
                "closed" if contour.is_closed else "open",
                str(len(contour.points)),
                str(sum(1 for _ in iter_segments(contour))),
                output.format_scalar(area_signed(contour)),
                winding(contour).value,
            )
        )
    print_contour_table(rows)


@app.command()
def distance(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to JSON contour file", show_default=False),
    ],
    x: Annotated[float, typer.Argument(help="Query point X coordinate")],
    y: Annotated[float, typer.Argument(help="Query point Y coordinate")],
) -> None:
    """Show squared distance from a point to the boundary of every contour."""
    state: CliState = ctx.obj
    output = state.settings.output

    if not state.quiet:
        print_header(__version__)
        print_step("Loading contours")

    contours = _load_contours(input_file, state)
    query = Point(x, y)

    if not state.quiet:
        print_step(f"Measuring from ({x:g}, {y:g})")

    rows = []
    nearest: tuple[int, object] | None = None
    for index, contour in enumerate(contours):
        value = distance_to_point_sq(contour, query)
        rows.append((str(index), output.format_scalar(value)))
        if value is None:
            continue
        if nearest is None or partial_cmp(value, nearest[1]) == Ordering.LESS:
            nearest = (index, value)

    print_distance_table(
        rows,
        None if nearest is None else (str(nearest[0]), output.format_scalar(nearest[1])),
    )


@app.command()
def normalize(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to JSON contour file", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-normalized.{ext})",
        ),
    ] = None,
    target: Annotated[
        str | None,
        typer.Option(
            "--winding",
            "-w",
            help="Target winding (clockwise|counter_clockwise)",
        ),
    ] = None,
) -> None:
    """Rewrite every contour of a file with the same winding direction."""
    state: CliState = ctx.obj

    if target is None:
        target_winding = state.settings.output.default_winding
    else:
        try:
            target_winding = Winding(target.lower())
        except ValueError:
            print_error(
                f"Invalid winding: {target}",
                details="Valid values: clockwise, counter_clockwise",
            )
            raise typer.Exit(code=1)

    if not state.quiet:
        print_header(__version__)
        print_step("Loading contours")

    contours = _load_contours(input_file, state)

    normalized: list[Contour] = []
    for contour in contours:
        result = with_winding(contour, target_winding)
        if result is not contour:
            state.stats.contours_reversed += 1
        normalized.append(result)

    output_path = output if output is not None else ContourWriter.get_normalized_path(input_file)

    if not state.quiet:
        print_step(f"Writing {target_winding.value} contours")

    try:
        state.stats.contours_written = ContourWriter(output_path).write(normalized)
    except ContourKitError as e:
        state.stats.errors.append((str(output_path), str(e)))
        print_error(str(e))
        raise typer.Exit(code=1)

    if state.logger is not None:
        state.logger.info(
            "Normalization complete",
            output=str(output_path),
            written=state.stats.contours_written,
            reversed=state.stats.contours_reversed,
        )

    if not state.quiet:
        print_success(
            output_path=str(output_path),
            written=state.stats.contours_written,
            reversed_count=state.stats.contours_reversed,
        )


def _load_contours(path: Path, state: CliState) -> list[Contour]:
    """Load contours, turning failures into a printed error and exit code 1.

    Args:
        path: Path to the contour file
        state: Shared CLI state

    Returns:
        Loaded contours
    """
    reader = ContourReader(path)
    try:
        reader.load()
    except FileNotFoundError:
        print_error(
            f"Input file not found: {path}",
            details=f"The file '{path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)
    except ContourKitError as e:
        state.stats.errors.append((str(path), str(e)))
        print_error(str(e))
        raise typer.Exit(code=1)

    state.stats.contours_read = reader.contour_count
    return reader.contours


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
