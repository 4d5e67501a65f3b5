"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

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
    console.print(f"\n[bold]contourkit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_file_info(path: str, contour_count: int, closed_count: int) -> None:
    """Print contour file information.

    Args:
        path: Path to the contour file
        contour_count: Total number of contours in the file
        closed_count: Number of closed contours
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(
        f"  {contour_count:,} contours {SYM_DOT} {closed_count:,} closed "
        f"{SYM_DOT} {contour_count - closed_count:,} open"
    )


def print_contour_table(rows: list[tuple[str, ...]]) -> None:
    """Print per-contour measurements.

    Args:
        rows: (index, kind, points, segments, area, winding) string tuples
    """
    table = Table(show_edge=False, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Points", justify="right")
    table.add_column("Segments", justify="right")
    table.add_column("Signed area", justify="right")
    table.add_column("Winding")
    for row in rows:
        table.add_row(*row)
    console.print(table)


def print_distance_table(rows: list[tuple[str, str]], nearest: tuple[str, str] | None) -> None:
    """Print squared distances from a query point to each contour.

    Args:
        rows: (index, squared distance) string tuples
        nearest: (index, squared distance) of the nearest contour, or None
            if no contour has a segment
    """
    table = Table(show_edge=False, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Distance²", justify="right")
    for row in rows:
        table.add_row(*row)
    console.print(table)

    if nearest is None:
        console.print(f"\n{SYM_DOT} No contour has a boundary segment")
    else:
        index, value = nearest
        console.print(f"\n[bold green]{SYM_OK}[/bold green] Nearest contour #{index} at distance² {value}")


def print_success(output_path: str, written: int, reversed_count: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        written: Number of contours written
        reversed_count: Number of contours whose points were reversed
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    console.print(f"  {written} contours {SYM_DOT} {reversed_count} reversed")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
