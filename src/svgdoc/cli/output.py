"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console(stderr=True)

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
    console.print(f"\n[bold]svgdoc[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(scene_path: str, shape_count: int) -> None:
    """Print scene information.

    Args:
        scene_path: Path to the scene file
        shape_count: Number of shapes in the scene
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(scene_path)
    console.print(line)
    plural = "shape" if shape_count == 1 else "shapes"
    console.print(f"  {shape_count:,} {plural}")


def print_shape_summary(counts: Mapping[str, int]) -> None:
    """Print a table of rendered elements per shape type.

    Args:
        counts: Element counts keyed by shape type
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Element")
    table.add_column("Count", justify="right")
    for name in sorted(counts):
        table.add_row(name, str(counts[name]))
    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(output_path: str, file_size: str, total_time_s: float, elements: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total rendering time in seconds
        elements: Number of elements written
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)
    console.print(f"  {elements} elements")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Paths and exception text are printed literally
    line = Text("\n")
    line.append(f"{SYM_ERR} Error:", style="bold red")
    line.append(f" {message}")
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
