"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with step markers, tables, and formatted messages.
"""

import math

from rich.console import Console
from rich.table import Table
from rich.text import Text

from epicycle.core import PipelineResult
from epicycle.domain import Epicycle

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
    console.print(f"\n[bold]Epicycle[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, mode: str, width: int, height: int) -> None:
    """Print source image information.

    Args:
        image_path: Path to the image file
        mode: Pillow mode (e.g., "RGBA")
        width: Width in pixels
        height: Height in pixels
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(image_path)
    line.append(f" ({mode})")
    console.print(line)
    console.print(f"  {width:,} × {height:,} px")


def print_diagnostics(result: PipelineResult, verbose: bool) -> None:
    """Print what the pipeline found along the way.

    Args:
        result: Successful pipeline result
        verbose: Whether to include stage timings
    """
    d = result.diagnostics
    w, h = d.working_size
    console.print(f"  working size {w} × {h} {SYM_DOT} threshold {d.threshold}")

    inversions = []
    if d.mask_inverted:
        inversions.append("mask")
    if d.component_inverted:
        inversions.append("component")
    if inversions:
        console.print(f"  [yellow]polarity inverted[/yellow] ({', '.join(inversions)})")

    console.print(
        f"  {d.label_count} components {SYM_DOT} largest {d.best_area:,} px "
        f"{SYM_DOT} boundary {d.boundary_points:,} points"
    )
    if not d.walk_closed:
        console.print("  [yellow]boundary walk did not close[/yellow]")

    if verbose:
        for stage, ms in result.stats.stage_durations_ms.items():
            console.print(f"  {stage:<12}{ms:8.1f}ms")
        console.print(f"  slowest stage: {result.stats.slowest_stage}")


def print_epicycles(epicycles: list[Epicycle], limit: int) -> None:
    """Print the largest epicycles as a table.

    Args:
        epicycles: Epicycles sorted by decreasing radius
        limit: Maximum rows to show
    """
    table = Table(box=None, padding=(0, 2), show_edge=False)
    table.add_column("n", justify="right")
    table.add_column("radius", justify="right")
    table.add_column("phase°", justify="right")

    for e in epicycles[:limit]:
        table.add_row(str(e.frequency), f"{e.radius:.3f}", f"{math.degrees(e.phase):.1f}")

    console.print(table)
    if len(epicycles) > limit:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(epicycles) - limit} more)")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    total_time_s: float,
    order: int,
    points: int,
    scale: float,
    output_path: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total pipeline time in seconds
        order: Series order N
        points: Points in the reconstructed curve
        scale: Fit scale onto the output canvas
        output_path: Path of the written image, if any
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(
        f"  {2 * order + 1} coefficients {SYM_DOT} {points:,} points {SYM_DOT} "
        f"scale {scale:.3f}"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
