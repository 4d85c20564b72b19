"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cursivekern.core import KernResult

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
    console.print(f"\n[bold]cursivekern[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    console.print(line)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_pair(left: str, right: str, offset: float) -> None:
    """Print the glyph pair being examined."""
    line = Text("  ")
    line.append(left, style="bold")
    line.append(f" {SYM_DOT} ")
    line.append(right, style="bold")
    if offset:
        line.append(f" (offset {offset:+g})")
    console.print(line)


def print_distance(distance: float | None) -> None:
    """Print a distance measurement."""
    if distance is None:
        console.print(f"  [yellow]no result[/yellow] {SYM_DOT} nothing to measure")
    else:
        console.print(f"  distance [green]{distance:.2f}[/green] units")


def print_kern_result(result: KernResult, target_distance: float) -> None:
    """Print a kerning solve as a table.

    Args:
        result: Solver result
        target_distance: Requested distance
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("field", style="dim")
    table.add_column("value")
    table.add_row("Target distance", f"{target_distance:g}")
    table.add_row(
        "Final distance",
        "none" if result.distance is None else f"{result.distance:.2f}",
    )
    table.add_row("Kern", f"[bold]{result.kern:+.2f}[/bold]")
    table.add_row("Iterations", str(result.iterations))
    table.add_row("Floor", f"{result.minimum_possible:g}")

    if result.clamped:
        status = "[yellow]clamped to floor[/yellow]"
    elif result.converged:
        status = f"[green]{SYM_OK} converged[/green]"
    else:
        status = "[yellow]iteration cap reached[/yellow]"
    table.add_row("Status", status)
    console.print(table)


def print_collision(collides: bool) -> None:
    """Print a collision verdict."""
    if collides:
        console.print(f"  [bold red]{SYM_ERR} collides[/bold red]")
    else:
        console.print(f"  [bold green]{SYM_OK} clear[/bold green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
