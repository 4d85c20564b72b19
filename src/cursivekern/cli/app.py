"""CLI application entry point for cursivekern.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer

from cursivekern import __version__
from cursivekern.cli.output import (
    console,
    print_collision,
    print_distance,
    print_error,
    print_font_info,
    print_header,
    print_kern_result,
    print_pair,
    print_step,
)
from cursivekern.config import CursiveKernSettings, KerningConfig, LoggingConfig
from cursivekern.core import SpacingEngine
from cursivekern.domain import Glyph, accumulate_advances
from cursivekern.exceptions import CursiveKernError, FontLoadError
from cursivekern.io import FontReader
from cursivekern.utils import configure_console_logging, configure_logging

# Create the Typer app
app = typer.Typer(
    name="cursivekern",
    help="Measure, kern and collision-test glyph pairs of cursive fonts.",
    add_completion=False,
    no_args_is_help=True,
)

FontArgument = Annotated[
    Path,
    typer.Argument(help="Path to TTF/OTF font file", show_default=False),
]
LeftArgument = Annotated[str, typer.Argument(help="Name of the left glyph", show_default=False)]
RightArgument = Annotated[str, typer.Argument(help="Name of the right glyph", show_default=False)]
OffsetOption = Annotated[
    float,
    typer.Option("--offset", help="Extra horizontal offset added to the left glyph's advance"),
]
QuietOption = Annotated[bool, typer.Option("--quiet", "-q", help="Minimal console output")]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]cursivekern[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
    """Measure, kern and collision-test glyph pairs of cursive fonts."""
    if log_file is not None:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
        configure_logging(
            log_file=logging_config.log_file,
            console_level=logging_config.log_level,
            file_level=logging_config.file_log_level,
            quiet=True,
        )
    else:
        configure_console_logging(log_level)


def _load_reader(font_path: Path) -> FontReader:
    """Load a font, wrapping fonttools failures."""
    reader = FontReader(font_path)
    try:
        reader.load()
    except Exception as e:
        raise FontLoadError(str(font_path), str(e)) from e
    return reader


@contextmanager
def _open_font(font_path: Path, quiet: bool) -> Iterator[FontReader]:
    """Open a font for a command, reporting load failures."""
    if not font_path.is_file():
        print_error(
            f"Input file not found: {font_path}",
            details=f"The file '{font_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    try:
        reader = _load_reader(font_path)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1) from None

    try:
        if not quiet:
            print_font_info(str(font_path), reader.glyph_count, reader.units_per_em)
        yield reader
    finally:
        reader.close()


def _place_pair(reader: FontReader, left: str, right: str, offset: float) -> tuple[Glyph, Glyph]:
    """Load two glyphs and position the right one after the left one's advance."""
    left_glyph = reader.get_glyph(left).with_advance_delta(offset)
    right_glyph = reader.get_glyph(right)
    placed = accumulate_advances([left_glyph, right_glyph])
    return placed[0], placed[1]


def _run(action: str, func: Callable[[], None]) -> None:
    """Run a command body, mapping errors to exit codes."""
    try:
        func()
    except CursiveKernError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error during {action}: {e}")
        raise typer.Exit(code=1)


@app.command()
def distance(
    font: FontArgument,
    left: LeftArgument,
    right: RightArgument,
    offset: OffsetOption = 0.0,
    quiet: QuietOption = False,
) -> None:
    """Measure the minimum outline distance between two glyphs.

    Example:
        cursivekern distance Gulzar.ttf BehxIni AlifFin
    """
    with _open_font(font, quiet) as reader:

        def body() -> None:
            left_glyph, right_glyph = _place_pair(reader, left, right, offset)
            if not quiet:
                print_step("Measuring")
                print_pair(left, right, offset)
            result = SpacingEngine().distance(left_glyph, right_glyph)
            if quiet:
                console.print("none" if result is None else f"{result:.2f}")
            else:
                print_distance(result)

        _run("distance measurement", body)


@app.command()
def kern(
    font: FontArgument,
    left: LeftArgument,
    right: RightArgument,
    target: Annotated[
        float,
        typer.Option("--target", "-t", help="Target distance between the outlines"),
    ] = 100.0,
    max_tuck: Annotated[
        float,
        typer.Option(
            "--max-tuck",
            help="Permitted tuck as a fraction of the left glyph's width",
            min=0.0,
            max=1.0,
        ),
    ] = 0.0,
    sidebearing_floor: Annotated[
        bool,
        typer.Option(
            "--sidebearing-floor",
            help="Derive the kern floor from max tuck and the right sidebearing",
        ),
    ] = False,
    quiet: QuietOption = False,
) -> None:
    """Solve the kern that places two glyphs at a target distance.

    Example:
        cursivekern kern Gulzar.ttf BehxIni AlifFin --target 120
    """
    settings = CursiveKernSettings(kerning=KerningConfig(sidebearing_floor=sidebearing_floor))

    with _open_font(font, quiet) as reader:

        def body() -> None:
            left_glyph, right_glyph = _place_pair(reader, left, right, 0.0)
            if not quiet:
                print_step("Kerning")
                print_pair(left, right, 0.0)
            scale_factor, _ = reader.get_scale()
            result = SpacingEngine(settings).kern(
                left_glyph,
                right_glyph,
                target,
                max_tuck=max_tuck,
                scale_factor=scale_factor,
                right_lsb=reader.left_side_bearing(right),
            )
            if quiet:
                console.print(f"{result.kern:.2f}")
            else:
                print_kern_result(result, target)

        _run("kerning", body)


@app.command()
def collide(
    font: FontArgument,
    left: LeftArgument,
    right: RightArgument,
    offset: OffsetOption = 0.0,
    quiet: QuietOption = False,
) -> None:
    """Test whether two positioned glyphs overlap.

    Exits with status 2 when the glyphs collide.

    Example:
        cursivekern collide Gulzar.ttf BehxIni AlifFin --offset -150
    """
    with _open_font(font, quiet) as reader:
        hit = False

        def body() -> None:
            nonlocal hit
            left_glyph, right_glyph = _place_pair(reader, left, right, offset)
            if not quiet:
                print_step("Testing collision")
                print_pair(left, right, offset)
            hit = SpacingEngine().collides(left_glyph, right_glyph, reader)
            if quiet:
                console.print("collides" if hit else "clear")
            else:
                print_collision(hit)

        _run("collision test", body)

    if hit:
        raise typer.Exit(code=2)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
