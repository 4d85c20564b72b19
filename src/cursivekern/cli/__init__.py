"""Command-line interface for cursivekern.

This module provides the CLI using Typer with rich output for
inspecting glyph pairs of a font file:

- distance: minimum outline distance
- kern: iterative kerning solve
- collide: collision test
"""

from cursivekern.cli.app import cli, main

__all__ = ["cli", "main"]
