"""Font I/O layer for cursivekern.

This module reads font files using fonttools and supplies the spacing
core with what it consumes from a font: glyph extents, scale, and
glyph outlines converted to domain Paths.

Key classes:
- FontReader: Load fonts, look up metrics and build domain glyphs

Key functions:
- recording_to_paths: Convert a RecordingPen recording to Paths
- classify_glyph_name: Attach role tags from glyph-name rules
"""

from cursivekern.io.converter import (
    classify_glyph_name,
    fonttools_glyph_to_paths,
    recording_to_paths,
)
from cursivekern.io.reader import FontReader

__all__ = [
    "FontReader",
    "classify_glyph_name",
    "fonttools_glyph_to_paths",
    "recording_to_paths",
]
