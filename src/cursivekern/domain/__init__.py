"""Domain models for cursivekern.

This module contains the geometry and glyph models consumed by the spacing
core. All models are designed to be:

- Immutable (frozen dataclasses), so computations never alias caller data
- Independent of fonttools implementation details

Key classes:
- Point: A 2D point in font units
- Line, Quad, Cubic: Contour segment variants
- Path: A closed contour
- Glyph: A positioned glyph with its contours and role tags
- GlyphExtents, Rect: Bounding metrics
"""

from cursivekern.domain.contour import (
    Cubic,
    Line,
    Path,
    Point,
    Quad,
    Segment,
    SegmentKind,
    translate_paths,
)
from cursivekern.domain.glyph import (
    FontMetrics,
    Glyph,
    GlyphExtents,
    GlyphRole,
    Rect,
    accumulate_advances,
)

__all__: list[str] = [
    # Enums
    "SegmentKind",
    "GlyphRole",
    # Core types
    "Point",
    "Line",
    "Quad",
    "Cubic",
    "Segment",
    "Path",
    "Glyph",
    "GlyphExtents",
    "Rect",
    "FontMetrics",
    # Helpers
    "accumulate_advances",
    "translate_paths",
]
