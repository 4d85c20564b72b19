"""Core spacing algorithms for cursivekern.

This module contains the core algorithms for:

- Segment distance (line and quadratic segment pairs)
- Contour and glyph distance (coarse pair selection, refined measurement)
- Kerning (iterative fixed-point solver with a floor)
- Collision detection (bounding-box reject, flattened edge tests)

All functions are:
- Stateless (independent glyph pairs can be processed in any order)
- Pure (caller-owned geometry is never modified)

Key functions:
- segment_distance: Distance between two segments
- closest_segment_pair: Closest-looking segment pair of two contours
- path_distance: Refined distance between two contours
- glyph_distance: Minimum distance between two contour sets
- determine_kern: Kern offset for a target distance
- collides: Collision test for two positioned glyphs

Key classes:
- KerningSolver: Configurable solver yielding per-iteration steps
- SpacingEngine: Host-facing facade with logging
"""

from cursivekern.core.collision import (
    collides,
    flatten_path,
    paths_intersect,
    polygon_edges,
    segments_intersect,
)
from cursivekern.core.distance import (
    closest_segment_pair,
    glyph_distance,
    path_distance,
    sampled_distance,
)
from cursivekern.core.engine import SpacingEngine
from cursivekern.core.kerning import (
    KernResult,
    KernStep,
    KerningSolver,
    determine_kern,
    sidebearing_floor,
)
from cursivekern.core.oracle import (
    line_line_distance,
    line_quad_distance,
    nearest_on_line,
    nearest_on_quad,
    quad_quad_distance,
    segment_distance,
)

__all__ = [
    # Kerning classes
    "KernResult",
    "KernStep",
    "KerningSolver",
    # Engine
    "SpacingEngine",
    # Collision functions
    "collides",
    "flatten_path",
    "paths_intersect",
    "polygon_edges",
    "segments_intersect",
    # Distance functions
    "closest_segment_pair",
    "glyph_distance",
    "path_distance",
    "sampled_distance",
    # Kerning functions
    "determine_kern",
    "sidebearing_floor",
    # Oracle functions
    "line_line_distance",
    "line_quad_distance",
    "nearest_on_line",
    "nearest_on_quad",
    "quad_quad_distance",
    "segment_distance",
]
