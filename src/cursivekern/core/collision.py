"""Collision detection between positioned glyphs.

A cheap bounding-box reject handles the common case. Glyphs whose boxes
overlap have their positioned contours flattened into polygons, and every
polygon edge of one glyph is tested against every edge of the other.
The edge test is quadratic in the flattened edge counts; no spatial index
is used.
"""

from collections.abc import Iterator

from cursivekern.config import GeometryConfig
from cursivekern.core._bezier import flatten_cubic, flatten_quadratic
from cursivekern.domain import Cubic, FontMetrics, Glyph, Path, Point, Quad

# Parallel-line threshold and parameter slack for the edge intersection test
_EPSILON = 1e-9


def flatten_path(path: Path, tolerance: float) -> list[Point]:
    """Convert a contour into polygon vertices.

    Curves are subdivided until they deviate from their chords by at most
    tolerance. The closing vertex is not repeated.

    Args:
        path: Contour to flatten
        tolerance: Maximum distance from true curve (in font units)

    Returns:
        Polygon vertices in contour order
    """
    points: list[Point] = []
    for segment in path:
        if isinstance(segment, Quad):
            flattened = flatten_quadratic(segment.control_points(), tolerance)
        elif isinstance(segment, Cubic):
            flattened = flatten_cubic(segment.control_points(), tolerance)
        else:
            flattened = segment.control_points()

        if points and points[-1] == flattened[0]:
            points.extend(flattened[1:])
        else:
            points.extend(flattened)

    if len(points) > 1 and points[-1] == points[0]:
        points.pop()
    return points


def polygon_edges(points: list[Point]) -> Iterator[tuple[Point, Point]]:
    """Yield the edges of a closed polygon, last vertex joined to the first."""
    n = len(points)
    for i in range(n):
        yield points[i], points[(i + 1) % n]


def segments_intersect(a0: Point, a1: Point, b0: Point, b1: Point) -> bool:
    """Test whether two line segments cross or touch.

    Uses parametric line equations. Parallel and collinear segments are
    reported as not intersecting.

    Examples:
        >>> segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        True
    """
    dx = b1.x - b0.x
    dy = b1.y - b0.y
    ex = a1.x - a0.x
    ey = a1.y - a0.y

    det = dx * ey - dy * ex
    if abs(det) < _EPSILON:
        return False

    # Parameter along segment a
    t = (dx * (b0.y - a0.y) - dy * (b0.x - a0.x)) / det
    if not -_EPSILON <= t <= 1.0 + _EPSILON:
        return False

    # Parameter along segment b
    u = ((a0.x - b0.x) * ey - (a0.y - b0.y) * ex) / det
    return -_EPSILON <= u <= 1.0 + _EPSILON


def paths_intersect(p1: Path, p2: Path, tolerance: float) -> bool:
    """Test whether the outlines of two contours cross.

    Only edge crossings count: a contour lying entirely inside the other
    does not intersect it.
    """
    pts1 = flatten_path(p1, tolerance)
    pts2 = flatten_path(p2, tolerance)
    edges2 = list(polygon_edges(pts2))
    for a0, a1 in polygon_edges(pts1):
        for b0, b1 in edges2:
            if segments_intersect(a0, a1, b0, b1):
                return True
    return False


def collides(
    glyph_a: Glyph,
    glyph_b: Glyph,
    font: FontMetrics,
    config: GeometryConfig | None = None,
) -> bool:
    """Test whether two positioned glyphs physically overlap.

    Args:
        glyph_a: First glyph, with running total advance filled in
        glyph_b: Second glyph, with running total advance filled in
        font: Source of glyph extents and scale
        config: Flattening settings

    Returns:
        True on the first pair of crossing outline edges
    """
    config = config or GeometryConfig()

    # If the bounding boxes don't intersect, we can't collide
    if glyph_a.bounding_box(font).intersect(glyph_b.bounding_box(font)).area() == 0.0:
        return False

    x_scale, _ = font.get_scale()
    tolerance = config.get_flatten_tolerance(x_scale)

    their_paths = glyph_b.positioned_paths()
    for p1 in glyph_a.positioned_paths():
        for p2 in their_paths:
            if paths_intersect(p1, p2, tolerance):
                return True
    return False
