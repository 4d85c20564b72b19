"""Segment distance oracle.

Minimum distance between one contour segment and another, dispatched on
the segment-type pair:

- Line-Line: exact, from clamped endpoint projections
- Line-Quad: six samples along the line projected onto the curve
- Quad-Quad: subdivision minimizer with a coarse precision

Any other pairing is handled according to an UnsupportedPolicy.
"""

import math

import structlog

from cursivekern.config import UnsupportedPolicy
from cursivekern.core._bezier import nearest_on_quad as _nearest_on_quad
from cursivekern.core._bezier import quad_min_distance
from cursivekern.domain import Line, Point, Quad, Segment
from cursivekern.exceptions import UnsupportedSegmentError

logger = structlog.get_logger("cursivekern.oracle")

# Parametric positions sampled along a line when measuring against a curve
LINE_SAMPLES: tuple[float, ...] = (0.0, 0.2, 0.4, 0.6, 0.8, 0.99)

QUAD_PRECISION = 0.5


def nearest_on_line(line: Line, point: Point) -> tuple[float, float]:
    """Find the point of a line segment nearest to a given point.

    Projects the point onto the infinite line, then clamps to the segment.

    Args:
        line: The segment to project onto
        point: The point to project

    Returns:
        Tuple of (t, squared distance)
    """
    dx = line.p1.x - line.p0.x
    dy = line.p1.y - line.p0.y

    # Handle zero-length segment
    length_sq = dx * dx + dy * dy
    if length_sq < 1e-20:
        return 0.0, point.distance_sq(line.p0)

    t = ((point.x - line.p0.x) * dx + (point.y - line.p0.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    return t, point.distance_sq(line.eval(t))


def nearest_on_quad(quad: Quad, point: Point) -> tuple[float, float]:
    """Find the point of a quadratic curve nearest to a given point.

    Args:
        quad: The curve to project onto
        point: The point to project

    Returns:
        Tuple of (t, squared distance)
    """
    return _nearest_on_quad(_as_curve(quad), point.to_tuple())


def _as_curve(quad: Quad) -> tuple[tuple[float, float], tuple[float, float], tuple[float, float]]:
    return (quad.p0.to_tuple(), quad.ctrl.to_tuple(), quad.p1.to_tuple())


def line_line_distance(l1: Line, l2: Line) -> float:
    """Minimum distance between two line segments.

    Takes the four endpoint-to-segment projections and returns the square
    root of the smallest squared distance.
    """
    a = nearest_on_line(l1, l2.p0)[1]
    b = nearest_on_line(l1, l2.p1)[1]
    c = nearest_on_line(l2, l1.p0)[1]
    d = nearest_on_line(l2, l1.p1)[1]
    return math.sqrt(min(a, b, c, d))


def line_quad_distance(line: Line, quad: Quad) -> float:
    """Approximate distance between a line segment and a quadratic curve.

    Samples the line at LINE_SAMPLES and projects each sample onto the
    curve. The sample set stops short of the line's end point, so this is
    an upper estimate that may differ from a curve-first measurement.
    """
    curve = _as_curve(quad)
    best = min(_nearest_on_quad(curve, line.eval(t).to_tuple())[1] for t in LINE_SAMPLES)
    return math.sqrt(best)


def quad_quad_distance(q1: Quad, q2: Quad, precision: float = QUAD_PRECISION) -> float:
    """Approximate minimum distance between two quadratic curves.

    The result lies within precision of the true minimum.
    """
    return quad_min_distance(_as_curve(q1), _as_curve(q2), precision)


def segment_distance(
    s1: Segment,
    s2: Segment,
    policy: UnsupportedPolicy = UnsupportedPolicy.ZERO,
    precision: float = QUAD_PRECISION,
) -> float:
    """Minimum distance between two segments, dispatched on their types.

    Args:
        s1: First segment
        s2: Second segment
        policy: What to do for a pairing the oracle cannot measure
        precision: Precision passed to the curve-curve minimizer

    Returns:
        Nonnegative distance. For unsupported pairings: 0.0 under
        UnsupportedPolicy.ZERO, math.inf ("unavailable") under
        UnsupportedPolicy.SKIP.

    Raises:
        UnsupportedSegmentError: For an unsupported pairing under
            UnsupportedPolicy.RAISE
    """
    if isinstance(s1, Line) and isinstance(s2, Line):
        return line_line_distance(s1, s2)
    if isinstance(s1, Line) and isinstance(s2, Quad):
        return line_quad_distance(s1, s2)
    if isinstance(s1, Quad) and isinstance(s2, Line):
        return line_quad_distance(s2, s1)
    if isinstance(s1, Quad) and isinstance(s2, Quad):
        return quad_quad_distance(s1, s2, precision)

    first = s1.kind.value
    second = s2.kind.value
    if policy == UnsupportedPolicy.RAISE:
        raise UnsupportedSegmentError(first, second)
    if policy == UnsupportedPolicy.SKIP:
        logger.debug("Unsupported segment combination skipped", first=first, second=second)
        return math.inf

    logger.warning("Unsupported segment combination", first=first, second=second, distance=0.0)
    return 0.0
