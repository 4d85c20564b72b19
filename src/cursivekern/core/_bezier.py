"""Internal Bezier curve algorithms.

This is an internal module containing helper functions for the distance
oracle and the collision detector. Not intended for public use.
"""

import math

from fontTools.misc.bezierTools import solveCubic, splitQuadraticAtT

from cursivekern.domain import Point

Coord = tuple[float, float]

# Subdivision depth cap for the curve-curve minimizer
_MAX_DEPTH = 40

# Subdivision depth cap for curve flattening
_MAX_FLATTEN_DEPTH = 12


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current subdivision depth, capped at _MAX_FLATTEN_DEPTH

    Returns:
        List of points approximating the curve, endpoints included
    """
    p0, p1, p2 = points

    # Curve midpoint (at t=0.5)
    curve_mid_x = 0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x
    curve_mid_y = 0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y

    # Deviation of the curve from its chord peaks at t=0.5
    distance = math.hypot(curve_mid_x - (p0.x + p2.x) / 2, curve_mid_y - (p0.y + p2.y) / 2)

    if distance <= tolerance or depth >= _MAX_FLATTEN_DEPTH:
        return [p0, p2]

    # Subdivide at t=0.5
    mid = Point(curve_mid_x, curve_mid_y)
    left = flatten_quadratic([p0, p0.lerp(p1, 0.5), mid], tolerance, depth + 1)
    right = flatten_quadratic([mid, p1.lerp(p2, 0.5), p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current subdivision depth, capped at _MAX_FLATTEN_DEPTH

    Returns:
        List of points approximating the curve, endpoints included
    """
    p0, p1, p2, p3 = points

    # Both control points close to the chord means the curve is too
    flat = max(
        _distance_to_chord(p1, p0, p3),
        _distance_to_chord(p2, p0, p3),
    )
    if flat * 0.75 <= tolerance or depth >= _MAX_FLATTEN_DEPTH:
        return [p0, p3]

    # De Casteljau at t=0.5
    q1 = p0.lerp(p1, 0.5)
    q2 = p1.lerp(p2, 0.5)
    q3 = p2.lerp(p3, 0.5)
    r1 = q1.lerp(q2, 0.5)
    r2 = q2.lerp(q3, 0.5)
    mid = r1.lerp(r2, 0.5)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    return left[:-1] + right


def _distance_to_chord(point: Point, start: Point, end: Point) -> float:
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length < 1e-10:
        return point.distance_to(start)
    return abs((point.x - start.x) * dy - (point.y - start.y) * dx) / length


def quad_point(curve: tuple[Coord, Coord, Coord], t: float) -> Coord:
    """Evaluate a quadratic given as (start, control, end) coordinates."""
    (x0, y0), (x1, y1), (x2, y2) = curve
    mt = 1.0 - t
    return (
        mt * mt * x0 + 2.0 * mt * t * x1 + t * t * x2,
        mt * mt * y0 + 2.0 * mt * t * y1 + t * t * y2,
    )


def nearest_on_quad(curve: tuple[Coord, Coord, Coord], point: Coord) -> tuple[float, float]:
    """Find the parameter of the curve point nearest to a given point.

    The squared distance |B(t) - P|^2 is a quartic in t; its stationary
    points are the roots of a cubic, solved exactly. Endpoints are always
    considered, so roots outside [0, 1] are harmless.

    Args:
        curve: Quadratic as (start, control, end) coordinates
        point: Query point

    Returns:
        Tuple of (t, squared distance)
    """
    (x0, y0), (x1, y1), (x2, y2) = curve
    px, py = point

    # B(t) = p0 + 2*b*t + a*t^2
    ax = x0 - 2.0 * x1 + x2
    ay = y0 - 2.0 * y1 + y2
    bx = x1 - x0
    by = y1 - y0
    dx = x0 - px
    dy = y0 - py

    c3 = ax * ax + ay * ay
    c2 = 3.0 * (ax * bx + ay * by)
    c1 = 2.0 * (bx * bx + by * by) + ax * dx + ay * dy
    c0 = bx * dx + by * dy

    candidates = [0.0, 1.0]
    for root in solveCubic(c3, c2, c1, c0):
        if 0.0 < root < 1.0:
            candidates.append(root)

    best_t = 0.0
    best_sq = math.inf
    for t in candidates:
        qx, qy = quad_point(curve, t)
        dist_sq = (qx - px) ** 2 + (qy - py) ** 2
        if dist_sq < best_sq:
            best_t = t
            best_sq = dist_sq
    return best_t, best_sq


def _hull_gap(a: tuple[Coord, ...], b: tuple[Coord, ...]) -> float:
    """Distance between the control-point bounding boxes of two curves.

    A lower bound on the distance between the curves themselves.
    """
    ax = [p[0] for p in a]
    ay = [p[1] for p in a]
    bx = [p[0] for p in b]
    by = [p[1] for p in b]
    gap_x = max(0.0, min(bx) - max(ax), min(ax) - max(bx))
    gap_y = max(0.0, min(by) - max(ay), min(ay) - max(by))
    return math.hypot(gap_x, gap_y)


def quad_min_distance(
    a: tuple[Coord, Coord, Coord],
    b: tuple[Coord, Coord, Coord],
    precision: float,
) -> float:
    """Approximate minimum distance between two quadratic curves.

    Branch-and-bound over recursive subdivision: curve pieces whose hull
    gap cannot beat the current best by more than precision are pruned.
    The result is never below the true minimum and at most precision above it.

    Args:
        a: First quadratic as (start, control, end) coordinates
        b: Second quadratic as (start, control, end) coordinates
        precision: Accepted error in font units

    Returns:
        Approximate minimum distance
    """
    best = min(math.dist(pa, pb) for pa in (a[0], a[2]) for pb in (b[0], b[2]))
    stack: list[tuple[tuple[Coord, ...], tuple[Coord, ...], int]] = [(a, b, 0)]

    while stack:
        piece_a, piece_b, depth = stack.pop()
        if _hull_gap(piece_a, piece_b) >= best - precision:
            continue

        mid_a = quad_point(piece_a, 0.5)
        mid_b = quad_point(piece_b, 0.5)
        best = min(
            best,
            math.dist(mid_a, mid_b),
            math.dist(mid_a, piece_b[0]),
            math.dist(mid_a, piece_b[2]),
            math.dist(piece_a[0], mid_b),
            math.dist(piece_a[2], mid_b),
        )

        if depth >= _MAX_DEPTH:
            continue

        halves_a = splitQuadraticAtT(*piece_a, 0.5)
        halves_b = splitQuadraticAtT(*piece_b, 0.5)
        for half_a in halves_a:
            for half_b in halves_b:
                stack.append((tuple(half_a), tuple(half_b), depth + 1))

    return best
