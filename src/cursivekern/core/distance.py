"""Distance between contours and between whole glyphs.

The path-pair minimizer picks the closest segment pair of two contours with
a coarse three-point sampling, then refines that pair with the segment
oracle. The aggregator takes the minimum over every contour pair of two
glyphs.
"""

import math
from collections.abc import Sequence

from cursivekern.config import UnsupportedPolicy
from cursivekern.core.oracle import QUAD_PRECISION, segment_distance
from cursivekern.domain import Path, Segment

# Parametric positions used by the coarse segment-pair filter
PAIR_SAMPLES: tuple[float, ...] = (0.0, 0.5, 1.0)


def _rank(value: float) -> float:
    """Total ordering key: NaN ranks after every real value."""
    return math.inf if math.isnan(value) else value


def sampled_distance(s1: Segment, s2: Segment) -> float:
    """Coarse distance between two segments.

    Compares start with start, middle with middle and end with end, and
    returns the smallest of the three distances.
    """
    return min(
        (_rank(s1.eval(t).distance_to(s2.eval(t))) for t in PAIR_SAMPLES),
        default=math.inf,
    )


def closest_segment_pair(path_a: Path, path_b: Path) -> tuple[Segment, Segment] | None:
    """Find the segment pair of two contours that looks closest.

    A later pair only replaces the current best when its sampled distance
    is strictly smaller, so the first pair seen wins ties.

    Returns:
        The best (segment from path_a, segment from path_b), or None if
        either path is empty
    """
    best: tuple[float, Segment, Segment] | None = None
    for s1 in path_a:
        for s2 in path_b:
            dist = sampled_distance(s1, s2)
            if best is not None and not dist < best[0]:
                continue
            best = (dist, s1, s2)

    if best is None:
        return None
    return best[1], best[2]


def path_distance(
    path_a: Path,
    path_b: Path,
    policy: UnsupportedPolicy = UnsupportedPolicy.ZERO,
    precision: float = QUAD_PRECISION,
) -> float:
    """Refined distance between two contours.

    Returns:
        Oracle distance for the closest segment pair, or math.inf when
        either path is empty
    """
    pair = closest_segment_pair(path_a, path_b)
    if pair is None:
        return math.inf
    return segment_distance(pair[0], pair[1], policy=policy, precision=precision)


def glyph_distance(
    paths_a: Sequence[Path],
    paths_b: Sequence[Path],
    policy: UnsupportedPolicy = UnsupportedPolicy.ZERO,
    precision: float = QUAD_PRECISION,
) -> float | None:
    """Minimum distance between two sets of contours.

    Args:
        paths_a: Contours of the first glyph
        paths_b: Contours of the second glyph
        policy: Handling of unsupported segment pairings
        precision: Curve-curve minimizer precision

    Returns:
        Minimum distance over all contour pairs, or None when there is
        nothing to measure (either side empty, or no pair had a distance)
    """
    min_distance: float | None = None
    for p1 in paths_a:
        for p2 in paths_b:
            d = path_distance(p1, p2, policy=policy, precision=precision)
            if math.isnan(d) or math.isinf(d):
                continue
            if min_distance is None or d < min_distance:
                min_distance = d
    return min_distance
