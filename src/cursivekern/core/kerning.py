"""Iterative kerning solver.

Finds the horizontal offset that places the right-hand glyph at a target
distance from the left-hand glyph. Each iteration measures the current
distance and moves the right contours by the remaining difference, until
the measurement is within tolerance, the iteration cap is hit, or the
accumulated kern falls below the permitted floor.

Every iteration works on a freshly translated copy of the right contours;
the caller's paths are never modified.
"""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from cursivekern.config import KerningConfig, UnsupportedPolicy
from cursivekern.core.distance import glyph_distance
from cursivekern.core.oracle import QUAD_PRECISION
from cursivekern.domain import Path, translate_paths


@dataclass(frozen=True)
class KernStep:
    """State after one solver iteration.

    Attributes:
        iteration: 1-based iteration number
        distance: Distance measured at the start of this iteration
            (None when nothing was measurable)
        delta: Adjustment applied in this iteration
        kern: Accumulated kern after this iteration
        right_paths: Right contours after this iteration's translation
        clamped: Whether the solve ended on the floor
    """

    iteration: int
    distance: float | None
    delta: float
    kern: float
    right_paths: tuple[Path, ...]
    clamped: bool = False


@dataclass(frozen=True)
class KernResult:
    """Outcome of a kerning solve.

    Attributes:
        kern: Signed offset to add to the glyph's horizontal advance
        iterations: Number of completed iterations
        converged: Whether the last measurement was within tolerance
        clamped: Whether the floor was returned
        distance: Last measured distance (None if nothing was measurable)
        minimum_possible: Floor that applied to this solve
    """

    kern: float
    iterations: int
    converged: bool
    clamped: bool
    distance: float | None
    minimum_possible: float


def sidebearing_floor(max_tuck: float, left_width: float, right_lsb: float) -> float:
    """Kern floor derived from the permitted tuck and the right sidebearing.

    Allows the right glyph to tuck under the left one by max_tuck of the
    left glyph's width, measured from the right glyph's ink edge.
    """
    left_edge = min(-right_lsb, 0.0)
    return left_edge - left_width * max_tuck


class KerningSolver:
    """Fixed-point kerning solver.

    Example:
        solver = KerningSolver(KerningConfig())
        result = solver.solve(left_paths, right_paths, target_distance=120.0)
        left_glyph = left_glyph.with_advance_delta(result.kern)
    """

    def __init__(
        self,
        config: KerningConfig | None = None,
        policy: UnsupportedPolicy = UnsupportedPolicy.ZERO,
        precision: float = QUAD_PRECISION,
    ) -> None:
        """Initialize the solver.

        Args:
            config: Iteration cap, tolerance and floor settings
            policy: Handling of unsupported segment pairings
            precision: Curve-curve minimizer precision
        """
        self.config = config or KerningConfig()
        self.policy = policy
        self.precision = precision

    def minimum_possible(
        self,
        scale_factor: float,
        max_tuck: float = 0.0,
        left_width: float | None = None,
        right_lsb: float | None = None,
    ) -> float:
        """Most negative kern the solver may return."""
        if (
            self.config.sidebearing_floor
            and max_tuck != 0.0
            and left_width is not None
            and right_lsb is not None
        ):
            return sidebearing_floor(max_tuck, left_width, right_lsb)
        return self.config.minimum_possible(scale_factor)

    def measure(self, left_paths: Sequence[Path], right_paths: Sequence[Path]) -> float | None:
        """Aggregated distance between two contour sets."""
        return glyph_distance(
            left_paths, right_paths, policy=self.policy, precision=self.precision
        )

    def iterate(
        self,
        left_paths: Sequence[Path],
        right_paths: Sequence[Path],
        target_distance: float,
        minimum_possible: float,
    ) -> Iterator[KernStep]:
        """Yield the solver's iterations one at a time.

        Stops after convergence or at the iteration cap. When nothing can be
        measured, or the kern falls below the floor, a final step with
        clamped=True is yielded and no translation is applied; its
        distance is None in the first case.
        """
        current = tuple(right_paths)
        kern = 0.0
        min_distance = -math.inf
        iterations = 0

        while (
            iterations < self.config.max_iterations
            and abs(target_distance - min_distance) > self.config.tolerance
        ):
            measured = self.measure(left_paths, current)
            if measured is None:
                yield KernStep(iterations + 1, None, 0.0, kern, current, clamped=True)
                return
            min_distance = measured

            delta = target_distance - min_distance
            kern += delta
            if kern < minimum_possible:
                yield KernStep(iterations + 1, min_distance, delta, kern, current, clamped=True)
                return

            current = tuple(translate_paths(current, delta, 0.0))
            iterations += 1
            yield KernStep(iterations, min_distance, delta, kern, current)

    def solve(
        self,
        left_paths: Sequence[Path],
        right_paths: Sequence[Path],
        target_distance: float,
        max_tuck: float = 0.0,
        scale_factor: float = 1.0,
        left_width: float | None = None,
        right_lsb: float | None = None,
    ) -> KernResult:
        """Solve for the kern placing the glyphs at target_distance.

        Args:
            left_paths: Contours of the left glyph (fixed)
            right_paths: Contours of the right glyph (moved)
            target_distance: Desired minimum distance between the outlines
            max_tuck: Permitted tuck as a fraction of the left glyph's width
            scale_factor: Font scale factor applied to the floor
            left_width: Advance width of the left glyph (sidebearing floor only)
            right_lsb: Left sidebearing of the right glyph (sidebearing floor only)

        Returns:
            KernResult; its kern is the floor when nothing was measurable or
            the floor was crossed
        """
        floor = self.minimum_possible(scale_factor, max_tuck, left_width, right_lsb)

        last: KernStep | None = None
        for step in self.iterate(left_paths, right_paths, target_distance, floor):
            last = step

        if last is None:
            return KernResult(floor, 0, False, True, None, floor)
        if last.clamped:
            return KernResult(floor, last.iteration - 1, False, True, last.distance, floor)

        converged = abs(target_distance - last.distance) <= self.config.tolerance
        return KernResult(last.kern, last.iteration, converged, False, last.distance, floor)


def determine_kern(
    left_paths: Sequence[Path],
    right_paths: Sequence[Path],
    target_distance: float,
    max_tuck: float = 0.0,
    scale_factor: float = 1.0,
    config: KerningConfig | None = None,
) -> float:
    """Signed horizontal offset that brings right_paths to target_distance.

    The caller adds the result to the relevant glyph's horizontal advance.
    """
    solver = KerningSolver(config)
    return solver.solve(left_paths, right_paths, target_distance, max_tuck, scale_factor).kern
