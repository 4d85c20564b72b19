"""Host-facing spacing engine.

Bundles distance measurement, kern solving and collision testing behind
one object configured from CursiveKernSettings, with statistics logging.
"""

from collections.abc import Sequence

from cursivekern.config import CursiveKernSettings
from cursivekern.core.collision import collides
from cursivekern.core.distance import glyph_distance
from cursivekern.core.kerning import KernResult, KerningSolver
from cursivekern.domain import FontMetrics, Glyph, accumulate_advances
from cursivekern.utils import SpacingLogger


class SpacingEngine:
    """Measures, kerns and collision-tests glyph pairs.

    Glyphs are measured in their positioned coordinate space, so the
    running total advance must be filled in (see accumulate_advances).

    Example:
        engine = SpacingEngine(get_default_settings())
        result, left = engine.kern_pair(left, right, target_distance=150.0)
    """

    def __init__(
        self,
        settings: CursiveKernSettings | None = None,
        spacing_logger: SpacingLogger | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            settings: Application settings (defaults if None)
            spacing_logger: Statistics logger (a fresh one if None)
        """
        self.settings = settings or CursiveKernSettings()
        self.spacing_logger = spacing_logger or SpacingLogger()
        self.solver = KerningSolver(
            config=self.settings.kerning,
            policy=self.settings.geometry.unsupported_segments,
            precision=self.settings.geometry.quad_precision,
        )

    def distance(self, left: Glyph, right: Glyph) -> float | None:
        """Minimum distance between two positioned glyphs.

        Returns:
            Distance, or None when either glyph has no contours
        """
        result = glyph_distance(
            left.positioned_paths(),
            right.positioned_paths(),
            policy=self.settings.geometry.unsupported_segments,
            precision=self.settings.geometry.quad_precision,
        )
        self.spacing_logger.log_distance(left.name, right.name, result)
        return result

    def kern(
        self,
        left: Glyph,
        right: Glyph,
        target_distance: float,
        max_tuck: float = 0.0,
        scale_factor: float = 1.0,
        right_lsb: float | None = None,
    ) -> KernResult:
        """Solve the kern between two positioned glyphs.

        Args:
            left: Fixed glyph
            right: Glyph moved by the solver
            target_distance: Desired minimum outline distance
            max_tuck: Permitted tuck as a fraction of the left glyph's width
            scale_factor: Font scale factor for the kern floor
            right_lsb: Right glyph's left sidebearing (sidebearing floor only)

        Returns:
            KernResult from the solver
        """
        result = self.solver.solve(
            left.positioned_paths(),
            right.positioned_paths(),
            target_distance,
            max_tuck=max_tuck,
            scale_factor=scale_factor,
            left_width=left.x_advance,
            right_lsb=right_lsb,
        )
        if result.distance is None:
            self.spacing_logger.log_pair_skipped(left.name, right.name, "nothing to measure")
        else:
            self.spacing_logger.log_kern(
                left.name,
                right.name,
                result.kern,
                result.iterations,
                result.converged,
                result.clamped,
            )
        return result

    def kern_pair(
        self,
        left: Glyph,
        right: Glyph,
        target_distance: float,
        max_tuck: float = 0.0,
        scale_factor: float = 1.0,
        right_lsb: float | None = None,
    ) -> tuple[KernResult, Glyph]:
        """Kern a pair and apply the offset to the left glyph's advance.

        Returns:
            Tuple of (solver result, copy of left with adjusted x_advance).
            A pair with nothing to measure leaves the advance unchanged.
        """
        result = self.kern(left, right, target_distance, max_tuck, scale_factor, right_lsb)
        if result.distance is None:
            return result, left
        return result, left.with_advance_delta(result.kern)

    def collides(self, glyph_a: Glyph, glyph_b: Glyph, font: FontMetrics) -> bool:
        """Test whether two positioned glyphs overlap."""
        hit = collides(glyph_a, glyph_b, font, self.settings.geometry)
        if hit:
            self.spacing_logger.log_collision(glyph_a.name, glyph_b.name)
        return hit

    def find_collisions(
        self,
        glyphs: Sequence[Glyph],
        font: FontMetrics,
    ) -> list[tuple[int, int]]:
        """Find every colliding pair in a glyph sequence.

        Running total advances are recomputed from the x_advance values.
        Space glyphs are skipped.

        Returns:
            Index pairs (i, j) with i < j
        """
        positioned = accumulate_advances(glyphs)
        hits: list[tuple[int, int]] = []
        for i, glyph_a in enumerate(positioned):
            if glyph_a.is_space():
                continue
            for j in range(i + 1, len(positioned)):
                glyph_b = positioned[j]
                if glyph_b.is_space():
                    continue
                if self.collides(glyph_a, glyph_b, font):
                    hits.append((i, j))
        return hits
