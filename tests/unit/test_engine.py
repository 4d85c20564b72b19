"""Unit tests for the spacing engine."""

import pytest

from cursivekern.config import CursiveKernSettings, KerningConfig
from cursivekern.core import SpacingEngine
from cursivekern.domain import Glyph, GlyphExtents, GlyphRole, Path
from cursivekern.utils import SpacingLogger


def square(x: float, y: float, size: float = 100.0) -> Path:
    return Path.from_points(
        [(x, y), (x + size, y), (x + size, y + size), (x, y + size)]
    )


class FakeFont:
    def get_glyph_extents(self, codepoint: int) -> GlyphExtents:
        return GlyphExtents(0, 100, 100, -100)

    def get_scale(self) -> tuple[float, float]:
        return (1.0, 1.0)


@pytest.fixture
def engine() -> SpacingEngine:
    return SpacingEngine(CursiveKernSettings(), SpacingLogger())


@pytest.fixture
def left() -> Glyph:
    return Glyph(codepoint=1, name="left", paths=(square(0, 0),), x_advance=100)


@pytest.fixture
def right() -> Glyph:
    """Square positioned 150 units after the left square's ink."""
    return Glyph(codepoint=1, name="right", paths=(square(0, 0),), x_advance=100, x_total_advance=250)


class TestDistance:
    """Tests for SpacingEngine.distance."""

    def test_positioned_distance(self, engine: SpacingEngine, left: Glyph, right: Glyph) -> None:
        """Test distance is measured in line space."""
        assert engine.distance(left, right) == pytest.approx(150.0)
        assert engine.spacing_logger.stats.pairs_measured == 1

    def test_empty_glyph(self, engine: SpacingEngine, left: Glyph) -> None:
        """Test a glyph without contours gives no result."""
        space = Glyph(codepoint=2, name="space", x_total_advance=100)
        assert engine.distance(left, space) is None


class TestKern:
    """Tests for SpacingEngine.kern and kern_pair."""

    def test_kern(self, engine: SpacingEngine, left: Glyph, right: Glyph) -> None:
        """Test the solver result and statistics."""
        result = engine.kern(left, right, target_distance=50.0)

        assert result.kern == pytest.approx(-100.0)
        assert result.converged
        stats = engine.spacing_logger.stats
        assert stats.pairs_kerned == 1
        assert stats.converged_count == 1

    def test_clamped_counted(self, engine: SpacingEngine, left: Glyph, right: Glyph) -> None:
        """Test a clamped solve is counted as such."""
        result = engine.kern(left, right, target_distance=-5000.0)

        assert result.clamped
        assert engine.spacing_logger.stats.clamped_count == 1
        assert engine.spacing_logger.stats.converged_count == 0

    def test_kern_pair_adjusts_left_advance(
        self, engine: SpacingEngine, left: Glyph, right: Glyph
    ) -> None:
        """Test the kern is applied to the left glyph's advance."""
        result, kerned = engine.kern_pair(left, right, target_distance=50.0)

        assert kerned.x_advance == pytest.approx(100.0 + result.kern)
        assert left.x_advance == 100

    def test_kern_pair_nothing_to_measure(self, engine: SpacingEngine, left: Glyph) -> None:
        """Test an unmeasurable pair keeps its advance and is logged as skipped."""
        space = Glyph(codepoint=2, name="space", x_total_advance=100)
        result, kerned = engine.kern_pair(left, space, target_distance=50.0)

        assert result.distance is None
        assert kerned.x_advance == 100
        assert engine.spacing_logger.stats.pairs_skipped == 1
        assert engine.spacing_logger.stats.skipped == [("left/space", "nothing to measure")]

    def test_sidebearing_floor_setting(self, left: Glyph, right: Glyph) -> None:
        """Test the engine passes the left advance to the sidebearing floor."""
        settings = CursiveKernSettings(kerning=KerningConfig(sidebearing_floor=True))
        engine = SpacingEngine(settings)
        result = engine.kern(left, right, 50.0, max_tuck=0.2, right_lsb=0.0)

        # Floor is 0 - 100 * 0.2 = -20
        assert result.minimum_possible == pytest.approx(-20.0)
        assert result.kern == pytest.approx(-20.0)

    def test_kern_pair_forwards_sidebearing(self, left: Glyph, right: Glyph) -> None:
        """Test kern_pair applies the sidebearing floor to the returned glyph."""
        settings = CursiveKernSettings(kerning=KerningConfig(sidebearing_floor=True))
        engine = SpacingEngine(settings)
        result, kerned = engine.kern_pair(left, right, 50.0, max_tuck=0.2, right_lsb=0.0)

        assert result.minimum_possible == pytest.approx(-20.0)
        assert result.kern == pytest.approx(-20.0)
        assert kerned.x_advance == pytest.approx(80.0)


class TestCollisions:
    """Tests for collision checks through the engine."""

    def test_collides_logs(self, engine: SpacingEngine, left: Glyph) -> None:
        overlapping = Glyph(codepoint=1, name="b", paths=(square(0, 0),), x_total_advance=90)
        assert engine.collides(left, overlapping, FakeFont())
        assert engine.spacing_logger.stats.collisions == 1

    def test_find_collisions(self, engine: SpacingEngine) -> None:
        """Test pairs are found from recomputed running advances."""
        glyphs = [
            Glyph(codepoint=1, name="a", paths=(square(0, 0),), x_advance=90),
            Glyph(codepoint=1, name="b", paths=(square(0, 0),), x_advance=200),
            Glyph(codepoint=1, name="c", paths=(square(0, 0),), x_advance=100),
        ]
        assert engine.find_collisions(glyphs, FakeFont()) == [(0, 1)]

    def test_find_collisions_skips_spaces(self, engine: SpacingEngine) -> None:
        """Test space glyphs are never reported."""
        glyphs = [
            Glyph(codepoint=1, name="a", paths=(square(0, 0),), x_advance=50),
            Glyph(
                codepoint=1,
                name="space",
                paths=(square(0, 0),),
                x_advance=0,
                roles=frozenset({GlyphRole.SPACE}),
            ),
        ]
        assert engine.find_collisions(glyphs, FakeFont()) == []
