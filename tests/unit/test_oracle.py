"""Unit tests for the segment distance oracle."""

import math

import pytest
from structlog.testing import capture_logs

from cursivekern.config import UnsupportedPolicy
from cursivekern.core.oracle import (
    line_line_distance,
    line_quad_distance,
    nearest_on_line,
    nearest_on_quad,
    quad_quad_distance,
    segment_distance,
)
from cursivekern.domain import Cubic, Line, Point, Quad
from cursivekern.exceptions import GeometryError, UnsupportedSegmentError


def line(x0: float, y0: float, x1: float, y1: float) -> Line:
    return Line(Point(x0, y0), Point(x1, y1))


@pytest.fixture
def arch() -> Quad:
    """Parabola from (0, 0) to (100, 0) peaking at (50, 50)."""
    return Quad(Point(0, 0), Point(100, 0), Point(50, 100))


@pytest.fixture
def cubic() -> Cubic:
    return Cubic(Point(0, 0), Point(100, 0), Point(30, 50), Point(70, 50))


class TestNearestOnLine:
    """Tests for clamped projection onto a line segment."""

    def test_projection_inside_segment(self) -> None:
        """Test a point projecting onto the interior."""
        t, dist_sq = nearest_on_line(line(0, 0, 100, 0), Point(25, 10))
        assert t == pytest.approx(0.25)
        assert dist_sq == pytest.approx(100.0)

    def test_projection_clamped_to_start(self) -> None:
        """Test a point beyond the start clamps to t=0."""
        t, dist_sq = nearest_on_line(line(0, 0, 100, 0), Point(-50, 10))
        assert t == 0.0
        assert dist_sq == pytest.approx(2600.0)

    def test_zero_length_segment(self) -> None:
        """Test degenerate segment measures to its single point."""
        t, dist_sq = nearest_on_line(line(5, 5, 5, 5), Point(8, 9))
        assert t == 0.0
        assert dist_sq == pytest.approx(25.0)


class TestNearestOnQuad:
    """Tests for nearest point on a quadratic curve."""

    def test_apex(self, arch: Quad) -> None:
        """Test point straight above the apex projects onto it."""
        t, dist_sq = nearest_on_quad(arch, Point(50, 100))
        assert t == pytest.approx(0.5)
        assert dist_sq == pytest.approx(2500.0)

    def test_endpoint(self, arch: Quad) -> None:
        """Test point beyond the start projects onto the start."""
        t, dist_sq = nearest_on_quad(arch, Point(-30, -40))
        assert t == 0.0
        assert dist_sq == pytest.approx(2500.0)

    def test_degenerate_quad(self) -> None:
        """Test a quad with collinear control behaves like a line."""
        flat = Quad(Point(0, 0), Point(100, 0), Point(50, 0))
        t, dist_sq = nearest_on_quad(flat, Point(30, 20))
        assert t == pytest.approx(0.3)
        assert dist_sq == pytest.approx(400.0)


class TestLineLineDistance:
    """Tests for line-line distance."""

    def test_parallel_lines(self) -> None:
        """Test two parallel vertical lines 50 apart."""
        assert line_line_distance(line(0, 0, 0, 100), line(50, 0, 50, 100)) == pytest.approx(50.0)

    def test_touching_lines(self) -> None:
        """Test lines sharing an endpoint measure zero."""
        assert line_line_distance(line(0, 0, 100, 0), line(100, 0, 200, 0)) == 0.0

    def test_offset_lines(self) -> None:
        """Test an endpoint projecting onto the other segment's interior."""
        assert line_line_distance(line(0, 0, 100, 0), line(40, 30, 40, 90)) == pytest.approx(30.0)

    def test_symmetric(self) -> None:
        """Test line-line distance is symmetric under argument swap."""
        a = line(0, 0, 80, 20)
        b = line(30, 70, 110, 40)
        assert line_line_distance(a, b) == pytest.approx(line_line_distance(b, a))

    def test_crossing_lines_measure_endpoints(self) -> None:
        """Test crossing segments report the endpoint projection distance."""
        d = line_line_distance(line(0, 0, 100, 100), line(0, 100, 100, 0))
        assert d == pytest.approx(math.hypot(50, 50))


class TestLineQuadDistance:
    """Tests for sampled line-curve distance."""

    def test_line_above_apex(self, arch: Quad) -> None:
        """Test horizontal line whose t=0.4 sample sits above the apex."""
        assert line_quad_distance(line(0, 100, 125, 100), arch) == pytest.approx(50.0)

    def test_apex_between_samples(self, arch: Quad) -> None:
        """Test the estimate exceeds the true gap when no sample hits the apex."""
        d = line_quad_distance(line(0, 100, 100, 100), arch)
        assert 50.0 < d < 51.0

    def test_samples_stop_short_of_line_end(self) -> None:
        """Test the estimate uses t=0.99 rather than the line's end point.

        The true distance is 10 (line end to curve start); the last sample
        sits one unit before the end.
        """
        curve = Quad(Point(100, 10), Point(200, 110), Point(150, 10))
        d = line_quad_distance(line(0, 0, 100, 0), curve)
        assert d == pytest.approx(math.sqrt(101.0))
        assert d > 10.0

    def test_dispatch_normalizes_order(self) -> None:
        """Test quad-line dispatches to the same line-first estimate."""
        curve = Quad(Point(100, 10), Point(200, 110), Point(150, 10))
        straight = line(0, 0, 100, 0)
        assert segment_distance(curve, straight) == segment_distance(straight, curve)

    def test_reversed_line_differs(self) -> None:
        """Test reversing the line changes which end is under-sampled."""
        curve = Quad(Point(100, 10), Point(200, 110), Point(150, 10))
        forward = line_quad_distance(line(0, 0, 100, 0), curve)
        backward = line_quad_distance(line(100, 0, 0, 0), curve)
        assert backward == pytest.approx(10.0)
        assert forward != pytest.approx(backward)


class TestQuadQuadDistance:
    """Tests for the curve-curve minimizer."""

    def test_facing_arches(self, arch: Quad) -> None:
        """Test two arches facing each other across a 100 unit gap."""
        upper = Quad(Point(0, 200), Point(100, 200), Point(50, 100))
        d = quad_quad_distance(arch, upper)
        assert 100.0 - 1e-9 <= d <= 100.5

    def test_crossing_curves(self, arch: Quad) -> None:
        """Test curves that cross measure within precision of zero."""
        flat = Quad(Point(0, 25), Point(100, 25), Point(50, 25))
        assert quad_quad_distance(arch, flat) <= 0.5

    def test_symmetric_within_precision(self, arch: Quad) -> None:
        """Test argument swap changes the result by at most the precision."""
        other = Quad(Point(120, 80), Point(220, 20), Point(160, 150))
        assert abs(quad_quad_distance(arch, other) - quad_quad_distance(other, arch)) <= 0.5

    def test_custom_precision(self, arch: Quad) -> None:
        """Test a finer precision stays close to the true minimum."""
        shifted = arch.translate(130, 0)
        d = quad_quad_distance(arch, shifted, precision=0.01)
        assert 30.0 - 1e-9 <= d <= 30.01


class TestSegmentDistance:
    """Tests for dispatch and unsupported pairings."""

    def test_dispatch_line_line(self) -> None:
        """Test line-line dispatch."""
        assert segment_distance(line(0, 0, 0, 100), line(50, 0, 50, 100)) == pytest.approx(50.0)

    def test_dispatch_quad_quad(self, arch: Quad) -> None:
        """Test quad-quad dispatch."""
        assert segment_distance(arch, arch.translate(0, 300)) >= 0.0

    def test_unsupported_returns_zero(self, cubic: Cubic) -> None:
        """Test an unsupported pairing returns 0 and logs a warning."""
        with capture_logs() as logs:
            d = segment_distance(cubic, line(0, 500, 100, 500))

        assert d == 0.0
        assert logs[0]["event"] == "Unsupported segment combination"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["first"] == "cubic"

    def test_unsupported_skip(self, cubic: Cubic, arch: Quad) -> None:
        """Test the skip policy reports the distance as unavailable."""
        assert segment_distance(arch, cubic, policy=UnsupportedPolicy.SKIP) == math.inf

    def test_unsupported_raise(self, cubic: Cubic) -> None:
        """Test the raise policy raises a geometry error."""
        with pytest.raises(UnsupportedSegmentError, match="cubic/line") as exc_info:
            segment_distance(cubic, line(0, 0, 1, 1), policy=UnsupportedPolicy.RAISE)
        assert isinstance(exc_info.value, GeometryError)
        assert exc_info.value.second == "line"

    def test_distances_nonnegative(self, arch: Quad, cubic: Cubic) -> None:
        """Test every dispatch path returns a nonnegative value."""
        segments = [line(0, 0, 10, 10), arch, cubic, line(300, 300, 400, 300)]
        for s1 in segments:
            for s2 in segments:
                assert segment_distance(s1, s2) >= 0.0
