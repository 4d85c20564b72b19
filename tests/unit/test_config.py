"""Unit tests for configuration settings."""

import pytest
from pydantic import ValidationError

from cursivekern.config import (
    CursiveKernSettings,
    GeometryConfig,
    KerningConfig,
    UnsupportedPolicy,
    get_default_settings,
)


class TestGeometryConfig:
    """Tests for GeometryConfig."""

    def test_defaults(self) -> None:
        config = GeometryConfig()
        assert config.quad_precision == 0.5
        assert config.flatten_factor == 50.0
        assert config.unsupported_segments is UnsupportedPolicy.ZERO

    def test_flatten_tolerance_scales(self) -> None:
        """Test the tolerance is the flatten factor times the x scale."""
        assert GeometryConfig().get_flatten_tolerance(0.02) == pytest.approx(1.0)

    def test_flatten_tolerance_mirrored_scale(self) -> None:
        """Test a negative scale gives a positive tolerance."""
        assert GeometryConfig().get_flatten_tolerance(-0.02) == pytest.approx(1.0)
        assert GeometryConfig().get_flatten_tolerance(0.0) == 0.0

    def test_policy_from_string(self) -> None:
        config = GeometryConfig(unsupported_segments="raise")  # type: ignore[arg-type]
        assert config.unsupported_segments is UnsupportedPolicy.RAISE

    def test_rejects_nonpositive_precision(self) -> None:
        with pytest.raises(ValidationError):
            GeometryConfig(quad_precision=0.0)


class TestKerningConfig:
    """Tests for KerningConfig."""

    def test_defaults(self) -> None:
        config = KerningConfig()
        assert config.max_iterations == 10
        assert config.tolerance == 10.0
        assert config.minimum_possible(1.0) == -1000.0
        assert not config.sidebearing_floor

    def test_floor_scales(self) -> None:
        assert KerningConfig().minimum_possible(0.05) == pytest.approx(-50.0)

    def test_iteration_bounds(self) -> None:
        """Test the iteration cap is validated."""
        with pytest.raises(ValidationError):
            KerningConfig(max_iterations=0)
        with pytest.raises(ValidationError):
            KerningConfig(max_iterations=101)

    def test_floor_must_not_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            KerningConfig(floor_per_scale=10.0)


class TestSettings:
    """Tests for the top-level settings."""

    def test_default_settings(self) -> None:
        settings = get_default_settings()
        assert isinstance(settings, CursiveKernSettings)
        assert settings.kerning.max_iterations == 10
        assert "Ini" in settings.roles.initial_substrings
        assert settings.logging.log_file is None

    def test_nested_override(self) -> None:
        """Test nested sections can be built from plain dictionaries."""
        settings = CursiveKernSettings.model_validate(
            {"kerning": {"tolerance": 2.5}, "geometry": {"unsupported_segments": "skip"}}
        )
        assert settings.kerning.tolerance == 2.5
        assert settings.geometry.unsupported_segments is UnsupportedPolicy.SKIP
