"""Configuration settings for cursivekern."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class UnsupportedPolicy(str, Enum):
    """How the distance oracle treats a segment pairing it cannot measure."""

    ZERO = "zero"
    SKIP = "skip"
    RAISE = "raise"


class GeometryConfig(BaseModel):
    """Configuration for distance and collision geometry."""

    quad_precision: float = Field(
        default=0.5,
        gt=0.0,
        le=50.0,
        description="Precision of the curve-curve minimizer (font units)",
    )
    flatten_factor: float = Field(
        default=50.0,
        gt=0.0,
        le=1000.0,
        description="Curve flattening tolerance as a multiple of the font's x scale",
    )
    unsupported_segments: UnsupportedPolicy = Field(
        default=UnsupportedPolicy.ZERO,
        description="Handling of segment pairings the oracle cannot measure",
    )

    def get_flatten_tolerance(self, x_scale: float) -> float:
        """Get the flattening tolerance for the given horizontal scale.

        Mirrored fonts have a negative scale; only its magnitude counts.
        """
        return self.flatten_factor * abs(x_scale)


class KerningConfig(BaseModel):
    """Configuration for the iterative kerning solver."""

    max_iterations: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Iteration cap of the solver loop",
    )
    tolerance: float = Field(
        default=10.0,
        gt=0.0,
        description="Accepted gap between target and measured distance",
    )
    floor_per_scale: float = Field(
        default=-1000.0,
        le=0.0,
        description="Most negative kern allowed, per unit of scale factor",
    )
    sidebearing_floor: bool = Field(
        default=False,
        description="Derive the floor from max tuck and the right glyph's sidebearing",
    )

    def minimum_possible(self, scale_factor: float) -> float:
        """Get the simple kern floor for the given scale factor."""
        return self.floor_per_scale * scale_factor


class RoleConfig(BaseModel):
    """Glyph-name rules used by the font-data layer to attach role tags.

    Suffix rules match the end of a glyph name, substring rules match
    anywhere in it.
    """

    dot_below_suffixes: list[str] = Field(default_factory=lambda: ["BelowNS", "HehCommaNS"])
    dot_above_suffixes: list[str] = Field(default_factory=lambda: ["AboveNS", "FathaNS"])
    bari_ye_substrings: list[str] = Field(default_factory=lambda: ["YehBarreeFin"])
    initial_substrings: list[str] = Field(default_factory=lambda: ["Ini"])
    medial_substrings: list[str] = Field(default_factory=lambda: ["Med"])
    isolated_substrings: list[str] = Field(default_factory=lambda: ["Sep"])
    final_substrings: list[str] = Field(default_factory=lambda: ["Fin"])
    space_substrings: list[str] = Field(default_factory=lambda: ["space"])


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class CursiveKernSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    kerning: KerningConfig = Field(default_factory=KerningConfig)
    roles: RoleConfig = Field(default_factory=RoleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CursiveKernSettings:
    """Get default application settings."""
    return CursiveKernSettings()
