"""Font reader supplying glyph outlines and metrics.

This module provides the FontReader class, the fonttools-backed font
collaborator of the spacing core: glyph extents, scale, and domain
glyphs with their contours and role tags.
"""

from collections.abc import Iterable
from pathlib import Path

from fontTools.pens.boundsPen import BoundsPen
from fontTools.ttLib import TTFont

from cursivekern.config import RoleConfig
from cursivekern.domain import Glyph, GlyphExtents, GlyphRole
from cursivekern.domain import Path as GlyphPath
from cursivekern.exceptions import GlyphNotFoundError
from cursivekern.io.converter import classify_glyph_name, fonttools_glyph_to_paths


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph data.

    Satisfies the FontMetrics protocol, so a loaded reader can be handed
    straight to the collision detector. Extents are looked up by glyph id.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            glyph = reader.get_glyph("BehxIni")
            extents = reader.get_glyph_extents(glyph.codepoint)
    """

    def __init__(
        self,
        font_path: Path,
        scale: tuple[float, float] | None = None,
        roles: RoleConfig | None = None,
    ) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
            scale: Horizontal and vertical scale relative to design units
                (1.0 each if None)
            roles: Glyph-name role rules
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._scale = scale if scale is not None else (1.0, 1.0)
        self._roles = roles or RoleConfig()

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    @property
    def font(self) -> TTFont:
        """Return the loaded TTFont.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self.font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self.font["maxp"].numGlyphs

    def get_scale(self) -> tuple[float, float]:
        """Return the (x, y) scale relative to design units."""
        return self._scale

    def glyph_id(self, name: str) -> int:
        """Return the glyph id for a glyph name.

        Raises:
            GlyphNotFoundError: If the font has no such glyph
        """
        if name not in self.font.getGlyphOrder():
            raise GlyphNotFoundError(name)
        return self.font.getGlyphID(name)

    def get_glyph_extents(self, codepoint: int) -> GlyphExtents:
        """Ink extents of a glyph in HarfBuzz convention.

        Args:
            codepoint: Glyph id

        Returns:
            GlyphExtents; all zero for glyphs without ink
        """
        name = self.font.getGlyphName(codepoint)
        glyph_set = self.font.getGlyphSet()
        pen = BoundsPen(glyph_set)
        glyph_set[name].draw(pen)
        if pen.bounds is None:
            return GlyphExtents(0.0, 0.0, 0.0, 0.0)

        x_min, y_min, x_max, y_max = pen.bounds
        return GlyphExtents(
            x_bearing=x_min,
            y_bearing=y_max,
            width=x_max - x_min,
            height=y_min - y_max,
        )

    def get_paths(self, name: str) -> list[GlyphPath]:
        """Contours of a glyph as domain Paths.

        Raises:
            GlyphNotFoundError: If the font has no such glyph
        """
        glyph_set = self.font.getGlyphSet()
        if name not in glyph_set:
            raise GlyphNotFoundError(name)
        return fonttools_glyph_to_paths(glyph_set[name])

    def advance_width(self, name: str) -> int:
        """Horizontal advance of a glyph from hmtx."""
        advance, _ = self.font["hmtx"][name]
        return advance

    def left_side_bearing(self, name: str) -> int:
        """Left sidebearing of a glyph from hmtx."""
        _, lsb = self.font["hmtx"][name]
        return lsb

    def get_glyph(self, name: str, roles: Iterable[GlyphRole] | None = None) -> Glyph:
        """Build a domain Glyph for a glyph name.

        Args:
            name: Glyph name
            roles: Explicit role tags; derived from the name when None

        Returns:
            Glyph with contours, advance and roles filled in

        Raises:
            GlyphNotFoundError: If the font has no such glyph
        """
        gid = self.glyph_id(name)
        return Glyph(
            codepoint=gid,
            name=name,
            paths=tuple(self.get_paths(name)),
            x_advance=self.advance_width(name),
            roles=frozenset(roles) if roles is not None else classify_glyph_name(name, self._roles),
        )

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
