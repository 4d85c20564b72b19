"""Glyph representation and positioning metadata.

This module defines the glyph domain model as consumed by the spacing core:
outline contours plus the advance and offset values that place them on a
rendered line of text.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Protocol

from cursivekern.domain.contour import Path, translate_paths


class GlyphRole(Enum):
    """Role of a glyph within cursive Nastaliq text.

    Roles are attached by the font-data layer; the geometry core never
    derives them from glyph names.
    """

    DOT_ABOVE = "dot_above"
    DOT_BELOW = "dot_below"
    INITIAL = "initial"
    MEDIAL = "medial"
    FINAL = "final"
    ISOLATED = "isolated"
    BARI_YE = "bari_ye"
    SPACE = "space"


@dataclass(frozen=True, slots=True)
class GlyphExtents:
    """Design-space ink extents of a glyph.

    Follows the HarfBuzz convention: y_bearing is the top of the ink box
    and height is negative for outlines extending downward from it.
    """

    x_bearing: float
    y_bearing: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle with x0 <= x1 and y0 <= y1."""

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_points(cls, a: tuple[float, float], b: tuple[float, float]) -> "Rect":
        """Build a normalized rectangle from two opposite corners."""
        return cls(min(a[0], b[0]), min(a[1], b[1]), max(a[0], b[0]), max(a[1], b[1]))

    def intersect(self, other: "Rect") -> "Rect":
        """Intersection rectangle; zero-sized when the rectangles are disjoint."""
        x0 = max(self.x0, other.x0)
        y0 = max(self.y0, other.y0)
        x1 = min(self.x1, other.x1)
        y1 = min(self.y1, other.y1)
        return Rect(x0, y0, max(x1, x0), max(y1, y0))

    def area(self) -> float:
        return (self.x1 - self.x0) * (self.y1 - self.y0)

    def is_empty(self) -> bool:
        return self.area() == 0.0


class FontMetrics(Protocol):
    """Font collaborator supplying bounding metrics and scale."""

    def get_glyph_extents(self, codepoint: int) -> GlyphExtents: ...

    def get_scale(self) -> tuple[float, float]: ...


@dataclass(frozen=True)
class Glyph:
    """A shaped glyph with its contours and positioning values.

    Attributes:
        codepoint: Glyph id used for extents lookup
        name: Glyph name (informational only)
        paths: Design-space contours
        cluster: Cluster index from the shaping buffer
        x_advance: Horizontal advance
        y_advance: Vertical advance
        x_offset: Horizontal positioning offset
        y_offset: Vertical positioning offset
        x_total_advance: Running total of previous advances in the line
        roles: Role tags attached by the font-data layer
        in_bari_ye: Whether the glyph sits over a bari ye tail
    """

    codepoint: int
    name: str = ""
    paths: tuple[Path, ...] = ()
    cluster: int = 0
    x_advance: float = 0
    y_advance: float = 0
    x_offset: float = 0
    y_offset: float = 0
    x_total_advance: float = 0
    roles: frozenset[GlyphRole] = field(default_factory=frozenset)
    in_bari_ye: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.paths, tuple):
            object.__setattr__(self, "paths", tuple(self.paths))
        if not isinstance(self.roles, frozenset):
            object.__setattr__(self, "roles", frozenset(self.roles))

    def has_role(self, role: GlyphRole) -> bool:
        return role in self.roles

    def is_dot_below(self) -> bool:
        return GlyphRole.DOT_BELOW in self.roles

    def is_dot_above(self) -> bool:
        return GlyphRole.DOT_ABOVE in self.roles

    def is_bari_ye(self) -> bool:
        return GlyphRole.BARI_YE in self.roles

    def is_init(self) -> bool:
        return GlyphRole.INITIAL in self.roles

    def is_medi(self) -> bool:
        return GlyphRole.MEDIAL in self.roles

    def is_isol(self) -> bool:
        return GlyphRole.ISOLATED in self.roles

    def is_fina(self) -> bool:
        return GlyphRole.FINAL in self.roles

    def is_space(self) -> bool:
        return GlyphRole.SPACE in self.roles

    def is_empty(self) -> bool:
        """Check if glyph has no outlines (spaces and other non-printing glyphs)."""
        return all(path.is_empty() for path in self.paths)

    def positioned_paths(self) -> list[Path]:
        """Contours translated into the coordinate space of the text line."""
        return translate_paths(
            self.paths,
            self.x_total_advance + self.x_offset,
            self.y_offset,
        )

    def bounding_box(self, font: FontMetrics) -> Rect:
        """Bounding box of the positioned glyph.

        Includes the full running-total x advance, so two boxes from the
        same line can be compared directly.
        """
        extents = font.get_glyph_extents(self.codepoint)
        bl_x = extents.x_bearing + self.x_total_advance + self.x_offset
        bl_y = extents.y_bearing + extents.height + self.y_offset
        tr_x = bl_x + extents.width
        tr_y = bl_y - extents.height
        return Rect.from_points((bl_x, bl_y), (tr_x, tr_y))

    def with_advance_delta(self, delta: float) -> "Glyph":
        """Copy of this glyph with delta added to its horizontal advance."""
        return replace(self, x_advance=self.x_advance + delta)


def accumulate_advances(glyphs: Iterable[Glyph]) -> list[Glyph]:
    """Fill in the running total horizontal advance for a glyph sequence.

    Each glyph's x_total_advance becomes the sum of the x_advance values of
    the glyphs before it.
    """
    result: list[Glyph] = []
    total = 0.0
    for glyph in glyphs:
        result.append(replace(glyph, x_total_advance=total))
        total += glyph.x_advance
    return result
