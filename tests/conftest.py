"""Shared fixtures: a small TrueType font built on the fly."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

# name -> (advance width, left sidebearing)
TEST_METRICS = {
    ".notdef": (100, 0),
    "square": (100, 0),
    "BehxIni": (140, 20),
    "arch": (100, 0),
    "space": (50, 0),
}


def _square_glyph(x0: float, size: float):
    pen = TTGlyphPen(None)
    pen.moveTo((x0, 0))
    pen.lineTo((x0, size))
    pen.lineTo((x0 + size, size))
    pen.lineTo((x0 + size, 0))
    pen.closePath()
    return pen.glyph()


def _arch_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((50, 100), (100, 0))
    pen.closePath()
    return pen.glyph()


def _empty_glyph():
    return TTGlyphPen(None).glyph()


@pytest.fixture
def font_path(tmp_path: Path) -> Path:
    """TrueType font with squares, a curved glyph and a space.

    - square: 100x100 box at the origin, advance 100
    - BehxIni: 100x100 box starting at x=20, advance 140
    - arch: quadratic dome from (0, 0) to (100, 0), apex at y=50
    - space: no outline, advance 50
    """
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(list(TEST_METRICS))
    fb.setupCharacterMap({0x20: "space", 0x41: "square"})
    fb.setupGlyf(
        {
            ".notdef": _empty_glyph(),
            "square": _square_glyph(0, 100),
            "BehxIni": _square_glyph(20, 100),
            "arch": _arch_glyph(),
            "space": _empty_glyph(),
        }
    )
    fb.setupHorizontalMetrics(TEST_METRICS)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "CursiveKern Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()

    path = tmp_path / "test.ttf"
    fb.save(str(path))
    return path
