"""Converters between fonttools and domain models.

This module handles the conversion from fonttools pen recordings to our
domain Paths, and the attachment of role tags to glyphs from their names.
"""

from typing import Any

from fontTools.pens.recordingPen import RecordingPen

from cursivekern.config import RoleConfig
from cursivekern.domain import Cubic, GlyphRole, Line, Path, Point, Quad, Segment
from cursivekern.exceptions import InvalidSegmentError


def fonttools_glyph_to_paths(fonttools_glyph: Any) -> list[Path]:
    """Convert a fonttools glyph to domain Paths.

    Uses a RecordingPen to extract the outline as a series of drawing
    commands. Composite glyphs are decomposed by the glyph set.

    Args:
        fonttools_glyph: The fonttools glyph object from GlyphSet

    Returns:
        One Path per contour
    """
    pen = RecordingPen()
    fonttools_glyph.draw(pen)
    return recording_to_paths(pen.value)


def recording_to_paths(recording: list[tuple[str, tuple[Any, ...]]]) -> list[Path]:
    """Convert RecordingPen recording to list of Path objects.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())

    Consecutive quadratic off-curve points get an implied on-curve point
    at their midpoint. Open contours are closed with a line.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        List of Path objects

    Raises:
        InvalidSegmentError: If a drawing command has no current point
    """
    paths: list[Path] = []
    segments: list[Segment] = []
    start: Point | None = None
    current: Point | None = None

    def finish() -> None:
        if start is not None and current is not None and current != start:
            segments.append(Line(current, start))
        if segments:
            paths.append(Path(tuple(segments)))
        segments.clear()

    for command, args in recording:
        if command == "moveTo":
            finish()
            start = current = Point(*args[0])
            continue

        if command in ("closePath", "endPath"):
            finish()
            start = current = None
            continue

        if command == "qCurveTo" and args[-1] is None:
            # TrueType contour made only of off-curve points
            off = [Point(*pt) for pt in args[:-1]]
            implied = off[-1].lerp(off[0], 0.5)
            start = current = implied
            args = (*args[:-1], implied.to_tuple())

        if current is None:
            raise InvalidSegmentError(f"'{command}' without a current point")

        if command == "lineTo":
            end = Point(*args[0])
            segments.append(Line(current, end))
            current = end

        elif command == "qCurveTo":
            off_curve = [Point(*pt) for pt in args[:-1]]
            end = Point(*args[-1])
            if not off_curve:
                segments.append(Line(current, end))
            for i, ctrl in enumerate(off_curve):
                if i < len(off_curve) - 1:
                    on = ctrl.lerp(off_curve[i + 1], 0.5)
                else:
                    on = end
                segments.append(Quad(current, on, ctrl))
                current = on
            current = end

        elif command == "curveTo":
            if len(args) != 3:
                raise InvalidSegmentError(f"curveTo expects 3 points, got {len(args)}")
            c0, c1, end = (Point(*pt) for pt in args)
            segments.append(Cubic(current, end, c0, c1))
            current = end

    finish()
    return paths


def classify_glyph_name(name: str, rules: RoleConfig | None = None) -> frozenset[GlyphRole]:
    """Derive role tags from a glyph name.

    Args:
        name: Glyph name (e.g. "BehxIni", "TwoDotsBelowNS")
        rules: Name rules (defaults if None)

    Returns:
        Set of roles matched by the name
    """
    rules = rules or RoleConfig()
    roles: set[GlyphRole] = set()

    if any(name.endswith(s) for s in rules.dot_below_suffixes):
        roles.add(GlyphRole.DOT_BELOW)
    if any(name.endswith(s) for s in rules.dot_above_suffixes):
        roles.add(GlyphRole.DOT_ABOVE)

    substring_rules = [
        (rules.bari_ye_substrings, GlyphRole.BARI_YE),
        (rules.initial_substrings, GlyphRole.INITIAL),
        (rules.medial_substrings, GlyphRole.MEDIAL),
        (rules.isolated_substrings, GlyphRole.ISOLATED),
        (rules.final_substrings, GlyphRole.FINAL),
        (rules.space_substrings, GlyphRole.SPACE),
    ]
    for substrings, role in substring_rules:
        if any(s in name for s in substrings):
            roles.add(role)

    return frozenset(roles)
