"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout cursivekern:
- Point: A 2D point in font design units
- Line, Quad, Cubic: Segment variants making up a contour
- Path: A closed contour built from segments
- SegmentKind: Enum tagging the segment variants
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class SegmentKind(Enum):
    """Segment type tag.

    Segments can be:
    - LINE: Straight line between two on-curve points
    - QUAD: Quadratic Bezier curve (TrueType outlines)
    - CUBIC: Cubic Bezier curve (PostScript/CFF outlines)
    """

    LINE = "line"
    QUAD = "quad"
    CUBIC = "cubic"


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_sq(self, other: "Point") -> float:
        """Squared Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def translate(self, dx: float, dy: float) -> "Point":
        """Return a copy of this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linear interpolation towards another point."""
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment from p0 to p1."""

    p0: Point
    p1: Point

    kind = SegmentKind.LINE

    def eval(self, t: float) -> Point:
        """Evaluate the segment at parameter t in [0, 1]."""
        return self.p0.lerp(self.p1, t)

    def control_points(self) -> list[Point]:
        return [self.p0, self.p1]

    def translate(self, dx: float, dy: float) -> "Line":
        return Line(self.p0.translate(dx, dy), self.p1.translate(dx, dy))


@dataclass(frozen=True, slots=True)
class Quad:
    """Quadratic Bezier segment.

    Attributes:
        p0: Start point (on-curve)
        p1: End point (on-curve)
        ctrl: Off-curve control point
    """

    p0: Point
    p1: Point
    ctrl: Point

    kind = SegmentKind.QUAD

    def eval(self, t: float) -> Point:
        """Evaluate the curve at parameter t in [0, 1]."""
        mt = 1.0 - t
        a = mt * mt
        b = 2.0 * mt * t
        c = t * t
        return Point(
            a * self.p0.x + b * self.ctrl.x + c * self.p1.x,
            a * self.p0.y + b * self.ctrl.y + c * self.p1.y,
        )

    def control_points(self) -> list[Point]:
        """Control polygon in curve order [start, control, end]."""
        return [self.p0, self.ctrl, self.p1]

    def translate(self, dx: float, dy: float) -> "Quad":
        return Quad(
            self.p0.translate(dx, dy),
            self.p1.translate(dx, dy),
            self.ctrl.translate(dx, dy),
        )


@dataclass(frozen=True, slots=True)
class Cubic:
    """Cubic Bezier segment.

    Only CFF outlines produce these. The distance oracle does not measure
    them; the collision detector flattens them like any other curve.
    """

    p0: Point
    p1: Point
    ctrl0: Point
    ctrl1: Point

    kind = SegmentKind.CUBIC

    def eval(self, t: float) -> Point:
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3.0 * mt * mt * t
        c = 3.0 * mt * t * t
        d = t * t * t
        return Point(
            a * self.p0.x + b * self.ctrl0.x + c * self.ctrl1.x + d * self.p1.x,
            a * self.p0.y + b * self.ctrl0.y + c * self.ctrl1.y + d * self.p1.y,
        )

    def control_points(self) -> list[Point]:
        return [self.p0, self.ctrl0, self.ctrl1, self.p1]

    def translate(self, dx: float, dy: float) -> "Cubic":
        return Cubic(
            self.p0.translate(dx, dy),
            self.p1.translate(dx, dy),
            self.ctrl0.translate(dx, dy),
            self.ctrl1.translate(dx, dy),
        )


Segment = Union[Line, Quad, Cubic]


def segment_to_dict(segment: Segment) -> dict[str, Any]:
    """Serialize a segment to a tagged dictionary."""
    return {
        "kind": segment.kind.value,
        "points": [p.to_dict() for p in segment.control_points()],
    }


def segment_from_dict(data: dict[str, Any]) -> Segment:
    """Deserialize a tagged segment dictionary.

    Raises:
        ValueError: If the kind tag is unknown or the point count is wrong
    """
    kind = SegmentKind(data["kind"])
    points = [Point.from_dict(p) for p in data["points"]]
    expected = {SegmentKind.LINE: 2, SegmentKind.QUAD: 3, SegmentKind.CUBIC: 4}[kind]
    if len(points) != expected:
        raise ValueError(f"Expected {expected} points for {kind.value}, got {len(points)}")

    if kind == SegmentKind.LINE:
        return Line(points[0], points[1])
    if kind == SegmentKind.QUAD:
        return Quad(points[0], points[2], points[1])
    return Cubic(points[0], points[3], points[1], points[2])


@dataclass(frozen=True)
class Path:
    """A closed contour made of line and curve segments.

    Paths are immutable; translation returns a new Path.

    Attributes:
        segments: Ordered segments, each starting where the previous one ends
    """

    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, "segments", tuple(self.segments))

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def is_empty(self) -> bool:
        """Check if the path has no segments."""
        return len(self.segments) == 0

    def translate(self, dx: float, dy: float) -> "Path":
        """Return a copy of this path moved by (dx, dy)."""
        return Path(tuple(seg.translate(dx, dy) for seg in self.segments))

    def bounds(self) -> tuple[float, float, float, float]:
        """Control-point bounding box as (min_x, min_y, max_x, max_y).

        Contains the curve, since Bezier curves lie inside their control hull.
        """
        points = [p for seg in self.segments for p in seg.control_points()]
        if not points:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return (min(xs), min(ys), max(xs), max(ys))

    @classmethod
    def from_points(cls, points: Iterable[Point | tuple[float, float]]) -> "Path":
        """Build a closed polygon path from its vertices."""
        pts = [p if isinstance(p, Point) else Point(*p) for p in points]
        if len(pts) < 2:
            return cls(())
        return cls(tuple(Line(pts[i], pts[(i + 1) % len(pts)]) for i in range(len(pts))))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"segments": [segment_to_dict(s) for s in self.segments]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary."""
        return cls(tuple(segment_from_dict(s) for s in data["segments"]))


def translate_paths(paths: Iterable[Path], dx: float, dy: float = 0.0) -> list[Path]:
    """Translate every path, returning a new list.

    The input paths are left untouched.
    """
    return [path.translate(dx, dy) for path in paths]
