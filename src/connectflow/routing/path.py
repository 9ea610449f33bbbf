"""Path commands and the routing result.

A path is a sequence of MoveTo / LineTo / CubicCurveTo commands in absolute
canvas coordinates. ``PathResult`` pairs it with the exact extent of the drawn
geometry, which callers pad into a viewport.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from connectflow.routing.types import BoundingBox, Point


@dataclass(frozen=True)
class MoveTo:
    point: Point

    def to_svg(self) -> str:
        return f"M {format_number(self.point.x)} {format_number(self.point.y)}"


@dataclass(frozen=True)
class LineTo:
    point: Point

    def to_svg(self) -> str:
        return f"L {format_number(self.point.x)} {format_number(self.point.y)}"


@dataclass(frozen=True)
class CubicCurveTo:
    control1: Point
    control2: Point
    end: Point

    def to_svg(self) -> str:
        c1, c2, end = self.control1, self.control2, self.end
        return (
            f"C {format_number(c1.x)} {format_number(c1.y)}, "
            f"{format_number(c2.x)} {format_number(c2.y)}, "
            f"{format_number(end.x)} {format_number(end.y)}"
        )


PathCommand = MoveTo | LineTo | CubicCurveTo


@dataclass(frozen=True)
class PathResult:
    """A synthesized connector path and its tight bounding box."""

    commands: tuple[PathCommand, ...]
    bounding_box: BoundingBox

    @classmethod
    def from_commands(cls, commands: list[PathCommand]) -> PathResult:
        return cls(commands=tuple(commands), bounding_box=path_bounds(commands))

    @property
    def start(self) -> Point:
        return end_point(self.commands[0])

    @property
    def end(self) -> Point:
        return end_point(self.commands[-1])

    def to_svg(self) -> str:
        """SVG path data, e.g. ``M 100 25 L 200 25``."""
        return " ".join(cmd.to_svg() for cmd in self.commands)

    def viewport(self, padding: float) -> BoundingBox:
        """The bounding box grown by padding, so coincident endpoints never give a zero-area view."""
        return self.bounding_box.padded(padding)


def end_point(cmd: PathCommand) -> Point:
    if isinstance(cmd, CubicCurveTo):
        return cmd.end
    return cmd.point


# ─── Bounds ──────────────────────────────────────────────────────────────────


def path_bounds(commands: list[PathCommand] | tuple[PathCommand, ...]) -> BoundingBox:
    """Exact extent of the drawn path (cubic extrema included, control points excluded)."""
    points: list[Point] = []
    current: Point | None = None
    for cmd in commands:
        if isinstance(cmd, CubicCurveTo) and current is not None:
            points.extend(_cubic_extrema(current, cmd))
        current = end_point(cmd)
        points.append(current)
    return BoundingBox.around(points)


def _cubic_extrema(p0: Point, cmd: CubicCurveTo) -> list[Point]:
    p1, p2, p3 = cmd.control1, cmd.control2, cmd.end
    ts: list[float] = []
    for a0, a1, a2, a3 in ((p0.x, p1.x, p2.x, p3.x), (p0.y, p1.y, p2.y, p3.y)):
        ts.extend(_derivative_roots(a0, a1, a2, a3))
    return [_cubic_at(p0, p1, p2, p3, t) for t in ts]


def _derivative_roots(a0: float, a1: float, a2: float, a3: float) -> list[float]:
    """Parameters in (0, 1) where one coordinate of the cubic has zero derivative."""
    # B'(t) / 3 = a t^2 + b t + c
    a = -a0 + 3 * a1 - 3 * a2 + a3
    b = 2 * (a0 - 2 * a1 + a2)
    c = a1 - a0
    roots: list[float] = []
    if abs(a) < 1e-12:
        if abs(b) > 1e-12:
            roots.append(-c / b)
    else:
        disc = b * b - 4 * a * c
        if disc >= 0:
            sq = math.sqrt(disc)
            roots.append((-b + sq) / (2 * a))
            roots.append((-b - sq) / (2 * a))
    return [t for t in roots if 0.0 < t < 1.0]


def _cubic_at(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    mt = 1 - t
    w0 = mt * mt * mt
    w1 = 3 * mt * mt * t
    w2 = 3 * mt * t * t
    w3 = t * t * t
    return Point(
        w0 * p0.x + w1 * p1.x + w2 * p2.x + w3 * p3.x,
        w0 * p0.y + w1 * p1.y + w2 * p2.y + w3 * p3.y,
    )


# ─── Formatting ──────────────────────────────────────────────────────────────


def format_number(value: float) -> str:
    """Shortest stable text for a coordinate: ``150``, ``12.5``, ``0.333333``."""
    if float(value).is_integer():
        text = str(int(value))
    else:
        text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
