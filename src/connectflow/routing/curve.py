"""Curved connector synthesis.

Two strategies share the ``CurveStrategy`` protocol:

* ``SideAwareCurve`` (default) leaves and enters each shape perpendicular to
  its edge. Control points sit ``curve_factor`` away from each anchor along the
  edge's outward normal. Same-axis pairs are split into two cubics that meet
  at the midpoint with a tangent along the other axis; mixed pairs use one.
* ``DominantAxisCurve`` ignores the sides and offsets both control points
  along whichever axis the connector mostly travels.

The curve factor is ``distance / 3`` clamped to [30, 120], so coincident
anchors still get a well-formed path.
"""

from __future__ import annotations

from typing import Protocol

from connectflow.config import CURVE_DISTANCE_DIVISOR, MAX_CURVE_FACTOR, MIN_CURVE_FACTOR
from connectflow.routing.anchors import distance
from connectflow.routing.path import CubicCurveTo, MoveTo, PathCommand
from connectflow.routing.types import AnchorPoint, Point
from connectflow.types import Side


class CurveStrategy(Protocol):
    """Protocol that all curve strategies must implement."""

    def __call__(self, start: AnchorPoint, end: AnchorPoint) -> list[PathCommand]:
        """Build the commands of a curved connector from start to end."""
        ...


def curve_factor(start: AnchorPoint, end: AnchorPoint) -> float:
    return max(MIN_CURVE_FACTOR, min(distance(start, end) / CURVE_DISTANCE_DIVISOR, MAX_CURVE_FACTOR))


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def _offset(anchor: AnchorPoint, side: Side, amount: float) -> Point:
    """Point amount away from anchor along the outward normal of side."""
    nx_, ny = side.normal
    return Point(anchor.x + nx_ * amount, anchor.y + ny * amount)


class DominantAxisCurve:
    """Single cubic with both control points offset along the dominant axis of travel."""

    def __call__(self, start: AnchorPoint, end: AnchorPoint) -> list[PathCommand]:
        x1, y1 = start.x, start.y
        x2, y2 = end.x, end.y
        dx = x2 - x1
        dy = y2 - y1
        cf = curve_factor(start, end)

        if abs(dx) > abs(dy):
            step = cf if dx >= 0 else -cf
            c1 = Point(x1 + step, y1)
            c2 = Point(x2 - step, y2)
        else:
            step = cf if dy >= 0 else -cf
            c1 = Point(x1, y1 + step)
            c2 = Point(x2, y2 - step)
        return [MoveTo(Point(x1, y1)), CubicCurveTo(c1, c2, Point(x2, y2))]


class SideAwareCurve:
    """Curve whose ends are tangent to the normals of their anchor edges."""

    def __init__(self, fallback: CurveStrategy | None = None) -> None:
        self.fallback = fallback or DominantAxisCurve()

    def __call__(self, start: AnchorPoint, end: AnchorPoint) -> list[PathCommand]:
        if start.side is None or end.side is None:
            return self.fallback(start, end)

        cf = curve_factor(start, end)
        origin = start.point
        target = end.point
        c_start = _offset(start, start.side, cf)
        c_end = _offset(end, end.side, cf)

        if start.side.is_horizontal == end.side.is_horizontal:
            mid = Point((start.x + end.x) / 2, (start.y + end.y) / 2)
            if start.side.is_horizontal:
                dy = end.y - start.y
                h = _sign(dy) * min(cf, abs(dy) / 2)
                into_mid = Point(mid.x, mid.y - h)
                out_of_mid = Point(mid.x, mid.y + h)
            else:
                dx = end.x - start.x
                h = _sign(dx) * min(cf, abs(dx) / 2)
                into_mid = Point(mid.x - h, mid.y)
                out_of_mid = Point(mid.x + h, mid.y)
            return [
                MoveTo(origin),
                CubicCurveTo(c_start, into_mid, mid),
                CubicCurveTo(out_of_mid, c_end, target),
            ]

        return [MoveTo(origin), CubicCurveTo(c_start, c_end, target)]


DEFAULT_CURVE: CurveStrategy = SideAwareCurve()


def curve(start: AnchorPoint, end: AnchorPoint, strategy: CurveStrategy | None = None) -> list[PathCommand]:
    return (strategy or DEFAULT_CURVE)(start, end)
