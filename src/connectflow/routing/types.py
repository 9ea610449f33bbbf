"""Geometry types shared by the anchor selector, the path synthesizers, and renderers."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

from connectflow.types import ConnectorType, Side


@dataclass(frozen=True)
class Point:
    """A 2D point in canvas coordinates (y grows downwards)."""

    x: float
    y: float


@dataclass(frozen=True)
class AnchorPoint:
    """A point on a shape's perimeter, tagged with the edge it sits on.

    ``side`` is None only for untagged points, which routing treats with its
    axis-dominance fallbacks.
    """

    x: float
    y: float
    side: Side | None = None

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class ShapeBox:
    """Bounding box of a host shape."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def of(cls, shape: object) -> ShapeBox:
        """Read a box from a host shape exposing x/y/width/height (attributes or keys)."""
        if isinstance(shape, ShapeBox):
            return shape
        if isinstance(shape, Mapping):
            values = [shape.get(key) for key in ("x", "y", "width", "height")]
        else:
            values = [getattr(shape, key, None) for key in ("x", "y", "width", "height")]
        if any(v is None for v in values):
            raise ValueError(f"shape {shape!r} has no x/y/width/height")
        try:
            x, y, width, height = (float(v) for v in values)
        except (TypeError, ValueError):
            raise ValueError(f"shape {shape!r} has a non-numeric box") from None
        if not all(math.isfinite(v) for v in (x, y, width, height)):
            raise ValueError(f"shape {shape!r} has a non-finite box")
        if width < 0 or height < 0:
            raise ValueError(f"shape {shape!r} has a negative size")
        return cls(x=x, y=y, width=width, height=height)

    def right(self) -> float:
        return self.x + self.width

    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle given by its top-left corner and size."""

    min_x: float
    min_y: float
    width: float
    height: float

    @classmethod
    def around(cls, points: list[Point]) -> BoundingBox:
        """Smallest box containing all points (a zero box at the origin if empty)."""
        if not points:
            return cls(0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height

    def padded(self, margin: float) -> BoundingBox:
        """Grow the box by margin on every side."""
        return BoundingBox(
            self.min_x - margin,
            self.min_y - margin,
            self.width + 2 * margin,
            self.height + 2 * margin,
        )

    def union(self, other: BoundingBox) -> BoundingBox:
        min_x = min(self.min_x, other.min_x)
        min_y = min(self.min_y, other.min_y)
        max_x = max(self.max_x, other.max_x)
        max_y = max(self.max_y, other.max_y)
        return BoundingBox(min_x, min_y, max_x - min_x, max_y - min_y)


@dataclass(frozen=True)
class RoutingRequest:
    """Everything one routing call needs: two boxes, a style, and optional pins."""

    connector_type: ConnectorType
    shape_a: ShapeBox
    shape_b: ShapeBox
    manual_start_side: Side | None = None
    manual_end_side: Side | None = None
