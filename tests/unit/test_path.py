"""Tests for routing.path — commands, SVG path data, and exact bounds."""

from __future__ import annotations

import pytest

from connectflow.routing.path import CubicCurveTo, LineTo, MoveTo, PathResult, format_number, path_bounds
from connectflow.routing.types import BoundingBox, Point


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (150, "150"),
            (150.0, "150"),
            (12.5, "12.5"),
            (-2.5, "-2.5"),
            (1 / 3, "0.333333"),
            (-0.0, "0"),
            (-1e-9, "0"),
            (1e6, "1000000"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestSvgPathData:
    def test_line(self):
        path = PathResult.from_commands([MoveTo(Point(100, 25)), LineTo(Point(200, 25))])
        assert path.to_svg() == "M 100 25 L 200 25"

    def test_cubic(self):
        path = PathResult.from_commands(
            [MoveTo(Point(0, 0)), CubicCurveTo(Point(10, 0), Point(20, 10), Point(30, 10))]
        )
        assert path.to_svg() == "M 0 0 C 10 0, 20 10, 30 10"

    def test_start_and_end(self):
        path = PathResult.from_commands(
            [MoveTo(Point(1, 2)), LineTo(Point(3, 4)), CubicCurveTo(Point(5, 6), Point(7, 8), Point(9, 10))]
        )
        assert path.start == Point(1, 2)
        assert path.end == Point(9, 10)


class TestBounds:
    def test_polyline(self):
        box = path_bounds([MoveTo(Point(0, 0)), LineTo(Point(10, 5)), LineTo(Point(-5, 20))])
        assert box == BoundingBox(-5, 0, 15, 20)

    def test_cubic_extremum_included_control_points_excluded(self):
        # Controls sit at y=-30 but the curve only reaches y=-22.5 (at t=0.5).
        commands = [MoveTo(Point(0, 0)), CubicCurveTo(Point(0, -30), Point(100, -30), Point(100, 0))]
        box = path_bounds(commands)
        assert box.min_x == 0
        assert box.width == 100
        assert box.min_y == pytest.approx(-22.5)
        assert box.height == pytest.approx(22.5)

    def test_straight_cubic_has_line_bounds(self):
        commands = [MoveTo(Point(0, 0)), CubicCurveTo(Point(10, 0), Point(20, 0), Point(30, 0))]
        assert path_bounds(commands) == BoundingBox(0, 0, 30, 0)

    def test_viewport_pads_every_side(self):
        path = PathResult.from_commands([MoveTo(Point(100, 25)), LineTo(Point(200, 25))])
        assert path.bounding_box == BoundingBox(100, 25, 100, 0)
        assert path.viewport(50) == BoundingBox(50, -25, 200, 100)

    def test_coincident_points_still_get_an_area(self):
        path = PathResult.from_commands([MoveTo(Point(7, 7)), LineTo(Point(7, 7))])
        assert path.bounding_box == BoundingBox(7, 7, 0, 0)
        viewport = path.viewport(50)
        assert viewport.width == 100
        assert viewport.height == 100


class TestBoundingBox:
    def test_union(self):
        a = BoundingBox(0, 0, 10, 10)
        b = BoundingBox(5, -5, 20, 5)
        assert a.union(b) == BoundingBox(0, -5, 25, 15)

    def test_around_empty(self):
        assert BoundingBox.around([]) == BoundingBox(0, 0, 0, 0)
