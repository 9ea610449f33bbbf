"""Tests for the scene parser."""

from __future__ import annotations

import logging

import pytest

from connectflow.parsers import parse
from connectflow.types import ConnectorType, Side


def test_parse_shapes_and_connector():
    src = "scene\nA[0, 0, 100, 50]\nB[200, 0, 100, 50]\nA --> B\n"
    scene = parse(src)
    assert scene.connector_type == ConnectorType.Direct
    assert scene.shape_ids() == ["A", "B"]
    assert (scene.shapes[1].x, scene.shapes[1].y, scene.shapes[1].width, scene.shapes[1].height) == (200, 0, 100, 50)
    assert len(scene.connectors) == 1
    conn = scene.connectors[0]
    assert (conn.from_id, conn.to_id) == ("A", "B")
    assert conn.connector_type is None
    assert conn.start_side is None and conn.end_side is None


def test_header_sets_default_type():
    scene = parse("scene curve\nA[0,0,1,1]\n")
    assert scene.connector_type == ConnectorType.Curve


def test_header_is_optional():
    scene = parse("A[0,0,1,1]\nB[5,5,1,1]\nA --> B")
    assert scene.connector_type == ConnectorType.Direct
    assert len(scene.connectors) == 1


def test_shape_label():
    scene = parse('A[0, 0, 10, 10] "Start \\"here\\""\n')
    assert scene.shapes[0].label == 'Start "here"'


def test_pinned_sides_and_type_label():
    scene = parse("A[0,0,10,10]\nB[50,0,10,10]\nA.bottom -->|orthogonal| B.Top\n")
    conn = scene.connectors[0]
    assert conn.start_side == Side.Bottom
    assert conn.end_side == Side.Top
    assert conn.connector_type == ConnectorType.Orthogonal


def test_pinned_sides_without_spaces():
    scene = parse("A[0,0,10,10]\nB[50,0,10,10]\nA.right-->|curve|B.left\nB-->A.top\n")
    first, second = scene.connectors
    assert (first.start_side, first.end_side) == (Side.Right, Side.Left)
    assert first.connector_type == ConnectorType.Curve
    assert (second.from_id, second.to_id, second.end_side) == ("B", "A", Side.Top)


def test_shape_named_scene_starting_a_connector():
    scene = parse("scene[0,0,1,1]\nB[2,0,1,1]\nscene-->B\n")
    assert [(c.from_id, c.to_id) for c in scene.connectors] == [("scene", "B")]


def test_chain():
    scene = parse("A[0,0,1,1]\nB[2,0,1,1]\nC[4,0,1,1]\nA --> B -->|curve| C\n")
    assert [(c.from_id, c.to_id) for c in scene.connectors] == [("A", "B"), ("B", "C")]
    assert scene.connectors[0].connector_type is None
    assert scene.connectors[1].connector_type == ConnectorType.Curve


def test_chain_side_belongs_to_both_segments():
    scene = parse("A[0,0,1,1]\nB[2,0,1,1]\nC[4,0,1,1]\nA --> B.left --> C\n")
    assert scene.connectors[0].end_side == Side.Left
    assert scene.connectors[1].start_side == Side.Left


def test_inline_boxes_in_connector():
    scene = parse("A[0, 0, 10, 10] --> B[40, 0, 10, 10]\n")
    assert scene.shape_ids() == ["A", "B"]
    assert len(scene.connectors) == 1


def test_first_definition_wins():
    scene = parse("A[0,0,10,10]\nA[99,99,1,1]\n")
    assert len(scene.shapes) == 1
    assert scene.shapes[0].x == 0


def test_comments_and_blank_lines():
    src = "%% header comment\n\nscene orthogonal %% default\n\n  A[0,0,1,1]  %% first\n\nB[3,3,1,1]\nA --> B\n"
    scene = parse(src)
    assert scene.connector_type == ConnectorType.Orthogonal
    assert scene.shape_ids() == ["A", "B"]


def test_numbers():
    scene = parse("A[-10.5, .5, 1e2, 0]\n")
    shape = scene.shapes[0]
    assert (shape.x, shape.y, shape.width, shape.height) == (-10.5, 0.5, 100.0, 0.0)


def test_shape_named_scene():
    scene = parse("scene[0, 0, 1, 1]\n")
    assert scene.shape_ids() == ["scene"]


def test_connector_line_numbers():
    scene = parse("A[0,0,1,1]\nB[2,0,1,1]\n\nA --> B\n")
    assert scene.connectors[0].line == 4


class TestNormalisation:
    def test_unknown_type_is_direct(self, caplog):
        with caplog.at_level(logging.WARNING):
            scene = parse("A[0,0,1,1]\nB[2,0,1,1]\nA -->|zigzag| B\n")
        assert scene.connectors[0].connector_type == ConnectorType.Direct
        assert "zigzag" in caplog.text

    def test_unknown_header_type_is_direct(self):
        assert parse("scene spline\n").connector_type == ConnectorType.Direct

    def test_unknown_side_is_unpinned(self, caplog):
        with caplog.at_level(logging.WARNING):
            scene = parse("A[0,0,1,1]\nB[2,0,1,1]\nA.middle --> B\n")
        assert scene.connectors[0].start_side is None
        assert "middle" in caplog.text


class TestErrors:
    def test_shape_without_box(self):
        with pytest.raises(ValueError, match="line 1"):
            parse("A\n")

    def test_short_box(self):
        with pytest.raises(ValueError, match="expected ','"):
            parse("A[0, 0, 10]\n")

    def test_negative_size(self):
        with pytest.raises(ValueError, match="negative size"):
            parse("A[0, 0, -1, 10]\n")

    def test_garbage_reports_line(self):
        with pytest.raises(ValueError, match="line 2"):
            parse("A[0,0,1,1]\n?? what\n")

    def test_trailing_input(self):
        with pytest.raises(ValueError, match="unexpected input"):
            parse("A[0,0,1,1] B\n")

    def test_missing_target(self):
        with pytest.raises(ValueError, match="expected a shape"):
            parse("A[0,0,1,1]\nA -->\n")

    def test_unterminated_label(self):
        with pytest.raises(ValueError, match="unterminated"):
            parse('A[0,0,1,1] "oops\n')

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported input format"):
            parse("A[0,0,1,1]\n", format="dot")

    def test_number_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            parse("A[1e999, 0, 1, 1]\n")
