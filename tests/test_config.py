"""Tests for config.py — settings defaults, host records, validation."""

from __future__ import annotations

import logging

import pytest

from connectflow.config import ConnectorSettings
from connectflow.types import ConnectorType, Side


def test_defaults():
    settings = ConnectorSettings()
    assert settings.connector_type == ConnectorType.Direct
    assert settings.color == "#000000"
    assert settings.opacity == 100
    assert settings.stroke_width == 2
    assert settings.position == "center"
    assert settings.style == "solid"
    assert settings.start_arrow == "none" and settings.end_arrow == "none"
    assert settings.start_anchor_side is None and settings.end_anchor_side is None
    assert settings.draw_on_selection is False


def test_from_host_record():
    settings = ConnectorSettings.from_mapping(
        {
            "connectorType": "curve",
            "color": "#FF0000",
            "opacity": "50",
            "strokeWidth": "4",
            "style": "dashed",
            "endArrow": "triangle-arrow",
            "startAnchorSide": "top",
            "endAnchor": "Left",
            "drawOnSelection": 1,
            "somethingElse": 5,
        }
    )
    assert settings.connector_type == ConnectorType.Curve
    assert settings.color == "#FF0000"
    assert settings.opacity == 50.0
    assert settings.stroke_width == 4
    assert settings.style == "dashed"
    assert settings.end_arrow == "triangle-arrow"
    assert settings.start_anchor_side == Side.Top
    assert settings.end_anchor_side == Side.Left
    assert settings.draw_on_selection is True


def test_snake_case_keys_are_accepted():
    settings = ConnectorSettings.from_mapping({"connector_type": "orthogonal", "stroke_width": 3})
    assert settings.connector_type == ConnectorType.Orthogonal
    assert settings.stroke_width == 3


def test_unknown_type_is_direct(caplog):
    with caplog.at_level(logging.WARNING):
        settings = ConnectorSettings(connector_type="zigzag")
    assert settings.connector_type == ConnectorType.Direct
    assert "zigzag" in caplog.text


@pytest.mark.parametrize("value", [None, "", "middle"])
def test_missing_or_unknown_side_is_unpinned(value):
    assert ConnectorSettings(start_anchor_side=value).start_anchor_side is None


@pytest.mark.parametrize(
    "kwargs,message",
    [
        ({"color": "red"}, "Invalid color"),
        ({"color": "#12345"}, "Invalid color"),
        ({"opacity": 101}, "Opacity"),
        ({"opacity": -1}, "Opacity"),
        ({"stroke_width": 0}, "Stroke width"),
        ({"stroke_width": 101}, "Stroke width"),
        ({"stroke_width": True}, "Stroke width"),
        ({"position": "middle"}, "stroke position"),
        ({"style": "wavy"}, "stroke style"),
        ({"end_arrow": "banner"}, "end arrow"),
    ],
)
def test_invalid_values(kwargs, message):
    with pytest.raises(ValueError, match=message):
        ConnectorSettings(**kwargs)


def test_short_hex_color():
    assert ConnectorSettings(color="#abc").color == "#abc"


def test_unparseable_number_in_record():
    with pytest.raises(ValueError, match="Invalid stroke width"):
        ConnectorSettings.from_mapping({"strokeWidth": "thick"})


def test_merged_keeps_other_fields():
    base = ConnectorSettings(color="#00FF00", stroke_width=5)
    updated = base.merged({"connectorType": "orthogonal"})
    assert updated.connector_type == ConnectorType.Orthogonal
    assert updated.color == "#00FF00"
    assert updated.stroke_width == 5
    assert base.connector_type == ConnectorType.Direct


def test_merged_can_clear_a_pin():
    base = ConnectorSettings(start_anchor_side=Side.Bottom)
    assert base.merged({"startAnchor": ""}).start_anchor_side is None


def test_merged_rejects_invalid_values():
    with pytest.raises(ValueError):
        ConnectorSettings().merged({"opacity": 150})


@pytest.mark.parametrize(
    "value,expected",
    [(True, True), (False, False), (1, True), (0, False), ("true", True), ("false", False), ("0", False), ("On", True)],
)
def test_draw_on_selection_spellings(value, expected):
    assert ConnectorSettings.from_mapping({"drawOnSelection": value}).draw_on_selection is expected


@pytest.mark.parametrize("value", ["maybe", 2, None])
def test_draw_on_selection_rejects_other_values(value):
    with pytest.raises(ValueError, match="draw on selection"):
        ConnectorSettings.from_mapping({"drawOnSelection": value})


@pytest.mark.parametrize("value", ["3", 3, 3.0, "3.0"])
def test_whole_stroke_widths_are_accepted(value):
    assert ConnectorSettings.from_mapping({"strokeWidth": value}).stroke_width == 3


@pytest.mark.parametrize("value", [2.5, "2.5"])
def test_fractional_stroke_width_is_rejected(value):
    with pytest.raises(ValueError, match="whole number"):
        ConnectorSettings.from_mapping({"strokeWidth": value})


def test_fractional_stroke_width_rejected_directly():
    with pytest.raises(ValueError, match="whole number"):
        ConnectorSettings(stroke_width=2.5)
