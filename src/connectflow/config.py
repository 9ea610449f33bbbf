"""Centralized configuration for connectflow."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from connectflow.types import ConnectorType, Side

logger = logging.getLogger(__name__)

# Margin added on each side of a connector's bounds to form its viewport.
VIEWPORT_PADDING: float = 50

MIN_CURVE_FACTOR: float = 30
MAX_CURVE_FACTOR: float = 120
CURVE_DISTANCE_DIVISOR: float = 3

STROKE_POSITIONS = ("center", "inner", "outer")
STROKE_STYLES = ("solid", "dashed", "dotted", "mixed")
STROKE_CAPS = (
    "none",
    "round",
    "square",
    "line-arrow",
    "triangle-arrow",
    "square-marker",
    "circle-marker",
    "diamond-marker",
)

_HEX_COLOR_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

# Host message keys -> field names. Both the original "startAnchor" and
# "startAnchorSide" spellings are accepted.
_HOST_KEYS: dict[str, str] = {
    "connectorType": "connector_type",
    "color": "color",
    "opacity": "opacity",
    "strokeWidth": "stroke_width",
    "position": "position",
    "style": "style",
    "startArrow": "start_arrow",
    "endArrow": "end_arrow",
    "startAnchor": "start_anchor_side",
    "startAnchorSide": "start_anchor_side",
    "endAnchor": "end_anchor_side",
    "endAnchorSide": "end_anchor_side",
    "drawOnSelection": "draw_on_selection",
}


@dataclass(frozen=True)
class ConnectorSettings:
    """Flat settings record produced by the settings panel.

    Connector type and anchor pins are normalised (unknown type -> direct,
    unknown side -> no pin); the remaining fields are validated and raise
    ValueError when out of range.
    """

    connector_type: ConnectorType = ConnectorType.Direct
    color: str = "#000000"
    opacity: float = 100
    stroke_width: int = 2
    position: str = "center"
    style: str = "solid"
    start_arrow: str = "none"
    end_arrow: str = "none"
    start_anchor_side: Side | None = None
    end_anchor_side: Side | None = None
    draw_on_selection: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "connector_type", _normalise_type(self.connector_type))
        object.__setattr__(self, "start_anchor_side", _normalise_side(self.start_anchor_side))
        object.__setattr__(self, "end_anchor_side", _normalise_side(self.end_anchor_side))

        if not isinstance(self.color, str) or not _HEX_COLOR_RE.fullmatch(self.color):
            raise ValueError(f"Invalid color '{self.color}'; expected a hex string like #1A2B3C")
        if not 0 <= self.opacity <= 100:
            raise ValueError(f"Opacity {self.opacity} out of range [0, 100]")
        if isinstance(self.stroke_width, bool) or not isinstance(self.stroke_width, int):
            raise ValueError(f"Stroke width {self.stroke_width!r} must be a whole number")
        if not 1 <= self.stroke_width <= 100:
            raise ValueError(f"Stroke width {self.stroke_width} out of range [1, 100]")
        if self.position not in STROKE_POSITIONS:
            raise ValueError(f"Unknown stroke position '{self.position}'; use {', '.join(STROKE_POSITIONS)}")
        if self.style not in STROKE_STYLES:
            raise ValueError(f"Unknown stroke style '{self.style}'; use {', '.join(STROKE_STYLES)}")
        for name in ("start_arrow", "end_arrow"):
            cap = getattr(self, name)
            if cap not in STROKE_CAPS:
                raise ValueError(f"Unknown {name.replace('_', ' ')} '{cap}'")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ConnectorSettings:
        """Build settings from a host record (camelCase or snake_case keys)."""
        return cls(**_field_values(data))

    def merged(self, changes: Mapping[str, object]) -> ConnectorSettings:
        """A copy with the given host-record changes applied."""
        return replace(self, **_field_values(changes))


def _field_values(data: Mapping[str, object]) -> dict[str, object]:
    names = {f.name for f in fields(ConnectorSettings)}
    values: dict[str, object] = {}
    for key, value in data.items():
        name = _HOST_KEYS.get(key, key)
        if name in names:
            values[name] = value
    if "stroke_width" in values:
        values["stroke_width"] = _as_int(values["stroke_width"], "stroke width")
    if "opacity" in values:
        values["opacity"] = _as_float(values["opacity"], "opacity")
    if "draw_on_selection" in values:
        values["draw_on_selection"] = _as_bool(values["draw_on_selection"], "draw on selection")
    return values


def _as_int(value: object, what: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid {what} {value!r}")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {what} {value!r}") from None
    if not number.is_integer():
        raise ValueError(f"Invalid {what} {value!r}; expected a whole number")
    return int(number)


def _as_float(value: object, what: str) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {what} {value!r}") from None


_TRUE_WORDS = {"true", "1", "yes", "on"}
_FALSE_WORDS = {"false", "0", "no", "off", ""}


def _as_bool(value: object, what: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError(f"Invalid {what} {value!r}")


def _normalise_type(value: object) -> ConnectorType:
    if not ConnectorType.is_known(value):
        logger.warning("Unknown connector type %r; using direct", value)
    return ConnectorType.parse(value)


def _normalise_side(value: object) -> Side | None:
    if value is None or value == "":
        return None
    side = Side.parse(value)
    if side is None:
        logger.warning("Unknown anchor side %r; picking the nearest anchor instead", value)
    return side
