"""Shared type definitions for connectflow.

Enums used across the settings layer, the routing engine, and the scene parser.
Both enumerations are closed: ``parse`` never raises and maps unknown input to
a safe default instead.
"""

from __future__ import annotations

from enum import Enum


class Side(Enum):
    Top = "top"
    Right = "right"
    Bottom = "bottom"
    Left = "left"

    @classmethod
    def parse(cls, value: object) -> Side | None:
        """Return the matching side, or None for anything unrecognised."""
        if isinstance(value, Side):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None

    @property
    def is_horizontal(self) -> bool:
        """True for left/right anchors, which exit along the x axis."""
        return self in (Side.Left, Side.Right)

    @property
    def is_vertical(self) -> bool:
        return self in (Side.Top, Side.Bottom)

    @property
    def normal(self) -> tuple[int, int]:
        """Outward unit vector of this edge (y grows downwards)."""
        return _NORMALS[self]


_NORMALS: dict[Side, tuple[int, int]] = {
    Side.Top: (0, -1),
    Side.Right: (1, 0),
    Side.Bottom: (0, 1),
    Side.Left: (-1, 0),
}

# Enumeration order used for anchors and tie-breaking.
SIDE_ORDER: tuple[Side, ...] = (Side.Top, Side.Right, Side.Bottom, Side.Left)


class ConnectorType(Enum):
    Direct = "direct"
    Orthogonal = "orthogonal"
    Curve = "curve"

    @classmethod
    def default(cls) -> ConnectorType:
        return cls.Direct

    @classmethod
    def parse(cls, value: object) -> ConnectorType:
        """Return the matching connector type; unknown values fall back to Direct."""
        if isinstance(value, ConnectorType):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.default()
        return cls.default()

    @classmethod
    def is_known(cls, value: object) -> bool:
        if isinstance(value, ConnectorType):
            return True
        return isinstance(value, str) and value.strip().lower() in {t.value for t in cls}

    @property
    def label(self) -> str:
        """Human readable name for settings menus."""
        return self.name

    @classmethod
    def available(cls) -> list[tuple[str, str]]:
        """(value, label) pairs for every connector type, in menu order."""
        return [(t.value, t.label) for t in cls]
