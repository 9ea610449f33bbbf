"""AST data structures for the scene format.

These types represent the parsed form of a scene file: shape declarations
with their boxes, and connector declarations between shape ids.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from connectflow.types import ConnectorType, Side


@dataclass
class ShapeDecl:
    id: str
    x: float
    y: float
    width: float
    height: float
    label: str | None = None


@dataclass
class ConnectorDecl:
    from_id: str
    to_id: str
    connector_type: ConnectorType | None = None  # None -> scene default
    start_side: Side | None = None
    end_side: Side | None = None
    line: int = 0


@dataclass
class Scene:
    connector_type: ConnectorType = field(default_factory=ConnectorType.default)
    shapes: list[ShapeDecl] = field(default_factory=list)
    connectors: list[ConnectorDecl] = field(default_factory=list)

    def shape_ids(self) -> list[str]:
        return [s.id for s in self.shapes]
