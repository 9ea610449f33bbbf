"""Scene graph: the parsed scene as a networkx MultiDiGraph.

Shapes are nodes carrying their ``ShapeBox``; connectors are keyed edges,
so two shapes may be joined more than once (e.g. with different pins).
Declaration order is preserved for both.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import networkx as nx

from connectflow.ir import ast
from connectflow.routing.types import ShapeBox
from connectflow.types import ConnectorType, Side


@dataclass
class ShapeData:
    id: str
    box: ShapeBox
    label: str | None = None


@dataclass
class ConnectorData:
    from_id: str
    to_id: str
    connector_type: ConnectorType | None
    start_side: Side | None
    end_side: Side | None


class SceneGraph:
    """Wraps a networkx MultiDiGraph and exposes helpers for routing and rendering."""

    def __init__(self, graph: nx.MultiDiGraph, connector_type: ConnectorType) -> None:
        self.graph = graph
        self.connector_type = connector_type

    @classmethod
    def from_ast(cls, scene: ast.Scene) -> SceneGraph:
        """Build a SceneGraph from a parsed Scene.

        Raises ValueError when a connector references an undeclared shape.
        """
        graph: nx.MultiDiGraph = nx.MultiDiGraph()
        for decl in scene.shapes:
            if decl.id in graph:
                continue
            box = ShapeBox(x=decl.x, y=decl.y, width=decl.width, height=decl.height)
            graph.add_node(decl.id, data=ShapeData(id=decl.id, box=box, label=decl.label))

        for index, conn in enumerate(scene.connectors):
            for endpoint in (conn.from_id, conn.to_id):
                if endpoint not in graph:
                    where = f"line {conn.line}: " if conn.line else ""
                    raise ValueError(f"{where}connector references undeclared shape '{endpoint}'")
            data = ConnectorData(
                from_id=conn.from_id,
                to_id=conn.to_id,
                connector_type=conn.connector_type,
                start_side=conn.start_side,
                end_side=conn.end_side,
            )
            graph.add_edge(conn.from_id, conn.to_id, key=index, data=data)

        return cls(graph=graph, connector_type=scene.connector_type)

    def shape(self, shape_id: str) -> ShapeData:
        if shape_id not in self.graph:
            raise KeyError(shape_id)
        return self.graph.nodes[shape_id]["data"]

    def shapes(self) -> list[ShapeData]:
        return [self.graph.nodes[n]["data"] for n in self.graph.nodes]

    def connectors(self) -> Iterator[ConnectorData]:
        edges = sorted(self.graph.edges(keys=True, data=True), key=lambda e: e[2])
        for _src, _tgt, _key, attrs in edges:
            yield attrs["data"]

    def shape_count(self) -> int:
        return self.graph.number_of_nodes()

    def connector_count(self) -> int:
        return self.graph.number_of_edges()

    def neighbours(self, shape_id: str) -> list[str]:
        """Ids of shapes connected to shape_id in either direction, sorted."""
        if shape_id not in self.graph:
            return []
        linked = set(self.graph.successors(shape_id)) | set(self.graph.predecessors(shape_id))
        linked.discard(shape_id)
        return sorted(linked)
