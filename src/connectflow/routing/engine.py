"""Routing engine: anchor resolution followed by path synthesis.

``generate_path`` dispatches on the connector type through a lookup table;
anything it does not recognise is drawn as a direct line. ``route`` runs one
request end to end and ``route_scene`` routes every connector of a scene.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from connectflow.routing.anchors import resolve_anchors
from connectflow.routing.curve import CurveStrategy, curve
from connectflow.routing.orthogonal import orthogonal
from connectflow.routing.path import LineTo, MoveTo, PathCommand, PathResult
from connectflow.routing.types import AnchorPoint, RoutingRequest
from connectflow.types import ConnectorType

if TYPE_CHECKING:
    from connectflow.ir.graph import SceneGraph

logger = logging.getLogger(__name__)

Synthesizer = Callable[[AnchorPoint, AnchorPoint, CurveStrategy | None], list[PathCommand]]


def direct(start: AnchorPoint, end: AnchorPoint) -> list[PathCommand]:
    return [MoveTo(start.point), LineTo(end.point)]


_SYNTHESIZERS: dict[ConnectorType, Synthesizer] = {
    ConnectorType.Direct: lambda start, end, _strategy: direct(start, end),
    ConnectorType.Orthogonal: lambda start, end, _strategy: orthogonal(start, end),
    ConnectorType.Curve: lambda start, end, strategy: curve(start, end, strategy),
}


def generate_path(
    connector_type: ConnectorType | str,
    start: AnchorPoint,
    end: AnchorPoint,
    curve_strategy: CurveStrategy | None = None,
) -> PathResult:
    """Synthesize the path for one connector between two resolved anchors."""
    kind = ConnectorType.parse(connector_type)
    synthesize = _SYNTHESIZERS.get(kind, _SYNTHESIZERS[ConnectorType.Direct])
    commands = synthesize(start, end, curve_strategy)
    return PathResult.from_commands(commands)


@dataclass(frozen=True)
class RoutedConnector:
    """A routed connector: the chosen anchors and the synthesized path."""

    start: AnchorPoint
    end: AnchorPoint
    path: PathResult
    from_id: str | None = None
    to_id: str | None = None


def route(request: RoutingRequest, curve_strategy: CurveStrategy | None = None) -> RoutedConnector:
    """Resolve anchors for request and synthesize its path."""
    start, end = resolve_anchors(request)
    path = generate_path(request.connector_type, start, end, curve_strategy)
    logger.debug("Routed %s connector: %s", ConnectorType.parse(request.connector_type).value, path.to_svg())
    return RoutedConnector(start=start, end=end, path=path)


def route_scene(
    graph: SceneGraph,
    default_type: ConnectorType | str | None = None,
    curve_strategy: CurveStrategy | None = None,
) -> list[RoutedConnector]:
    """Route every connector of a scene, in declaration order.

    A connector's own type wins; otherwise default_type, otherwise the scene's.
    """
    fallback = ConnectorType.parse(default_type) if default_type is not None else graph.connector_type
    routed: list[RoutedConnector] = []
    for conn in graph.connectors():
        request = RoutingRequest(
            connector_type=conn.connector_type or fallback,
            shape_a=graph.shape(conn.from_id).box,
            shape_b=graph.shape(conn.to_id).box,
            manual_start_side=conn.start_side,
            manual_end_side=conn.end_side,
        )
        result = route(request, curve_strategy)
        routed.append(
            RoutedConnector(
                start=result.start,
                end=result.end,
                path=result.path,
                from_id=conn.from_id,
                to_id=conn.to_id,
            )
        )
    logger.info("Routed %d connectors across %d shapes", len(routed), graph.shape_count())
    return routed
