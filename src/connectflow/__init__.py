"""connectflow: anchor selection and path synthesis for connectors between two shapes."""

from connectflow.config import VIEWPORT_PADDING, ConnectorSettings
from connectflow.ir.graph import SceneGraph
from connectflow.parsers import parse
from connectflow.renderers.svg import SvgRenderer
from connectflow.routing import (
    AnchorPoint,
    PathResult,
    RoutedConnector,
    RoutingRequest,
    ShapeBox,
    generate_path,
    resolve_anchors,
    route,
    route_scene,
)
from connectflow.types import ConnectorType, Side

__version__ = "0.1.0"

__all__ = [
    "AnchorPoint",
    "ConnectorSettings",
    "ConnectorType",
    "PathResult",
    "RoutedConnector",
    "RoutingRequest",
    "ShapeBox",
    "Side",
    "generate_path",
    "render_dsl",
    "resolve_anchors",
    "route",
    "route_dsl",
]


def route_dsl(src: str, connector_type: str | None = None) -> list[RoutedConnector]:
    """Parse a scene and route all of its connectors.

    Args:
        src: Scene source text.
        connector_type: Override the scene's default connector type; None keeps the parsed value.

    Returns:
        One RoutedConnector per declared connector, in declaration order.

    Raises:
        ValueError: If the input cannot be parsed or references an undeclared shape.
    """
    graph = SceneGraph.from_ast(parse(src))
    return route_scene(graph, connector_type)


def render_dsl(
    src: str,
    connector_type: str | None = None,
    settings: ConnectorSettings | None = None,
    padding: float = VIEWPORT_PADDING,
) -> str:
    """Parse a scene, route it, and render it to an SVG document.

    Args:
        src: Scene source text.
        connector_type: Override the scene's default connector type; None keeps the parsed value.
        settings: Stroke settings for the connectors (defaults to ConnectorSettings()).
        padding: Margin around the drawing inside the viewBox.

    Returns:
        The SVG document as a string.

    Raises:
        ValueError: If the input cannot be parsed or references an undeclared shape.
    """
    graph = SceneGraph.from_ast(parse(src))
    connectors = route_scene(graph, connector_type)
    return SvgRenderer(settings, padding).render(graph, connectors)
