"""SVG output.

``render_connector_svg`` builds the minimal document handed to the host for a
single connector: one unfilled path inside a viewBox padded around the path's
bounds. ``SvgRenderer`` draws a whole routed scene (shape outlines, labels
and connectors) for previews and the CLI.
"""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from connectflow.config import VIEWPORT_PADDING, ConnectorSettings
from connectflow.ir.graph import SceneGraph
from connectflow.routing.engine import RoutedConnector
from connectflow.routing.path import PathResult, format_number
from connectflow.routing.types import BoundingBox

SVG_NS = "http://www.w3.org/2000/svg"
SHAPE_STROKE = "#9e9e9e"


def _view_box(box: BoundingBox) -> str:
    return " ".join(format_number(v) for v in (box.min_x, box.min_y, box.width, box.height))


def _path_element(path: PathResult, settings: ConnectorSettings, extra: str = "") -> str:
    return (
        f'<path d="{path.to_svg()}" fill="none" stroke="{settings.color}" '
        f'stroke-width="{settings.stroke_width}"{extra}/>'
    )


def render_connector_svg(
    path: PathResult,
    settings: ConnectorSettings | None = None,
    padding: float = VIEWPORT_PADDING,
) -> str:
    """SVG document holding just this connector's path."""
    settings = settings or ConnectorSettings()
    viewport = path.viewport(padding)
    return (
        f'<svg viewBox="{_view_box(viewport)}" xmlns="{SVG_NS}">\n'
        f"  {_path_element(path, settings)}\n"
        "</svg>\n"
    )


class SvgRenderer:
    """Renders a routed scene to a standalone SVG document."""

    def __init__(self, settings: ConnectorSettings | None = None, padding: float = VIEWPORT_PADDING) -> None:
        self.settings = settings or ConnectorSettings()
        self.padding = padding

    def render(self, graph: SceneGraph, connectors: list[RoutedConnector]) -> str:
        bounds = self._scene_bounds(graph, connectors)
        lines = [f'<svg viewBox="{_view_box(bounds.padded(self.padding))}" xmlns="{SVG_NS}">']

        for shape in graph.shapes():
            box = shape.box
            lines.append(
                f'  <rect x="{format_number(box.x)}" y="{format_number(box.y)}" '
                f'width="{format_number(box.width)}" height="{format_number(box.height)}" '
                f'fill="none" stroke="{SHAPE_STROKE}"/>'
            )
            if shape.label:
                cx = box.x + box.width / 2
                cy = box.y + box.height / 2
                lines.append(
                    f'  <text x="{format_number(cx)}" y="{format_number(cy)}" '
                    f'text-anchor="middle" dominant-baseline="middle">{escape(shape.label)}</text>'
                )

        opacity = format_number(self.settings.opacity / 100)
        for conn in connectors:
            extra = f' stroke-opacity="{opacity}"'
            if conn.from_id is not None and conn.to_id is not None:
                extra += f" data-from={quoteattr(conn.from_id)} data-to={quoteattr(conn.to_id)}"
            lines.append(f"  {_path_element(conn.path, self.settings, extra)}")

        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _scene_bounds(graph: SceneGraph, connectors: list[RoutedConnector]) -> BoundingBox:
        boxes = [BoundingBox(s.box.x, s.box.y, s.box.width, s.box.height) for s in graph.shapes()]
        boxes.extend(conn.path.bounding_box for conn in connectors)
        if not boxes:
            return BoundingBox(0.0, 0.0, 0.0, 0.0)
        bounds = boxes[0]
        for box in boxes[1:]:
            bounds = bounds.union(box)
        return bounds
