"""Boundary between the routing engine and the host application.

The host owns shapes and selection. It hands over shape boxes and gets back
an SVG document, a viewport and a stroke record to materialise. Failures on
either side of the engine are reported through ``Host.notify`` and never
propagate to the caller:

  selection size != 2   -> InvalidSelectionCount, user notified, no path
  shape without a box   -> ValueError, user notified, no path
  host cannot create it -> HostCreationFailure, user notified, no retry
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any, Protocol

from connectflow.config import VIEWPORT_PADDING, ConnectorSettings
from connectflow.errors import HostCreationFailure, InvalidSelectionCount
from connectflow.renderers.svg import render_connector_svg
from connectflow.routing.curve import CurveStrategy
from connectflow.routing.engine import route
from connectflow.routing.path import PathResult
from connectflow.routing.types import AnchorPoint, BoundingBox, RoutingRequest, ShapeBox

logger = logging.getLogger(__name__)

SELECT_TWO_MESSAGE = "Please select exactly two objects to create a flow."
CREATED_MESSAGE = "Connector created successfully!"
CREATE_FAILED_MESSAGE = "Error creating connector. Please try again."


class Host(Protocol):
    """The shape-creation collaborator."""

    def create_connector(self, svg: str, viewport: BoundingBox, stroke: dict[str, Any]) -> Any:
        """Materialise the path in svg at viewport with the given stroke; return the new shape."""
        ...

    def notify(self, message: str) -> None:
        """Show a short message to the user."""
        ...


@dataclass(frozen=True)
class Connector:
    """Everything generated for one connector, plus the host shape once created."""

    start: AnchorPoint
    end: AnchorPoint
    path: PathResult
    svg: str
    viewport: BoundingBox
    stroke: dict[str, Any]
    shape: Any = None


def build_stroke(settings: ConnectorSettings) -> dict[str, Any]:
    """Host stroke record; caps are only present when not 'none'."""
    stroke: dict[str, Any] = {
        "strokeColor": settings.color,
        "strokeOpacity": settings.opacity / 100,
        "strokeWidth": settings.stroke_width,
        "strokeStyle": settings.style,
        "strokeAlignment": settings.position,
    }
    if settings.start_arrow != "none":
        stroke["strokeCapStart"] = settings.start_arrow
    if settings.end_arrow != "none":
        stroke["strokeCapEnd"] = settings.end_arrow
    return stroke


def build_connector(
    selection: Sequence[object],
    settings: ConnectorSettings,
    curve_strategy: CurveStrategy | None = None,
    padding: float = VIEWPORT_PADDING,
) -> Connector:
    """Route a connector from the first selected shape to the second.

    Raises InvalidSelectionCount unless exactly two shapes are selected.
    """
    if len(selection) != 2:
        raise InvalidSelectionCount(len(selection))

    request = RoutingRequest(
        connector_type=settings.connector_type,
        shape_a=ShapeBox.of(selection[0]),
        shape_b=ShapeBox.of(selection[1]),
        manual_start_side=settings.start_anchor_side,
        manual_end_side=settings.end_anchor_side,
    )
    routed = route(request, curve_strategy)
    return Connector(
        start=routed.start,
        end=routed.end,
        path=routed.path,
        svg=render_connector_svg(routed.path, settings, padding),
        viewport=routed.path.viewport(padding),
        stroke=build_stroke(settings),
    )


def generate_connector(
    selection: Sequence[object],
    settings: ConnectorSettings,
    host: Host,
    curve_strategy: CurveStrategy | None = None,
) -> Connector | None:
    """Build a connector and ask the host to create it.

    Returns the connector with the host's shape attached, or None when the
    attempt was reported to the user instead.
    """
    try:
        connector = build_connector(selection, settings, curve_strategy)
    except InvalidSelectionCount as e:
        logger.info("Not generating connector: %s", e)
        host.notify(SELECT_TWO_MESSAGE)
        return None
    except ValueError as e:
        logger.warning("Cannot route connector for selection: %s", e)
        host.notify(CREATE_FAILED_MESSAGE)
        return None

    logger.debug("Creating %s connector: %s", settings.connector_type.value, connector.path.to_svg())
    try:
        shape = _create(host, connector)
    except HostCreationFailure:
        logger.exception("Error creating connector")
        host.notify(CREATE_FAILED_MESSAGE)
        return None

    host.notify(CREATED_MESSAGE)
    return replace(connector, shape=shape)


def _create(host: Host, connector: Connector) -> Any:
    try:
        shape = host.create_connector(connector.svg, connector.viewport, connector.stroke)
    except Exception as e:
        raise HostCreationFailure(f"host failed to create connector: {e}") from e
    if shape is None:
        raise HostCreationFailure("host returned no shape for connector")
    return shape
