"""Renderers for routed connectors."""

from connectflow.renderers.base import Renderer
from connectflow.renderers.svg import SvgRenderer, render_connector_svg

__all__ = ["Renderer", "SvgRenderer", "render_connector_svg"]
