"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from connectflow.ir.graph import SceneGraph
from connectflow.routing.engine import RoutedConnector


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, graph: SceneGraph, connectors: list[RoutedConnector]) -> str:
        """Render a routed scene to an output string."""
        ...
