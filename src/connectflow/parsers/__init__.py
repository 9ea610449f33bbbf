"""Parser registry — pick a parser for the input format and dispatch to it."""

from __future__ import annotations

from connectflow.ir.ast import Scene
from connectflow.parsers.base import Parser
from connectflow.parsers.scene import SceneParser

_PARSERS: dict[str, type[Parser]] = {
    "scene": SceneParser,
}


def parse(src: str, format: str = "scene") -> Scene:
    """Parse src with the parser registered for format."""
    parser_cls = _PARSERS.get(format)
    if parser_cls is None:
        raise ValueError(f"Unsupported input format: {format}")
    return parser_cls().parse(src)


__all__ = ["Parser", "SceneParser", "parse"]
