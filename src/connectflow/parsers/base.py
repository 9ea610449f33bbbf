"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from connectflow.ir.ast import Scene


class Parser(Protocol):
    """Protocol that all scene parsers must implement."""

    def parse(self, src: str) -> Scene:
        """Parse source text into a Scene AST."""
        ...
