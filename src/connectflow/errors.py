"""Errors raised at the boundaries of the routing engine.

Routing itself is total; these only come from validating the selection
before routing and from the host after it.
"""

from __future__ import annotations


class ConnectFlowError(Exception):
    """Base class for connectflow errors."""


class InvalidSelectionCount(ConnectFlowError, ValueError):
    """A connector needs exactly two selected shapes."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Expected exactly 2 selected shapes, got {count}")
        self.count = count


class HostCreationFailure(ConnectFlowError):
    """The host could not turn a generated path into a drawable shape."""
