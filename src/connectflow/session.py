"""Caller-owned settings state for interactive use.

The routing engine is stateless; a session remembers the last applied
settings so a selection change can regenerate with them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from connectflow.config import ConnectorSettings
from connectflow.host import Connector, Host, generate_connector
from connectflow.routing.curve import CurveStrategy

logger = logging.getLogger(__name__)


class ConnectorSession:
    def __init__(
        self,
        host: Host,
        settings: ConnectorSettings | None = None,
        curve_strategy: CurveStrategy | None = None,
    ) -> None:
        self.host = host
        self._settings = settings or ConnectorSettings()
        self.curve_strategy = curve_strategy

    @property
    def settings(self) -> ConnectorSettings:
        return self._settings

    def update_settings(self, changes: Mapping[str, object]) -> ConnectorSettings:
        """Apply a settings-changed record; invalid values leave the current settings untouched."""
        self._settings = self._settings.merged(changes)
        logger.debug("Settings updated, draw on selection: %s", self._settings.draw_on_selection)
        return self._settings

    def generate(self, selection: Sequence[object]) -> Connector | None:
        """Explicit 'generate connector' action."""
        return generate_connector(selection, self._settings, self.host, self.curve_strategy)

    def on_selection_change(self, selection: Sequence[object]) -> Connector | None:
        """Auto-generate when enabled and exactly two shapes are selected; otherwise do nothing."""
        if not self._settings.draw_on_selection or len(selection) != 2:
            return None
        logger.debug("Auto-generating connector on selection change")
        return self.generate(selection)
