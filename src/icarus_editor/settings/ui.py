"""
Window geometry persistence.
"""

from typing import Any

from PySide6.QtCore import QByteArray
from PySide6.QtWidgets import QMainWindow

from .base import SettingsSection


class UISettings(SettingsSection):
    """Remembers the main window's size, position and toolbar state."""

    prefix = "ui"

    def save_window_geometry(self, window: QMainWindow) -> None:
        self.settings.setValue(self.key("window_geometry"), window.saveGeometry())
        self.put("window_state", window.saveState())

    def restore_window_geometry(self, window: QMainWindow) -> bool:
        """Apply the stored geometry. Returns False if nothing was stored."""
        geometry: Any = self.get_raw("window_geometry")
        if not isinstance(geometry, QByteArray) or geometry.isEmpty():
            return False
        window.restoreGeometry(geometry)
        state: Any = self.get_raw("window_state")
        if isinstance(state, QByteArray):
            window.restoreState(state)
        return True
