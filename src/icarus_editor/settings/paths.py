"""
Location of the game's offline save folder.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QStandardPaths

from .base import SettingsSection

# Offline saves, relative to the local application data root
OFFLINE_SAVE_SUBPATH = Path("Icarus") / "Saved" / "Offline"


def default_save_root() -> Optional[Path]:
    """Return the game's offline save directory for this platform.

    On Windows this is ``%LOCALAPPDATA%\\Icarus\\Saved\\Offline``.
    Returns None if Qt cannot resolve a local data location.
    """
    data_root = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.GenericDataLocation
    )
    if not data_root:
        return None
    return Path(data_root) / OFFLINE_SAVE_SUBPATH


class PathSettings(SettingsSection):
    """User-selected save folder, falling back to the platform default."""

    prefix = "paths"

    @property
    def save_root_override(self) -> Optional[Path]:
        path_str = self.get_str("save_root")
        return Path(path_str) if path_str else None

    @save_root_override.setter
    def save_root_override(self, value: Optional[Path]) -> None:
        # Empty string clears the override
        self.put("save_root", str(value) if value else "")

    @property
    def save_root(self) -> Optional[Path]:
        return self.save_root_override or default_save_root()
