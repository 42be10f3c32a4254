"""
Application settings for icarus_editor.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .base import SettingsSection
from .logging import LoggingSettings
from .migration import SettingsMigrator
from .paths import PathSettings
from .types import ConfigVersion, ValidationResult
from .ui import UISettings
from .validation import SettingsValidator

logger = logging.getLogger(__name__)

ORGANIZATION_NAME = "icarus-editor"
APPLICATION_NAME = "icarus_editor"


class AppSettings(SettingsSection):
    """
    Persistent editor configuration backed by QSettings.

    Options live in small sections (``paths``, ``ui``, ``logging``) under a
    profile group, e.g. ``default/paths/save_root``. By default the native
    per-user store is used; an explicit INI file can be given instead.
    """

    prefix = "app"

    def __init__(
        self, profile: str = "default", settings_file: Optional[Union[str, Path]] = None
    ):
        if settings_file is not None:
            store = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            store = QSettings(ORGANIZATION_NAME, APPLICATION_NAME)
        super().__init__(store)
        self.profile = profile
        self.settings.beginGroup(profile)

        self.paths = PathSettings(self.settings)
        self.ui = UISettings(self.settings)
        self.logging = LoggingSettings(self.settings)
        self._validator = SettingsValidator(self)

        SettingsMigrator(self.settings).ensure_version()

        logger.debug(
            f"Settings profile '{profile}' stored at: {self.settings.fileName()}"
        )

    @property
    def is_first_run(self) -> bool:
        return self.get_bool("first_run", True)

    def set_first_run_complete(self) -> None:
        self.put("first_run", False)

    @property
    def version(self) -> str:
        return self.get_str("version", ConfigVersion.CURRENT.value)

    # === SAVE FOLDER ===

    @property
    def save_root_override(self) -> Optional[Path]:
        """Save folder chosen by the user, if any."""
        return self.paths.save_root_override

    @save_root_override.setter
    def save_root_override(self, value: Optional[Path]) -> None:
        self.paths.save_root_override = value

    @property
    def save_root(self) -> Optional[Path]:
        """Save folder in effect: the override or the platform default."""
        return self.paths.save_root

    # === UTILITY METHODS ===

    def validate(self) -> ValidationResult:
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        self.settings.sync()
