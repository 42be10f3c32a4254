"""
Logging options stored in QSettings.
"""

import logging
from pathlib import Path

from .base import SettingsSection

logger = logging.getLogger(__name__)

# Relative to the working directory the editor is started from
LOG_FILE_PATH = "logs/icarus_editor.csv"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(SettingsSection):
    """Console and file logging options. Applied at startup."""

    prefix = "logging"

    @property
    def console_enabled(self) -> bool:
        return self.get_bool("console_enabled", True)

    @console_enabled.setter
    def console_enabled(self, value: bool) -> None:
        self.put("console_enabled", value)

    @property
    def console_level(self) -> str:
        return self.get_str("console_level", "INFO")

    @console_level.setter
    def console_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning(
                f"Invalid console log level: {value}, keeping {self.console_level}"
            )
            return
        self.put("console_level", level)

    @property
    def console_colors(self) -> bool:
        return self.get_bool("console_use_colors", True)

    @console_colors.setter
    def console_colors(self, value: bool) -> None:
        self.put("console_use_colors", value)

    @property
    def file_enabled(self) -> bool:
        """File logging is off unless switched on in the settings dialog."""
        return self.get_bool("file_enabled", False)

    @file_enabled.setter
    def file_enabled(self, value: bool) -> None:
        self.put("file_enabled", value)

    @property
    def file_path(self) -> Path:
        return Path(LOG_FILE_PATH)
