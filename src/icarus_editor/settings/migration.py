"""
Version stamping and migration of stored settings.
"""

import logging

from .base import SettingsSection
from .types import ConfigVersion

logger = logging.getLogger(__name__)


class SettingsMigrator(SettingsSection):
    """Stamps new stores with the current version and upgrades old ones."""

    prefix = "app"

    def ensure_version(self) -> None:
        stored = self.get_str("version")
        current = ConfigVersion.CURRENT.value

        if not stored:
            self.settings.setValue(self.key("first_run"), True)
            self.put("version", current)
            logger.info("First run detected, initializing configuration")
        elif stored != current:
            self._migrate(stored, current)

    def _migrate(self, from_version: str, to_version: str) -> None:
        # Only one format exists so far: re-stamp and remember the origin
        self.settings.setValue(self.key("migrated_from"), from_version)
        self.put("version", to_version)
        logger.info(f"Configuration migrated from {from_version} to {to_version}")
