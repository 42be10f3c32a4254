"""
Settings validation system for icarus_editor.
"""

import logging
from typing import List, TYPE_CHECKING

from ..save_data.models import SaveLocation
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # An explicit override must point at a directory
        override = self.settings.save_root_override
        if override is not None and not override.is_dir():
            errors.append(f"Save folder does not exist: {override}")

        save_root = self.settings.save_root
        if save_root is None:
            warnings.append("Save folder could not be determined")
        elif not save_root.exists():
            warnings.append(f"Save folder not found: {save_root}")
        else:
            location = SaveLocation(save_root)
            for path in (location.profile_file, location.characters_file):
                if not path.exists():
                    warnings.append(f"Save file not found: {path}")

        return ValidationResult(errors=errors, warnings=warnings)
