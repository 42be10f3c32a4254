"""
Shared settings types for icarus_editor.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Layout of the stored settings keys. Bump when keys move."""
    V1_0 = "1.0"
    CURRENT = V1_0


class ConfigError(Exception):
    """Raised when no usable save folder can be configured."""


@dataclass
class ValidationResult:
    """Problems found in the stored settings.

    Errors make the configuration unusable; warnings describe a save folder
    the editor will not be able to load yet.
    """
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
