"""
Settings package for icarus_editor.

Configuration is kept in Qt's QSettings so it is stored in the native
per-user location on every platform.

Usage:
    from icarus_editor.settings import AppSettings

    settings = AppSettings()
    result = settings.validate()
    level = settings.logging.console_level
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .paths import default_save_root

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "default_save_root",
]
