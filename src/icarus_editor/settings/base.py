"""
Typed access to one key prefix of a QSettings store.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class SettingsSection:
    """Base for settings groups stored under ``<prefix>/<name>`` keys.

    Values written through an INI file come back as strings, so readers
    convert explicitly instead of trusting the stored type.
    """

    prefix = ""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def key(self, name: str) -> str:
        return f"{self.prefix}/{name}" if self.prefix else name

    def get_raw(self, name: str, default: Any = None) -> Any:
        return self.settings.value(self.key(name), default)

    def get_str(self, name: str, default: str = "") -> str:
        value = self.get_raw(name, default)
        return str(value) if value is not None else default

    def get_bool(self, name: str, default: bool = False) -> bool:
        value = self.get_raw(name, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def put(self, name: str, value: Any) -> None:
        """Store a value and write it through immediately."""
        self.settings.setValue(self.key(name), value)
        self.settings.sync()
