"""
Resources for icarus_editor.

Provides helpers to access icons used by the GUI.
"""

from functools import lru_cache

import qtawesome as qta  # type: ignore
from PySide6.QtGui import QIcon

APP_ICON_NAME = "mdi.account-edit"


@lru_cache(maxsize=1)
def get_app_icon() -> QIcon:
    """Return the shared application icon."""
    return QIcon(qta.icon(APP_ICON_NAME))  # type: ignore[arg-type]


def get_icon(name: str) -> QIcon:
    """Return a Material Design icon by qtawesome name (e.g. ``mdi.content-save``)."""
    return QIcon(qta.icon(name))  # type: ignore[arg-type]
