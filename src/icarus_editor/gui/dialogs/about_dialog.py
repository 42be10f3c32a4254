"""
About dialog for icarus_editor.
"""

from typing import Optional
from PySide6.QtWidgets import QMessageBox, QWidget, QApplication
from PySide6.QtCore import Qt


def show_about_dialog(
    version: str,
    save_root: Optional[str] = None,
    parent: Optional[QWidget] = None,
) -> None:
    """
    Show about dialog with application information.

    Args:
        version: Application version string
        save_root: Offline save directory in use (optional)
        parent: Parent widget
    """
    msg = QMessageBox(parent)
    msg.setWindowTitle("")

    save_root_display = save_root if save_root else "Not found"

    msg.setText(
        f"<h3>Icarus Offline Character Editor v{version}</h3>"
        "<p>Edits the offline profile and characters of Icarus.</p>"
        "<p>Close the game before saving: the editor overwrites its save files.</p>"
        f"<p><b>Save folder:</b><br>{save_root_display}</p>"
    )

    msg.setIconPixmap(QApplication.windowIcon().pixmap(64, 64))

    msg.setWindowFlags(
        Qt.WindowType.Dialog
        | Qt.WindowType.CustomizeWindowHint
        | Qt.WindowType.MSWindowsFixedSizeDialogHint
    )

    msg.exec()
