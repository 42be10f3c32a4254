"""
Logging settings dialog for icarus_editor.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QDesktopServices, QShowEvent
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QGroupBox,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...resources import get_icon
from ...settings.logging import VALID_LOG_LEVELS, LoggingSettings


class LoggingSettingsDialog(QDialog):
    """Edits the logging section of the settings. Applied on next start."""

    def __init__(self, options: LoggingSettings, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.options = options

        self.setWindowTitle("Logging Settings")
        self.setWindowFlags(
            Qt.WindowType.Dialog
            | Qt.WindowType.CustomizeWindowHint
            | Qt.WindowType.WindowTitleHint
        )
        self.setModal(True)

        self._setup_ui()
        self._load_options()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        console_group = QGroupBox("Console")
        console_form = QFormLayout(console_group)
        self.console_enabled_check = QCheckBox("Log to console")
        console_form.addRow(self.console_enabled_check)
        self.console_level_combo = QComboBox()
        self.console_level_combo.addItems(list(VALID_LOG_LEVELS))
        console_form.addRow("Level:", self.console_level_combo)
        self.console_colors_check = QCheckBox("Colored level names")
        console_form.addRow(self.console_colors_check)
        layout.addWidget(console_group)

        file_group = QGroupBox("File")
        file_form = QFormLayout(file_group)
        self.file_enabled_check = QCheckBox("Write a CSV log (always DEBUG)")
        file_form.addRow(self.file_enabled_check)
        open_button = QPushButton(get_icon("mdi.folder-open"), "Open Folder")
        open_button.clicked.connect(self._open_log_folder)
        file_form.addRow(str(self.options.file_path), open_button)
        layout.addWidget(file_group)

        note = QLabel("Changes take effect after restarting the editor")
        note.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(note)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._save_and_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _load_options(self) -> None:
        self.console_enabled_check.setChecked(self.options.console_enabled)
        self.console_level_combo.setCurrentText(self.options.console_level)
        self.console_colors_check.setChecked(self.options.console_colors)
        self.file_enabled_check.setChecked(self.options.file_enabled)

    def _save_and_accept(self) -> None:
        self.options.console_enabled = self.console_enabled_check.isChecked()
        self.options.console_level = self.console_level_combo.currentText()
        self.options.console_colors = self.console_colors_check.isChecked()
        self.options.file_enabled = self.file_enabled_check.isChecked()
        self.logger.info("Logging settings updated")
        self.accept()

    def _open_log_folder(self) -> None:
        folder = self.options.file_path.resolve().parent
        folder.mkdir(parents=True, exist_ok=True)
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(folder))):
            self.logger.error(f"Failed to open log folder: {folder}")

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self.adjustSize()
