"""Action handlers for MainWindow.

Keeps UI action logic separate from window construction/layout.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtWidgets import QDialog, QFileDialog, QMessageBox

from .. import __version__
from ..save_data import Character, SaveDataError
from .dialogs import LoggingSettingsDialog, show_about_dialog

if TYPE_CHECKING:
    from .main_window import MainWindow


class MainWindowActions:
    """Handles actions and events for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def save(self) -> bool:
        """Write the in-memory documents. Returns True on success."""
        mw = self.main_window
        if mw.service is None:
            return False

        mw.logger.info("Save requested")
        try:
            mw.service.save()
        except SaveDataError as e:
            mw.logger.error(f"Save failed: {e}")
            QMessageBox.warning(
                mw,
                "Save Failed",
                "The save files could not be written:\n"
                f"{e}\n\n"
                "Your changes are still in memory. Close Icarus and try again.",
            )
            return False

        mw.mark_saved()
        mw.status_bar.showMessage("Profile and characters saved", 3000)
        return True

    def reload(self) -> None:
        """Read the save folder again, discarding unsaved edits after confirmation."""
        mw = self.main_window
        if not self.confirm_discard_changes():
            return
        mw.load_save_data()
        if mw.service is not None:
            mw.status_bar.showMessage("Save data reloaded", 3000)

    def restore_character(self, character: Character) -> None:
        """Restore an abandoned character and resynchronize its files."""
        mw = self.main_window
        if mw.service is None:
            return

        reply = QMessageBox.question(
            mw,
            "Restore Character",
            f"Restore {character.character_name}?\n\n"
            "The character's inventory will be emptied and its loadout marked valid. "
            "These files are written immediately.",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        try:
            mw.service.restore(character)
        except SaveDataError as e:
            mw.logger.error(f"Restoring {character.character_name} failed: {e}")
            QMessageBox.warning(
                mw, "Restore Failed", f"Restoring the character failed:\n{e}"
            )
        else:
            mw.status_bar.showMessage(
                f"{character.character_name} restored - save to keep the status change",
                5000,
            )
        finally:
            # Status flags are cleared even if a file write failed
            mw.refresh_views()
            mw.mark_dirty()

    def choose_save_folder(self) -> None:
        """Let the user pick the offline save folder and reload from it."""
        mw = self.main_window
        if not self.confirm_discard_changes():
            return

        current = mw.settings.save_root
        initial_dir = str(current) if current and current.exists() else str(Path.home())
        selected_dir = QFileDialog.getExistingDirectory(
            mw,
            "Select Icarus Offline Save Folder",
            initial_dir,
            QFileDialog.Option.ShowDirsOnly,
        )
        if not selected_dir:
            return

        save_root = Path(selected_dir).resolve()
        old_root = mw.settings.save_root_override
        mw.settings.save_root_override = save_root
        mw.logger.info(f"Save folder updated: {old_root} -> {save_root}")

        mw.load_save_data()
        if mw.service is not None:
            mw.status_bar.showMessage(f"Loaded save folder: {save_root}", 3000)

    def confirm_discard_changes(self) -> bool:
        """Ask what to do with unsaved edits. Returns False to cancel."""
        mw = self.main_window
        if not mw.is_dirty:
            return True

        reply = QMessageBox.question(
            mw,
            "Unsaved Changes",
            "There are unsaved changes. Save them first?",
            QMessageBox.StandardButton.Save
            | QMessageBox.StandardButton.Discard
            | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Save,
        )
        if reply == QMessageBox.StandardButton.Cancel:
            return False
        if reply == QMessageBox.StandardButton.Save:
            return self.save()
        return True

    def logging_settings(self) -> None:
        """Show logging settings dialog."""
        mw = self.main_window
        dialog = LoggingSettingsDialog(mw.settings.logging, mw)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            mw.status_bar.showMessage("Logging settings saved", 3000)

    def about(self) -> None:
        """Show about dialog."""
        mw = self.main_window
        save_root = str(mw.settings.save_root) if mw.settings.save_root else None
        show_about_dialog(version=__version__, save_root=save_root, parent=mw)
