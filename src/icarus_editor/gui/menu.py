"""
Menu builder for main application window.
"""

import logging
from typing import TYPE_CHECKING

from PySide6.QtGui import QAction, QKeySequence

from ..resources import get_icon

if TYPE_CHECKING:
    from .main_window import MainWindow


class MenuBuilder:
    """Builds and manages the application menu bar."""

    def __init__(self, main_window: "MainWindow") -> None:
        """
        Initialize menu builder.

        Args:
            main_window: MainWindow instance that owns the menus
        """
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def setup_actions(self) -> None:
        """Create all actions for menus."""
        self._setup_file_actions()
        self._setup_settings_actions()
        self._setup_help_actions()

        self.logger.debug("Actions created")

    def _setup_file_actions(self) -> None:
        """Create File menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_save = QAction(get_icon("mdi.content-save"), "&Save", mw)
        mw.action_save.setShortcut(QKeySequence.StandardKey.Save)
        mw.action_save.setStatusTip("Write profile and characters back to the save folder")
        mw.action_save.triggered.connect(actions.save)
        mw.action_save.setEnabled(False)  # Disabled until save data is loaded

        mw.action_reload = QAction(get_icon("mdi.refresh"), "&Reload", mw)
        mw.action_reload.setShortcut(QKeySequence.StandardKey.Refresh)
        mw.action_reload.setStatusTip("Discard unsaved changes and read the save files again")
        mw.action_reload.triggered.connect(actions.reload)

        mw.action_choose_save_folder = QAction(
            get_icon("mdi.folder-open"), "Choose Save &Folder...", mw
        )
        mw.action_choose_save_folder.setStatusTip("Select the Icarus offline save folder")
        mw.action_choose_save_folder.triggered.connect(actions.choose_save_folder)

        mw.action_exit = QAction("E&xit", mw)
        mw.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        mw.action_exit.setStatusTip("Exit the application")
        mw.action_exit.triggered.connect(mw.close)

    def _setup_settings_actions(self) -> None:
        """Create Settings menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_logging_settings = QAction("&Logging Settings...", mw)
        mw.action_logging_settings.setStatusTip("Configure logging settings")
        mw.action_logging_settings.triggered.connect(actions.logging_settings)

    def _setup_help_actions(self) -> None:
        """Create Help menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_about = QAction("&About", mw)
        mw.action_about.setStatusTip("Show information about the editor")
        mw.action_about.triggered.connect(actions.about)

    def setup_menus(self) -> None:
        """Create the menu bar."""
        mw = self.main_window
        menubar = mw.menuBar()

        file_menu = menubar.addMenu("&File")
        file_menu.addAction(mw.action_save)
        file_menu.addAction(mw.action_reload)
        file_menu.addSeparator()
        file_menu.addAction(mw.action_choose_save_folder)
        file_menu.addSeparator()
        file_menu.addAction(mw.action_exit)

        settings_menu = menubar.addMenu("&Settings")
        settings_menu.addAction(mw.action_logging_settings)

        help_menu = menubar.addMenu("&Help")
        help_menu.addAction(mw.action_about)

        self.logger.debug("Menus created")
