"""
Main application window for icarus_editor.
"""

import logging
from typing import List, Optional

from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPushButton,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent

from ..resources import get_app_icon, get_icon
from ..save_data import SaveDataError, SaveDataService
from ..settings import AppSettings, ConfigError
from .actions import MainWindowActions
from .character_tab import CharacterTab
from .menu import MenuBuilder
from .profile_panel import ProfilePanel


class MainWindow(QMainWindow):
    """Main application window.

    Shows either the loaded save (profile panel plus one tab per character)
    or, when loading failed, an error view that still allows choosing
    another save folder or retrying.
    """

    # Menu actions (created by MenuBuilder)
    action_save: QAction
    action_reload: QAction
    action_choose_save_folder: QAction
    action_exit: QAction
    action_logging_settings: QAction
    action_about: QAction

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings
        self.service: Optional[SaveDataService] = None
        self.load_error: Optional[str] = None
        self.profile_panel: Optional[ProfilePanel] = None
        self.character_tabs: List[CharacterTab] = []
        self._dirty = False

        self.main_window_actions = MainWindowActions(self)
        self.menu_builder = MenuBuilder(self)
        self.menu_builder.setup_actions()
        self.menu_builder.setup_menus()
        self.status_bar = self.statusBar()

        if not self.settings.ui.restore_window_geometry(self):
            self.resize(440, 600)

        self.setWindowIcon(get_app_icon())
        self.load_save_data()

        self.logger.info("Main window initialized")

    # === LOADING ===

    def load_save_data(self) -> None:
        """(Re)load the save folder and rebuild the central widget."""
        self.service = None
        self.load_error = None
        try:
            save_root = self.settings.save_root
            if save_root is None:
                raise ConfigError("Unable to locate the local application data folder")
            service = SaveDataService(save_root)
            service.load()
            self.service = service
        except (SaveDataError, ConfigError) as e:
            self.logger.error(f"Failed to load save data: {e}")
            self.load_error = str(e)

        self._dirty = False
        self._rebuild_central()
        self._update_title()
        self.action_save.setEnabled(self.service is not None)

    def _rebuild_central(self) -> None:
        if self.service is None:
            self.setCentralWidget(self._create_error_view())
        else:
            self.setCentralWidget(self._create_data_view(self.service))

    def _create_error_view(self) -> QWidget:
        self.profile_panel = None
        self.character_tabs = []

        view = QWidget()
        layout = QVBoxLayout(view)
        label = QLabel(f"Error occurred during startup: {self.load_error or 'Unknown Error'}")
        label.setWordWrap(True)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()
        layout.addWidget(label)

        choose_button = QPushButton(get_icon("mdi.folder-open"), "Choose Save Folder...")
        choose_button.clicked.connect(self.main_window_actions.choose_save_folder)
        layout.addWidget(choose_button)

        retry_button = QPushButton(get_icon("mdi.refresh"), "Retry")
        retry_button.clicked.connect(self.load_save_data)
        layout.addWidget(retry_button)
        layout.addStretch()
        return view

    def _create_data_view(self, service: SaveDataService) -> QWidget:
        view = QWidget()
        layout = QVBoxLayout(view)

        self.profile_panel = ProfilePanel(service.profile, service.mutator)
        self.profile_panel.profile_changed.connect(self.mark_dirty)
        layout.addWidget(self.profile_panel)

        save_button = QPushButton(get_icon("mdi.content-save"), "Save")
        save_button.clicked.connect(self.main_window_actions.save)
        layout.addWidget(save_button)

        tabs = QTabWidget()
        self.character_tabs = []
        for character in service.characters:
            tab = CharacterTab(character, service.mutator)
            tab.character_changed.connect(self.mark_dirty)
            tab.restore_requested.connect(self.main_window_actions.restore_character)
            tabs.addTab(tab, character.character_name)
            self.character_tabs.append(tab)
        layout.addWidget(tabs, 1)
        return view

    # === STATE ===

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def mark_dirty(self) -> None:
        self._dirty = True
        self._update_title()

    def mark_saved(self) -> None:
        self._dirty = False
        self._update_title()

    def _update_title(self) -> None:
        title = "Icarus Offline Character Editor"
        if self._dirty:
            title += " *"
        self.setWindowTitle(title)

    def refresh_views(self) -> None:
        """Reload every editor from the in-memory documents."""
        if self.profile_panel is not None:
            self.profile_panel.refresh()
        for tab in self.character_tabs:
            tab.refresh()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle window close event: offer to save, then persist geometry."""
        if not self.main_window_actions.confirm_discard_changes():
            event.ignore()
            return

        self.settings.ui.save_window_geometry(self)
        self.logger.info("Window geometry saved")
        super().closeEvent(event)
