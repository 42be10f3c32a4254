"""
Profile panel: account-wide currencies and unlocks.
"""

import logging
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFormLayout, QGroupBox, QHBoxLayout, QPushButton, QWidget

from ..resources import get_icon
from ..save_data import CREDITS, EXOTICS, Profile
from .editors import make_number_box, to_number

if TYPE_CHECKING:
    from ..save_data import SaveMutator


class ProfilePanel(QGroupBox):
    """Editors bound to the loaded Profile document."""

    # Emitted after any edit of the profile
    profile_changed = Signal()

    def __init__(
        self, profile: Profile, mutator: "SaveMutator", parent: Optional[QWidget] = None
    ):
        super().__init__("Profile", parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.profile = profile
        self.mutator = mutator

        self._setup_ui()
        self.refresh()

    def _setup_ui(self) -> None:
        layout = QFormLayout(self)

        self.credits_box = make_number_box(self)
        self.credits_box.valueChanged.connect(self._on_credits_changed)
        layout.addRow("Credits:", self.credits_box)

        self.exotics_box = make_number_box(self)
        self.exotics_box.valueChanged.connect(self._on_exotics_changed)
        layout.addRow("Exotics:", self.exotics_box)

        buttons = QHBoxLayout()
        self.unlock_prospects_button = QPushButton(
            get_icon("mdi.map-marker-check"), "Unlock All Prospects"
        )
        self.unlock_prospects_button.clicked.connect(self._on_unlock_prospects)
        buttons.addWidget(self.unlock_prospects_button)

        self.unlock_workshop_button = QPushButton(
            get_icon("mdi.hammer-wrench"), "Unlock All Workshop Items"
        )
        self.unlock_workshop_button.clicked.connect(self._on_unlock_workshop_items)
        buttons.addWidget(self.unlock_workshop_button)
        layout.addRow(buttons)

    def refresh(self) -> None:
        """Reload editor values from the document without emitting edits."""
        for box, view in ((self.credits_box, CREDITS), (self.exotics_box, EXOTICS)):
            box.blockSignals(True)
            box.setValue(float(view.count(self.profile.meta_resources)))
            box.blockSignals(False)

    def _on_credits_changed(self, value: float) -> None:
        CREDITS.set(self.profile.meta_resources, to_number(value))
        self.profile_changed.emit()

    def _on_exotics_changed(self, value: float) -> None:
        EXOTICS.set(self.profile.meta_resources, to_number(value))
        self.profile_changed.emit()

    def _on_unlock_prospects(self) -> None:
        self.mutator.unlock_all_prospects(self.profile)
        self.profile_changed.emit()

    def _on_unlock_workshop_items(self) -> None:
        self.mutator.unlock_all_workshop_items(self.profile)
        self.profile_changed.emit()
