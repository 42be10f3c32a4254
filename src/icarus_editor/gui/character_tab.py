"""
Character tab: per-slot stats, status and bulk talent operations.
"""

import logging
from typing import TYPE_CHECKING, Callable, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QFormLayout,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..resources import get_icon
from ..save_data import EXOTIC_EXTRACTION, EXOTIC_MINING, Character, FlagView
from .editors import make_number_box, to_number

if TYPE_CHECKING:
    from ..save_data import SaveMutator


class CharacterTab(QWidget):
    """Editors bound to one Character document."""

    # Emitted after any in-memory edit of the character
    character_changed = Signal()
    # Restore touches files, so the owner window performs it
    restore_requested = Signal(object)

    def __init__(
        self,
        character: Character,
        mutator: "SaveMutator",
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.character = character
        self.mutator = mutator

        self._setup_ui()
        self.refresh()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        self.location_label = QLabel()
        layout.addWidget(self.location_label)

        form = QFormLayout()

        xp_row = QHBoxLayout()
        self.xp_box = make_number_box(self, width=140)
        self.xp_box.valueChanged.connect(self._on_xp_changed)
        xp_row.addWidget(self.xp_box)
        self.max_level_button = QPushButton(get_icon("mdi.arrow-collapse-up"), "Max Level")
        self.max_level_button.clicked.connect(
            lambda: self._apply(self.mutator.level_to_max)
        )
        xp_row.addWidget(self.max_level_button)
        xp_row.addStretch()
        form.addRow("XP:", xp_row)

        self.xp_debt_box = make_number_box(self, width=140)
        self.xp_debt_box.valueChanged.connect(self._on_xp_debt_changed)
        form.addRow("XP Debt:", self.xp_debt_box)

        # Death is decided by the game; shown for information only
        self.dead_check = QCheckBox()
        self.dead_check.setEnabled(False)
        form.addRow("Dead:", self.dead_check)

        abandoned_row = QHBoxLayout()
        self.abandoned_check = QCheckBox()
        self.abandoned_check.toggled.connect(self._on_abandoned_toggled)
        abandoned_row.addWidget(self.abandoned_check)
        self.restore_button = QPushButton(get_icon("mdi.account-reactivate"), "Restore Character")
        self.restore_button.clicked.connect(
            lambda: self.restore_requested.emit(self.character)
        )
        abandoned_row.addWidget(self.restore_button)
        abandoned_row.addStretch()
        form.addRow("Abandoned:", abandoned_row)
        layout.addLayout(form)

        grid = QGridLayout()
        operations = (
            ("Reset Talents", "mdi.restore", self.mutator.reset_talents),
            ("Reset Blueprints", "mdi.file-restore", self.mutator.reset_blueprints),
            ("Unlock All Talents", "mdi.star-check", self.mutator.unlock_all_talents),
            ("Unlock All Blueprints", "mdi.file-check", self.mutator.unlock_all_blueprints),
        )
        for index, (label, icon, operation) in enumerate(operations):
            button = QPushButton(get_icon(icon), label)
            button.clicked.connect(lambda _=False, op=operation: self._apply(op))
            grid.addWidget(button, index // 2, index % 2)
        layout.addLayout(grid)

        self.exotic_mining_check = QCheckBox("Exotic Mining Unlocked")
        self.exotic_mining_check.toggled.connect(
            lambda checked: self._set_flag(EXOTIC_MINING, checked)
        )
        layout.addWidget(self.exotic_mining_check)

        self.exotic_extraction_check = QCheckBox("Exotic Extraction Unlocked")
        self.exotic_extraction_check.toggled.connect(
            lambda checked: self._set_flag(EXOTIC_EXTRACTION, checked)
        )
        layout.addWidget(self.exotic_extraction_check)

        layout.addStretch()

    def refresh(self) -> None:
        """Reload editor values from the document without emitting edits."""
        c = self.character
        widgets = (
            self.xp_box,
            self.xp_debt_box,
            self.abandoned_check,
            self.exotic_mining_check,
            self.exotic_extraction_check,
        )
        for widget in widgets:
            widget.blockSignals(True)

        self.location_label.setText(f"Current Prospect: {c.location or '-'}")
        self.xp_box.setValue(float(c.xp))
        self.xp_debt_box.setValue(float(c.xp_debt))
        self.dead_check.setChecked(c.is_dead)
        self.abandoned_check.setChecked(c.is_abandoned)
        # Abandoned can only be cleared here, never set
        self.abandoned_check.setEnabled(c.is_abandoned)
        self.restore_button.setEnabled(c.is_abandoned)
        self.exotic_mining_check.setChecked(EXOTIC_MINING.get(c.unlocked_flags))
        self.exotic_extraction_check.setChecked(EXOTIC_EXTRACTION.get(c.unlocked_flags))

        for widget in widgets:
            widget.blockSignals(False)

    def _apply(self, operation: Callable[[Character], None]) -> None:
        operation(self.character)
        self.refresh()
        self.character_changed.emit()

    def _set_flag(self, view: FlagView, checked: bool) -> None:
        view.set(self.character.unlocked_flags, checked)
        self.character_changed.emit()

    def _on_xp_changed(self, value: float) -> None:
        self.character.xp = to_number(value)
        self.character_changed.emit()

    def _on_xp_debt_changed(self, value: float) -> None:
        self.character.xp_debt = to_number(value)
        self.character_changed.emit()

    def _on_abandoned_toggled(self, checked: bool) -> None:
        self.character.is_abandoned = checked
        self.refresh()
        self.character_changed.emit()
