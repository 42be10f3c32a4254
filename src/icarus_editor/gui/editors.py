"""
Small editor widgets shared by the profile panel and character tabs.
"""

from typing import Optional, Union

from PySide6.QtWidgets import QDoubleSpinBox, QWidget

# Large enough for the "Max Level" XP and any realistic currency count
NUMBER_BOX_MAXIMUM = 1e12


def make_number_box(parent: Optional[QWidget] = None, width: int = 120) -> QDoubleSpinBox:
    """Create a whole-number spin box for save document counters."""
    box = QDoubleSpinBox(parent)
    box.setDecimals(0)
    box.setRange(0, NUMBER_BOX_MAXIMUM)
    box.setFixedWidth(width)
    box.setKeyboardTracking(False)
    return box


def to_number(value: float) -> Union[int, float]:
    """Store whole spin box values as ints, like the game writes them."""
    return int(value) if float(value).is_integer() else value
