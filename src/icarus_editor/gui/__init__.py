"""
PySide6 front end for icarus_editor.

Every button maps onto one save_data operation; no editing logic lives here.
"""

from .main_window import MainWindow

__all__ = ["MainWindow"]
