"""
Main entry point for icarus_editor.
Usage: python -m icarus_editor
"""

import sys
import logging
from typing import Optional

from PySide6.QtWidgets import QApplication, QMessageBox

from . import __version__
from .settings import AppSettings
from .gui.main_window import MainWindow
from .utils.logging_config import setup_logging
from .resources import get_app_icon


def show_error_dialog(title: str, message: str, details: Optional[str] = None) -> None:
    """Show error dialog to user."""
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)

    if details:
        msg_box.setDetailedText(details)

    msg_box.exec()


def main() -> int:
    """Main application entry point."""
    logger = logging.getLogger(f"{__name__}.main")
    try:
        settings = AppSettings()

        app = QApplication(sys.argv)
        app.setApplicationName("icarus_editor")
        app.setApplicationVersion(__version__)
        app.setOrganizationName("icarus-editor")
        app.setWindowIcon(get_app_icon())

        setup_logging(settings)

        logger.info("Starting icarus_editor")
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        # Problems with the save folder are shown in the window itself
        validation = settings.validate()
        for warning in validation.warnings:
            logger.warning(f"  {warning}")
        for error in validation.errors:
            logger.error(f"  {error}")

        app.setStyle("Fusion")

        main_window = MainWindow(settings)
        main_window.show()
        settings.set_first_run_complete()

        logger.info("Application started successfully")
        return app.exec()

    except Exception as e:
        logger.exception("Unhandled exception in main")
        show_error_dialog("Application Error", "An unexpected error occurred.", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
