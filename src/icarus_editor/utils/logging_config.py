"""
Logging configuration for icarus_editor.

Console output goes to stderr with optional colored level names; the
optional file log is a rotating, semicolon-separated CSV that always
records DEBUG.
"""

import logging
import logging.handlers
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..settings import AppSettings
    from ..settings.logging import LoggingSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for console output."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return formatted
        return formatted.replace(
            record.levelname, f"{color}{record.levelname}{self.RESET}", 1
        )


class CSVFormatter(logging.Formatter):
    """One quoted, semicolon-separated line per record."""

    def format(self, record: logging.LogRecord) -> str:
        fields = (
            self.formatTime(record, self.datefmt),
            f"{int(record.relativeCreated)} ms",
            record.name,
            str(record.lineno),
            record.getMessage().replace('"', '""'),
        )
        timestamp, duration, module, line_no, message = (f'"{f}"' for f in fields)
        level = record.levelname.ljust(8)
        return f"{timestamp};{level};{duration};{module};{line_no};{message}"


def _console_handler(options: "LoggingSettings") -> logging.Handler:
    formatter_class = ColoredFormatter if options.console_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, options.console_level, logging.INFO))
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    return handler


def _file_handler(options: "LoggingSettings") -> Optional[logging.Handler]:
    log_path = options.file_path
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"Could not set up file logging: {e}")
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Replace the root logger's handlers according to the logging settings.

    Args:
        settings: AppSettings whose ``logging`` section is applied
    """
    options = settings.logging

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    if options.console_enabled:
        root_logger.addHandler(_console_handler(options))

    file_handler = _file_handler(options) if options.file_enabled else None
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if options.console_enabled:
        logger.debug(
            f"Console logging: {options.console_level} (colors: {options.console_colors})"
        )
    if file_handler is not None:
        logger.debug(f"File logging: DEBUG at {options.file_path.resolve()}")
