"""
Exceptions raised while loading, editing or writing save data.
"""


class SaveDataError(Exception):
    """Base class for save data failures."""


class SaveFilesMissingError(SaveDataError):
    """Raised when the offline profile or characters file does not exist."""


class SaveFormatError(SaveDataError):
    """Raised when a save file cannot be decoded into the expected shape."""


class SaveWriteError(SaveDataError):
    """Raised when a save file cannot be written.

    Recoverable: the in-memory state is untouched and the user may retry.
    """
