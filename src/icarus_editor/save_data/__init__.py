"""
Module for working with offline Icarus save data.

Provides the document model for Profile.json and Characters.json, computed
views over their sparse collections, bulk reset/unlock operations and the
writers that persist everything back to disk.
"""

from .service import SaveDataService
from .errors import (
    SaveDataError,
    SaveFilesMissingError,
    SaveFormatError,
    SaveWriteError,
)
from .models import (
    Character,
    Cosmetics,
    MetaResource,
    Profile,
    SaveLocation,
    Talent,
    slot_file_index,
    CHARACTERS_ENVELOPE_KEY,
)
from .views import (
    ComputedField,
    FlagView,
    NamedResourceView,
    CREDITS,
    EXOTICS,
    EXOTIC_MINING,
    EXOTIC_EXTRACTION,
)
from .loader import SaveDataLoader
from .mutations import SaveMutator, MAX_LEVEL_XP
from .store import SaveStore, DEFAULT_INVENTORY

__all__ = [
    # Main service
    "SaveDataService",
    # Errors
    "SaveDataError",
    "SaveFilesMissingError",
    "SaveFormatError",
    "SaveWriteError",
    # Documents
    "Character",
    "Cosmetics",
    "MetaResource",
    "Profile",
    "SaveLocation",
    "Talent",
    "slot_file_index",
    "CHARACTERS_ENVELOPE_KEY",
    # Computed fields
    "ComputedField",
    "FlagView",
    "NamedResourceView",
    "CREDITS",
    "EXOTICS",
    "EXOTIC_MINING",
    "EXOTIC_EXTRACTION",
    # Component classes
    "SaveDataLoader",
    "SaveMutator",
    "SaveStore",
    "MAX_LEVEL_XP",
    "DEFAULT_INVENTORY",
]
