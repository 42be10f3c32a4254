"""
Main service for working with an offline Icarus save directory.

Provides the high-level API used by the front end: load the documents once,
let the caller edit them in memory, and write them back on an explicit save.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..reference import ReferenceTables, load_bundled_tables
from .errors import SaveDataError
from .loader import SaveDataLoader
from .models import Character, Number, Profile, SaveLocation
from .mutations import SaveMutator
from .store import SaveStore


class SaveDataService:
    """Service holding the in-memory profile and characters of one save.

    Responsible for loading both primary documents, sorting characters by
    slot, and routing edits and writes through the mutator and store.
    There is no autosave: nothing reaches disk until ``save()`` or
    ``restore()`` is called.
    """

    def __init__(
        self,
        save_root: str | Path,
        tables: Optional[ReferenceTables] = None,
    ):
        """Initialize the service.

        Args:
            save_root: Offline save directory (contains Profile.json)
            tables: Reference tables for bulk edits; bundled tables if omitted
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.location = SaveLocation(Path(save_root))

        self.loader = SaveDataLoader(self.location)
        self.store = SaveStore(self.location)
        self.mutator = SaveMutator(tables if tables is not None else load_bundled_tables())

        self._profile: Optional[Profile] = None
        self._characters: List[Character] = []

        self.logger.info(f"Initializing SaveDataService with path: {save_root}")

    # === LOADING ===

    def load(self) -> None:
        """Read both primary documents, replacing any in-memory state.

        Raises:
            SaveFilesMissingError: If a primary file does not exist
            SaveFormatError: If a file cannot be decoded
            SaveDataError: If a file cannot be read
        """
        self.loader.check_files()
        try:
            profile = self.loader.load_profile()
            characters = self.loader.load_characters()
        except OSError as e:
            raise SaveDataError(f"Unable to read save files: {e}") from e

        self._profile = profile
        self._characters = characters
        self.logger.info(
            f"Save data loaded: profile '{profile.user_id}', {len(characters)} characters"
        )

    def reload(self) -> None:
        """Discard unsaved edits and read the files again."""
        self.logger.info("Reloading save data, unsaved changes are discarded")
        self.load()

    @property
    def is_loaded(self) -> bool:
        return self._profile is not None

    @property
    def profile(self) -> Profile:
        if self._profile is None:
            raise SaveDataError("Save data has not been loaded")
        return self._profile

    @property
    def characters(self) -> List[Character]:
        """Characters ordered by ascending slot."""
        return self._characters

    def character(self, slot: Number) -> Optional[Character]:
        """Return the character in ``slot``, if any."""
        return next((c for c in self._characters if c.character_slot == slot), None)

    # === WRITING ===

    def save(self) -> None:
        """Write the profile and characters documents.

        Raises:
            SaveWriteError: If either write fails
        """
        self.store.save(self.profile, self._characters)

    def restore(self, character: Character) -> None:
        """Restore a character and resynchronize its inventory and loadout files."""
        self.mutator.restore(character, self.store)
