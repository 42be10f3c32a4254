"""
Writers for the save documents.

Every write rewrites a whole existing file: open it read/write, write the
new content from offset zero, truncate to the new length and flush. Nothing
is merged or appended, and the profile and characters writes are not atomic
as a pair.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import orjson

from .errors import SaveWriteError
from .loader import read_json_object
from .models import CHARACTERS_ENVELOPE_KEY, Character, Profile, SaveLocation

# Written verbatim over a restored character's inventory
DEFAULT_INVENTORY = b'{\n    "ID": "MetaInventoryID_Main",\n    "Delta": []\n}'


def overwrite_file(path: Path, content: bytes) -> None:
    """Replace the content of an existing file.

    Raises:
        SaveWriteError: If the file is missing or cannot be written
    """
    try:
        with path.open("r+b") as f:
            f.write(content)
            f.truncate()
            f.flush()
    except OSError as e:
        raise SaveWriteError(f"Unable to write {path}: {e}") from e


def encode_document(document: Any) -> bytes:
    """Serialize one document.

    Raises:
        SaveWriteError: If a value cannot be encoded (e.g. an int beyond 64 bits)
    """
    try:
        return orjson.dumps(document)
    except orjson.JSONEncodeError as e:
        raise SaveWriteError(f"Unable to encode save data: {e}") from e


def encode_characters(characters: List[Character]) -> bytes:
    """Encode characters into the Characters.json envelope.

    Each character is serialized to its own JSON string first; the envelope
    holds those strings.
    """
    envelope: Dict[str, Any] = {
        CHARACTERS_ENVELOPE_KEY: [
            encode_document(character.to_dict()).decode("utf-8") for character in characters
        ]
    }
    return encode_document(envelope)


class SaveStore:
    """Persists the in-memory documents back to a save directory."""

    def __init__(self, location: SaveLocation):
        self.location = location
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _write_profile(self, content: bytes) -> None:
        path = self.location.profile_file
        overwrite_file(path, content)
        self.logger.info(f"Profile written to {path}")

    def _write_characters(self, content: bytes, count: int) -> None:
        path = self.location.characters_file
        overwrite_file(path, content)
        self.logger.info(f"{count} characters written to {path}")

    def save_profile(self, profile: Profile) -> None:
        self._write_profile(encode_document(profile.to_dict()))

    def save_characters(self, characters: List[Character]) -> None:
        self._write_characters(encode_characters(characters), len(characters))

    def save(self, profile: Profile, characters: List[Character]) -> None:
        """Write both primary documents.

        Both are encoded before either file is touched. If the characters
        write fails, the profile write has already landed.
        """
        profile_content = encode_document(profile.to_dict())
        characters_content = encode_characters(characters)
        self._write_profile(profile_content)
        self._write_characters(characters_content, len(characters))

    def update_inventory(self, path: Path) -> None:
        """Reset an inventory file to the empty default inventory."""
        overwrite_file(path, DEFAULT_INVENTORY)
        self.logger.info(f"Inventory reset: {path}")

    def update_loadout(self, path: Path) -> None:
        """Mark a loadout file as valid, leaving every other field untouched.

        Raises:
            SaveFormatError: If the file is not a JSON object
            SaveWriteError: If the file cannot be read or written
        """
        try:
            loadout = read_json_object(path)
        except OSError as e:
            raise SaveWriteError(f"Unable to read {path}: {e}") from e
        loadout["Valid"] = True
        overwrite_file(path, encode_document(loadout))
        self.logger.info(f"Loadout marked valid: {path}")
