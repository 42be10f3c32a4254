"""
Loader for the offline profile and characters documents.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import orjson

from .errors import SaveFilesMissingError, SaveFormatError
from .models import CHARACTERS_ENVELOPE_KEY, Character, Profile, SaveLocation


def read_json_object(path: Path) -> Dict[str, Any]:
    """Read a JSON file that must contain an object.

    Raises:
        SaveFormatError: If the file is not valid JSON or not an object
    """
    try:
        with path.open("rb") as f:  # orjson works with bytes
            data = orjson.loads(f.read())
    except orjson.JSONDecodeError as e:
        raise SaveFormatError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SaveFormatError(
            f"{path} must contain a JSON object, got {type(data).__name__}"
        )
    return data


class SaveDataLoader:
    """Decodes Profile.json and Characters.json from a save directory."""

    def __init__(self, location: SaveLocation):
        self.location = location
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def check_files(self) -> None:
        """Make sure both primary documents exist.

        Raises:
            SaveFilesMissingError: If either file is missing
        """
        profile_file = self.location.profile_file
        characters_file = self.location.characters_file
        if not profile_file.is_file() or not characters_file.is_file():
            raise SaveFilesMissingError(
                f"One or both of [{profile_file}] and [{characters_file}] do not exist - "
                "please open Icarus and create an offline character first"
            )

    def load_profile(self) -> Profile:
        """Decode the profile document."""
        path = self.location.profile_file
        data = read_json_object(path)
        try:
            profile = Profile.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise SaveFormatError(f"{path} is not a valid profile: {e}") from e
        self.logger.debug(
            f"Profile '{profile.user_id}' loaded: {len(profile.talents)} talent entries, "
            f"{len(profile.meta_resources)} resources"
        )
        return profile

    def load_characters(self) -> List[Character]:
        """Decode every character and attach its derived file paths.

        Returns:
            Characters sorted by ascending slot number
        """
        path = self.location.characters_file
        envelope = read_json_object(path)
        encoded = envelope.get(CHARACTERS_ENVELOPE_KEY)
        if not isinstance(encoded, list):
            raise SaveFormatError(
                f"{path} has no '{CHARACTERS_ENVELOPE_KEY}' array"
            )

        characters: List[Character] = []
        for index, raw in enumerate(encoded):
            if not isinstance(raw, str):
                raise SaveFormatError(
                    f"{path}: character #{index} is not an encoded JSON string"
                )
            try:
                data = orjson.loads(raw)
                if not isinstance(data, dict):
                    raise TypeError(f"expected an object, got {type(data).__name__}")
                character = Character.from_dict(data)
            except (orjson.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                raise SaveFormatError(f"{path}: character #{index} is invalid: {e}") from e

            character.inventory_path = self.location.inventory_path(character.character_slot)
            character.loadout_path = self.location.loadout_path(character.character_slot)
            characters.append(character)

        characters.sort(key=lambda character: character.character_slot)
        self.logger.debug(
            f"Loaded {len(characters)} characters from {path}: "
            f"{[c.character_name for c in characters]}"
        )
        return characters
