"""Tests for writing save documents back to disk."""

from pathlib import Path

import orjson
import pytest

from icarus_editor.save_data import (
    DEFAULT_INVENTORY,
    SaveDataLoader,
    SaveFormatError,
    SaveLocation,
    SaveStore,
    SaveWriteError,
)
from icarus_editor.save_data.store import encode_characters, overwrite_file


@pytest.fixture
def location(save_root: Path) -> SaveLocation:
    return SaveLocation(save_root)


@pytest.fixture
def store(location: SaveLocation) -> SaveStore:
    return SaveStore(location)


class TestOverwriteFile:
    """Test whole-file replacement."""

    def test_shorter_content_truncates(self, tmp_path: Path) -> None:
        """Test no stale bytes remain after writing shorter content."""
        path = tmp_path / "file.json"
        path.write_bytes(b"0123456789")
        overwrite_file(path, b"abc")
        assert path.read_bytes() == b"abc"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test files are never created."""
        path = tmp_path / "missing.json"
        with pytest.raises(SaveWriteError):
            overwrite_file(path, b"{}")
        assert not path.exists()


class TestSave:
    """Test persisting profile and characters."""

    def test_save_round_trip(self, location: SaveLocation, store: SaveStore) -> None:
        """Test edits survive a save and reload."""
        loader = SaveDataLoader(location)
        profile = loader.load_profile()
        characters = loader.load_characters()
        profile.meta_resources[0].count = 999
        characters[0].xp = 123

        store.save(profile, characters)

        reloaded = SaveDataLoader(location)
        assert reloaded.load_profile() == profile
        assert reloaded.load_characters() == characters

    def test_characters_written_in_memory_order(
        self, location: SaveLocation, store: SaveStore
    ) -> None:
        """Test the envelope lists characters in the order given."""
        characters = SaveDataLoader(location).load_characters()
        store.save_characters(characters)
        envelope = orjson.loads(location.characters_file.read_bytes())
        names = [orjson.loads(raw)["CharacterName"] for raw in envelope["Characters.json"]]
        assert names == ["First", "Second"]

    def test_envelope_holds_strings(self, location: SaveLocation) -> None:
        """Test each character is a JSON string inside the envelope."""
        characters = SaveDataLoader(location).load_characters()
        envelope = orjson.loads(encode_characters(characters))
        assert list(envelope) == ["Characters.json"]
        assert all(isinstance(raw, str) for raw in envelope["Characters.json"])

    def test_save_fails_when_file_removed(
        self, location: SaveLocation, store: SaveStore
    ) -> None:
        """Test a write to a vanished file is reported."""
        profile = SaveDataLoader(location).load_profile()
        location.profile_file.unlink()
        with pytest.raises(SaveWriteError):
            store.save_profile(profile)


class TestRestoreFiles:
    """Test inventory and loadout resynchronization."""

    def test_update_inventory_writes_default(
        self, location: SaveLocation, store: SaveStore
    ) -> None:
        """Test the inventory is replaced byte for byte."""
        path = location.inventory_path(0)
        store.update_inventory(path)
        assert path.read_bytes() == DEFAULT_INVENTORY

    def test_update_loadout_keeps_other_fields(
        self, location: SaveLocation, store: SaveStore
    ) -> None:
        """Test only the Valid field changes."""
        path = location.loadout_path(2)
        store.update_loadout(path)
        loadout = orjson.loads(path.read_bytes())
        assert loadout == {"Slot": 2, "Valid": True, "Items": ["Knife"]}
        assert list(loadout) == ["Slot", "Valid", "Items"]

    def test_update_loadout_keeps_key_order(
        self, location: SaveLocation, store: SaveStore
    ) -> None:
        """Test the rewritten document lists keys in their original order."""
        path = location.loadout_path(0)
        path.write_bytes(b'{"Items": [], "Slot": 0, "Valid": false, "Extra": 1}')
        store.update_loadout(path)
        assert path.read_bytes() == b'{"Items":[],"Slot":0,"Valid":true,"Extra":1}'

    def test_update_loadout_adds_missing_valid(
        self, location: SaveLocation, store: SaveStore
    ) -> None:
        """Test Valid is added when absent."""
        path = location.loadout_path(0)
        path.write_bytes(b'{"Slot": 0}')
        store.update_loadout(path)
        assert orjson.loads(path.read_bytes()) == {"Slot": 0, "Valid": True}

    def test_update_loadout_non_object(self, location: SaveLocation, store: SaveStore) -> None:
        """Test a loadout that is not an object is rejected."""
        path = location.loadout_path(0)
        path.write_bytes(b"[]")
        with pytest.raises(SaveFormatError):
            store.update_loadout(path)

    def test_update_loadout_missing(self, location: SaveLocation, store: SaveStore) -> None:
        """Test a missing loadout file is a write error."""
        with pytest.raises(SaveWriteError):
            store.update_loadout(location.loadout_path(5))


class TestEncoding:
    """Test encoding failures are reported before anything is written."""

    def test_unencodable_value_raises_write_error(self, location: SaveLocation) -> None:
        """Test an integer beyond 64 bits is a save error."""
        characters = SaveDataLoader(location).load_characters()
        characters[0].xp = 2**70
        with pytest.raises(SaveWriteError, match="encode"):
            encode_characters(characters)

    def test_save_writes_nothing_when_encoding_fails(
        self, location: SaveLocation, store: SaveStore
    ) -> None:
        """Test the profile is left alone when the characters cannot be encoded."""
        loader = SaveDataLoader(location)
        profile = loader.load_profile()
        characters = loader.load_characters()
        profile.meta_resources[0].count = 1
        characters[0].xp = 2**70
        before = location.profile_file.read_bytes()

        with pytest.raises(SaveWriteError):
            store.save(profile, characters)
        assert location.profile_file.read_bytes() == before
