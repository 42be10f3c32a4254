"""Tests for the save document models."""

from pathlib import Path
from typing import Any, Dict

import orjson
import pytest

from icarus_editor.save_data import (
    Character,
    Cosmetics,
    MetaResource,
    Profile,
    SaveLocation,
    Talent,
    slot_file_index,
)


class TestSlotFileIndex:
    """Test slot number to file index conversion."""

    @pytest.mark.parametrize(
        "slot, expected",
        [
            (0, 0),
            (5, 5),
            (127, 127),
            (128, -128),
            (255, -1),
            (256, 0),
            (300, 44),
            (-1, -1),
            (-129, 127),
            (3.9, 3),
            (-2.5, -2),
        ],
    )
    def test_wraps_into_signed_byte(self, slot: float, expected: int) -> None:
        """Test truncation and 8-bit signed wrap-around."""
        assert slot_file_index(slot) == expected

    def test_derived_file_names(self, tmp_path: Path) -> None:
        """Test inventory and loadout file names use the wrapped index."""
        location = SaveLocation(tmp_path)
        assert location.inventory_path(2) == tmp_path / "Inventory" / "InventoryID_2.json"
        assert location.loadout_path(300) == tmp_path / "Loadout" / "Slot_44.json"
        assert location.profile_file == tmp_path / "Profile.json"
        assert location.characters_file == tmp_path / "Characters.json"


class TestRoundTrip:
    """Test decode -> encode -> decode keeps every field."""

    def test_character_round_trip(self, make_character: Any) -> None:
        """Test a character survives a full JSON round trip."""
        original = Character.from_dict(make_character())
        encoded = orjson.dumps(original.to_dict())
        assert Character.from_dict(orjson.loads(encoded)) == original

    def test_character_wire_names(self, make_character: Any) -> None:
        """Test encoding reproduces the original document."""
        data = make_character()
        assert Character.from_dict(data).to_dict() == data

    def test_profile_round_trip(self, profile_data: Dict[str, Any]) -> None:
        """Test a profile survives a full JSON round trip."""
        original = Profile.from_dict(profile_data)
        encoded = orjson.dumps(original.to_dict())
        assert Profile.from_dict(orjson.loads(encoded)) == original
        assert original.to_dict() == profile_data

    def test_unknown_fields_are_kept(self, make_character: Any) -> None:
        """Test fields the editor does not model are written back."""
        data = make_character(Prospects=["A"], FutureField={"x": 1})
        character = Character.from_dict(data)
        assert character.extra == {"Prospects": ["A"], "FutureField": {"x": 1}}
        assert character.to_dict()["FutureField"] == {"x": 1}

    def test_derived_paths_not_serialized_or_compared(self, make_character: Any) -> None:
        """Test inventory/loadout paths stay out of the document."""
        first = Character.from_dict(make_character())
        second = Character.from_dict(make_character())
        first.inventory_path = Path("a.json")
        assert first == second
        assert "inventory_path" not in first.to_dict()


class TestModels:
    """Test individual model conversions."""

    def test_cosmetics_has_thirteen_fields(self) -> None:
        """Test all customization values are written."""
        data = Cosmetics().to_dict()
        assert len(data) == 13
        assert data["IsMale"] is True

    def test_unknown_cosmetic_fields_are_kept(self, make_character: Any) -> None:
        """Test customization keys not modelled survive a round trip."""
        data = make_character()
        data["Cosmetic"]["Customization_Race"] = 3
        character = Character.from_dict(data)
        assert character.cosmetics.extra == {"Customization_Race": 3}
        assert character.to_dict()["Cosmetic"] == data["Cosmetic"]

    def test_meta_resource_and_talent(self) -> None:
        """Test the small pair entries."""
        assert MetaResource.from_dict({"MetaRow": "Credits", "Count": 5}) == MetaResource("Credits", 5)
        assert Talent("Talent_Alpha", 2).to_dict() == {"RowName": "Talent_Alpha", "Rank": 2}

    def test_character_requires_name_and_slot(self) -> None:
        """Test identity fields are mandatory."""
        with pytest.raises(KeyError):
            Character.from_dict({"CharacterName": "NoSlot"})

    def test_file_index_property(self, make_character: Any) -> None:
        """Test the character exposes its wrapped file index."""
        assert Character.from_dict(make_character(slot=130)).file_index == -126
