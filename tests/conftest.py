"""Shared fixtures: small reference tables and an on-disk offline save folder."""

from pathlib import Path
from typing import Any, Callable, Dict, List

import orjson
import pytest

from icarus_editor.reference import ReferenceTables

TALENTS_TEXT = "Talent_Bravo,3\nTalent_Alpha,2\nTalent_Charlie,1"
BLUEPRINTS_TEXT = "Blueprint_Wall,1\nBlueprint_Floor,1"
PROSPECTS_TEXT = "Prospect_Two,1\nProspect_One,1"
WORKSHOP_ITEMS_TEXT = "Workshop_Pack,1\nWorkshop_Knife,1"

CharacterFactory = Callable[..., Dict[str, Any]]


@pytest.fixture
def tables() -> ReferenceTables:
    """Fixture reference tables used instead of the bundled ones."""
    return ReferenceTables.from_text(
        talents=TALENTS_TEXT,
        blueprints=BLUEPRINTS_TEXT,
        prospects=PROSPECTS_TEXT,
        workshop_items=WORKSHOP_ITEMS_TEXT,
    )


@pytest.fixture
def make_character() -> CharacterFactory:
    """Factory for character documents in wire format."""

    def factory(name: str = "Hunter", slot: int = 0, **overrides: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "CharacterName": name,
            "ChrSlot": slot,
            "XP": 1500,
            "XP_Debt": 20,
            "IsDead": False,
            "IsAbandoned": False,
            "LastProspectId": "Tier1_Forest_Recon_0",
            "Location": "Olympus",
            "UnlockedFlags": [3, 17],
            "MetaResources": [{"MetaRow": "Credits", "Count": 10}],
            "Cosmetic": {
                "Customization_Head": 1,
                "Customization_Hair": 2,
                "Customization_HairColor": 3,
                "Customization_Body": 0,
                "Customization_BodyColor": 1,
                "Customization_SkinTone": 4,
                "Customization_HeadTattoo": 0,
                "Customization_HeadScar": 0,
                "Customization_HeadFacialHair": 2,
                "Customization_CapLogo": 1,
                "IsMale": False,
                "Customization_Voice": 1,
                "Customization_EyeColor": 5,
            },
            "Talents": [
                {"RowName": "Talent_Alpha", "Rank": 1},
                {"RowName": "Unknown_Row", "Rank": 4},
                {"RowName": "Blueprint_Wall", "Rank": 1},
            ],
        }
        data.update(overrides)
        return data

    return factory


@pytest.fixture
def profile_data() -> Dict[str, Any]:
    """Profile document in wire format."""
    return {
        "UserID": "76561198000000000",
        "MetaResources": [
            {"MetaRow": "Credits", "Count": 250},
            {"MetaRow": "Refund", "Count": 1},
        ],
        "UnlockedFlags": [1, 2],
        "Talents": [
            {"RowName": "Prospect_One", "Rank": 1},
            {"RowName": "Workshop_Knife", "Rank": 1},
            {"RowName": "Profile_Other", "Rank": 2},
        ],
    }


def write_characters_file(path: Path, characters: List[Dict[str, Any]]) -> None:
    """Write a Characters.json envelope of string-encoded characters."""
    envelope = {"Characters.json": [orjson.dumps(c).decode("utf-8") for c in characters]}
    path.write_bytes(orjson.dumps(envelope))


@pytest.fixture
def save_root(
    tmp_path: Path, make_character: CharacterFactory, profile_data: Dict[str, Any]
) -> Path:
    """Offline save folder with slots 2 and 0 (in that file order)."""
    root = tmp_path / "Offline"
    (root / "Inventory").mkdir(parents=True)
    (root / "Loadout").mkdir()

    (root / "Profile.json").write_bytes(orjson.dumps(profile_data))
    write_characters_file(
        root / "Characters.json",
        [
            make_character(name="Second", slot=2, IsAbandoned=True, IsDead=True),
            make_character(name="First", slot=0),
        ],
    )

    for slot in (0, 2):
        (root / "Inventory" / f"InventoryID_{slot}.json").write_bytes(
            orjson.dumps({"ID": "MetaInventoryID_Main", "Delta": [{"Item": "Stone", "Count": 40}]})
        )
        (root / "Loadout" / f"Slot_{slot}.json").write_bytes(
            orjson.dumps({"Slot": slot, "Valid": False, "Items": ["Knife"]})
        )
    return root
