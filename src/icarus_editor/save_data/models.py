"""
Data models for the offline Icarus save documents.

Each dataclass mirrors one JSON document (or sub-object) written by the game.
Field names are pythonic; the wire names live in ``from_dict``/``to_dict``
and must not change, the game reads them back.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

Number = Union[int, float]

# Key of the single array in Characters.json
CHARACTERS_ENVELOPE_KEY = "Characters.json"


def slot_file_index(slot: Number) -> int:
    """Convert a slot number to the index used in per-slot file names.

    The slot is truncated toward zero and wrapped into the signed 8-bit
    range, so 300 maps to 44 and 128 maps to -128.
    """
    value = int(slot)
    return ((value + 128) % 256) - 128


def _extra_fields(data: Dict[str, Any], known: Tuple[str, ...]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if key not in known}


def _slot_number(value: Any) -> Number:
    # bool is an int subclass but never a valid slot
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"ChrSlot must be a number, got {value!r}")
    return value


@dataclass
class MetaResource:
    """A named resource counter (``{"MetaRow", "Count"}``)."""

    meta_row: str
    count: Number = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetaResource":
        return cls(meta_row=str(data["MetaRow"]), count=data.get("Count", 0))

    def to_dict(self) -> Dict[str, Any]:
        return {"MetaRow": self.meta_row, "Count": self.count}


@dataclass
class Talent:
    """An entry of a ``Talents`` collection (``{"RowName", "Rank"}``).

    The entry may be a talent, blueprint, prospect or workshop item; the
    document itself does not say which.
    """

    row_name: str
    rank: Number = 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Talent":
        return cls(row_name=str(data["RowName"]), rank=data.get("Rank", 1))

    def to_dict(self) -> Dict[str, Any]:
        return {"RowName": self.row_name, "Rank": self.rank}


# (attribute name, wire name) pairs, in the order the game writes them
COSMETIC_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("head", "Customization_Head"),
    ("hair", "Customization_Hair"),
    ("hair_color", "Customization_HairColor"),
    ("body", "Customization_Body"),
    ("body_color", "Customization_BodyColor"),
    ("skin_tone", "Customization_SkinTone"),
    ("head_tattoo", "Customization_HeadTattoo"),
    ("head_scar", "Customization_HeadScar"),
    ("head_facial_hair", "Customization_HeadFacialHair"),
    ("cap_logo", "Customization_CapLogo"),
    ("is_male", "IsMale"),
    ("voice", "Customization_Voice"),
    ("eye_color", "Customization_EyeColor"),
)


@dataclass
class Cosmetics:
    """Character customization values (the ``Cosmetic`` object)."""

    head: Number = 0
    hair: Number = 0
    hair_color: Number = 0
    body: Number = 0
    body_color: Number = 0
    skin_tone: Number = 0
    head_tattoo: Number = 0
    head_scar: Number = 0
    head_facial_hair: Number = 0
    cap_logo: Number = 0
    is_male: bool = True
    voice: Number = 0
    eye_color: Number = 0
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cosmetics":
        values = {attr: data[wire] for attr, wire in COSMETIC_FIELDS if wire in data}
        if "is_male" in values:
            values["is_male"] = bool(values["is_male"])
        known = tuple(wire for _, wire in COSMETIC_FIELDS)
        return cls(**values, extra=_extra_fields(data, known))

    def to_dict(self) -> Dict[str, Any]:
        data = {wire: getattr(self, attr) for attr, wire in COSMETIC_FIELDS}
        data.update(self.extra)
        return data


_CHARACTER_KEYS = (
    "CharacterName",
    "ChrSlot",
    "XP",
    "XP_Debt",
    "IsDead",
    "IsAbandoned",
    "LastProspectId",
    "Location",
    "UnlockedFlags",
    "MetaResources",
    "Cosmetic",
    "Talents",
)


@dataclass
class Character:
    """One offline character, stored as a string inside Characters.json.

    ``inventory_path`` and ``loadout_path`` are derived from the slot when the
    character is loaded; they are never serialized and do not take part in
    equality.
    """

    character_name: str
    character_slot: Number
    xp: Number = 0
    xp_debt: Number = 0
    is_dead: bool = False
    is_abandoned: bool = False
    last_prospect_id: str = ""
    location: str = ""
    unlocked_flags: List[Number] = field(default_factory=list)
    meta_resources: List[MetaResource] = field(default_factory=list)
    cosmetics: Cosmetics = field(default_factory=Cosmetics)
    talents: List[Talent] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)
    inventory_path: Optional[Path] = field(default=None, compare=False, repr=False)
    loadout_path: Optional[Path] = field(default=None, compare=False, repr=False)

    @property
    def file_index(self) -> int:
        """Slot index used in the inventory and loadout file names."""
        return slot_file_index(self.character_slot)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Character":
        return cls(
            character_name=str(data["CharacterName"]),
            character_slot=_slot_number(data["ChrSlot"]),
            xp=data.get("XP", 0),
            xp_debt=data.get("XP_Debt", 0),
            is_dead=bool(data.get("IsDead", False)),
            is_abandoned=bool(data.get("IsAbandoned", False)),
            last_prospect_id=str(data.get("LastProspectId", "")),
            location=str(data.get("Location", "")),
            unlocked_flags=list(data.get("UnlockedFlags", [])),
            meta_resources=[
                MetaResource.from_dict(item) for item in data.get("MetaResources", [])
            ],
            cosmetics=Cosmetics.from_dict(data.get("Cosmetic", {})),
            talents=[Talent.from_dict(item) for item in data.get("Talents", [])],
            extra=_extra_fields(data, _CHARACTER_KEYS),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "CharacterName": self.character_name,
            "ChrSlot": self.character_slot,
            "XP": self.xp,
            "XP_Debt": self.xp_debt,
            "IsDead": self.is_dead,
            "IsAbandoned": self.is_abandoned,
            "LastProspectId": self.last_prospect_id,
            "Location": self.location,
            "UnlockedFlags": list(self.unlocked_flags),
            "MetaResources": [item.to_dict() for item in self.meta_resources],
            "Cosmetic": self.cosmetics.to_dict(),
            "Talents": [item.to_dict() for item in self.talents],
        }
        data.update(self.extra)
        return data


_PROFILE_KEYS = ("UserID", "MetaResources", "UnlockedFlags", "Talents")


@dataclass
class Profile:
    """Account-wide offline profile (Profile.json)."""

    user_id: str = ""
    meta_resources: List[MetaResource] = field(default_factory=list)
    unlocked_flags: List[Number] = field(default_factory=list)
    talents: List[Talent] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        return cls(
            user_id=str(data.get("UserID", "")),
            meta_resources=[
                MetaResource.from_dict(item) for item in data.get("MetaResources", [])
            ],
            unlocked_flags=list(data.get("UnlockedFlags", [])),
            talents=[Talent.from_dict(item) for item in data.get("Talents", [])],
            extra=_extra_fields(data, _PROFILE_KEYS),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "UserID": self.user_id,
            "MetaResources": [item.to_dict() for item in self.meta_resources],
            "UnlockedFlags": list(self.unlocked_flags),
            "Talents": [item.to_dict() for item in self.talents],
        }
        data.update(self.extra)
        return data


@dataclass(frozen=True)
class SaveLocation:
    """File layout of an offline save directory."""

    root: Path

    PROFILE_FILENAME = "Profile.json"
    CHARACTERS_FILENAME = "Characters.json"
    INVENTORY_DIRNAME = "Inventory"
    LOADOUT_DIRNAME = "Loadout"

    @property
    def profile_file(self) -> Path:
        return self.root / self.PROFILE_FILENAME

    @property
    def characters_file(self) -> Path:
        return self.root / self.CHARACTERS_FILENAME

    @property
    def inventory_dir(self) -> Path:
        return self.root / self.INVENTORY_DIRNAME

    @property
    def loadout_dir(self) -> Path:
        return self.root / self.LOADOUT_DIRNAME

    def inventory_path(self, slot: Number) -> Path:
        """Inventory file of a slot (``Inventory/InventoryID_{slot}.json``)."""
        return self.inventory_dir / f"InventoryID_{slot_file_index(slot)}.json"

    def loadout_path(self, slot: Number) -> Path:
        """Loadout file of a slot (``Loadout/Slot_{slot}.json``)."""
        return self.loadout_dir / f"Slot_{slot_file_index(slot)}.json"
