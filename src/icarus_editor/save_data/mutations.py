"""
Bulk edits of profile and character documents.

Every operation rebuilds the part of a ``Talents`` collection it owns:
entries of its category are removed and, for unlocks, recreated from the
reference table in lexicographic name order. Entries of other categories
keep their relative order. Applying an operation twice gives the same result
as applying it once.
"""

import logging
from typing import TYPE_CHECKING, Callable, List, Tuple

from ..reference import ReferenceTables, TalentCategory
from .errors import SaveDataError
from .models import Character, Number, Profile, Talent

if TYPE_CHECKING:
    from .store import SaveStore

# XP value used by "Max Level"
MAX_LEVEL_XP = 99_999_999


class SaveMutator:
    """Applies reset and unlock operations using injected reference tables."""

    def __init__(self, tables: ReferenceTables):
        self.tables = tables
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # === COLLECTION HELPERS ===

    def _remove_category(
        self, talents: List[Talent], category: TalentCategory
    ) -> int:
        """Drop entries of ``category`` in place, returning how many were removed."""
        kept = [t for t in talents if not self.tables.contains(category, t.row_name)]
        removed = len(talents) - len(kept)
        talents[:] = kept
        return removed

    def _replace_category(
        self,
        talents: List[Talent],
        category: TalentCategory,
        rank_of: Callable[[str], Number],
    ) -> Tuple[int, int]:
        """Remove entries of ``category`` then append one entry per table name."""
        removed = self._remove_category(talents, category)
        names = self.tables.names(category)
        talents.extend(Talent(row_name=name, rank=rank_of(name)) for name in names)
        return removed, len(names)

    # === CHARACTER OPERATIONS ===

    def level_to_max(self, character: Character) -> None:
        character.xp = MAX_LEVEL_XP
        self.logger.info(f"{character.character_name}: XP set to {MAX_LEVEL_XP}")

    def reset_talents(self, character: Character) -> None:
        removed = self._remove_category(character.talents, TalentCategory.TALENT)
        self.logger.info(f"{character.character_name}: {removed} talents reset")

    def reset_blueprints(self, character: Character) -> None:
        removed = self._remove_category(character.talents, TalentCategory.BLUEPRINT)
        self.logger.info(f"{character.character_name}: {removed} blueprints reset")

    def unlock_all_talents(self, character: Character) -> None:
        """Set every talent of the reference table to its max rank."""
        removed, added = self._replace_category(
            character.talents, TalentCategory.TALENT, self.tables.max_rank
        )
        self.logger.info(
            f"{character.character_name}: talents unlocked "
            f"({removed} removed, {added} added at max rank)"
        )

    def unlock_all_blueprints(self, character: Character) -> None:
        removed, added = self._replace_category(
            character.talents, TalentCategory.BLUEPRINT, lambda _: 1
        )
        self.logger.info(
            f"{character.character_name}: blueprints unlocked ({removed} removed, {added} added)"
        )

    def restore(self, character: Character, store: "SaveStore") -> None:
        """Bring a dead or abandoned character back.

        Clears both status flags in memory, resets the inventory file and
        marks the loadout file valid. The flags stay cleared even if a file
        write fails.

        Raises:
            SaveDataError: If the character has no derived file paths, or a
                file cannot be updated
        """
        if character.inventory_path is None or character.loadout_path is None:
            raise SaveDataError(
                f"{character.character_name} was not loaded from a save directory"
            )

        character.is_dead = False
        character.is_abandoned = False

        store.update_inventory(character.inventory_path)
        store.update_loadout(character.loadout_path)
        self.logger.info(f"{character.character_name}: restored (slot {character.character_slot})")

    # === PROFILE OPERATIONS ===

    def unlock_all_prospects(self, profile: Profile) -> None:
        removed, added = self._replace_category(
            profile.talents, TalentCategory.PROSPECT, lambda _: 1
        )
        self.logger.info(
            f"Profile '{profile.user_id}': prospects unlocked ({removed} removed, {added} added)"
        )

    def unlock_all_workshop_items(self, profile: Profile) -> None:
        removed, added = self._replace_category(
            profile.talents, TalentCategory.WORKSHOP_ITEM, lambda _: 1
        )
        self.logger.info(
            f"Profile '{profile.user_id}': workshop items unlocked ({removed} removed, {added} added)"
        )
