"""
Reference tables classifying talent-collection row names.

The game keeps talents, blueprints, prospects and workshop items in one flat
``Talents`` list. The only way to tell them apart is to check the row name
against the bundled tables loaded here.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from importlib import resources as importlib_resources
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

Rank = Union[int, float]

# Bundled resource names, relative to the ``data`` directory of this package
TALENTS_RESOURCE = "talents.txt"
BLUEPRINTS_RESOURCE = "blueprints.txt"
PROSPECTS_RESOURCE = "prospects.txt"
WORKSHOP_ITEMS_RESOURCE = "workshop_items.txt"


class ReferenceTableError(ValueError):
    """Raised when a bundled reference table cannot be parsed."""


class TalentCategory(Enum):
    """Logical category of an entry in a ``Talents`` collection."""

    TALENT = "talent"
    BLUEPRINT = "blueprint"
    PROSPECT = "prospect"
    WORKSHOP_ITEM = "workshop_item"


def _split_records(text: str, source: str) -> List[Tuple[str, str]]:
    """Split ``name,value`` records, one per line.

    Args:
        text: Raw resource content
        source: Resource name used in error messages

    Returns:
        List of (name, value) pairs in file order

    Raises:
        ReferenceTableError: If a line does not have exactly two fields
    """
    records: List[Tuple[str, str]] = []
    for line_no, line in enumerate(text.strip().splitlines(), start=1):
        parts = line.split(",")
        if len(parts) != 2:
            raise ReferenceTableError(
                f"{source}:{line_no}: expected [{line}] to split into 2 fields, got {parts!r}"
            )
        records.append((parts[0].strip(), parts[1].strip()))
    return records


def parse_rank_table(text: str, source: str = "<talents>") -> Dict[str, Rank]:
    """Parse a leveled table into a name -> max rank mapping."""
    ranks: Dict[str, Rank] = {}
    for line_no, (name, value) in enumerate(_split_records(text, source), start=1):
        try:
            rank = float(value)
        except ValueError:
            raise ReferenceTableError(
                f"{source}:{line_no}: unable to parse [{value}] as a number"
            ) from None
        ranks[name] = int(rank) if rank.is_integer() else rank
    return ranks


def parse_name_table(text: str, source: str = "<names>") -> FrozenSet[str]:
    """Parse a table into the set of names it declares (values are ignored)."""
    return frozenset(name for name, _ in _split_records(text, source))


@dataclass(frozen=True)
class ReferenceTables:
    """Immutable lookup context for the mutation engine.

    Built once and passed explicitly to whatever needs it, so tests can hand
    in small fixture tables instead of the bundled ones.
    """

    talent_ranks: Mapping[str, Rank]
    blueprints: FrozenSet[str]
    prospects: FrozenSet[str]
    workshop_items: FrozenSet[str]

    @classmethod
    def from_text(
        cls,
        talents: str,
        blueprints: str,
        prospects: str,
        workshop_items: str,
    ) -> "ReferenceTables":
        """Build tables from raw ``name,value`` resource texts.

        Raises:
            ReferenceTableError: If any resource is malformed
        """
        return cls(
            talent_ranks=MappingProxyType(parse_rank_table(talents, TALENTS_RESOURCE)),
            blueprints=parse_name_table(blueprints, BLUEPRINTS_RESOURCE),
            prospects=parse_name_table(prospects, PROSPECTS_RESOURCE),
            workshop_items=parse_name_table(workshop_items, WORKSHOP_ITEMS_RESOURCE),
        )

    def _table(self, category: TalentCategory) -> Union[Mapping[str, Rank], FrozenSet[str]]:
        if category is TalentCategory.TALENT:
            return self.talent_ranks
        if category is TalentCategory.BLUEPRINT:
            return self.blueprints
        if category is TalentCategory.PROSPECT:
            return self.prospects
        return self.workshop_items

    def contains(self, category: TalentCategory, name: str) -> bool:
        """Check whether ``name`` belongs to the table of ``category``."""
        return name in self._table(category)

    def names(self, category: TalentCategory) -> Tuple[str, ...]:
        """Return all names of a table, sorted lexicographically."""
        return tuple(sorted(self._table(category)))

    def max_rank(self, name: str) -> Rank:
        """Return the max rank of a talent.

        Raises:
            KeyError: If ``name`` is not in the talent table
        """
        return self.talent_ranks[name]

    def classify(self, name: str) -> Optional[TalentCategory]:
        """Return the first category whose table contains ``name``, if any."""
        for category in TalentCategory:
            if self.contains(category, name):
                return category
        return None


def _read_resource(name: str) -> str:
    return (
        importlib_resources.files(__package__)
        .joinpath("data")
        .joinpath(name)
        .read_text(encoding="utf-8")
    )


@lru_cache(maxsize=1)
def load_bundled_tables() -> ReferenceTables:
    """Return the process-wide tables parsed from the bundled resources.

    Parsed on first call and cached afterwards. A malformed resource is a
    packaging defect and raises ``ReferenceTableError``.
    """
    tables = ReferenceTables.from_text(
        talents=_read_resource(TALENTS_RESOURCE),
        blueprints=_read_resource(BLUEPRINTS_RESOURCE),
        prospects=_read_resource(PROSPECTS_RESOURCE),
        workshop_items=_read_resource(WORKSHOP_ITEMS_RESOURCE),
    )
    logger.debug(
        f"Reference tables loaded: {len(tables.talent_ranks)} talents, "
        f"{len(tables.blueprints)} blueprints, {len(tables.prospects)} prospects, "
        f"{len(tables.workshop_items)} workshop items"
    )
    return tables
