"""
Computed fields over sparse save-document collections.

Some values the editor exposes do not map onto a single stored field: the
credit balance is whichever ``MetaResources`` entry is named "Credits", an
unlock is the presence of a code in ``UnlockedFlags``. Each such value is a
``ComputedField`` with a plain get/set contract over its collection.
"""

from typing import List, Protocol, TypeVar

from .models import MetaResource, Number

C = TypeVar("C", contravariant=True)
V = TypeVar("V")


class ComputedField(Protocol[C, V]):
    """Read/write access to a value derived from a collection."""

    def get(self, collection: C) -> V:
        """Read the value without modifying ``collection``."""
        ...

    def set(self, collection: C, value: V) -> None:
        """Write the value into ``collection`` in place."""
        ...


class NamedResourceView:
    """Count of the ``MetaResources`` entry with a given name.

    Reading never inserts: a missing entry reads as a detached zero-count
    resource. Writing inserts the entry when it is missing.
    """

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"NamedResourceView({self.name!r})"

    def find(self, collection: List[MetaResource]) -> MetaResource | None:
        """Return the first entry with this name, or None."""
        return next((item for item in collection if item.meta_row == self.name), None)

    def get(self, collection: List[MetaResource]) -> MetaResource:
        entry = self.find(collection)
        if entry is None:
            return MetaResource(meta_row=self.name, count=0)
        return entry

    def count(self, collection: List[MetaResource]) -> Number:
        """Shortcut for ``get(collection).count``."""
        return self.get(collection).count

    def set(self, collection: List[MetaResource], value: Number) -> None:
        entry = self.find(collection)
        if entry is None:
            entry = MetaResource(meta_row=self.name, count=0)
            collection.append(entry)
        entry.count = value


class FlagView:
    """Presence of one code in an ``UnlockedFlags`` list."""

    def __init__(self, flag: Number):
        self.flag = flag

    def __repr__(self) -> str:
        return f"FlagView({self.flag!r})"

    def get(self, collection: List[Number]) -> bool:
        return self.flag in collection

    def set(self, collection: List[Number], value: bool) -> None:
        if value:
            if self.flag not in collection:
                collection.append(self.flag)
        else:
            # Drops duplicates as well
            collection[:] = [code for code in collection if code != self.flag]


CREDITS = NamedResourceView("Credits")
EXOTICS = NamedResourceView("Exotic1")

EXOTIC_MINING_FLAG = 17
EXOTIC_EXTRACTION_FLAG = 18

EXOTIC_MINING = FlagView(EXOTIC_MINING_FLAG)
EXOTIC_EXTRACTION = FlagView(EXOTIC_EXTRACTION_FLAG)
