"""Tests for computed fields over resource and flag collections."""

from typing import List

from icarus_editor.save_data import (
    CREDITS,
    EXOTIC_MINING,
    ComputedField,
    FlagView,
    MetaResource,
    NamedResourceView,
)
from icarus_editor.save_data.models import Number


class TestNamedResourceView:
    """Test find-or-insert access to named resources."""

    def test_get_missing_returns_zero_without_mutation(self) -> None:
        """Test reading an absent resource leaves the list unchanged."""
        resources = [MetaResource("Exotic1", 3)]
        entry = CREDITS.get(resources)
        assert entry.count == 0
        assert entry.meta_row == "Credits"
        assert resources == [MetaResource("Exotic1", 3)]

    def test_set_missing_appends_entry(self) -> None:
        """Test writing an absent resource appends it and keeps the rest."""
        resources = [MetaResource("Exotic1", 3)]
        CREDITS.set(resources, 500)
        assert resources == [MetaResource("Exotic1", 3), MetaResource("Credits", 500)]

    def test_set_existing_mutates_in_place(self) -> None:
        """Test writing an existing resource updates that entry only."""
        credits = MetaResource("Credits", 10)
        resources = [MetaResource("Refund", 1), credits]
        CREDITS.set(resources, 42)
        assert credits.count == 42
        assert len(resources) == 2

    def test_get_returns_live_entry(self) -> None:
        """Test the existing entry itself is returned."""
        credits = MetaResource("Credits", 10)
        assert CREDITS.get([credits]) is credits
        assert CREDITS.count([credits]) == 10

    def test_custom_name(self) -> None:
        """Test any resource name can be viewed."""
        view = NamedResourceView("Refund")
        resources: List[MetaResource] = []
        view.set(resources, 2)
        assert view.count(resources) == 2


class TestFlagView:
    """Test set-membership access to unlocked flags."""

    def test_set_true_then_get(self) -> None:
        """Test enabling a flag on an empty set."""
        flags: List[Number] = []
        EXOTIC_MINING.set(flags, True)
        assert EXOTIC_MINING.get(flags) is True
        assert flags == [17]

    def test_set_true_does_not_duplicate(self) -> None:
        """Test enabling a present flag leaves the set unchanged."""
        flags: List[Number] = [3, 17]
        FlagView(17).set(flags, True)
        assert flags == [3, 17]

    def test_set_false_removes_all_duplicates(self) -> None:
        """Test disabling removes every occurrence."""
        flags: List[Number] = [17, 17]
        FlagView(17).set(flags, False)
        assert flags == []

    def test_set_false_keeps_other_flags(self) -> None:
        """Test disabling leaves other codes in order."""
        flags: List[Number] = [1, 17, 2, 17, 3]
        FlagView(17).set(flags, False)
        assert flags == [1, 2, 3]

    def test_float_codes_match(self) -> None:
        """Test codes stored as floats are recognized."""
        assert FlagView(18).get([18.0])


class TestComputedFieldContract:
    """Test both views share the get/set contract."""

    def test_views_are_computed_fields(self) -> None:
        """Test the views can be used through the common interface."""

        def toggle(field: "ComputedField[List[Number], bool]", flags: List[Number]) -> None:
            field.set(flags, not field.get(flags))

        flags: List[Number] = []
        toggle(FlagView(5), flags)
        assert flags == [5]
        toggle(FlagView(5), flags)
        assert flags == []
