"""Mini README: Tests covering the maintenance expense ledger.

Structure:
    * add/total behaviour - totals grow by each accepted amount.
    * rejection - blank descriptions and missing or non-numeric amounts leave the ledger untouched.
    * removal - removal by identifier and no-op removal of unknown identifiers.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from maintenance_maker.ledger import (
    EntryRequest,
    EntryStatus,
    InvalidEntryError,
    MaintenanceLedger,
)


def test_empty_ledger_totals_zero() -> None:
    """A fresh ledger has no entries and a total of exactly zero."""

    ledger = MaintenanceLedger()

    assert len(ledger) == 0
    assert ledger.total() == 0
    assert ledger.export_snapshot() == {"entries": [], "total": "0"}


def test_add_increases_total_by_amount() -> None:
    """Each accepted entry raises the total by its amount and keeps insertion order."""

    ledger = MaintenanceLedger()
    before = ledger.total()
    first = ledger.add("HVAC filter change", "Jul-25", "1500.75", "2025-07-04", "paid")
    assert ledger.total() == before + Decimal("1500.75")

    second = ledger.add("Lift servicing", "Jun-25", 2400)
    assert ledger.total() == Decimal("3900.75")
    assert [entry.entry_id for entry in ledger] == [first.entry_id, second.entry_id]
    assert first.deadline == date(2025, 7, 4)
    assert first.status is EntryStatus.PAID
    assert second.status is EntryStatus.PENDING
    assert second.deadline is None


def test_float_amounts_keep_their_written_value() -> None:
    """Floats are stored through their decimal representation, not binary noise."""

    ledger = MaintenanceLedger()
    entry = ledger.add("Plumbing", "Jul-25", 1500.75)

    assert entry.amount == Decimal("1500.75")


@pytest.mark.parametrize(
    ("description", "amount"),
    [
        ("", "100"),
        ("   ", "100"),
        (None, "100"),
        ("Cleaning", ""),
        ("Cleaning", None),
        ("Cleaning", "abc"),
        ("Cleaning", "nan"),
        ("Cleaning", "-5"),
    ],
)
def test_invalid_submissions_are_rejected_without_mutation(description, amount) -> None:
    """Missing descriptions or unusable amounts raise and do not change the ledger."""

    ledger = MaintenanceLedger()
    ledger.add("Existing", "Jul-25", "10")

    with pytest.raises(InvalidEntryError):
        ledger.add(description, "Jul-25", amount)

    assert len(ledger) == 1
    assert ledger.total() == Decimal("10")


def test_unknown_status_is_rejected() -> None:
    with pytest.raises(InvalidEntryError):
        EntryRequest("Painting", "Jul-25", "100", status="Cancelled")


def test_remove_drops_exactly_one_entry() -> None:
    """Removing a present identifier deletes only that entry."""

    ledger = MaintenanceLedger()
    keep = ledger.add("Security", "Jul-25", "300")
    drop = ledger.add("Gardening", "Jul-25", "200")

    removed = ledger.remove(drop.entry_id)

    assert removed == drop
    assert len(ledger) == 1
    assert ledger.list_entries() == [keep]
    assert ledger.total() == Decimal("300")
    assert drop.entry_id not in [entry.entry_id for entry in ledger]


def test_remove_unknown_identifier_is_a_noop() -> None:
    ledger = MaintenanceLedger()
    ledger.add("Security", "Jul-25", "300")

    assert ledger.remove("entry_9999") is None
    assert len(ledger) == 1


def test_identifiers_are_not_reused_after_removal() -> None:
    """Sequence-based identifiers stay unique even once entries are removed."""

    ledger = MaintenanceLedger()
    first = ledger.add("A", "Jul-25", "1")
    ledger.remove(first.entry_id)
    second = ledger.add("B", "Jul-25", "1")

    assert second.entry_id != first.entry_id


def test_as_dict_is_json_friendly() -> None:
    ledger = MaintenanceLedger()
    entry = ledger.add("Generator fuel", "Aug-25", "999.5", date(2025, 8, 1), EntryStatus.OVERDUE)

    assert entry.as_dict() == {
        "entry_id": entry.entry_id,
        "description": "Generator fuel",
        "period": "Aug-25",
        "amount": "999.5",
        "deadline": "2025-08-01",
        "status": "Overdue",
    }


def test_description_is_stored_as_typed() -> None:
    """Only blank descriptions are refused; surrounding spaces are kept."""

    ledger = MaintenanceLedger()
    entry = ledger.add("  Pump  overhaul ", "Jul-25", "10")

    assert entry.description == "  Pump  overhaul "
