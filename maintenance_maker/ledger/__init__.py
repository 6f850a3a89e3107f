"""Mini README: Expense ledger for Maintenance Maker.

This package holds the in-memory ledger a single report session mutates:
the entry model, its status enum, the validated creation request, and the
ledger that adds, removes and totals entries. Nothing here touches disk.
"""

from .ledger import (
    Entry,
    EntryRequest,
    EntryStatus,
    InvalidEntryError,
    MaintenanceLedger,
)

__all__ = [
    "Entry",
    "EntryRequest",
    "EntryStatus",
    "InvalidEntryError",
    "MaintenanceLedger",
]
