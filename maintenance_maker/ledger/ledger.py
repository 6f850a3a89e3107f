"""Mini README: In-memory ledger of maintenance expense entries.

Structure:
    * EntryStatus - enum of the payment states an entry can be in.
    * InvalidEntryError - raised when a submission lacks a description or amount.
    * EntryRequest - validated creation request built from raw form values.
    * Entry - dataclass storing one recorded expense line item.
    * MaintenanceLedger - ordered collection with add, remove and total helpers.

The ledger lives for a single report session and is never persisted. Entries
keep insertion order, identifiers come from a per-ledger sequence that is
never reused, and amounts are stored as ``Decimal`` at full precision.
Rounding for display is left to the formatting helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Iterator, List, Optional, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

AmountInput = Union[Decimal, int, float, str, None]
DeadlineInput = Union[date, datetime, str, None]


class EntryStatus(str, Enum):
    """Enumerate the payment states shown in the report."""

    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"

    @classmethod
    def from_str(cls, value: Union[str, "EntryStatus"]) -> "EntryStatus":
        """Coerce arbitrary casing into a valid status."""

        if isinstance(value, cls):
            return value
        try:
            normalised = value.strip().lower()
            for member in cls:
                if member.value.lower() == normalised:
                    return member
        except AttributeError as error:
            raise ValueError(f"Unsupported entry status: {value}") from error
        raise ValueError(f"Unsupported entry status: {value}")


class InvalidEntryError(ValueError):
    """Raised when a submission cannot be recorded in the ledger."""


def _parse_amount(value: AmountInput) -> Decimal:
    """Parse a required, finite, non-negative amount."""

    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidEntryError("An amount is required.")
    if isinstance(value, bool):
        raise InvalidEntryError(f"Amount must be numeric, got {value!r}.")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as error:
        raise InvalidEntryError(f"Amount must be numeric, got {value!r}.") from error
    if not amount.is_finite():
        raise InvalidEntryError(f"Amount must be a finite number, got {value!r}.")
    if amount < 0:
        raise InvalidEntryError("Amount cannot be negative.")
    return amount


def _parse_deadline(value: DeadlineInput) -> Optional[date]:
    """Parse ISO strings or date objects; blanks mean no deadline."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise InvalidEntryError(f"Deadline must be an ISO date, got {value!r}.") from error
    raise InvalidEntryError("Deadlines must be provided as ISO strings or date/datetime instances.")


@dataclass(init=False)
class EntryRequest:
    """Typed, validated field set used to create an entry.

    Construction coerces the raw values and raises ``InvalidEntryError`` when
    the description is blank or the amount is missing or not a valid number.
    """

    description: str
    period: Optional[str]
    amount: Decimal
    deadline: Optional[date]
    status: EntryStatus

    def __init__(
        self,
        description: Optional[str],
        period: Optional[str],
        amount: AmountInput,
        deadline: DeadlineInput = None,
        status: Union[str, EntryStatus] = EntryStatus.PENDING,
    ) -> None:
        if not (description or "").strip():
            raise InvalidEntryError("A description is required.")
        self.description = description
        self.period = (period or "").strip() or None
        self.amount = _parse_amount(amount)
        self.deadline = _parse_deadline(deadline)
        try:
            self.status = EntryStatus.from_str(status or EntryStatus.PENDING)
        except ValueError as error:
            raise InvalidEntryError(str(error)) from error


@dataclass(slots=True)
class Entry:
    """One recorded maintenance expense."""

    entry_id: str
    description: str
    period: Optional[str]
    amount: Decimal
    deadline: Optional[date] = None
    status: EntryStatus = EntryStatus.PENDING

    def as_dict(self) -> Dict[str, object]:
        """Export the entry with JSON-serialisable values."""

        return {
            "entry_id": self.entry_id,
            "description": self.description,
            "period": self.period,
            "amount": str(self.amount),
            "deadline": self.deadline.isoformat() if self.deadline else None,
            "status": self.status.value,
        }


class MaintenanceLedger:
    """Keep the session's entries in insertion order."""

    def __init__(self) -> None:
        self._entries: Dict[str, Entry] = {}
        self._sequence = 0
        LOGGER.debug("Maintenance ledger initialised")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries.values()))

    def _next_id(self) -> str:
        """Generate the next identifier; removed identifiers are not reused."""

        self._sequence += 1
        return f"entry_{self._sequence:04d}"

    def add(
        self,
        description: Optional[str],
        period: Optional[str],
        amount: AmountInput,
        deadline: DeadlineInput = None,
        status: Union[str, EntryStatus] = EntryStatus.PENDING,
    ) -> Entry:
        """Validate the fields and append a new entry.

        Raises ``InvalidEntryError`` without changing the ledger when the
        description is empty or the amount is absent or non-numeric.
        """

        request = EntryRequest(description, period, amount, deadline, status)
        return self.add_request(request)

    def add_request(self, request: EntryRequest) -> Entry:
        """Append an entry built from an already validated request."""

        entry = Entry(
            entry_id=self._next_id(),
            description=request.description,
            period=request.period,
            amount=request.amount,
            deadline=request.deadline,
            status=request.status,
        )
        self._entries[entry.entry_id] = entry
        LOGGER.info("Added entry %s (%s, %s)", entry.entry_id, entry.description, entry.amount)
        return entry

    def remove(self, entry_id: str) -> Optional[Entry]:
        """Remove and return the matching entry; unknown identifiers are ignored."""

        removed = self._entries.pop(entry_id, None)
        if removed is None:
            LOGGER.debug("Ignoring removal of unknown entry %s", entry_id)
        else:
            LOGGER.info("Removed entry %s", entry_id)
        return removed

    def total(self) -> Decimal:
        """Sum of all entry amounts; zero for an empty ledger."""

        return sum((entry.amount for entry in self._entries.values()), Decimal("0"))

    def list_entries(self) -> List[Entry]:
        """Return entries in the order they were added."""

        return list(self._entries.values())

    def export_snapshot(self) -> Dict[str, object]:
        """Export entries and the raw total for JSON responses."""

        return {
            "entries": [entry.as_dict() for entry in self.list_entries()],
            "total": str(self.total()),
        }
