"""Mini README: Report session state owned by the web surface.

Structure:
    * ReportSession - holds the ledger, the editable report title and the
      most recently used billing period.

A session is created empty when the application starts and discarded when
it stops. The form surface mutates state only through the helpers below so
the ledger has a single owner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from .export import ReportExporter
from .ledger import Entry, EntryRequest, EntryStatus, MaintenanceLedger
from .ledger.ledger import AmountInput, DeadlineInput
from .logging_utils import get_logger

if TYPE_CHECKING:
    from .configuration import MaintenanceMakerSettings

LOGGER = get_logger(__name__)

DEFAULT_REPORT_TITLE = "OFFICE MAINTENANCE SPENDING JULY 2025"


@dataclass
class ReportSession:
    """Single-user report being composed in the browser."""

    ledger: MaintenanceLedger = field(default_factory=MaintenanceLedger)
    title: str = DEFAULT_REPORT_TITLE
    last_period: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: "MaintenanceMakerSettings") -> "ReportSession":
        return cls(title=settings.default_report_title)

    def add_entry(
        self,
        description: Optional[str],
        period: Optional[str],
        amount: AmountInput,
        deadline: DeadlineInput = None,
        status: Union[str, EntryStatus] = EntryStatus.PENDING,
    ) -> Entry:
        """Record an entry and keep its period selected for the next one."""

        request = EntryRequest(description, period, amount, deadline, status)
        return self.add_request(request)

    def add_request(self, request: EntryRequest) -> Entry:
        entry = self.ledger.add_request(request)
        self.last_period = entry.period
        return entry

    def remove_entry(self, entry_id: str) -> Optional[Entry]:
        return self.ledger.remove(entry_id)

    def rename(self, title: Optional[str]) -> None:
        """Replace the report title; any text, including an empty one, is accepted."""

        self.title = title or ""
        LOGGER.debug("Report title set to '%s'", self.title)

    def export(self, exporter: ReportExporter) -> bytes:
        """Render the current title, entries and total with ``exporter``."""

        return exporter.export(self.title, self.ledger.list_entries(), self.ledger.total())
