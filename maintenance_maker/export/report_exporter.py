"""Mini README: Export the expense ledger as a spreadsheet-openable report.

Structure:
    * ReportRow - one formatted data row of the report table.
    * ReportExporter - renders title, entries and total into ``.xls`` bytes.

The document is HTML table markup carrying the Microsoft Office namespaces
and a worksheet-name hint, which spreadsheet applications import as a single
sheet. It is rendered from a Jinja2 template with autoescaping, declares
UTF-8 in a meta tag and is prefixed with a byte-order mark so the currency
symbol survives the import.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional

from jinja2 import Environment, PackageLoader

from ..formatting import Formatter
from ..ledger import Entry
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MEDIA_TYPE = "application/vnd.ms-excel"
DEFAULT_FILENAME = "Maintenance_Report.xls"
DEFAULT_WORKSHEET_NAME = "Maintenance Report"
COLUMN_HEADERS = ("Sr.No", "Item", "Month", "Amount", "Payment deadline", "Status")

_BOM = "\ufeff"
_ENVIRONMENT = Environment(
    loader=PackageLoader("maintenance_maker.export", "templates"),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


@dataclass(slots=True)
class ReportRow:
    """Display values for one entry, numbered from one in ledger order."""

    serial: int
    item: str
    month: str
    amount: str
    deadline: str
    status: str


class ReportExporter:
    """Serialise report titles and entries into ``.xls`` compatible markup."""

    def __init__(
        self,
        formatter: Optional[Formatter] = None,
        *,
        worksheet_name: str = DEFAULT_WORKSHEET_NAME,
    ) -> None:
        self.formatter = formatter or Formatter()
        self.worksheet_name = worksheet_name
        self._template = _ENVIRONMENT.get_template("report.xls.html")

    def build_rows(self, entries: Iterable[Entry]) -> List[ReportRow]:
        """Project entries into formatted rows without touching stored values."""

        return [
            ReportRow(
                serial=index,
                item=entry.description,
                month=entry.period or "",
                amount=self.formatter.amount(entry.amount),
                deadline=self.formatter.deadline(entry.deadline),
                status=entry.status.value,
            )
            for index, entry in enumerate(entries, start=1)
        ]

    def render(self, title: str, entries: Iterable[Entry], total: Decimal) -> str:
        """Return the report markup as text."""

        rows = self.build_rows(entries)
        return self._template.render(
            title=(title or "").upper(),
            worksheet_name=self.worksheet_name,
            headers=COLUMN_HEADERS,
            rows=rows,
            total=self.formatter.amount(total),
        )

    def export(self, title: str, entries: Iterable[Entry], total: Decimal) -> bytes:
        """Return the UTF-8 encoded document, byte-order mark included."""

        markup = self.render(title, entries, total)
        document = (_BOM + markup).encode("utf-8")
        LOGGER.info("Exported report '%s' (%s bytes)", title, len(document))
        return document
