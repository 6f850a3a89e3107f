"""Mini README: Export utilities for Maintenance Maker reports.

Exposes the exporter that turns the current ledger and report title into a
spreadsheet-openable ``.xls`` document, plus the download defaults it is
served with.
"""

from .report_exporter import (
    DEFAULT_FILENAME,
    DEFAULT_WORKSHEET_NAME,
    MEDIA_TYPE,
    ReportExporter,
    ReportRow,
)

__all__ = [
    "DEFAULT_FILENAME",
    "DEFAULT_WORKSHEET_NAME",
    "MEDIA_TYPE",
    "ReportExporter",
    "ReportRow",
]
