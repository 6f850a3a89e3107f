"""Mini README: Core package initializer for Maintenance Maker.

Maintenance Maker records monthly maintenance expenses in an in-memory
ledger and exports them as a spreadsheet-openable report. This module
re-exports the pieces most callers need so they can avoid reaching into
sub-modules.
"""

from .logging_utils import get_logger
from .session import ReportSession

__all__ = ["ReportSession", "get_logger"]
