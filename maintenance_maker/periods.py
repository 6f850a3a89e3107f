"""Mini README: Billing period options offered by the entry form.

Structure:
    * MONTH_OFFSETS - offsets (in months back from today) of the offered periods.
    * shift_month - move a date by whole months using month-index arithmetic.
    * period_label - render a month as ``Mon-YY`` (e.g. ``Jul-25``).
    * month_options - the five selectable periods relative to a given day.

The form lets the user pick next month, the current month, or one of the
three months before it. Calculations normalise a running month index rather
than manipulating strings so year boundaries roll over correctly.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from babel.dates import format_date

DEFAULT_MONTH_LOCALE = "en_US"

# -1 is next month, 0 the current month, 1..3 the months before it.
MONTH_OFFSETS = (-1, 0, 1, 2, 3)


def shift_month(day: date, months_back: int) -> date:
    """Return the first day of the month ``months_back`` months before ``day``."""

    index = day.year * 12 + (day.month - 1) - months_back
    year, month_index = divmod(index, 12)
    return date(year, month_index + 1, 1)


def period_label(day: date, *, locale: str = DEFAULT_MONTH_LOCALE) -> str:
    """Render the month containing ``day`` as a short name plus two-digit year."""

    return format_date(day, format="MMM-yy", locale=locale)


def month_options(
    today: Optional[date] = None, *, locale: str = DEFAULT_MONTH_LOCALE
) -> List[str]:
    """Return next month, this month and the three previous months as labels."""

    today = today or date.today()
    return [period_label(shift_month(today, offset), locale=locale) for offset in MONTH_OFFSETS]
