"""Mini README: Display formatting for amounts, deadlines and periods.

Structure:
    * format_currency - whole-unit localised currency strings (e.g. ``₹1,501``).
    * format_date - ``DD Month YYYY`` rendering of optional deadlines.
    * Formatter - bundles the configured locales, including the month labels
      offered by the entry form, so callers stay deterministic.

Formatting happens at read time only: rounding to whole units is applied to a
copy of the value and never written back to stored entries. Locale and
currency are explicit parameters rather than being taken from the host.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, List, Optional, Union

from babel import Locale
from babel.dates import format_date as babel_format_date
from babel.numbers import NumberPattern
from babel.numbers import format_currency as babel_format_currency

from .periods import DEFAULT_MONTH_LOCALE, month_options

if TYPE_CHECKING:
    from .configuration import MaintenanceMakerSettings

DEFAULT_CURRENCY_LOCALE = "en_IN"
DEFAULT_CURRENCY = "INR"
DEFAULT_DATE_LOCALE = "en_GB"

Number = Union[Decimal, int, float, str]


@lru_cache()
def _whole_unit_pattern(locale: str) -> NumberPattern:
    """Return the locale's standard currency pattern with the fraction dropped."""

    pattern = copy.copy(Locale.parse(locale).currency_formats["standard"])
    pattern.frac_prec = (0, 0)
    return pattern


def _whole_units(amount: Number) -> Decimal:
    """Round half away from zero to whole units without touching the input."""

    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def format_currency(
    amount: Number,
    *,
    locale: str = DEFAULT_CURRENCY_LOCALE,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """Render ``amount`` as a localised currency string with no decimal places.

    Grouping follows the locale, so ``en_IN`` yields lakh separators
    (``₹1,50,000``).
    """

    return babel_format_currency(
        _whole_units(amount),
        currency,
        format=_whole_unit_pattern(locale),
        locale=locale,
        currency_digits=False,
    )


def format_date(
    value: Optional[Union[date, datetime, str]],
    *,
    locale: str = DEFAULT_DATE_LOCALE,
) -> str:
    """Render a deadline as ``DD Month YYYY``; missing deadlines become ``""``."""

    if value is None or (isinstance(value, str) and not value.strip()):
        return ""
    if isinstance(value, datetime):
        value = value.date()
    elif isinstance(value, str):
        value = date.fromisoformat(value.strip())
    return babel_format_date(value, format="dd MMMM yyyy", locale=locale)


@dataclass(frozen=True)
class Formatter:
    """Locale-bound formatting used by the exporter and the web surface."""

    currency_locale: str = DEFAULT_CURRENCY_LOCALE
    currency_code: str = DEFAULT_CURRENCY
    date_locale: str = DEFAULT_DATE_LOCALE
    month_locale: str = DEFAULT_MONTH_LOCALE

    @classmethod
    def from_settings(cls, settings: "MaintenanceMakerSettings") -> "Formatter":
        return cls(
            currency_locale=settings.currency_locale,
            currency_code=settings.currency_code,
            date_locale=settings.date_locale,
            month_locale=settings.month_locale,
        )

    def amount(self, amount: Number) -> str:
        return format_currency(amount, locale=self.currency_locale, currency=self.currency_code)

    def deadline(self, value: Optional[Union[date, datetime, str]]) -> str:
        return format_date(value, locale=self.date_locale)

    def month_options(self, today: Optional[date] = None) -> List[str]:
        return month_options(today, locale=self.month_locale)
