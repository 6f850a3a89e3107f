"""Mini README: Tests for the billing period options.

Checks the label format, the fixed ordering of offsets and year rollover in
both directions.
"""

from datetime import date

from maintenance_maker.periods import month_options, shift_month


def test_month_options_mid_year() -> None:
    options = month_options(date(2025, 7, 15))

    assert options == ["Aug-25", "Jul-25", "Jun-25", "May-25", "Apr-25"]


def test_month_options_roll_back_over_new_year() -> None:
    options = month_options(date(2025, 1, 15))

    assert len(options) == 5
    assert options[0] == "Feb-25"
    assert options[1] == "Jan-25"
    assert options[-1] == "Oct-24"


def test_month_options_roll_forward_over_new_year() -> None:
    assert month_options(date(2025, 12, 31))[0] == "Jan-26"


def test_shift_month_returns_first_of_month() -> None:
    assert shift_month(date(2024, 3, 31), 1) == date(2024, 2, 1)
    assert shift_month(date(2024, 1, 31), -1) == date(2024, 2, 1)
    assert shift_month(date(2024, 2, 10), 14) == date(2022, 12, 1)
