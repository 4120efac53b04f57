"""Calendar arithmetic for schedules and trend buckets."""

import calendar
from datetime import date


def add_months(start: date, months: int) -> date:
    """Shift ``start`` by whole calendar months, clamping the day.

    A day-of-month that does not exist in the target month is clamped to
    that month's last day: Jan 31 + 1 month is Feb 29 (leap) or Feb 28.

    Parameters
    ----------
    start : date
        Anchor date.
    months : int
        Months to add (negative to go back).

    Returns
    -------
    date
        Shifted date.
    """
    index = start.year * 12 + (start.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def add_years(start: date, years: int) -> date:
    """Shift ``start`` by whole years (Feb 29 clamps to Feb 28)."""
    return add_months(start, years * 12)


def end_of_year(year: int) -> date:
    return date(year, 12, 31)
