"""Calendar arithmetic over :class:`datetime.date`.

The representable range is ``date.min`` (0001-01-01) to ``date.max``
(9999-12-31). Any result outside it raises :class:`DateRangeError`.

Month and year shifts clamp the day-of-month to the last valid day of
the target month (March 31 minus one month is the last day of February).
"""

from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, date, timedelta

from datectl.domain.errors import DateRangeError
from datectl.domain.types import DatePeriod

MIN_DATE = date.min
MAX_DATE = date.max


def days_in_month(year: int, month: int) -> int:
    """Number of days in *month* of *year*."""
    return calendar.monthrange(year, month)[1]


def shift_days(d: date, days: int) -> date:
    """Return *d* moved by *days* (negative moves backwards)."""
    try:
        return d + timedelta(days=days)
    except OverflowError as exc:
        raise DateRangeError(
            f"{d.isoformat()} {days:+d} days is outside {MIN_DATE}..{MAX_DATE}"
        ) from exc


def shift_months(d: date, months: int) -> date:
    """Return *d* moved by *months*, clamping the day to the target month."""
    index = d.year * 12 + (d.month - 1) + months
    year, month0 = divmod(index, 12)
    if not MINYEAR <= year <= MAXYEAR:
        raise DateRangeError(
            f"{d.isoformat()} {months:+d} months is outside {MIN_DATE}..{MAX_DATE}"
        )
    month = month0 + 1
    day = min(d.day, days_in_month(year, month))
    return date(year, month, day)


def shift_years(d: date, years: int) -> date:
    """Return *d* moved by *years*; February 29 clamps to February 28."""
    year = d.year + years
    if not MINYEAR <= year <= MAXYEAR:
        raise DateRangeError(
            f"{d.isoformat()} {years:+d} years is outside {MIN_DATE}..{MAX_DATE}"
        )
    day = min(d.day, days_in_month(year, d.month))
    return date(year, d.month, day)


def period_between(start: date, end: date) -> DatePeriod:
    """Calendar period from *start* (inclusive) to *end* (exclusive).

    Whole months are counted first, then the remaining days. The result
    is negative when *end* precedes *start*.
    """
    total_months = (end.year * 12 + end.month) - (start.year * 12 + start.month)
    days = end.day - start.day
    if total_months > 0 and days < 0:
        total_months -= 1
        days = (end - shift_months(start, total_months)).days
    elif total_months < 0 and days > 0:
        total_months += 1
        days -= days_in_month(end.year, end.month)

    sign = -1 if total_months < 0 else 1
    years, months = divmod(abs(total_months), 12)
    return DatePeriod(years=sign * years, months=sign * months, days=days)
