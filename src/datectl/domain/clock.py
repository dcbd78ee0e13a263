"""The "today" capability.

Operations that compare against the current date take a ``clock``
argument instead of reading the wall clock directly. A clock is any
zero-argument callable returning a :class:`datetime.date`.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datectl.domain.errors import InvalidArgumentError

Clock = Callable[[], date]


def system_clock() -> date:
    """Today's date in the process's local timezone."""
    return date.today()


def fixed_clock(today: date) -> Clock:
    """Return a clock that always reports *today*."""
    if not isinstance(today, date):
        raise InvalidArgumentError("fixed_clock requires a date")

    def _clock() -> date:
        return today

    return _clock


def zone_clock(timezone: str) -> Clock:
    """Return a clock reporting today's date in the IANA zone *timezone*."""
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidArgumentError(f"Unknown timezone: {timezone!r}") from exc

    def _clock() -> date:
        return datetime.now(tz).date()

    return _clock
