"""Date operations — the public function surface of datectl.

Every function is pure and stateless. The two that compare against
"today" (:func:`age`, :func:`is_after_today`, :func:`is_before_today`)
take an injectable ``clock`` so callers and tests control the date.

Errors are raised, never logged or swallowed, with one exception:
:func:`is_valid_date` converts every failure to ``False``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from datectl.domain import arithmetic
from datectl.domain.clock import Clock, system_clock
from datectl.domain.errors import (
    DateError,
    FormatError,
    InvalidArgumentError,
    InvalidPatternError,
    ParseError,
)
from datectl.domain.locales import DEFAULT_LOCALE, get_locale
from datectl.domain.patterns import compile_pattern
from datectl.domain.types import DatePeriod, ResolverStyle


def _require_date(value: Any, name: str) -> date:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if isinstance(value, datetime) or not isinstance(value, date):
        raise InvalidArgumentError(f"{name} must be a date, got {type(value).__name__}")
    return value


def _require_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def parse_date(
    text: str,
    pattern: str,
    *,
    locale: str = DEFAULT_LOCALE,
    resolver: ResolverStyle | str = ResolverStyle.SMART,
) -> date:
    """Convert *text* to a date using *pattern*.

    Args:
        text: The text to parse, e.g. ``"2025-10-28"``.
        pattern: Format pattern, e.g. ``"yyyy-MM-dd"`` or ``"dd/MM/yyyy"``.
        locale: Locale used for month and weekday names in the text.
        resolver: ``"smart"`` clamps day 29-31 to the month's end;
            ``"strict"`` rejects days that do not exist.

    Raises:
        ParseError: if the text does not match, the pattern is malformed,
            or the locale has no name data.
    """
    if not isinstance(text, str):
        raise ParseError(f"Text to parse must be a string, got {type(text).__name__}")
    try:
        style = ResolverStyle(resolver)
    except ValueError as exc:
        raise ParseError(f"Unknown resolver style: {resolver!r}") from exc
    try:
        compiled = compile_pattern(pattern)
        return compiled.parse(text, locale, style)
    except ParseError:
        raise
    except (InvalidPatternError, FormatError) as exc:
        raise ParseError(str(exc), text=text, pattern=str(pattern)) from exc


def format_date(d: date, pattern: str, *, locale: str = DEFAULT_LOCALE) -> str:
    """Render *d* as text using *pattern*.

    Raises:
        InvalidArgumentError: if *d* is not a date.
        FormatError: if the pattern is malformed or the locale unsupported.
    """
    d = _require_date(d, "date")
    try:
        compiled = compile_pattern(pattern)
    except InvalidPatternError as exc:
        raise FormatError(str(exc)) from exc
    return compiled.format(d, locale)


def month_name(d: date, locale: str = DEFAULT_LOCALE) -> str:
    """Full month name of *d* in *locale* (``"enero"``, ``"January"``).

    Raises:
        UnsupportedLocaleError: if *locale* has no month-name data.
    """
    d = _require_date(d, "date")
    return get_locale(locale).months[d.month - 1]


def age(birth_date: date, *, clock: Clock = system_clock) -> int:
    """Whole years elapsed from *birth_date* to today.

    Raises:
        InvalidArgumentError: if *birth_date* is None.
    """
    birth_date = _require_date(birth_date, "birth_date")
    return arithmetic.period_between(birth_date, clock()).years


def add_days(d: date, days: int) -> date:
    """Return *d* shifted by *days*; a negative count subtracts.

    Raises:
        DateRangeError: if the result is outside 0001-01-01..9999-12-31.
    """
    return arithmetic.shift_days(_require_date(d, "date"), _require_int(days, "days"))


def subtract_months(d: date, months: int) -> date:
    """Return *d* moved back *months* months.

    The day is clamped to the last day of the target month, so
    March 31 minus one month is February 28 (or 29).
    """
    return arithmetic.shift_months(_require_date(d, "date"), -_require_int(months, "months"))


def add_months(d: date, months: int) -> date:
    """Return *d* moved forward *months* months, clamping the day."""
    return arithmetic.shift_months(_require_date(d, "date"), _require_int(months, "months"))


def add_years(d: date, years: int) -> date:
    """Return *d* moved by *years* years; February 29 clamps to February 28."""
    return arithmetic.shift_years(_require_date(d, "date"), _require_int(years, "years"))


def is_valid_date(
    text: Any,
    pattern: Any,
    *,
    locale: str = DEFAULT_LOCALE,
    resolver: ResolverStyle | str = ResolverStyle.SMART,
) -> bool:
    """Check whether *text* parses under *pattern*. Never raises."""
    try:
        parse_date(text, pattern, locale=locale, resolver=resolver)
    except (DateError, TypeError):
        return False
    return True


def is_after_today(d: date, *, clock: Clock = system_clock) -> bool:
    """True if *d* is strictly later than today."""
    return _require_date(d, "date") > clock()


def is_before_today(d: date, *, clock: Clock = system_clock) -> bool:
    """True if *d* is strictly earlier than today."""
    return _require_date(d, "date") < clock()


def days_between(date1: date, date2: date) -> int:
    """Signed number of days from *date1* to *date2*.

    Positive when *date2* is later; ``days_between(a, b) == -days_between(b, a)``.
    """
    date1 = _require_date(date1, "date1")
    date2 = _require_date(date2, "date2")
    return (date2 - date1).days


def period_between(start: date, end: date) -> DatePeriod:
    """Calendar period (years, months, days) from *start* to *end*."""
    return arithmetic.period_between(_require_date(start, "start"), _require_date(end, "end"))
