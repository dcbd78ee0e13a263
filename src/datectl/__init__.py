"""datectl — date parsing, formatting, and calendar arithmetic."""

from datectl.domain.clock import fixed_clock, system_clock, zone_clock
from datectl.domain.dates import (
    add_days,
    add_months,
    add_years,
    age,
    days_between,
    format_date,
    is_after_today,
    is_before_today,
    is_valid_date,
    month_name,
    parse_date,
    period_between,
    subtract_months,
)
from datectl.domain.errors import (
    DateError,
    DateRangeError,
    FormatError,
    InvalidArgumentError,
    InvalidPatternError,
    ParseError,
    UnsupportedLocaleError,
)
from datectl.domain.types import DatePeriod, ResolverStyle

__version__ = "0.1.0"

__all__ = [
    "DateError",
    "DatePeriod",
    "DateRangeError",
    "FormatError",
    "InvalidArgumentError",
    "InvalidPatternError",
    "ParseError",
    "ResolverStyle",
    "UnsupportedLocaleError",
    "add_days",
    "add_months",
    "add_years",
    "age",
    "days_between",
    "fixed_clock",
    "format_date",
    "is_after_today",
    "is_before_today",
    "is_valid_date",
    "month_name",
    "parse_date",
    "period_between",
    "subtract_months",
    "system_clock",
    "zone_clock",
]
