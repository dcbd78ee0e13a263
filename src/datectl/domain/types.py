"""Value types and classification enums shared across the domain layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ResolverStyle(StrEnum):
    """How parsed fields are turned into a date.

    SMART accepts a day-of-month up to 31 and clamps it to the month's
    last day. STRICT rejects any day that does not exist in the month.
    """

    SMART = "smart"
    STRICT = "strict"


@dataclass(frozen=True)
class DatePeriod:
    """A calendar period of whole years, months, and days.

    All three components share the sign of the period.
    """

    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months

    def is_negative(self) -> bool:
        return self.years < 0 or self.months < 0 or self.days < 0

    def __str__(self) -> str:
        """ISO 8601 duration form, e.g. ``P1Y2M3D``."""
        if self.years == self.months == self.days == 0:
            return "P0D"
        parts = ["P"]
        if self.years:
            parts.append(f"{self.years}Y")
        if self.months:
            parts.append(f"{self.months}M")
        if self.days:
            parts.append(f"{self.days}D")
        return "".join(parts)
