"""DateService — date operations exposed as ServiceResult-returning methods.

Input dates arrive as text and are read with the configured
``[dates] input_pattern``; result dates are rendered with
``[dates] output_pattern``. Every payload carries a ``value`` key holding
the operation's primary answer, which ``--quiet`` prints on its own.

Under the smart resolver a day past the month's end is clamped (``2025-02-30``
reads as 2025-02-28); each clamp adds a warning to the result.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any

from datectl.domain import dates
from datectl.domain.types import ResolverStyle
from datectl.services.base import BaseService
from datectl.services.result import ServiceResult


class DateService(BaseService):
    """Parses, formats, shifts, and compares dates for the CLI."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def _locale(self) -> str:
        return self._settings.dates.locale

    @property
    def _resolver(self) -> ResolverStyle:
        return self._settings.dates.resolver

    def _parse(
        self,
        text: str,
        pattern: str,
        locale: str,
        resolver: ResolverStyle | str,
        warnings: list[str],
    ) -> date:
        d = dates.parse_date(text, pattern, locale=locale, resolver=resolver)
        if resolver == ResolverStyle.SMART and not dates.is_valid_date(
            text, pattern, locale=locale, resolver=ResolverStyle.STRICT
        ):
            warnings.append(f"Day clamped: {text!r} read as {d.isoformat()}")
        return d

    def _read(self, value: str, warnings: list[str]) -> date:
        return self._parse(
            value, self._settings.dates.input_pattern, self._locale, self._resolver, warnings
        )

    def _render(self, d: date) -> str:
        return dates.format_date(d, self._settings.dates.output_pattern, locale=self._locale)

    def _shift(
        self, op: str, value: str, amount: int, key: str, fn: Callable[[date, int], date]
    ) -> ServiceResult:
        warnings: list[str] = []

        def run() -> dict[str, Any]:
            start = self._read(value, warnings)
            result = fn(start, amount)
            return {
                "date": start.isoformat(),
                key: amount,
                "result": result.isoformat(),
                "value": self._render(result),
            }

        return self._run(op, run, warnings=warnings)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(
        self,
        text: str,
        *,
        pattern: str | None = None,
        locale: str | None = None,
        resolver: str | None = None,
    ) -> ServiceResult:
        """Parse *text* with *pattern* (default: the configured input pattern)."""
        pattern = pattern or self._settings.dates.input_pattern
        warnings: list[str] = []

        def run() -> dict[str, Any]:
            d = self._parse(
                text,
                pattern,
                locale or self._locale,
                resolver or self._resolver,
                warnings,
            )
            return {
                "text": text,
                "pattern": pattern,
                "date": d.isoformat(),
                "weekday": d.isoweekday(),
                "value": d.isoformat(),
            }

        return self._run("parse_date", run, warnings=warnings)

    def format(
        self,
        value: str,
        *,
        pattern: str | None = None,
        locale: str | None = None,
    ) -> ServiceResult:
        """Render the input date with *pattern* (default: the output pattern)."""
        pattern = pattern or self._settings.dates.output_pattern
        warnings: list[str] = []

        def run() -> dict[str, Any]:
            d = self._read(value, warnings)
            text = dates.format_date(d, pattern, locale=locale or self._locale)
            return {"date": d.isoformat(), "pattern": pattern, "text": text, "value": text}

        return self._run("format_date", run, warnings=warnings)

    def month_name(self, value: str, *, locale: str | None = None) -> ServiceResult:
        """Full month name of the input date."""
        locale = locale or self._locale
        warnings: list[str] = []

        def run() -> dict[str, Any]:
            d = self._read(value, warnings)
            name = dates.month_name(d, locale)
            return {"date": d.isoformat(), "locale": locale, "month_name": name, "value": name}

        return self._run("month_name", run, warnings=warnings)

    def age(self, birth_date: str) -> ServiceResult:
        """Whole years from *birth_date* to today."""
        warnings: list[str] = []

        def run() -> dict[str, Any]:
            born = self._read(birth_date, warnings)
            today = self._clock()
            years = dates.age(born, clock=lambda: today)
            return {
                "birth_date": born.isoformat(),
                "today": today.isoformat(),
                "age": years,
                "value": years,
            }

        return self._run("age", run, warnings=warnings)

    def add_days(self, value: str, days: int) -> ServiceResult:
        return self._shift("add_days", value, days, "days", dates.add_days)

    def subtract_months(self, value: str, months: int) -> ServiceResult:
        return self._shift("subtract_months", value, months, "months", dates.subtract_months)

    def add_months(self, value: str, months: int) -> ServiceResult:
        return self._shift("add_months", value, months, "months", dates.add_months)

    def add_years(self, value: str, years: int) -> ServiceResult:
        return self._shift("add_years", value, years, "years", dates.add_years)

    def validate(
        self,
        text: str,
        *,
        pattern: str | None = None,
        locale: str | None = None,
    ) -> ServiceResult:
        """Check whether *text* parses. Always succeeds; the answer is in ``valid``."""
        pattern = pattern or self._settings.dates.input_pattern
        valid = dates.is_valid_date(
            text,
            pattern,
            locale=locale or self._locale,
            resolver=self._resolver,
        )
        return ServiceResult(
            ok=True,
            op="is_valid_date",
            data={"text": text, "pattern": pattern, "valid": valid, "value": valid},
        )

    def after_today(self, value: str) -> ServiceResult:
        """Whether the input date is strictly later than today."""
        warnings: list[str] = []

        def run() -> dict[str, Any]:
            d = self._read(value, warnings)
            today = self._clock()
            after = dates.is_after_today(d, clock=lambda: today)
            return {
                "date": d.isoformat(),
                "today": today.isoformat(),
                "after_today": after,
                "value": after,
            }

        return self._run("is_after_today", run, warnings=warnings)

    def before_today(self, value: str) -> ServiceResult:
        """Whether the input date is strictly earlier than today."""
        warnings: list[str] = []

        def run() -> dict[str, Any]:
            d = self._read(value, warnings)
            today = self._clock()
            before = dates.is_before_today(d, clock=lambda: today)
            return {
                "date": d.isoformat(),
                "today": today.isoformat(),
                "before_today": before,
                "value": before,
            }

        return self._run("is_before_today", run, warnings=warnings)

    def between(self, first: str, second: str) -> ServiceResult:
        """Signed day count from *first* to *second*."""
        warnings: list[str] = []

        def run() -> dict[str, Any]:
            d1 = self._read(first, warnings)
            d2 = self._read(second, warnings)
            days = dates.days_between(d1, d2)
            return {"date1": d1.isoformat(), "date2": d2.isoformat(), "days": days, "value": days}

        return self._run("days_between", run, warnings=warnings)

    def period(self, start: str, end: str) -> ServiceResult:
        """Calendar period (years, months, days) from *start* to *end*."""
        warnings: list[str] = []

        def run() -> dict[str, Any]:
            d1 = self._read(start, warnings)
            d2 = self._read(end, warnings)
            p = dates.period_between(d1, d2)
            return {
                "start": d1.isoformat(),
                "end": d2.isoformat(),
                "years": p.years,
                "months": p.months,
                "days": p.days,
                "value": str(p),
            }

        return self._run("period_between", run, warnings=warnings)
