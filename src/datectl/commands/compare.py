"""Commands: age, after-today, before-today, between, period."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.commands._base import DatectlCommand

if TYPE_CHECKING:
    from datectl.commands._context import AppContext


@click.command(
    cls=DatectlCommand,
    examples="""\
  datectl age 2000-10-29
  datectl -q age 1990-01-01""",
)
@click.argument("birth_date")
@click.pass_obj
def age(app: AppContext, birth_date: str) -> None:
    """Whole years from BIRTH_DATE to today."""
    app.emit(app.dates.age(birth_date))


@click.command(
    "after-today",
    cls=DatectlCommand,
    examples="""\
  datectl after-today 2030-01-01
  datectl -q after-today 2020-01-01""",
)
@click.argument("date")
@click.pass_obj
def after_today(app: AppContext, date: str) -> None:
    """Whether DATE is strictly later than today."""
    app.emit(app.dates.after_today(date))


@click.command(
    "before-today",
    cls=DatectlCommand,
    examples="""\
  datectl before-today 2020-01-01""",
)
@click.argument("date")
@click.pass_obj
def before_today(app: AppContext, date: str) -> None:
    """Whether DATE is strictly earlier than today."""
    app.emit(app.dates.before_today(date))


@click.command(
    cls=DatectlCommand,
    examples="""\
  datectl between 2025-01-01 2025-12-31
  datectl -q between 2025-12-31 2025-01-01""",
)
@click.argument("date1")
@click.argument("date2")
@click.pass_obj
def between(app: AppContext, date1: str, date2: str) -> None:
    """Signed number of days from DATE1 to DATE2."""
    app.emit(app.dates.between(date1, date2))


@click.command(
    cls=DatectlCommand,
    examples="""\
  datectl period 2000-10-29 2025-10-28
  datectl -q period 2025-01-31 2025-03-01""",
)
@click.argument("start")
@click.argument("end")
@click.pass_obj
def period(app: AppContext, start: str, end: str) -> None:
    """Calendar period (years, months, days) from START to END."""
    app.emit(app.dates.period(start, end))
