"""Commands: add-days, subtract-months, add-months, add-years."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.commands._base import DatectlCommand

if TYPE_CHECKING:
    from datectl.commands._context import AppContext


@click.command(
    "add-days",
    cls=DatectlCommand,
    signed=True,
    examples="""\
  datectl add-days 2024-02-28 1
  datectl add-days 2025-01-10 -30
  datectl -q add-days 2025-10-28 90""",
)
@click.argument("date")
@click.argument("days", type=int)
@click.pass_obj
def add_days(app: AppContext, date: str, days: int) -> None:
    """Add DAYS to DATE (negative DAYS subtracts)."""
    app.emit(app.dates.add_days(date, days))


@click.command(
    "subtract-months",
    cls=DatectlCommand,
    signed=True,
    examples="""\
  datectl subtract-months 2025-03-31 1
  datectl -q subtract-months 2025-10-28 12""",
)
@click.argument("date")
@click.argument("months", type=int)
@click.pass_obj
def subtract_months(app: AppContext, date: str, months: int) -> None:
    """Move DATE back MONTHS months, clamping to the month's last day."""
    app.emit(app.dates.subtract_months(date, months))


@click.command(
    "add-months",
    cls=DatectlCommand,
    signed=True,
    examples="""\
  datectl add-months 2025-01-31 1
  datectl add-months 2025-05-15 -3""",
)
@click.argument("date")
@click.argument("months", type=int)
@click.pass_obj
def add_months(app: AppContext, date: str, months: int) -> None:
    """Move DATE forward MONTHS months, clamping to the month's last day."""
    app.emit(app.dates.add_months(date, months))


@click.command(
    "add-years",
    cls=DatectlCommand,
    signed=True,
    examples="""\
  datectl add-years 2024-02-29 1
  datectl add-years 2025-10-28 -10""",
)
@click.argument("date")
@click.argument("years", type=int)
@click.pass_obj
def add_years(app: AppContext, date: str, years: int) -> None:
    """Move DATE by YEARS years (February 29 clamps to February 28)."""
    app.emit(app.dates.add_years(date, years))
