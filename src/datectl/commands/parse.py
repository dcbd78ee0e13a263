"""Commands: parse, format, validate, month-name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.commands._base import DatectlCommand
from datectl.domain.types import ResolverStyle

if TYPE_CHECKING:
    from datectl.commands._context import AppContext


@click.command(
    cls=DatectlCommand,
    examples="""\
  datectl parse 2025-10-28
  datectl parse 28/10/2025 --pattern dd/MM/yyyy
  datectl parse "28 de octubre de 2025" -p "d 'de' MMMM 'de' yyyy" --locale es
  datectl --json parse 2023-02-30 --resolver strict""",
)
@click.argument("text")
@click.option(
    "-p", "--pattern", default=None, help="Format pattern (default: [dates] input_pattern)."
)
@click.option("-l", "--locale", default=None, help="Locale for month/weekday names.")
@click.option(
    "--resolver",
    type=click.Choice([s.value for s in ResolverStyle]),
    default=None,
    help="How out-of-range days are handled.",
)
@click.pass_obj
def parse(
    app: AppContext,
    text: str,
    pattern: str | None,
    locale: str | None,
    resolver: str | None,
) -> None:
    """Parse TEXT into a date."""
    app.emit(app.dates.parse(text, pattern=pattern, locale=locale, resolver=resolver))


@click.command(
    "format",
    cls=DatectlCommand,
    examples="""\
  datectl format 2025-10-28 --pattern dd/MM/yyyy
  datectl format 2025-10-28 -p "EEEE d MMMM yyyy" --locale fr
  datectl -q format 2025-10-28 -p yyyyMMdd""",
)
@click.argument("date")
@click.option(
    "-p", "--pattern", default=None, help="Output pattern (default: [dates] output_pattern)."
)
@click.option("-l", "--locale", default=None, help="Locale for month/weekday names.")
@click.pass_obj
def format_cmd(app: AppContext, date: str, pattern: str | None, locale: str | None) -> None:
    """Render DATE with a format pattern."""
    app.emit(app.dates.format(date, pattern=pattern, locale=locale))


@click.command(
    cls=DatectlCommand,
    examples="""\
  datectl validate 2025-10-28
  datectl validate 31/04/2025 --pattern dd/MM/yyyy
  datectl -q validate not-a-date""",
)
@click.argument("text")
@click.option(
    "-p", "--pattern", default=None, help="Expected pattern (default: [dates] input_pattern)."
)
@click.option("-l", "--locale", default=None, help="Locale for month/weekday names.")
@click.pass_obj
def validate(app: AppContext, text: str, pattern: str | None, locale: str | None) -> None:
    """Check whether TEXT is a valid date. Exits 0 either way."""
    app.emit(app.dates.validate(text, pattern=pattern, locale=locale))


@click.command(
    "month-name",
    cls=DatectlCommand,
    examples="""\
  datectl month-name 2025-10-28
  datectl month-name 2025-01-15 --locale es
  datectl -q month-name 2025-03-01 -l de""",
)
@click.argument("date")
@click.option("-l", "--locale", default=None, help="Locale (default: [dates] locale).")
@click.pass_obj
def month_name(app: AppContext, date: str, locale: str | None) -> None:
    """Print the full month name of DATE."""
    app.emit(app.dates.month_name(date, locale=locale))
