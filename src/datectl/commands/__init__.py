"""Subcommand modules for datectl.

Provides register_commands() which uses deferred imports to keep
``datectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from datectl.commands.compare import after_today, age, before_today, between, period
    from datectl.commands.parse import format_cmd, month_name, parse, validate
    from datectl.commands.shift import add_days, add_months, add_years, subtract_months

    # --- Text <-> date ---
    cli.add_command(parse)
    cli.add_command(format_cmd)
    cli.add_command(validate)
    cli.add_command(month_name)

    # --- Arithmetic ---
    cli.add_command(add_days)
    cli.add_command(subtract_months)
    cli.add_command(add_months)
    cli.add_command(add_years)

    # --- Comparison ---
    cli.add_command(age)
    cli.add_command(after_today)
    cli.add_command(before_today)
    cli.add_command(between)
    cli.add_command(period)
