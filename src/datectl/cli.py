"""Root CLI group for datectl with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from datectl import __version__
from datectl.commands import register_commands
from datectl.commands._base import DatectlGroup
from datectl.commands._context import AppContext
from datectl.config.settings import DatectlSettings


@click.group(
    cls=DatectlGroup,
    invoke_without_command=True,
    examples="""\
  datectl parse 28/10/2025 --pattern dd/MM/yyyy
  datectl --json between 2025-01-01 2025-12-31
  datectl -c ./datectl.toml month-name 2025-10-28""",
)
@click.version_option(version=__version__, prog_name="datectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the result value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """datectl — date parsing, formatting, and arithmetic."""
    ctx.ensure_object(dict)
    try:
        settings = DatectlSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
