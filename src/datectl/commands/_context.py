"""AppContext — the object every datectl command receives via ``@click.pass_obj``.

Built once by the root group from the resolved settings. It configures
logging, builds the :class:`DateService` on first use, and turns a
:class:`ServiceResult` into terminal output and an exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.config.logging import configure_logging
from datectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from datectl.config.settings import DatectlSettings
    from datectl.services.dates import DateService
    from datectl.services.result import ServiceResult


class AppContext:
    """Settings, the date service, and result emission for one invocation.

    The service is created lazily so ``--help``, ``--version`` and
    ``--examples`` never build a clock.
    """

    def __init__(self, settings: DatectlSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._dates: DateService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def dates(self) -> DateService:
        if self._dates is None:
            from datectl.services.dates import DateService

            self._dates = DateService(self.settings)
        return self._dates

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit 1 if it failed.

        The answer goes to stdout and an error to stderr. Warnings such as
        a clamped day go to stderr as ``WARNING:`` lines, so piped output
        holds only the answer. JSON output already carries them.
        """
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
