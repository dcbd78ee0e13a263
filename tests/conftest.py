"""Shared pytest fixtures and test helpers for datectl tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from datectl.config.settings import DatectlSettings
from datectl.domain.clock import Clock, fixed_clock
from datectl.services.dates import DateService

# The reference "today" used by clock-dependent tests.
TODAY = date(2025, 10, 28)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def today_clock() -> Clock:
    """A clock frozen at :data:`TODAY`."""
    return fixed_clock(TODAY)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's DATECTL_* environment out of every test."""
    import os

    for key in list(os.environ):
        if key.startswith("DATECTL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to an empty temp dir so no datectl.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(isolated_dir: Path) -> DatectlSettings:
    """Default settings with no config file in reach."""
    return DatectlSettings.from_cli(start_dir=isolated_dir)


@pytest.fixture
def service(settings: DatectlSettings, today_clock: Clock) -> DateService:
    """DateService on default settings with today fixed at :data:`TODAY`."""
    return DateService(settings, clock=today_clock)


@pytest.fixture
def frozen_today(monkeypatch: pytest.MonkeyPatch) -> Generator[date]:
    """Make the CLI's system clock report :data:`TODAY`."""
    import datectl.config.settings as settings_module

    monkeypatch.setattr(settings_module, "system_clock", fixed_clock(TODAY))
    yield TODAY


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handler and level changes made by ``configure_logging``."""
    import logging

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    datectl_logger = logging.getLogger("datectl")
    datectl_level = datectl_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    datectl_logger.setLevel(datectl_level)
