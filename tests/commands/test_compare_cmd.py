"""Tests for the age, after-today, before-today, between, and period commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from datectl.cli import cli


@pytest.mark.usefixtures("isolated_dir", "frozen_today")
class TestTodayCommands:
    def test_age(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "age", "2000-10-29"])
        assert result.exit_code == 0
        assert result.output.strip() == "24"

    def test_age_on_birthday(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "age", "2000-10-28"])
        data = json.loads(result.output)["data"]
        assert data["age"] == 25
        assert data["today"] == "2025-10-28"

    def test_after_today(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["-q", "after-today", "2025-10-29"]).output.strip() == "true"
        assert cli_runner.invoke(cli, ["-q", "after-today", "2025-10-28"]).output.strip() == "false"

    def test_before_today(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["before-today", "2020-01-01"])
        assert result.exit_code == 0
        assert "before_today: true" in result.output

    def test_bad_date(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["after-today", "tomorrow"])
        assert result.exit_code == 1


@pytest.mark.usefixtures("isolated_dir")
class TestBetween:
    def test_days(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "between", "2025-01-01", "2025-12-31"])
        assert result.output.strip() == "364"

    def test_reversed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "between", "2025-12-31", "2025-01-01"])
        assert result.output.strip() == "-364"

    def test_rich(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["between", "2024-02-28", "2024-03-01"])
        assert "days_between" in result.output
        assert "days: 2" in result.output


@pytest.mark.usefixtures("isolated_dir")
class TestPeriod:
    def test_quiet_iso(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "period", "2025-01-31", "2025-03-01"])
        assert result.output.strip() == "P1M1D"

    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["period", "2000-10-29", "2025-10-28"])
        assert result.exit_code == 0
        assert "P24Y11M29D" in result.output
        assert "months" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "period", "2025-10-28", "2000-10-29"])
        data = json.loads(result.output)["data"]
        assert (data["years"], data["months"], data["days"]) == (-24, -11, -30)
