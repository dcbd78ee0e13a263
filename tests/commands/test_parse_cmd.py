"""Tests for the parse, format, validate, and month-name commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from datectl.cli import cli


@pytest.mark.usefixtures("isolated_dir")
class TestParseCommand:
    def test_default_pattern(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "2025-10-28"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "parse_date" in result.output
        assert "2025-10-28" in result.output

    def test_pattern_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "28/10/2025", "-p", "dd/MM/yyyy"])
        assert result.exit_code == 0
        assert result.output.strip() == "2025-10-28"

    def test_localized_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "parse", "28 de octubre de 2025", "-p", "d 'de' MMMM 'de' yyyy", "-l", "es"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "2025-10-28"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "2025-10-28"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "parse_date"
        assert data["data"]["weekday"] == 2

    def test_mismatch_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "28/10/2025"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "does not match" in result.output

    def test_huge_year_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "1" * 5000 + "-01-01"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "PARSE_ERROR"

    def test_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "2023-02-30", "--resolver", "strict"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "PARSE_ERROR"

    def test_bad_resolver_choice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "2025-10-28", "--resolver", "lenient"])
        assert result.exit_code == 2

    def test_verbose_error_shows_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "parse", "nope"])
        assert result.exit_code == 1
        assert "code: PARSE_ERROR" in result.output


@pytest.mark.usefixtures("isolated_dir")
class TestFormatCommand:
    def test_pattern(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "format", "2025-10-28", "-p", "dd/MM/yyyy"])
        assert result.exit_code == 0
        assert result.output.strip() == "28/10/2025"

    def test_locale(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "format", "2025-10-28", "-p", "EEEE d MMMM yyyy", "-l", "fr"]
        )
        assert result.output.strip() == "mardi 28 octobre 2025"

    def test_bad_pattern(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "format", "2025-10-28", "-p", "HH:mm"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "FORMAT_ERROR"


@pytest.mark.usefixtures("isolated_dir")
class TestValidateCommand:
    def test_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "validate", "2025-10-28"])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_invalid_exits_0(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "validate", "not-a-date"])
        assert result.exit_code == 0
        assert result.output.strip() == "false"

    def test_pattern(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "31/04/2025", "-p", "dd/MM/yyyy"])
        assert result.exit_code == 0
        assert "valid: true" in result.output


@pytest.mark.usefixtures("isolated_dir")
class TestMonthNameCommand:
    def test_default_locale(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "month-name", "2025-10-28"])
        assert result.output.strip() == "October"

    def test_spanish(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "month-name", "2025-01-15", "--locale", "es"])
        assert result.output.strip() == "enero"

    def test_unsupported_locale(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "month-name", "2025-01-15", "-l", "ja"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "UNSUPPORTED_LOCALE"

    def test_clamp_warning_shown_on_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["month-name", "2025-02-30", "-l", "ja"])
        assert result.exit_code == 1
        assert "Unsupported locale" in result.output
        assert "WARNING: Day clamped: '2025-02-30' read as 2025-02-28" in result.output


class TestConfigFile:
    def test_discovered_config(self, cli_runner: CliRunner, isolated_dir: Path) -> None:
        (isolated_dir / "datectl.toml").write_text(
            '[dates]\ninput_pattern = "dd/MM/yyyy"\nlocale = "de"\n'
        )
        result = cli_runner.invoke(cli, ["-q", "month-name", "15/03/2025"])
        assert result.exit_code == 0
        assert result.output.strip() == "März"

    def test_explicit_config(self, cli_runner: CliRunner, isolated_dir: Path) -> None:
        cfg = isolated_dir / "other.toml"
        cfg.write_text('[dates]\noutput_pattern = "yyyyMMdd"\n')
        result = cli_runner.invoke(cli, ["-q", "-c", str(cfg), "format", "2025-10-28"])
        assert result.output.strip() == "20251028"

    def test_env_override(
        self, cli_runner: CliRunner, isolated_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DATECTL_DATES__LOCALE", "it")
        result = cli_runner.invoke(cli, ["-q", "month-name", "2025-10-28"])
        assert result.output.strip() == "ottobre"

    def test_invalid_config(self, cli_runner: CliRunner, isolated_dir: Path) -> None:
        (isolated_dir / "datectl.toml").write_text('[dates]\nlocale = "xx"\n')
        result = cli_runner.invoke(cli, ["parse", "2025-10-28"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_unknown_timezone_in_config(self, cli_runner: CliRunner, isolated_dir: Path) -> None:
        (isolated_dir / "datectl.toml").write_text('[clock]\ntimezone = "Mars/Olympus"\n')
        result = cli_runner.invoke(cli, ["after-today", "2025-10-28"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "Unknown timezone" in result.output
        assert "Traceback" not in result.output

    def test_unknown_timezone_in_env(
        self, cli_runner: CliRunner, isolated_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DATECTL_CLOCK__TIMEZONE", "Nowhere/Special")
        result = cli_runner.invoke(cli, ["age", "2000-01-01"])
        assert result.exit_code == 1
        assert "Unknown timezone" in result.output
