"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from datectl.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("datectl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("datectl").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("datectl.test")
        log.warning("hello world", key="val")

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("datectl.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "datectl.test"
        assert "timestamp" in parsed

    def test_stdlib_datectl_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("datectl.services.base").debug("add_days failed: out of range")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "add_days failed: out of range"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "datectl.services.base"

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        logging.getLogger("datectl.services.base").debug("hidden")
        logging.getLogger("somelib").info("also hidden")

        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_bound_operation_name(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        with structlog.contextvars.bound_contextvars(op="add_days"):
            logging.getLogger("datectl.services.base").debug("add_days failed: out of range")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["op"] == "add_days"

    def test_reconfigure_clears_bound_context(self, capfd: pytest.CaptureFixture[str]) -> None:
        structlog.contextvars.bind_contextvars(op="stale")
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("datectl.services.base").debug("fresh")

        assert "op" not in json.loads(capfd.readouterr().err.strip())
