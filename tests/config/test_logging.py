"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from typeguards import TypeGuards as T
from typeguards.config.logging import LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Restore the typeguards logger after each test and isolate settings discovery."""
    monkeypatch.chdir(tmp_path)
    logger = logging.getLogger(LOGGER_NAME)
    original_handlers = logger.handlers[:]
    original_level = logger.level
    original_propagate = logger.propagate
    yield
    logger.handlers = original_handlers
    logger.setLevel(original_level)
    logger.propagate = original_propagate


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        handlers = root.handlers[:]
        level = root.level
        configure_logging(verbose=True, log_json=True)
        assert root.handlers == handlers
        assert root.level == level

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("typeguards.test").warning("json test")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "typeguards.test"
        assert "timestamp" in parsed

    def test_union_merge_is_logged_at_debug(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        T.Union(T.Schema({"a": T.Number, "b": T.String}), T.Schema({"a": T.String}))
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "typeguards.domain.union"
        assert parsed["event"] == "Merged 2 schema candidates into 2 keys (1 widened)"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        T.Record("ab", T.String).validate({})
        assert capfd.readouterr().err == ""


class TestSettingsDefaults:
    def test_reads_logging_section(self, tmp_path: Path) -> None:
        (tmp_path / "typeguards.toml").write_text("[logging]\nverbose = true\n")
        configure_logging()
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_explicit_level(self, tmp_path: Path) -> None:
        (tmp_path / "typeguards.toml").write_text('[logging]\nlevel = "INFO"\n')
        configure_logging()
        assert logging.getLogger(LOGGER_NAME).level == logging.INFO

    def test_argument_beats_settings_level(self, tmp_path: Path) -> None:
        (tmp_path / "typeguards.toml").write_text('[logging]\nlevel = "INFO"\n')
        configure_logging(verbose=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING
