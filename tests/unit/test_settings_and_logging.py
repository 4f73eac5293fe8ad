"""Tests for config.settings, mm_common.logging_config and mm_common.datetime_utils."""

import logging
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from config.settings import Settings
from src.mm_common.datetime_utils import seconds_since, utc_now
from src.mm_common.logging_config import build_logging_config, configure_logging


class TestSettings:
    def test_defaults_need_no_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FILE", raising=False)
        s = Settings(_env_file=None)
        assert s.PORT == 3000
        assert s.LOG_LEVEL == "INFO"
        assert s.LOG_FILE is None

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.PORT == 8080
        assert s.LOG_LEVEL == "DEBUG"


class TestLoggingConfig:
    def test_console_only_by_default(self) -> None:
        cfg = build_logging_config("WARNING")
        assert set(cfg["handlers"]) == {"console"}
        assert cfg["root"]["level"] == "WARNING"

    def test_file_handler_when_path_given(self, tmp_path: Path) -> None:
        cfg = build_logging_config("INFO", str(tmp_path / "app.log"))
        assert cfg["handlers"]["file"]["class"] == "logging.handlers.RotatingFileHandler"
        assert cfg["loggers"]["src"]["handlers"] == ["console", "file"]

    def test_configure_creates_log_dir(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "app.log"
        logger = configure_logging("INFO", str(log_file))
        assert logger.name == "src"
        assert log_file.parent.is_dir()
        for name in ("src", "mm.request", None):
            for handler in logging.getLogger(name).handlers:
                handler.close()
        configure_logging("INFO")


class TestUtcNow:
    def test_is_utc(self) -> None:
        assert utc_now().tzinfo == UTC

    def test_seconds_since(self) -> None:
        start = datetime(2026, 1, 1, tzinfo=UTC)
        assert seconds_since(start, start + timedelta(seconds=12.5)) == 12.5
        assert seconds_since(start, start - timedelta(seconds=1)) == -1.0
