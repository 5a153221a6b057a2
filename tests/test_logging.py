"""
Unit Tests for Structured Logging
=================================
Level resolution, per-context filtering and structlog setup.
"""

import json

import pytest
from structlog.testing import capture_logs


class TestResolveLogLevel:
    """Tests for environment-driven level selection."""

    def test_default_is_verbose(self):
        """Should default to VERBOSE outside production."""
        from tinhub_core.logging import resolve_log_level, LogLevel

        assert resolve_log_level() == LogLevel.VERBOSE

    def test_configured_level(self):
        """Should use the configured level when nothing overrides it."""
        from tinhub_core.logging import resolve_log_level, LogLevel

        assert resolve_log_level(LogLevel.WARN) == LogLevel.WARN
        assert resolve_log_level("debug") == LogLevel.DEBUG

    def test_env_overrides_config(self, monkeypatch):
        """LOG_LEVEL should win over the configured level."""
        from tinhub_core.logging import resolve_log_level, LogLevel

        monkeypatch.setenv("LOG_LEVEL", "warn")

        assert resolve_log_level(LogLevel.DEBUG) == LogLevel.WARN

    def test_production_defaults_to_error(self, monkeypatch):
        """Production without LOG_LEVEL should log errors only."""
        from tinhub_core.logging import resolve_log_level, LogLevel

        monkeypatch.setenv("ENVIRONMENT", "production")

        assert resolve_log_level(LogLevel.DEBUG) == LogLevel.ERROR

    def test_production_respects_env_level(self, monkeypatch):
        """LOG_LEVEL should still win in production."""
        from tinhub_core.logging import resolve_log_level, LogLevel

        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert resolve_log_level() == LogLevel.DEBUG

    def test_unknown_env_level_ignored(self, monkeypatch):
        """An unrecognised LOG_LEVEL should be ignored."""
        from tinhub_core.logging import resolve_log_level, LogLevel

        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        assert resolve_log_level(LogLevel.LOG) == LogLevel.LOG


class TestLoggerService:
    """Tests for the per-context logger."""

    def test_binds_context(self):
        """Records should carry the context name."""
        from tinhub_core.logging import LoggerService

        with capture_logs() as logs:
            LoggerService("OrdersController").log("order placed", order_id="o-1")

        assert logs == [
            {
                "event": "order placed",
                "log_level": "info",
                "context": "OrdersController",
                "order_id": "o-1",
            }
        ]

    def test_filters_below_level(self):
        """Messages below the logger's level should be dropped."""
        from tinhub_core.logging import LoggerService, LogLevel

        with capture_logs() as logs:
            log = LoggerService("Quiet", level=LogLevel.WARN)
            log.verbose("v")
            log.debug("d")
            log.log("l")
            log.warn("w")
            log.error("e")

        assert [entry["event"] for entry in logs] == ["w", "e"]
        assert [entry["log_level"] for entry in logs] == ["warning", "error"]

    def test_verbose_marked(self):
        """Verbose messages should go out as debug records flagged verbose."""
        from tinhub_core.logging import LoggerService

        with capture_logs() as logs:
            LoggerService("Chatty").verbose("details")

        assert logs[0]["log_level"] == "debug"
        assert logs[0]["verbose"] is True

    def test_http_record(self):
        """http() should log the payload as structured data."""
        from tinhub_core.logging import LoggerService

        data = {"method": "GET", "path": "/health", "status": 200}

        with capture_logs() as logs:
            LoggerService("Http").http(data)

        assert logs[0]["event"] == "HTTP"
        assert logs[0]["http"] == data

    def test_set_log_level(self):
        """set_log_level should change filtering."""
        from tinhub_core.logging import LoggerService, LogLevel

        log = LoggerService("Svc")
        log.set_log_level("error")

        assert log.log_level == LogLevel.ERROR
        with pytest.raises(ValueError):
            log.set_log_level("nope")

    def test_set_log_level_ignored_with_env(self, monkeypatch):
        """LOG_LEVEL should pin the level."""
        from tinhub_core.logging import LoggerService, LogLevel

        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        log = LoggerService("Svc")
        log.set_log_level(LogLevel.ERROR)

        assert log.log_level == LogLevel.DEBUG


class TestSetupLogging:
    """Tests for structlog configuration."""

    def test_json_output(self, capsys):
        """Should emit JSON lines with service and timestamp."""
        from tinhub_core.logging import setup_logging, get_logger

        setup_logging("billing-api", json_output=True)
        get_logger("test").info("payment captured", amount=10)

        lines = capsys.readouterr().out.strip().splitlines()
        record = json.loads(lines[-1])

        assert record["event"] == "payment captured"
        assert record["service"] == "billing-api"
        assert record["level"] == "info"
        assert record["amount"] == 10
        assert "timestamp" in record

    def test_level_filtering(self, capsys):
        """Records below the configured level should be dropped."""
        from tinhub_core.logging import setup_logging, get_logger

        setup_logging("svc", level="WARN", json_output=True)
        logger = get_logger("test")
        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_log_error_includes_exception(self, capsys):
        """log_error should render exception details."""
        from tinhub_core.logging import setup_logging, log_error

        setup_logging("svc", json_output=True, timestamp=False)
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            log_error(e, context="charging card", order_id="o-1")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])

        assert record["event"] == "charging card"
        assert record["error_type"] == "RuntimeError"
        assert record["order_id"] == "o-1"
        assert "boom" in record["exception"]
        assert "timestamp" not in record

    def test_log_event(self):
        """log_event should log under the event type."""
        from tinhub_core.logging import log_event

        with capture_logs() as logs:
            log_event("otp.issued", channel="email")

        assert logs[0]["event"] == "otp.issued"
        assert logs[0]["channel"] == "email"
