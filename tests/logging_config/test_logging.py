"""Tests for structlog configuration helpers."""

import structlog
from structlog.testing import capture_logs

from stockcast.logging import configure_logging, get_engine_logger, get_logger
from stockcast.logging.config import log_computation


class TestLoggingConfiguration:
    """Test logging setup."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_renderer(self):
        """Test JSON output renders last."""
        configure_logging(level="WARNING", format_json=True)

        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_console_renderer_default(self):
        """Test human-readable output is the default."""
        configure_logging()
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_optional_processors(self):
        """Test timestamp, caller and extra processors are appended."""
        def marker(logger, method_name, event_dict):
            return event_dict

        configure_logging(include_timestamp=False, include_caller=True, extra_processors=[marker])
        processors = structlog.get_config()["processors"]

        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)
        assert any(isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors)
        assert marker in processors


class TestEngineLoggers:
    """Test logger helpers used by the engines."""

    def test_engine_logger_binds_subsystem(self):
        """Test the subsystem is bound as context."""
        with capture_logs() as logs:
            get_engine_logger("stockcast.test", "forecast").info("hello")

        assert logs == [{"subsystem": "forecast", "event": "hello", "log_level": "info"}]

    def test_log_computation_fields(self):
        """Test computation logs carry operation, bar count and context."""
        with capture_logs() as logs:
            logger = get_engine_logger("stockcast.test", "indicators")
            log_computation(logger, "compute_indicators", 40, {"warmup_bars": 34})

        assert logs == [{
            "subsystem": "indicators",
            "operation": "compute_indicators",
            "bar_count": 40,
            "warmup_bars": 34,
            "event": "Computation complete",
            "log_level": "debug",
        }]

    def test_get_logger(self):
        """Test plain loggers can be bound."""
        with capture_logs() as logs:
            get_logger("stockcast.test").bind(symbol="ACME").warning("careful")

        assert logs[0]["symbol"] == "ACME"
        assert logs[0]["log_level"] == "warning"
