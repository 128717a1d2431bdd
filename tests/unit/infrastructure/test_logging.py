"""Unit tests for structured logging configuration.

Tests the structlog configuration and logging output format.
"""

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from promgate.infrastructure.observability.correlation import startup_attempt
from promgate.infrastructure.observability.logging import _get_log_level, configure_structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestConfigureStructlog:
    """Tests for configure_structlog function."""

    def test_configure_production_mode(self) -> None:
        """Production mode renders JSON."""
        configure_structlog(environment="production")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_development_mode(self) -> None:
        """Any other environment renders for the console."""
        configure_structlog(environment="development")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_output_is_json_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production", log_level="INFO")
        with startup_attempt("json-test-id"):
            structlog.get_logger().bind(component="startup_sequencer").info(
                "startup_validation_accepted", mode="agent"
            )

        captured = capsys.readouterr()
        assert captured.out == ""
        entry = json.loads(captured.err.strip().splitlines()[-1])
        assert entry["event"] == "startup_validation_accepted"
        assert entry["component"] == "startup_sequencer"
        assert entry["correlation_id"] == "json-test-id"
        assert entry["level"] == "info"
        assert "timestamp" in entry

    @pytest.mark.parametrize("environment", ["production", "development"])
    def test_json_format_overrides_environment(self, environment: str) -> None:
        configure_structlog(environment=environment, log_format="json")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_logfmt_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """logfmt lines lead with timestamp, level and event."""
        configure_structlog(environment="production", log_level="INFO", log_format="logfmt")

        structlog.get_logger().info("server_starting", listen_address="0.0.0.0:9090")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert line.startswith("timestamp=")
        assert " level=info event=server_starting " in line
        assert "listen_address=0.0.0.0:9090" in line

    def test_level_filters_lower_levels(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production", log_level="ERROR")

        structlog.get_logger().info("hidden")
        structlog.get_logger().error("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err


class TestGetLogLevel:
    """Tests for log level resolution."""

    def test_explicit_level(self) -> None:
        assert _get_log_level("debug") == logging.DEBUG

    def test_warn_alias(self) -> None:
        assert _get_log_level("warn") == logging.WARNING

    def test_environment_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert _get_log_level() == logging.ERROR

    def test_unknown_level_defaults_to_info(self) -> None:
        assert _get_log_level("chatty") == logging.INFO
