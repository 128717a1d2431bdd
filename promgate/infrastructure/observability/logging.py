"""Structured logging configuration with structlog.

This module provides centralized structlog configuration, supporting both
production (JSON) and development (console) output modes, plus the
``--log.format`` renderers (json, logfmt). Log lines go to
stderr, the stream the startup diagnostic is also written to.

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "startup_validation_accepted",
        "correlation_id": "32 hex chars",
        "component": "startup_sequencer",
        ...additional context
    }

Usage:
    from promgate.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
    configure_structlog(environment="development", log_format="logfmt")
"""

import logging
import os
import sys
from typing import cast

import structlog
from structlog.typing import Processor

from promgate.infrastructure.observability.correlation import add_attempt_id

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

LOGFMT_KEY_ORDER = ["timestamp", "level", "event"]


def _get_log_level(level_name: str | None = None) -> int:
    """Resolve a log level name, falling back to the environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    name = (level_name or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    level = getattr(logging, name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def _final_processor(environment: str, log_format: str | None) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "logfmt":
        return structlog.processors.LogfmtRenderer(key_order=LOGFMT_KEY_ORDER)
    if environment == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_structlog(
    environment: str = "production",
    log_level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog for the process.

    Should be called once, before the first log line.

    Args:
        environment: 'production' for JSON output, anything else for console.
        log_level: Level name; defaults to the LOG_LEVEL environment variable.
        log_format: 'json' or 'logfmt' from the command line; overrides the
            environment's renderer.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, add_attempt_id),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors + [_final_processor(environment, log_format)],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

