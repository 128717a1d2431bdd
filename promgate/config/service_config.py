"""Service settings read from the environment.

Environment Variables:
- ENVIRONMENT: deployment environment; ``production`` switches logs to JSON
  (default: development)
- SERVICE_NAME: service label on operational metrics (default: promgate)
- LOG_LEVEL: structlog filtering level (default: INFO)
- PROMGATE_SHUTDOWN_TIMEOUT_SECONDS: graceful shutdown timeout for the HTTP
  server (default: 30, min: 1, max: 300)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


DEFAULT_ENVIRONMENT = "development"
DEFAULT_SERVICE_NAME = "promgate"
DEFAULT_LOG_LEVEL = "INFO"

DEFAULT_SHUTDOWN_TIMEOUT_SECONDS = 30
MIN_SHUTDOWN_TIMEOUT_SECONDS = 1
MAX_SHUTDOWN_TIMEOUT_SECONDS = 300


@dataclass(frozen=True)
class ServiceConfig:
    """Process-level settings that are not command-line flags.

    Attributes:
        environment: Deployment environment name.
        service_name: Value of the ``service`` metrics label.
        log_level: Log level name.
        shutdown_timeout_seconds: Graceful shutdown timeout.
    """

    environment: str = DEFAULT_ENVIRONMENT
    service_name: str = DEFAULT_SERVICE_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    shutdown_timeout_seconds: int = DEFAULT_SHUTDOWN_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.service_name:
            raise ValueError("service_name cannot be empty")
        if (
            not MIN_SHUTDOWN_TIMEOUT_SECONDS
            <= self.shutdown_timeout_seconds
            <= MAX_SHUTDOWN_TIMEOUT_SECONDS
        ):
            raise ValueError(
                f"shutdown_timeout_seconds must be between {MIN_SHUTDOWN_TIMEOUT_SECONDS} "
                f"and {MAX_SHUTDOWN_TIMEOUT_SECONDS}, got {self.shutdown_timeout_seconds}"
            )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> ServiceConfig:
        """Create configuration from environment variables.

        Out-of-range shutdown timeouts are clamped, invalid integers fall
        back to the default.
        """
        shutdown_timeout = _get_int_env(
            "PROMGATE_SHUTDOWN_TIMEOUT_SECONDS", DEFAULT_SHUTDOWN_TIMEOUT_SECONDS
        )
        shutdown_timeout = max(
            MIN_SHUTDOWN_TIMEOUT_SECONDS,
            min(MAX_SHUTDOWN_TIMEOUT_SECONDS, shutdown_timeout),
        )
        return cls(
            environment=os.environ.get("ENVIRONMENT", DEFAULT_ENVIRONMENT),
            service_name=os.environ.get("SERVICE_NAME", DEFAULT_SERVICE_NAME)
            or DEFAULT_SERVICE_NAME,
            log_level=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            shutdown_timeout_seconds=shutdown_timeout,
        )


__all__ = ["ServiceConfig"]
