"""Observability infrastructure for structured logging and correlation.

Usage:
    from promgate.infrastructure.observability import (
        configure_structlog,
        startup_attempt,
    )

    configure_structlog(environment="production", log_format="json")
    with startup_attempt():
        ...
"""

from promgate.infrastructure.observability.correlation import (
    add_attempt_id,
    current_attempt_id,
    new_attempt_id,
    startup_attempt,
)
from promgate.infrastructure.observability.logging import configure_structlog

__all__: list[str] = [
    "add_attempt_id",
    "configure_structlog",
    "current_attempt_id",
    "new_attempt_id",
    "startup_attempt",
]
