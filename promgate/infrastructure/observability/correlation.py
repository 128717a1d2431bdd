"""Correlation of log lines to one startup attempt.

A process makes exactly one startup attempt. Everything logged while the
attempt is open (validation stages, the verdict, the server run) carries
the attempt's ``correlation_id``; once the scope closes the previous id,
normally none, is restored.

Usage:
    with startup_attempt() as correlation_id:
        verdict = validate_startup(flags)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_current_attempt: ContextVar[str | None] = ContextVar("startup_attempt", default=None)


def new_attempt_id() -> str:
    """Return a fresh 32-character hex id for a startup attempt."""
    return uuid4().hex


def current_attempt_id() -> str | None:
    return _current_attempt.get()


@contextmanager
def startup_attempt(correlation_id: str | None = None) -> Iterator[str]:
    """Open the scope of a startup attempt.

    Args:
        correlation_id: Id to use; a new one is generated when omitted.

    Yields:
        The correlation id bound for the duration of the block.
    """
    attempt_id = correlation_id or new_attempt_id()
    token = _current_attempt.set(attempt_id)
    try:
        yield attempt_id
    finally:
        _current_attempt.reset(token)


def add_attempt_id(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor stamping the open attempt's id on each event.

    An explicit ``correlation_id`` passed to the log call is left alone.
    """
    attempt_id = _current_attempt.get()
    if attempt_id is not None:
        event_dict.setdefault("correlation_id", attempt_id)
    return event_dict
