"""Port for the operational metrics of a startup attempt.

The startup hooks record what happened (one verdict per attempt, then the
serving mode once accepted); the ``/metrics`` route renders it for
scraping.
"""

from __future__ import annotations

from typing import Protocol

from promgate.domain.models.verdict import Accepted, ValidationVerdict


class StartupMetricsPort(Protocol):
    """Records startup verdicts and renders them in exposition format."""

    @property
    def content_type(self) -> str:
        """Media type of ``render`` output."""
        ...

    def record_verdict(self, verdict: ValidationVerdict) -> None:
        """Count one verdict, labelled by outcome and error kind."""
        ...

    def record_serving(self, verdict: Accepted) -> None:
        """Mark the start of serving in the accepted mode."""
        ...

    def render(self) -> bytes:
        ...


__all__ = ["StartupMetricsPort"]
