"""Startup validation verdict models.

A startup attempt produces exactly one ValidationVerdict:
- Accepted: the process may serve in the resolved mode
- Rejected: the process must exit non-zero with the given diagnostic

Usage:
    verdict = sequencer.run(flags)
    if isinstance(verdict, Rejected):
        print(verdict.detail, file=sys.stderr)
        return verdict.exit_code
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from promgate.domain.errors.startup import ErrorKind, StartupValidationError
from promgate.domain.models.mode import Mode
from promgate.domain.models.proto_message import ProtoMessageType

if TYPE_CHECKING:
    from promgate.domain.models.prometheus_config import PrometheusConfig

EXIT_CODE_ACCEPTED = 0
EXIT_CODE_REJECTED = 1


class StartupStage(str, Enum):
    """Stages of the startup pipeline, in execution order."""

    INIT = "init"
    MODE_RESOLVED = "mode_resolved"
    CONSTRAINTS_CHECKED = "constraints_checked"
    BOUNDS_CHECKED = "bounds_checked"
    PROTO_CHECKED = "proto_checked"
    EXTERNAL_URL_CHECKED = "external_url_checked"
    CONFIG_CHECKED = "config_checked"


@dataclass(frozen=True)
class Accepted:
    """Startup may proceed.

    Attributes:
        mode: Resolved operating mode.
        protobuf_messages: Accepted remote-write message types.
        external_url: URL under which the server is externally reachable.
        config: Loaded configuration document.
    """

    mode: Mode
    protobuf_messages: frozenset[ProtoMessageType] = frozenset()
    external_url: str = ""
    config: PrometheusConfig | None = field(default=None, hash=False)

    @property
    def is_accepted(self) -> bool:
        return True

    @property
    def exit_code(self) -> int:
        return EXIT_CODE_ACCEPTED


@dataclass(frozen=True)
class Rejected:
    """Startup must not proceed.

    Attributes:
        error_kind: Category of the failure.
        detail: Single-line diagnostic.
        last_passed_stage: Last stage that passed before the failure.
        mode: Resolved mode, if resolution happened.
        error: Triggering exception (excluded from equality).
    """

    error_kind: ErrorKind
    detail: str
    last_passed_stage: StartupStage = StartupStage.INIT
    mode: Mode | None = None
    error: StartupValidationError | None = field(
        default=None, compare=False, hash=False, repr=False
    )

    @classmethod
    def from_error(
        cls,
        error: StartupValidationError,
        last_passed_stage: StartupStage,
        mode: Mode | None = None,
    ) -> Rejected:
        """Package a component error into a verdict."""
        return cls(
            error_kind=error.error_kind,
            detail=str(error),
            last_passed_stage=last_passed_stage,
            mode=mode,
            error=error,
        )

    @property
    def is_accepted(self) -> bool:
        return False

    @property
    def exit_code(self) -> int:
        return EXIT_CODE_REJECTED


ValidationVerdict = Union[Accepted, Rejected]


__all__ = [
    "EXIT_CODE_ACCEPTED",
    "EXIT_CODE_REJECTED",
    "Accepted",
    "Rejected",
    "StartupStage",
    "ValidationVerdict",
]
