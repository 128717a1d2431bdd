"""Startup validation errors.

This module provides the exception classes raised while deciding whether
a startup attempt may proceed:
- StartupValidationError: Base class for all startup validation errors
- ConstraintViolationError: Flag or config section not allowed in the mode
- BoundsViolationError: Numeric flag malformed or out of range
- ProtoViolationError: Unknown remote-write protobuf message requested
- ConfigParseError: Config file missing, unreadable or invalid
- ExternalUrlError: External URL cannot be computed from the flags

Every error is terminal for the current attempt. Each carries an
``error_kind`` and renders as a single actionable diagnostic line.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from promgate.domain.exceptions import PromgateError
from promgate.domain.models.constraint_rule import Policy
from promgate.domain.models.mode import Mode


class ErrorKind(str, Enum):
    """Category of a rejected startup attempt."""

    CONSTRAINT_VIOLATION = "constraint_violation"
    BOUNDS_VIOLATION = "bounds_violation"
    PROTO_VIOLATION = "proto_violation"
    CONFIG_PARSE_ERROR = "config_parse_error"
    INVALID_EXTERNAL_URL = "invalid_external_url"


class BoundsViolationKind(str, Enum):
    """Why a bounded flag was rejected."""

    MALFORMED = "malformed"
    OUT_OF_RANGE = "out_of_range"


class StartupValidationError(PromgateError):
    """Base class for startup validation errors.

    Attributes:
        error_kind: Category reported in the rejected verdict.
    """

    error_kind: ClassVar[ErrorKind]


class ConstraintViolationError(StartupValidationError):
    """Raised when a flag or config section breaks a mode constraint.

    Attributes:
        mode: Resolved operating mode.
        subject: Flag name or config section name.
        value: Offending flag value, or None for absent flags and sections.
        policy: Policy of the violated flag rule, None for config sections.
        rule: Human-readable description of the violated rule.
    """

    error_kind = ErrorKind.CONSTRAINT_VIOLATION

    def __init__(
        self,
        mode: Mode,
        subject: str,
        rule: str,
        value: str | None = None,
        policy: Policy | None = None,
    ) -> None:
        self.mode = mode
        self.subject = subject
        self.value = value
        self.policy = policy
        self.rule = rule

        message = rule
        if value:
            message = f"{rule} (got {value!r})"
        super().__init__(message)


class BoundsViolationError(StartupValidationError):
    """Raised when a numeric flag is malformed or out of its range.

    Attributes:
        kind: MALFORMED or OUT_OF_RANGE.
        flag_name: Name of the bounded flag.
        value: Raw flag value as given.
        min_value: Rendered lower bound.
        max_value: Rendered upper bound.
    """

    error_kind = ErrorKind.BOUNDS_VIOLATION

    def __init__(
        self,
        kind: BoundsViolationKind,
        flag_name: str,
        value: str,
        min_value: str,
        max_value: str,
    ) -> None:
        self.kind = kind
        self.flag_name = flag_name
        self.value = value
        self.min_value = min_value
        self.max_value = max_value

        if kind is BoundsViolationKind.MALFORMED:
            message = f"flag '{flag_name}' has invalid value {value!r}"
        else:
            message = (
                f"flag '{flag_name}' must be set between {min_value} and "
                f"{max_value}, got {value!r}"
            )
        super().__init__(message)


class ProtoViolationError(StartupValidationError):
    """Raised when an unknown protobuf message type is requested.

    Attributes:
        identifier: First unknown identifier in request order.
        flag_name: Flag the identifiers were taken from.
        known: Registered identifiers, sorted.
    """

    error_kind = ErrorKind.PROTO_VIOLATION

    def __init__(
        self,
        identifier: str,
        known: tuple[str, ...],
        flag_name: str | None = None,
    ) -> None:
        self.identifier = identifier
        self.flag_name = flag_name
        self.known = known

        message = f"unknown remote-write protobuf message type {identifier!r}"
        if flag_name:
            message = f"flag '{flag_name}': {message}"
        message = f"{message}; supported: {', '.join(known)}"
        super().__init__(message)


class ConfigParseError(StartupValidationError):
    """Raised when the configuration file cannot be loaded.

    Attributes:
        path: Path of the configuration file.
        reason: Short description of the failure.
    """

    error_kind = ErrorKind.CONFIG_PARSE_ERROR

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"error loading config from {path!r}: {reason}")


class ExternalUrlError(StartupValidationError):
    """Raised when the external URL cannot be computed.

    Attributes:
        url: Value of the external URL flag (may be empty).
        reason: Short description of the failure.
    """

    error_kind = ErrorKind.INVALID_EXTERNAL_URL

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"parse external URL {url!r}: {reason}")


__all__ = [
    "BoundsViolationError",
    "BoundsViolationKind",
    "ConfigParseError",
    "ConstraintViolationError",
    "ErrorKind",
    "ExternalUrlError",
    "ProtoViolationError",
    "StartupValidationError",
]
