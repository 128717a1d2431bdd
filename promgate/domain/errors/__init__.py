"""Domain errors for promgate.

All exceptions inherit from PromgateError.
"""

from promgate.domain.errors.startup import (
    BoundsViolationError,
    BoundsViolationKind,
    ConfigParseError,
    ConstraintViolationError,
    ErrorKind,
    ExternalUrlError,
    ProtoViolationError,
    StartupValidationError,
)

__all__: list[str] = [
    "BoundsViolationError",
    "BoundsViolationKind",
    "ConfigParseError",
    "ConstraintViolationError",
    "ErrorKind",
    "ExternalUrlError",
    "ProtoViolationError",
    "StartupValidationError",
]
