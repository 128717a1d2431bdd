"""Remote-write protobuf message negotiation.

Requested message types come from a flag value, either comma-separated
(``a,b``) or given by repeating the flag (the flag parser joins repeats
with commas). Identifiers are checked in request order and the first one
missing from the registry fails the whole request.

Usage:
    validator = ProtoMessageValidator(PROTO_MESSAGE_REGISTRY)
    accepted = validator.validate(parse_message_list(flags.get(name, "")))
"""

from __future__ import annotations

from collections.abc import Sequence

from promgate.domain.errors.startup import ProtoViolationError
from promgate.domain.models.proto_message import ProtoMessageRegistry, ProtoMessageType


def parse_message_list(value: str) -> tuple[str, ...]:
    """Split a comma-delimited flag value into identifiers.

    Whitespace around items is stripped and empty items are dropped.
    """
    return tuple(item.strip() for item in value.split(",") if item.strip())


class ProtoMessageValidator:
    """Validates requested message types against a registry.

    Attributes:
        _registry: Registry of recognized message types.
        _flag_name: Flag named in diagnostics, if any.
    """

    def __init__(
        self, registry: ProtoMessageRegistry, flag_name: str | None = None
    ) -> None:
        self._registry = registry
        self._flag_name = flag_name

    def validate(self, requested: Sequence[str]) -> frozenset[ProtoMessageType]:
        """Resolve requested identifiers to message types.

        Args:
            requested: Identifiers in request order; may contain duplicates.

        Returns:
            The set of accepted message types, or the registry defaults if
            nothing was requested.

        Raises:
            ProtoViolationError: Naming the first unknown identifier.
        """
        if not requested:
            return self._registry.default_set()

        accepted: set[ProtoMessageType] = set()
        for identifier in requested:
            message = self._registry.get(identifier)
            if message is None:
                raise ProtoViolationError(
                    identifier=identifier,
                    known=tuple(sorted(m.identifier for m in self._registry)),
                    flag_name=self._flag_name,
                )
            accepted.add(message)
        return frozenset(accepted)


__all__ = ["ProtoMessageValidator", "parse_message_list"]
