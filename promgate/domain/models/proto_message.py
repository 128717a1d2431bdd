"""Remote-write protobuf message types and their registry.

The remote-write receiver negotiates which protobuf message encodings it
accepts. Only identifiers present in the registry may be requested; the
registry is fixed at construction and supports lookup and membership only.

Usage:
    registry = ProtoMessageRegistry(
        message_types=(WRITE_REQUEST_V1, WRITE_REQUEST_V2),
        defaults=(WRITE_REQUEST_V1, WRITE_REQUEST_V2),
    )
    "prometheus.WriteRequest" in registry  # True
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ProtoMessageType:
    """A recognized remote-write message encoding.

    Attributes:
        identifier: Fully qualified protobuf message name.
        description: Human-readable protocol description.
    """

    identifier: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.identifier or self.identifier != self.identifier.strip():
            raise ValueError(f"invalid protobuf message identifier {self.identifier!r}")

    def __str__(self) -> str:
        return self.identifier


@dataclass(frozen=True)
class ProtoMessageRegistry:
    """Fixed set of recognized message types.

    Attributes:
        message_types: All recognized message types.
        defaults: Message types accepted when none are requested.
    """

    message_types: tuple[ProtoMessageType, ...]
    defaults: tuple[ProtoMessageType, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "message_types", tuple(self.message_types))
        object.__setattr__(self, "defaults", tuple(self.defaults))
        identifiers = [message.identifier for message in self.message_types]
        if len(identifiers) != len(set(identifiers)):
            raise ValueError("registry contains duplicate message identifiers")
        for message in self.defaults:
            if message not in self.message_types:
                raise ValueError(
                    f"default message {message.identifier!r} is not registered"
                )

    @classmethod
    def from_identifiers(cls, *identifiers: str) -> ProtoMessageRegistry:
        """Build a registry whose members are all defaults."""
        message_types = tuple(ProtoMessageType(identifier) for identifier in identifiers)
        return cls(message_types=message_types, defaults=message_types)

    def get(self, identifier: str) -> ProtoMessageType | None:
        """Return the registered message type for identifier, if any."""
        for message in self.message_types:
            if message.identifier == identifier:
                return message
        return None

    def default_set(self) -> frozenset[ProtoMessageType]:
        """Return the message types accepted when none are requested."""
        return frozenset(self.defaults)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.get(identifier) is not None

    def __iter__(self) -> Iterator[ProtoMessageType]:
        return iter(self.message_types)

    def __len__(self) -> int:
        return len(self.message_types)


__all__ = ["ProtoMessageRegistry", "ProtoMessageType"]
