"""Immutable set of parsed command-line flags.

A FlagSet is produced once per startup attempt by the flag parser and
handed to every validation component. It only contains flags that were
given explicitly; defaults belong to whoever owns the running
configuration.

Flag names are stored without leading dashes, exactly as spelled on the
command line (e.g. ``storage.tsdb.path``, ``web.enable-admin-api``).

Usage:
    flags = FlagSet.of({"agent": "true", "config.file": "agent.yml"})
    flags.has("agent")            # True
    flags.get("storage.tsdb.path")  # None
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class FlagSet(Mapping[str, str]):
    """Read-only mapping of flag name to flag value.

    Attributes:
        entries: Read-only view over the flag name/value pairs.
    """

    entries: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Freeze the given mapping and validate names and values."""
        frozen: dict[str, str] = {}
        for name, value in dict(self.entries).items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"flag name must be a non-empty string, got {name!r}")
            if name.startswith("-"):
                raise ValueError(f"flag name must not include dashes prefix: {name!r}")
            if not isinstance(value, str):
                raise TypeError(
                    f"flag {name!r} must have a string value, got {type(value).__name__}"
                )
            frozen[name] = value
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    @classmethod
    def of(cls, values: Mapping[str, str] | None = None) -> FlagSet:
        """Build a FlagSet from a plain mapping."""
        return cls(entries=MappingProxyType(dict(values or {})))

    def __getitem__(self, name: str) -> str:
        return self.entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FlagSet):
            return dict(self.entries) == dict(other.entries)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __repr__(self) -> str:
        return f"FlagSet({dict(sorted(self.entries.items()))!r})"

    def has(self, name: str) -> bool:
        """Return True if the flag was given, whatever its value."""
        return name in self.entries

    def names(self) -> frozenset[str]:
        """Return the names of all given flags."""
        return frozenset(self.entries)


__all__ = ["FlagSet"]
