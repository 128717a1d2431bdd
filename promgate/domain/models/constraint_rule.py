"""Declarative mode/flag constraint rules.

Each ConstraintRule binds a flag to a presence policy under one mode.
Rules live in a ConstraintTable, which keeps declaration order: the
enforcer reports the first violated rule in that order.

Usage:
    table = ConstraintTable(
        rules=(
            ConstraintRule(Mode.AGENT, "web.enable-admin-api", Policy.FORBIDDEN),
            ConstraintRule(Mode.SERVER, "storage.agent.path", Policy.REQUIRED_ABSENT),
        )
    )
    for rule in table.rules_for(Mode.AGENT):
        ...
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from promgate.domain.models.mode import Mode


class Policy(str, Enum):
    """Presence policy for a flag under a given mode.

    - FORBIDDEN: the flag must not be given at all, whatever its value
    - REQUIRED_ABSENT: the flag must not carry a value (an explicitly
      empty value resets the flag and counts as absent)
    - REQUIRED_PRESENT: the flag must be given with a non-empty value
    """

    FORBIDDEN = "forbidden"
    REQUIRED_ABSENT = "required_absent"
    REQUIRED_PRESENT = "required_present"


@dataclass(frozen=True)
class ConstraintRule:
    """A single (mode, flag, policy) constraint.

    Attributes:
        mode: Mode the rule applies to.
        flag_name: Flag name without leading dashes.
        policy: Presence policy enforced for the flag.
    """

    mode: Mode
    flag_name: str
    policy: Policy

    def __post_init__(self) -> None:
        if not self.flag_name:
            raise ValueError("flag_name cannot be empty")

    def describe(self) -> str:
        """Render the rule as a short human-readable clause."""
        if self.policy is Policy.FORBIDDEN:
            return f"flag '{self.flag_name}' cannot be used in {self.mode.value} mode"
        if self.policy is Policy.REQUIRED_ABSENT:
            return f"flag '{self.flag_name}' must not be set in {self.mode.value} mode"
        return f"flag '{self.flag_name}' is required in {self.mode.value} mode"


@dataclass(frozen=True)
class ConfigSectionRule:
    """A top-level config file section that a mode does not accept.

    Attributes:
        mode: Mode the rule applies to.
        section: Top-level key of the configuration file.
    """

    mode: Mode
    section: str

    def describe(self) -> str:
        """Render the rule as a short human-readable clause."""
        return (
            f"config section '{self.section}' is not allowed in "
            f"{self.mode.value} mode"
        )


@dataclass(frozen=True)
class ConstraintTable:
    """Ordered, immutable collection of constraint rules.

    Attributes:
        rules: Flag rules in declaration order.
        section_rules: Config section rules in declaration order.
    """

    rules: tuple[ConstraintRule, ...]
    section_rules: tuple[ConfigSectionRule, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store tuples.
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "section_rules", tuple(self.section_rules))
        seen: set[tuple[Mode, str]] = set()
        for rule in self.rules:
            key = (rule.mode, rule.flag_name)
            if key in seen:
                raise ValueError(
                    f"duplicate constraint for flag '{rule.flag_name}' "
                    f"in {rule.mode.value} mode"
                )
            seen.add(key)

    def rules_for(self, mode: Mode) -> tuple[ConstraintRule, ...]:
        """Return the flag rules that apply to a mode, in declaration order."""
        return tuple(rule for rule in self.rules if rule.mode is mode)

    def section_rules_for(self, mode: Mode) -> tuple[ConfigSectionRule, ...]:
        """Return the config section rules that apply to a mode."""
        return tuple(rule for rule in self.section_rules if rule.mode is mode)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[ConstraintRule]:
        return iter(self.rules)


__all__ = ["ConfigSectionRule", "ConstraintRule", "ConstraintTable", "Policy"]
