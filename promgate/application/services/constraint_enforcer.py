"""Mode constraint enforcement.

Checks the flags, and later the loaded configuration document, against
the declarative constraint table for the resolved mode. Rules are
evaluated in declaration order and the first violated rule is the one
reported: a failed attempt yields exactly one diagnostic.

Usage:
    enforcer = ConstraintEnforcer(CONSTRAINT_TABLE)
    enforcer.enforce(Mode.AGENT, flags)          # raises on violation
    enforcer.enforce_config(Mode.AGENT, config)  # raises on violation
"""

from __future__ import annotations

from promgate.domain.errors.startup import ConstraintViolationError
from promgate.domain.models.constraint_rule import (
    ConstraintRule,
    ConstraintTable,
    Policy,
)
from promgate.domain.models.flag_set import FlagSet
from promgate.domain.models.mode import Mode
from promgate.domain.models.prometheus_config import PrometheusConfig


def _is_violated(rule: ConstraintRule, flags: FlagSet) -> bool:
    value = flags.get(rule.flag_name)
    if rule.policy is Policy.FORBIDDEN:
        return value is not None
    if rule.policy is Policy.REQUIRED_ABSENT:
        return bool(value)
    return not value


class ConstraintEnforcer:
    """Rejects flag and config section combinations a mode does not allow.

    Attributes:
        _table: Constraint table to enforce.
    """

    def __init__(self, table: ConstraintTable) -> None:
        """Initialize the enforcer.

        Args:
            table: Constraint table to enforce.
        """
        self._table = table

    @property
    def table(self) -> ConstraintTable:
        return self._table

    def enforce(self, mode: Mode, flags: FlagSet) -> None:
        """Check every flag rule of the mode against the flags.

        Args:
            mode: Resolved operating mode.
            flags: Parsed command-line flags.

        Raises:
            ConstraintViolationError: For the first violated rule.
        """
        for rule in self._table.rules_for(mode):
            if _is_violated(rule, flags):
                raise ConstraintViolationError(
                    mode=mode,
                    subject=rule.flag_name,
                    rule=rule.describe(),
                    value=flags.get(rule.flag_name),
                    policy=rule.policy,
                )

    def enforce_config(self, mode: Mode, config: PrometheusConfig) -> None:
        """Check the top-level sections of the configuration document.

        A forbidden section written with an empty value (``rule_files: []``)
        configures nothing and is allowed.

        Args:
            mode: Resolved operating mode.
            config: Loaded configuration document.

        Raises:
            ConstraintViolationError: For the first forbidden section with content.
        """
        sections = config.populated_sections()
        for rule in self._table.section_rules_for(mode):
            if rule.section in sections:
                raise ConstraintViolationError(
                    mode=mode,
                    subject=rule.section,
                    rule=rule.describe(),
                )


__all__ = ["ConstraintEnforcer"]
