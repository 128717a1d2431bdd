"""
Domain layer - Flag sets, modes, rule tables and startup errors.

This layer contains:
- Domain models (FlagSet, Mode, ConstraintRule, BoundSpec, verdicts)
- Static primitives (flag names, constraint/bounds tables, proto registry)
- Pure helpers (quantity parsing)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
"""

from promgate.domain.exceptions import PromgateError
from promgate.domain.models.flag_set import FlagSet
from promgate.domain.models.mode import Mode

__all__: list[str] = ["FlagSet", "Mode", "PromgateError"]
