"""Numeric flag bounds validation.

For every bound whose flag was given, the value is parsed in the bound's
unit and checked against the inclusive range. A value that does not parse
is MALFORMED; one that parses but falls outside the range (zero and
negative values included) is OUT_OF_RANGE. Both are fatal. Absent flags
are skipped; defaults are not this validator's concern.
"""

from __future__ import annotations

from promgate.domain.errors.startup import BoundsViolationError, BoundsViolationKind
from promgate.domain.models.bound_spec import BoundSpec, BoundsTable
from promgate.domain.models.flag_set import FlagSet
from promgate.domain.services.quantity import (
    QuantityParseError,
    format_quantity,
    parse_quantity,
)


def _violation(
    spec: BoundSpec, kind: BoundsViolationKind, value: str
) -> BoundsViolationError:
    return BoundsViolationError(
        kind=kind,
        flag_name=spec.flag_name,
        value=value,
        min_value=format_quantity(spec.min_value, spec.unit),
        max_value=format_quantity(spec.max_value, spec.unit),
    )


class BoundsValidator:
    """Validates numeric flags against a bounds table."""

    def check(self, spec: BoundSpec, raw_value: str) -> int:
        """Parse and range-check a single value.

        Args:
            spec: Bound to check against.
            raw_value: Flag value as given on the command line.

        Returns:
            The parsed value in base units.

        Raises:
            BoundsViolationError: If the value is malformed or out of range.
        """
        try:
            value = parse_quantity(raw_value, spec.unit)
        except QuantityParseError as e:
            raise _violation(spec, BoundsViolationKind.MALFORMED, raw_value) from e

        if not spec.contains(value):
            raise _violation(spec, BoundsViolationKind.OUT_OF_RANGE, raw_value)
        return value

    def validate(self, flags: FlagSet, table: BoundsTable) -> None:
        """Check every bounded flag present in the flags.

        Args:
            flags: Parsed command-line flags.
            table: Bounds to enforce, checked in declaration order.

        Raises:
            BoundsViolationError: For the first malformed or out-of-range flag.
        """
        for spec in table:
            raw_value = flags.get(spec.flag_name)
            if raw_value is None:
                continue
            self.check(spec, raw_value)


__all__ = ["BoundsValidator"]
