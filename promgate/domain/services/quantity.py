"""Parsing of numeric flag values with unit suffixes.

Byte sizes use base-2 multipliers (``KB`` and ``KiB`` both mean 1024
bytes), matching how the storage flags are documented. Durations use the
Prometheus syntax: one or more ``<int><unit>`` terms in descending unit
order, e.g. ``2h``, ``1h30m``, ``500ms``; a bare ``0`` is allowed.

A leading minus sign is accepted by every parser so that negative values
reach the range check and are reported as out of range, not malformed.

Raises:
    QuantityParseError: When a value does not follow the unit's syntax.
"""

from __future__ import annotations

import re

from promgate.domain.models.bound_spec import Unit

_BYTE_MULTIPLIERS: dict[str, int] = {
    "": 1,
    "B": 1,
    "KB": 1 << 10,
    "MB": 1 << 20,
    "GB": 1 << 30,
    "TB": 1 << 40,
    "PB": 1 << 50,
    "EB": 1 << 60,
    "KiB": 1 << 10,
    "MiB": 1 << 20,
    "GiB": 1 << 30,
    "TiB": 1 << 40,
    "PiB": 1 << 50,
    "EiB": 1 << 60,
}

_BYTES_PATTERN = re.compile(r"^(?P<sign>[+-]?)(?P<number>\d+)(?P<unit>[KMGTPE]i?B|B)?$")

_DURATION_PATTERN = re.compile(
    r"^(?:(?P<y>\d+)y)?(?:(?P<w>\d+)w)?(?:(?P<d>\d+)d)?(?:(?P<h>\d+)h)?"
    r"(?:(?P<m>\d+)m)?(?:(?P<s>\d+)s)?(?:(?P<ms>\d+)ms)?$"
)

_DURATION_UNITS_MS: dict[str, int] = {
    "y": 365 * 24 * 60 * 60 * 1000,
    "w": 7 * 24 * 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
    "h": 60 * 60 * 1000,
    "m": 60 * 1000,
    "s": 1000,
    "ms": 1,
}

_COUNT_PATTERN = re.compile(r"^[+-]?\d+$")


class QuantityParseError(ValueError):
    """Raised when a flag value does not match the syntax of its unit."""


def parse_bytes(value: str) -> int:
    """Parse a base-2 byte size such as ``256MB`` into bytes."""
    match = _BYTES_PATTERN.match(value.strip())
    if match is None:
        raise QuantityParseError(f"invalid byte size {value!r}")
    number = int(match.group("number")) * _BYTE_MULTIPLIERS[match.group("unit") or ""]
    return -number if match.group("sign") == "-" else number


def parse_duration_ms(value: str) -> int:
    """Parse a Prometheus duration such as ``1h30m`` into milliseconds."""
    text = value.strip()
    negative = text.startswith("-")
    if text[:1] in ("-", "+"):
        text = text[1:]
    if text == "0":
        return 0
    match = _DURATION_PATTERN.match(text)
    if not text or match is None:
        raise QuantityParseError(f"invalid duration {value!r}")
    total = 0
    for unit, multiplier in _DURATION_UNITS_MS.items():
        amount = match.group(unit)
        if amount is not None:
            total += int(amount) * multiplier
    return -total if negative else total


def parse_count(value: str) -> int:
    """Parse a plain integer count."""
    text = value.strip()
    if not _COUNT_PATTERN.match(text):
        raise QuantityParseError(f"invalid integer {value!r}")
    return int(text)


def parse_quantity(value: str, unit: Unit) -> int:
    """Parse a flag value in the base unit of ``unit``."""
    if unit is Unit.BYTES:
        return parse_bytes(value)
    if unit is Unit.DURATION:
        return parse_duration_ms(value)
    return parse_count(value)


def format_quantity(value: int, unit: Unit) -> str:
    """Render a base-unit value for diagnostics (``10MiB``, ``1h``, ``42``)."""
    if unit is Unit.BYTES:
        for suffix in ("EiB", "PiB", "TiB", "GiB", "MiB", "KiB"):
            multiplier = _BYTE_MULTIPLIERS[suffix]
            if value and value % multiplier == 0:
                return f"{value // multiplier}{suffix}"
        return f"{value}B"
    if unit is Unit.DURATION:
        if value == 0:
            return "0s"
        sign = "-" if value < 0 else ""
        remaining = abs(value)
        parts: list[str] = []
        for suffix, multiplier in _DURATION_UNITS_MS.items():
            amount, remaining = divmod(remaining, multiplier)
            if amount:
                parts.append(f"{amount}{suffix}")
        return sign + "".join(parts)
    return str(value)


__all__ = [
    "QuantityParseError",
    "format_quantity",
    "parse_bytes",
    "parse_count",
    "parse_duration_ms",
    "parse_quantity",
]
