"""Static startup validation tables.

This module defines the process-wide tables the startup gate checks
against. They are built once at import and never modified.

Usage:
    from promgate.domain.primitives.startup_tables import (
        BOUNDS_TABLE,
        CONSTRAINT_TABLE,
        PROTO_MESSAGE_REGISTRY,
    )
"""

from promgate.config.storage_limits import (
    MAX_BLOCK_CHUNK_SEGMENT_SIZE_BYTES,
    MAX_QUERY_CONCURRENCY,
    MAX_WAL_SEGMENT_SIZE_BYTES,
    MAX_WAL_TRUNCATE_FREQUENCY_MS,
    MIN_BLOCK_CHUNK_SEGMENT_SIZE_BYTES,
    MIN_QUERY_CONCURRENCY,
    MIN_WAL_SEGMENT_SIZE_BYTES,
    MIN_WAL_TRUNCATE_FREQUENCY_MS,
)
from promgate.domain.models.bound_spec import BoundSpec, BoundsTable, Unit
from promgate.domain.models.constraint_rule import (
    ConfigSectionRule,
    ConstraintRule,
    ConstraintTable,
    Policy,
)
from promgate.domain.models.mode import Mode
from promgate.domain.models.proto_message import ProtoMessageRegistry, ProtoMessageType
from promgate.domain.primitives import flag_names

# =============================================================================
# Mode constraints
# =============================================================================

AGENT_FORBIDDEN_CONFIG_SECTIONS: tuple[str, ...] = (
    "rule_files",
    "alerting",
    "remote_read",
    "storage",
)

SERVER_FORBIDDEN_CONFIG_SECTIONS: tuple[str, ...] = ("agent",)

CONSTRAINT_TABLE = ConstraintTable(
    rules=tuple(
        ConstraintRule(Mode.AGENT, name, Policy.FORBIDDEN)
        for name in flag_names.SERVER_ONLY_FLAGS
    )
    + tuple(
        ConstraintRule(Mode.SERVER, name, Policy.REQUIRED_ABSENT)
        for name in flag_names.AGENT_ONLY_FLAGS
    ),
    section_rules=tuple(
        ConfigSectionRule(Mode.AGENT, section)
        for section in AGENT_FORBIDDEN_CONFIG_SECTIONS
    )
    + tuple(
        ConfigSectionRule(Mode.SERVER, section)
        for section in SERVER_FORBIDDEN_CONFIG_SECTIONS
    ),
)
"""Server-only flags are forbidden for the agent, agent-only flags must be unset for the server."""

# =============================================================================
# Numeric bounds
# =============================================================================

BOUNDS_TABLE = BoundsTable(
    specs=(
        BoundSpec(
            flag_name=flag_names.STORAGE_TSDB_WAL_SEGMENT_SIZE,
            unit=Unit.BYTES,
            min_value=MIN_WAL_SEGMENT_SIZE_BYTES,
            max_value=MAX_WAL_SEGMENT_SIZE_BYTES,
        ),
        BoundSpec(
            flag_name=flag_names.STORAGE_AGENT_WAL_SEGMENT_SIZE,
            unit=Unit.BYTES,
            min_value=MIN_WAL_SEGMENT_SIZE_BYTES,
            max_value=MAX_WAL_SEGMENT_SIZE_BYTES,
        ),
        BoundSpec(
            flag_name=flag_names.STORAGE_TSDB_MAX_BLOCK_CHUNK_SEGMENT_SIZE,
            unit=Unit.BYTES,
            min_value=MIN_BLOCK_CHUNK_SEGMENT_SIZE_BYTES,
            max_value=MAX_BLOCK_CHUNK_SEGMENT_SIZE_BYTES,
        ),
        BoundSpec(
            flag_name=flag_names.STORAGE_AGENT_WAL_TRUNCATE_FREQUENCY,
            unit=Unit.DURATION,
            min_value=MIN_WAL_TRUNCATE_FREQUENCY_MS,
            max_value=MAX_WAL_TRUNCATE_FREQUENCY_MS,
        ),
        BoundSpec(
            flag_name=flag_names.QUERY_MAX_CONCURRENCY,
            unit=Unit.COUNT,
            min_value=MIN_QUERY_CONCURRENCY,
            max_value=MAX_QUERY_CONCURRENCY,
        ),
    )
)

# =============================================================================
# Remote-write protobuf messages
# =============================================================================

WRITE_REQUEST_V1 = ProtoMessageType(
    identifier="prometheus.WriteRequest",
    description="remote-write 1.0",
)

WRITE_REQUEST_V2 = ProtoMessageType(
    identifier="io.prometheus.write.v2.Request",
    description="remote-write 2.0",
)

PROTO_MESSAGE_REGISTRY = ProtoMessageRegistry(
    message_types=(WRITE_REQUEST_V1, WRITE_REQUEST_V2),
    defaults=(WRITE_REQUEST_V1, WRITE_REQUEST_V2),
)
