"""Storage and query flag limits.

These are the configured ceilings and floors that bounded flags are
checked against at startup. They are constants, never derived at runtime.

- WAL segments: between 10MiB and 256MiB.
- Block chunk segments: between 1MiB and 4GiB (chunk references hold
  32-bit segment offsets).
- Agent WAL truncation: between one minute and one day.
- Query concurrency: between 1 and 10000 concurrent queries.
"""

MIB = 1 << 20
GIB = 1 << 30

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS

# =============================================================================
# WAL segment size (storage.tsdb.wal-segment-size, storage.agent.wal-segment-size)
# =============================================================================

MIN_WAL_SEGMENT_SIZE_BYTES = 10 * MIB
MAX_WAL_SEGMENT_SIZE_BYTES = 256 * MIB

# =============================================================================
# Block chunk segment size (storage.tsdb.max-block-chunk-segment-size)
# =============================================================================

MIN_BLOCK_CHUNK_SEGMENT_SIZE_BYTES = 1 * MIB
MAX_BLOCK_CHUNK_SEGMENT_SIZE_BYTES = 4 * GIB

# =============================================================================
# Agent WAL truncation (storage.agent.wal-truncate-frequency)
# =============================================================================

MIN_WAL_TRUNCATE_FREQUENCY_MS = 1 * MINUTE_MS
MAX_WAL_TRUNCATE_FREQUENCY_MS = 24 * HOUR_MS

# =============================================================================
# Query concurrency (query.max-concurrency)
# =============================================================================

MIN_QUERY_CONCURRENCY = 1
MAX_QUERY_CONCURRENCY = 10_000

# =============================================================================
# Defaults applied by the running process when a flag is absent
# =============================================================================

DEFAULT_CONFIG_FILE = "prometheus.yml"
DEFAULT_LISTEN_ADDRESS = "0.0.0.0:9090"
