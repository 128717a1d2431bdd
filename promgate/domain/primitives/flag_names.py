"""Command-line flag names known to the startup gate.

Names are spelled without leading dashes, exactly as they follow ``--``
on the command line.
"""

# Mode selection
AGENT = "agent"
ENABLE_FEATURE = "enable-feature"

# Web
WEB_LISTEN_ADDRESS = "web.listen-address"
WEB_EXTERNAL_URL = "web.external-url"
WEB_ENABLE_ADMIN_API = "web.enable-admin-api"
WEB_ENABLE_LIFECYCLE = "web.enable-lifecycle"
WEB_ENABLE_REMOTE_WRITE_RECEIVER = "web.enable-remote-write-receiver"
WEB_REMOTE_WRITE_RECEIVER_PROTO_MSGS = (
    "web.remote-write-receiver.accepted-protobuf-messages"
)

# Config
CONFIG_FILE = "config.file"

# Server storage
STORAGE_TSDB_PATH = "storage.tsdb.path"
STORAGE_TSDB_RETENTION_TIME = "storage.tsdb.retention.time"
STORAGE_TSDB_RETENTION_SIZE = "storage.tsdb.retention.size"
STORAGE_TSDB_WAL_SEGMENT_SIZE = "storage.tsdb.wal-segment-size"
STORAGE_TSDB_MAX_BLOCK_CHUNK_SEGMENT_SIZE = "storage.tsdb.max-block-chunk-segment-size"
STORAGE_TSDB_MIN_BLOCK_DURATION = "storage.tsdb.min-block-duration"
STORAGE_TSDB_MAX_BLOCK_DURATION = "storage.tsdb.max-block-duration"
STORAGE_TSDB_NO_LOCKFILE = "storage.tsdb.no-lockfile"
STORAGE_TSDB_WAL_COMPRESSION = "storage.tsdb.wal-compression"
STORAGE_REMOTE_READ_SAMPLE_LIMIT = "storage.remote.read-sample-limit"
STORAGE_REMOTE_READ_CONCURRENT_LIMIT = "storage.remote.read-concurrent-limit"

# Agent storage
STORAGE_AGENT_PATH = "storage.agent.path"
STORAGE_AGENT_WAL_SEGMENT_SIZE = "storage.agent.wal-segment-size"
STORAGE_AGENT_WAL_COMPRESSION = "storage.agent.wal-compression"
STORAGE_AGENT_WAL_TRUNCATE_FREQUENCY = "storage.agent.wal-truncate-frequency"
STORAGE_AGENT_RETENTION_MIN_TIME = "storage.agent.retention.min-time"
STORAGE_AGENT_RETENTION_MAX_TIME = "storage.agent.retention.max-time"
STORAGE_AGENT_NO_LOCKFILE = "storage.agent.no-lockfile"

# Rules, alerting and query
RULES_ALERT_FOR_OUTAGE_TOLERANCE = "rules.alert.for-outage-tolerance"
RULES_ALERT_FOR_GRACE_PERIOD = "rules.alert.for-grace-period"
RULES_ALERT_RESEND_DELAY = "rules.alert.resend-delay"
ALERTMANAGER_NOTIFICATION_QUEUE_CAPACITY = "alertmanager.notification-queue-capacity"
QUERY_LOOKBACK_DELTA = "query.lookback-delta"
QUERY_TIMEOUT = "query.timeout"
QUERY_MAX_CONCURRENCY = "query.max-concurrency"
QUERY_MAX_SAMPLES = "query.max-samples"

# Logging
LOG_LEVEL = "log.level"
LOG_FORMAT = "log.format"

SERVER_ONLY_FLAGS: tuple[str, ...] = (
    WEB_ENABLE_ADMIN_API,
    STORAGE_TSDB_PATH,
    STORAGE_TSDB_RETENTION_TIME,
    STORAGE_TSDB_RETENTION_SIZE,
    STORAGE_TSDB_WAL_SEGMENT_SIZE,
    STORAGE_TSDB_MAX_BLOCK_CHUNK_SEGMENT_SIZE,
    STORAGE_TSDB_MIN_BLOCK_DURATION,
    STORAGE_TSDB_MAX_BLOCK_DURATION,
    STORAGE_TSDB_NO_LOCKFILE,
    STORAGE_TSDB_WAL_COMPRESSION,
    STORAGE_REMOTE_READ_SAMPLE_LIMIT,
    STORAGE_REMOTE_READ_CONCURRENT_LIMIT,
    RULES_ALERT_FOR_OUTAGE_TOLERANCE,
    RULES_ALERT_FOR_GRACE_PERIOD,
    RULES_ALERT_RESEND_DELAY,
    ALERTMANAGER_NOTIFICATION_QUEUE_CAPACITY,
    QUERY_LOOKBACK_DELTA,
    QUERY_TIMEOUT,
    QUERY_MAX_CONCURRENCY,
    QUERY_MAX_SAMPLES,
)
"""Flags that only make sense with local storage, rules and queries."""

AGENT_ONLY_FLAGS: tuple[str, ...] = (
    STORAGE_AGENT_PATH,
    STORAGE_AGENT_WAL_SEGMENT_SIZE,
    STORAGE_AGENT_WAL_COMPRESSION,
    STORAGE_AGENT_WAL_TRUNCATE_FREQUENCY,
    STORAGE_AGENT_RETENTION_MIN_TIME,
    STORAGE_AGENT_RETENTION_MAX_TIME,
    STORAGE_AGENT_NO_LOCKFILE,
)
"""Flags that only configure the agent's forwarding WAL."""
