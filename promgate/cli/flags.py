"""Command-line flag parsing.

Turns ``argv`` into an immutable FlagSet. Only flags given explicitly end
up in the FlagSet: every option defaults to ``argparse.SUPPRESS``.
Boolean flags are recorded as ``"true"``; repeatable flags are joined
with commas. Any parse error prints usage and exits with status 1.

Usage:
    flags = parse_flags(["--agent", "--config.file=agent.yml"])
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from promgate import __version__
from promgate.config.storage_limits import DEFAULT_CONFIG_FILE, DEFAULT_LISTEN_ADDRESS
from promgate.domain.models.flag_set import FlagSet
from promgate.domain.primitives import flag_names

PARSE_ERROR_EXIT_CODE = 1

BOOLEAN_FLAGS: dict[str, str] = {
    flag_names.AGENT: "Run in agent mode: scrape and forward only.",
    flag_names.WEB_ENABLE_ADMIN_API: "Enable API endpoints for admin control actions.",
    flag_names.WEB_ENABLE_LIFECYCLE: "Enable shutdown and reload via HTTP request.",
    flag_names.WEB_ENABLE_REMOTE_WRITE_RECEIVER: "Enable the remote-write receiver.",
    flag_names.STORAGE_TSDB_NO_LOCKFILE: "Do not create a lockfile in the data directory.",
    flag_names.STORAGE_TSDB_WAL_COMPRESSION: "Compress the tsdb WAL.",
    flag_names.STORAGE_AGENT_WAL_COMPRESSION: "Compress the agent WAL.",
    flag_names.STORAGE_AGENT_NO_LOCKFILE: "Do not create a lockfile in the agent data directory.",
}

REPEATABLE_FLAGS: dict[str, str] = {
    flag_names.ENABLE_FEATURE: "Comma separated feature names to enable.",
    flag_names.WEB_REMOTE_WRITE_RECEIVER_PROTO_MSGS: (
        "Remote-write protobuf message types to accept; repeat or comma separate."
    ),
}

VALUE_FLAGS: dict[str, str] = {
    flag_names.CONFIG_FILE: f"Configuration file path (default: {DEFAULT_CONFIG_FILE}).",
    flag_names.WEB_LISTEN_ADDRESS: (
        f"Address to listen on for the web interface (default: {DEFAULT_LISTEN_ADDRESS})."
    ),
    flag_names.WEB_EXTERNAL_URL: "URL under which the server is externally reachable.",
    flag_names.STORAGE_TSDB_PATH: "Base path for metrics storage.",
    flag_names.STORAGE_TSDB_RETENTION_TIME: "How long to retain samples in storage.",
    flag_names.STORAGE_TSDB_RETENTION_SIZE: "Maximum number of bytes of storage blocks.",
    flag_names.STORAGE_TSDB_WAL_SEGMENT_SIZE: "Size of tsdb WAL segment files.",
    flag_names.STORAGE_TSDB_MAX_BLOCK_CHUNK_SEGMENT_SIZE: "Maximum chunk segment size in a block.",
    flag_names.STORAGE_TSDB_MIN_BLOCK_DURATION: "Minimum duration of a data block.",
    flag_names.STORAGE_TSDB_MAX_BLOCK_DURATION: "Maximum duration compacted blocks may span.",
    flag_names.STORAGE_REMOTE_READ_SAMPLE_LIMIT: "Maximum samples per remote read query.",
    flag_names.STORAGE_REMOTE_READ_CONCURRENT_LIMIT: "Maximum concurrent remote read calls.",
    flag_names.STORAGE_AGENT_PATH: "Base path for the agent WAL.",
    flag_names.STORAGE_AGENT_WAL_SEGMENT_SIZE: "Size of agent WAL segment files.",
    flag_names.STORAGE_AGENT_WAL_TRUNCATE_FREQUENCY: "How often to truncate the agent WAL.",
    flag_names.STORAGE_AGENT_RETENTION_MIN_TIME: "Minimum age before samples are truncated.",
    flag_names.STORAGE_AGENT_RETENTION_MAX_TIME: "Maximum age before samples are deleted.",
    flag_names.RULES_ALERT_FOR_OUTAGE_TOLERANCE: "Outage tolerated when restoring alert state.",
    flag_names.RULES_ALERT_FOR_GRACE_PERIOD: "Grace period before restoring for state.",
    flag_names.RULES_ALERT_RESEND_DELAY: "Minimum wait before resending an alert.",
    flag_names.ALERTMANAGER_NOTIFICATION_QUEUE_CAPACITY: "Capacity of the notification queue.",
    flag_names.QUERY_LOOKBACK_DELTA: "Maximum lookback duration for retrieving metrics.",
    flag_names.QUERY_TIMEOUT: "Maximum time a query may take before being aborted.",
    flag_names.QUERY_MAX_CONCURRENCY: "Maximum number of queries executed concurrently.",
    flag_names.QUERY_MAX_SAMPLES: "Maximum number of samples a single query can load.",
    flag_names.LOG_LEVEL: "Only log messages with the given severity or above.",
    flag_names.LOG_FORMAT: "Output format of log messages (logfmt or json).",
}

LOG_LEVEL_CHOICES = ("debug", "info", "warn", "error")
LOG_FORMAT_CHOICES = ("logfmt", "json")


class FlagParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on parse errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(PARSE_ERROR_EXIT_CODE, f"{self.prog}: error: {message}\n")


def build_parser() -> FlagParser:
    """Create the parser for every known flag."""
    parser = FlagParser(
        prog="promgate",
        description="Prometheus-compatible metrics server startup gate.",
        argument_default=argparse.SUPPRESS,
        allow_abbrev=False,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    for name, help_text in BOOLEAN_FLAGS.items():
        parser.add_argument(
            f"--{name}", dest=name, action="store_const", const="true", help=help_text
        )
    for name, help_text in REPEATABLE_FLAGS.items():
        parser.add_argument(
            f"--{name}", dest=name, action="append", metavar="VALUE", help=help_text
        )
    for name, help_text in VALUE_FLAGS.items():
        choices: Sequence[str] | None = None
        if name == flag_names.LOG_LEVEL:
            choices = LOG_LEVEL_CHOICES
        elif name == flag_names.LOG_FORMAT:
            choices = LOG_FORMAT_CHOICES
        parser.add_argument(
            f"--{name}", dest=name, metavar="VALUE", choices=choices, help=help_text
        )
    return parser


def parse_flags(argv: Sequence[str] | None = None) -> FlagSet:
    """Parse command-line arguments into a FlagSet.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        FlagSet holding the explicitly given flags.
    """
    namespace = build_parser().parse_args(argv)
    values: dict[str, str] = {}
    for name, value in vars(namespace).items():
        if isinstance(value, list):
            values[name] = ",".join(value)
        else:
            values[name] = value
    return FlagSet.of(values)


__all__ = ["FlagParser", "build_parser", "parse_flags"]
