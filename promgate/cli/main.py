"""promgate process entry point.

Parses the command line, runs the startup validation pipeline and, when
the verdict is accepted, serves the HTTP API for the resolved mode.

Exit codes:
    0: Startup accepted and the server shut down cleanly
    1: Startup rejected, bad command line, or the server failed to bind

Usage:
    python -m promgate --agent --config.file=agent.yml
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import uvicorn
from structlog import get_logger

from promgate.api.main import create_app
from promgate.api.startup import (
    configure_logging,
    configure_metrics,
    record_service_startup,
    validate_startup,
)
from promgate.application.services.external_url import split_host_port
from promgate.cli.flags import parse_flags
from promgate.config.service_config import ServiceConfig
from promgate.config.storage_limits import DEFAULT_LISTEN_ADDRESS
from promgate.domain.models.flag_set import FlagSet
from promgate.domain.models.verdict import EXIT_CODE_REJECTED, Accepted, Rejected
from promgate.domain.primitives import flag_names
from promgate.infrastructure.observability.correlation import startup_attempt

logger = get_logger()

DEFAULT_HOST = "0.0.0.0"


def serve(verdict: Accepted, flags: FlagSet, service_config: ServiceConfig) -> int:
    """Run the HTTP server until it is shut down.

    Returns:
        0 after a clean shutdown, 1 if the server never started.
    """
    log = logger.bind(component="server", mode=verdict.mode.value)
    listen_address = flags.get(flag_names.WEB_LISTEN_ADDRESS, DEFAULT_LISTEN_ADDRESS)
    try:
        host, port = split_host_port(listen_address)
        port_number = int(port)
    except ValueError as e:
        log.debug("invalid_listen_address", listen_address=listen_address, error=str(e))
        print(f"promgate: invalid listen address {listen_address!r}", file=sys.stderr)
        return EXIT_CODE_REJECTED

    server = uvicorn.Server(
        uvicorn.Config(
            create_app(verdict, flags),
            host=host or DEFAULT_HOST,
            port=port_number,
            log_config=None,
            timeout_graceful_shutdown=service_config.shutdown_timeout_seconds,
        )
    )
    log.info("server_starting", listen_address=listen_address)
    try:
        server.run()
    except SystemExit as e:
        # uvicorn exits when the socket cannot be bound
        log.error("server_failed", exit_code=e.code)
        return EXIT_CODE_REJECTED

    if not server.started:
        log.error("server_failed", listen_address=listen_address)
        return EXIT_CODE_REJECTED
    log.info("server_stopped")
    return verdict.exit_code


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the startup flags and serve on success.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    flags = parse_flags(argv)

    service_config = ServiceConfig.from_environment()
    configure_logging(
        service_config,
        log_level=flags.get(flag_names.LOG_LEVEL),
        log_format=flags.get(flag_names.LOG_FORMAT),
    )
    configure_metrics(service_config)

    with startup_attempt():
        verdict = validate_startup(flags)
        if isinstance(verdict, Rejected):
            # the only diagnostic of a rejected attempt
            print(f"promgate: {verdict.detail}", file=sys.stderr)
            return verdict.exit_code

        record_service_startup(verdict)
        return serve(verdict, flags, service_config)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


__all__ = ["main", "run", "serve"]
