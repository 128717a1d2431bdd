"""Startup hooks for the promgate process.

This module provides the hooks run around the startup verdict:
1. Configure structured logging and the metrics collector
2. Validate the startup flags (mode, constraints, bounds, proto messages,
   external URL, config file)
3. Record the verdict and, when accepted, the service start in metrics

A rejected verdict is reported to the operator by the caller as a single
diagnostic line; the hooks here log it below the default level only.

Usage:
    configure_logging(service_config)
    configure_metrics(service_config)
    verdict = validate_startup(flags)
    if verdict.is_accepted:
        record_service_startup(verdict)
"""

from structlog import get_logger

from promgate.bootstrap.logging import configure_structlog
from promgate.bootstrap.metrics import configure_metrics as configure_startup_metrics
from promgate.bootstrap.metrics import get_metrics_collector, get_startup_metrics
from promgate.bootstrap.startup import build_startup_sequencer
from promgate.config.service_config import ServiceConfig
from promgate.domain.models.flag_set import FlagSet
from promgate.domain.models.verdict import Accepted, Rejected, ValidationVerdict

logger = get_logger()


def configure_logging(
    service_config: ServiceConfig,
    log_level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structured logging for the process.

    Should be called first in the startup sequence, before any logging occurs.

    Args:
        service_config: Environment-driven settings.
        log_level: Level from the command line; overrides LOG_LEVEL.
        log_format: Renderer from the command line (json, logfmt).
    """
    configure_structlog(
        environment=service_config.environment,
        log_level=log_level or service_config.log_level,
        log_format=log_format,
    )
    get_logger().bind(component="startup_logging").debug(
        "structured_logging_configured", environment=service_config.environment
    )


def configure_metrics(service_config: ServiceConfig) -> None:
    """Label operational metrics with the service settings."""
    configure_startup_metrics(service_config)


def validate_startup(flags: FlagSet) -> ValidationVerdict:
    """Run the startup validation pipeline and count the verdict.

    Args:
        flags: Parsed command-line flags.

    Returns:
        The verdict for this startup attempt.
    """
    verdict = build_startup_sequencer().run(flags)
    get_startup_metrics().record_verdict(verdict)
    if isinstance(verdict, Rejected):
        logger.bind(component="startup").debug(
            "startup_rejected",
            error_kind=verdict.error_kind.value,
            last_passed_stage=verdict.last_passed_stage.value,
        )
    return verdict


def record_service_startup(verdict: Accepted) -> None:
    """Record service startup for uptime tracking."""
    get_startup_metrics().record_serving(verdict)

    logger.bind(component="startup").info(
        "service_startup_recorded",
        service=get_metrics_collector().service_name,
        mode=verdict.mode.value,
        external_url=verdict.external_url,
    )
