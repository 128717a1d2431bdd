"""Bootstrap wiring for operational metrics."""

from __future__ import annotations

from promgate.application.ports.startup_metrics import StartupMetricsPort
from promgate.config.service_config import ServiceConfig
from promgate.domain.models.mode import Mode
from promgate.domain.models.verdict import Accepted, Rejected, ValidationVerdict
from promgate.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    MetricsCollector,
    generate_metrics,
    reset_metrics_collector,
)
from promgate.infrastructure.monitoring.metrics import (
    get_metrics_collector as get_infra_metrics_collector,
)


class PrometheusStartupMetrics:
    """Startup metrics backed by the process-wide prometheus_client collector."""

    @property
    def content_type(self) -> str:
        return METRICS_CONTENT_TYPE

    def record_verdict(self, verdict: ValidationVerdict) -> None:
        collector = get_infra_metrics_collector()
        if isinstance(verdict, Rejected):
            collector.record_verdict(accepted=False, error_kind=verdict.error_kind.value)
        else:
            collector.record_verdict(accepted=True)

    def record_serving(self, verdict: Accepted) -> None:
        collector = get_infra_metrics_collector()
        collector.record_startup(collector.service_name)
        collector.set_agent_mode(verdict.mode is Mode.AGENT)

    def render(self) -> bytes:
        return generate_metrics()


_startup_metrics: StartupMetricsPort | None = None


def configure_metrics(service_config: ServiceConfig) -> None:
    """Create the process collector labelled with the service settings."""
    reset_metrics()
    get_infra_metrics_collector(service_config)


def get_metrics_collector() -> MetricsCollector:
    """Get the metrics collector instance."""
    return get_infra_metrics_collector()


def get_startup_metrics() -> StartupMetricsPort:
    """Get the startup metrics instance."""
    global _startup_metrics
    if _startup_metrics is None:
        _startup_metrics = PrometheusStartupMetrics()
    return _startup_metrics


def set_startup_metrics(startup_metrics: StartupMetricsPort) -> None:
    """Set custom startup metrics (testing/override)."""
    global _startup_metrics
    _startup_metrics = startup_metrics


def reset_metrics() -> None:
    """Reset metrics singletons (testing cleanup)."""
    global _startup_metrics
    _startup_metrics = None
    reset_metrics_collector()
