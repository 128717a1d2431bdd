"""Prometheus metrics infrastructure.

Operational metrics exposed on ``/metrics`` once startup was accepted.
The presence of ``prometheus_time_seconds`` in a scrape is what external
health checks use to confirm the process reached its running state.

Labels: service, environment on every process-level series.
"""

import threading
import time

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    generate_latest,
)

from promgate.config.service_config import ServiceConfig

# Content type for Prometheus metrics endpoint
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

# Thread lock for singleton initialization
_collector_lock = threading.Lock()


class MetricsCollector:
    """Collects and manages operational Prometheus metrics.

    Attributes:
        time_seconds: Gauge reporting the current unix time at scrape.
        uptime_seconds: Gauge tracking seconds since service start.
        service_starts_total: Counter tracking service starts.
        startup_verdicts_total: Counter of startup verdicts by outcome.
        agent_mode: Gauge set to 1 in agent mode, 0 in server mode.
        startup_times: Dict mapping service name to startup timestamp.
    """

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        service_config: ServiceConfig | None = None,
    ) -> None:
        """Initialize metrics collector with operational metrics.

        Args:
            registry: Optional custom registry for testing isolation.
            service_config: Source of the service and environment labels;
                read from the environment when omitted.
        """
        self._registry = registry or CollectorRegistry()
        self.startup_times: dict[str, float] = {}

        config = service_config or ServiceConfig.from_environment()
        self._environment = config.environment
        self._service_name = config.service_name

        self.time_seconds = Gauge(
            name="prometheus_time_seconds",
            documentation="Current system time in seconds since the epoch",
            registry=self._registry,
        )
        self.time_seconds.set_function(time.time)

        self.uptime_seconds = Gauge(
            name="uptime_seconds",
            documentation="Seconds since service start",
            labelnames=["service", "environment"],
            registry=self._registry,
        )

        self.service_starts_total = Counter(
            name="service_starts_total",
            documentation="Total number of service starts/restarts",
            labelnames=["service", "environment"],
            registry=self._registry,
        )

        # error_kind is "none" for accepted verdicts
        self.startup_verdicts_total = Counter(
            name="startup_verdicts_total",
            documentation="Total startup validation verdicts by outcome",
            labelnames=["service", "environment", "verdict", "error_kind"],
            registry=self._registry,
        )

        self.agent_mode = Gauge(
            name="prometheus_agent_mode",
            documentation="Whether the process runs in agent mode (1) or server mode (0)",
            registry=self._registry,
        )

    def set_uptime(self, service: str, seconds: float) -> None:
        """Set uptime gauge for a service."""
        self.uptime_seconds.labels(service=service, environment=self._environment).set(
            seconds
        )

    def increment_service_starts(self, service: str) -> None:
        """Increment service starts counter."""
        self.service_starts_total.labels(
            service=service, environment=self._environment
        ).inc()

    def record_verdict(self, accepted: bool, error_kind: str | None = None) -> None:
        """Count a startup verdict.

        Args:
            accepted: True for an accepted verdict.
            error_kind: Error kind value for rejected verdicts.
        """
        self.startup_verdicts_total.labels(
            service=self._service_name,
            environment=self._environment,
            verdict="accepted" if accepted else "rejected",
            error_kind=error_kind or "none",
        ).inc()

    def set_agent_mode(self, is_agent: bool) -> None:
        """Expose the resolved operating mode."""
        self.agent_mode.set(1 if is_agent else 0)

    def record_startup(self, service: str) -> None:
        """Record service startup time."""
        self.startup_times[service] = time.time()
        self.increment_service_starts(service)

    def get_uptime_seconds(self, service: str) -> float:
        """Get uptime in seconds for a service.

        Returns:
            Uptime in seconds, or 0.0 if service not registered.
        """
        if service not in self.startup_times:
            return 0.0
        return time.time() - self.startup_times[service]

    def update_uptime_gauges(self) -> None:
        """Update uptime gauges for all registered services."""
        for service in self.startup_times:
            self.set_uptime(service, self.get_uptime_seconds(service))

    def get_registry(self) -> CollectorRegistry:
        """Get the Prometheus registry."""
        return self._registry

    @property
    def service_name(self) -> str:
        return self._service_name


# Singleton instance for application-wide metrics
_metrics_collector: MetricsCollector | None = None


def get_metrics_collector(service_config: ServiceConfig | None = None) -> MetricsCollector:
    """Get the singleton metrics collector instance (thread-safe).

    Args:
        service_config: Used only when the collector is first created.
    """
    global _metrics_collector
    if _metrics_collector is None:
        with _collector_lock:
            if _metrics_collector is None:
                _metrics_collector = MetricsCollector(service_config=service_config)
    return _metrics_collector


def reset_metrics_collector() -> None:
    """Reset the singleton metrics collector (for testing)."""
    global _metrics_collector
    with _collector_lock:
        _metrics_collector = None


def generate_metrics() -> bytes:
    """Generate Prometheus exposition output for the singleton collector."""
    collector = get_metrics_collector()
    collector.update_uptime_gauges()
    return generate_latest(collector.get_registry())
