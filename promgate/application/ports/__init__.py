"""Ports (interfaces) used by the application services."""

from promgate.application.ports.config_loader import ConfigLoaderProtocol
from promgate.application.ports.startup_metrics import StartupMetricsPort

__all__: list[str] = ["ConfigLoaderProtocol", "StartupMetricsPort"]
