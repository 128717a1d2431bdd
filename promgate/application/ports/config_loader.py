"""Configuration loader port.

The startup sequencer performs no I/O itself; reading and parsing the
configuration file is delegated to an implementation of this port.

Usage:
    loader: ConfigLoaderProtocol = YamlConfigLoader()
    config = loader.load("prometheus.yml")
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from promgate.domain.models.prometheus_config import PrometheusConfig


@runtime_checkable
class ConfigLoaderProtocol(Protocol):
    """Protocol for loading the configuration document."""

    def load(self, path: str) -> PrometheusConfig:
        """Load and validate the configuration file at path.

        Raises:
            ConfigParseError: If the file is missing, unreadable or invalid.
        """
        ...


__all__ = ["ConfigLoaderProtocol"]
