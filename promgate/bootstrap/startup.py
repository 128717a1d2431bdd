"""Bootstrap wiring for the startup sequencer."""

from __future__ import annotations

from promgate.application.services.startup_sequencer import StartupSequencer
from promgate.infrastructure.adapters.yaml_config_loader import YamlConfigLoader


def build_startup_sequencer() -> StartupSequencer:
    """Create a sequencer using the YAML config loader and default tables."""
    return StartupSequencer(config_loader=YamlConfigLoader())


__all__ = ["build_startup_sequencer"]
