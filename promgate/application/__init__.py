"""
Application layer - Startup validation use cases.

This layer contains:
- Application services (mode resolution, constraint enforcement, bounds and
  proto validation, the startup sequencer)
- Port definitions (abstract interfaces for infrastructure)

IMPORT RULES:
- CAN import from: domain, config
- CANNOT import from: infrastructure, api
"""

from promgate.application.ports import ConfigLoaderProtocol

__all__: list[str] = ["ConfigLoaderProtocol"]
