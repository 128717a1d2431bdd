"""
Infrastructure layer - External adapters for promgate.

This layer contains:
- YAML config loader (PyYAML + pydantic)
- Structured logging (structlog)
- Operational metrics (prometheus_client)

IMPORT RULES:
- CAN import from: domain, application, config
- Implements ports defined in application layer
"""
