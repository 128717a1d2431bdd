"""
API layer - FastAPI routes and HTTP concerns for promgate.

This layer contains:
- FastAPI app factory and route definitions
- Response models
- Startup hooks

IMPORT RULES:
- CAN import from: application, domain, bootstrap
- CANNOT import from: infrastructure directly
"""

__all__: list[str] = []
