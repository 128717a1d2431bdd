"""
Pytest configuration and shared fixtures for promgate tests.

Testing Standards:
- Async tests run in auto mode (asyncio_mode = "auto" in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Configuration file fixtures live in tests/fixtures/
"""

from collections.abc import Iterator
from pathlib import Path

import pytest

from promgate.bootstrap.metrics import reset_metrics

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from promgate import __version__

    return __version__


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding configuration file fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def agent_config_path() -> str:
    """Path to an agent configuration, with an ``agent`` section."""
    return str(FIXTURES_DIR / "agent.yml")


@pytest.fixture
def server_config_path() -> str:
    """Path to a configuration file with rule files, for server mode."""
    return str(FIXTURES_DIR / "prometheus.yml")


@pytest.fixture
def scrape_only_config_path() -> str:
    """Path to a configuration file both modes accept."""
    return str(FIXTURES_DIR / "scrape_only.yml")


@pytest.fixture(autouse=True)
def clean_metrics(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test fresh metrics singletons and default service settings."""
    for name in ("ENVIRONMENT", "SERVICE_NAME", "LOG_LEVEL", "PROMGATE_SHUTDOWN_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    reset_metrics()
    yield
    reset_metrics()
