"""End-to-end startup tests for the promgate process.

Launches ``python -m promgate`` and checks the exit code contract:
rejected startups exit 1 with a diagnostic on stderr, accepted startups
keep serving until they are stopped.
"""

import os
import subprocess
import sys
import time
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent

# How long an accepted process must stay up to count as started.
STARTUP_GRACE_SECONDS = 3.0
PROCESS_TIMEOUT_SECONDS = 30

pytestmark = pytest.mark.integration


def _command(*args: str) -> list[str]:
    return [sys.executable, "-m", "promgate", "--web.listen-address=127.0.0.1:0", *args]


def _environment() -> dict[str, str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        part for part in (str(PROJECT_ROOT), env.get("PYTHONPATH", "")) if part
    )
    return env


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        _command(*args),
        cwd=PROJECT_ROOT,
        env=_environment(),
        capture_output=True,
        text=True,
        timeout=PROCESS_TIMEOUT_SECONDS,
    )


class TestRejectedStartup:
    """Rejected startups exit with status 1."""

    def test_agent_with_admin_api(self, agent_config_path: str) -> None:
        result = _run("--agent", "--web.enable-admin-api", f"--config.file={agent_config_path}")

        assert result.returncode == 1
        assert "web.enable-admin-api" in result.stderr
        assert len(result.stderr.strip().splitlines()) == 1

    def test_agent_with_missing_config(self) -> None:
        result = _run("--agent", "--config.file=fake-input-file")

        assert result.returncode == 1
        assert "fake-input-file" in result.stderr
        assert len(result.stderr.strip().splitlines()) == 1

    def test_server_with_agent_config(self, agent_config_path: str) -> None:
        result = _run(f"--config.file={agent_config_path}")

        assert result.returncode == 1
        assert "config section 'agent'" in result.stderr
        assert len(result.stderr.strip().splitlines()) == 1

    def test_unknown_protobuf_message(self, scrape_only_config_path: str) -> None:
        result = _run(
            f"--config.file={scrape_only_config_path}",
            "--web.remote-write-receiver.accepted-protobuf-messages=unknown1,unknown2",
        )

        assert result.returncode == 1
        assert "unknown1" in result.stderr

    def test_unknown_flag(self) -> None:
        result = _run("--no-such-flag")

        assert result.returncode == 1


class TestAcceptedStartup:
    """Accepted startups keep running."""

    def test_agent_keeps_running(self, agent_config_path: str) -> None:
        """An agent with a valid config is still up after the grace period."""
        process = subprocess.Popen(
            _command("--agent", f"--config.file={agent_config_path}"),
            cwd=PROJECT_ROOT,
            env=_environment(),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
        )
        try:
            deadline = time.monotonic() + STARTUP_GRACE_SECONDS
            while time.monotonic() < deadline:
                if process.poll() is not None:
                    _, stderr = process.communicate()
                    pytest.fail(f"process exited early with {process.returncode}: {stderr}")
                time.sleep(0.1)
            assert process.poll() is None
        finally:
            process.terminate()
            try:
                process.wait(timeout=PROCESS_TIMEOUT_SECONDS)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()
