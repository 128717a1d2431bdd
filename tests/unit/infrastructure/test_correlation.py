"""Unit tests for startup attempt correlation.

Tests the attempt scope and the structlog processor that stamps its id.
"""

import asyncio
import re

from promgate.infrastructure.observability.correlation import (
    add_attempt_id,
    current_attempt_id,
    new_attempt_id,
    startup_attempt,
)


class TestNewAttemptId:
    """Tests for new_attempt_id."""

    def test_is_32_hex_chars(self) -> None:
        assert re.fullmatch(r"[0-9a-f]{32}", new_attempt_id()) is not None

    def test_ids_are_unique(self) -> None:
        ids = [new_attempt_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestStartupAttempt:
    """Tests for the startup_attempt scope."""

    def test_no_attempt_outside_scope(self) -> None:
        assert current_attempt_id() is None

    def test_generates_id_when_omitted(self) -> None:
        with startup_attempt() as attempt_id:
            assert current_attempt_id() == attempt_id
            assert len(attempt_id) == 32

    def test_uses_given_id(self) -> None:
        with startup_attempt("attempt-1") as attempt_id:
            assert attempt_id == "attempt-1"
            assert current_attempt_id() == "attempt-1"

    def test_id_cleared_on_exit(self) -> None:
        with startup_attempt("attempt-1"):
            pass

        assert current_attempt_id() is None

    def test_id_cleared_when_block_raises(self) -> None:
        try:
            with startup_attempt("attempt-1"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        assert current_attempt_id() is None

    def test_nested_scope_restores_outer_id(self) -> None:
        with startup_attempt("outer"):
            with startup_attempt("inner"):
                assert current_attempt_id() == "inner"
            assert current_attempt_id() == "outer"

    async def test_scopes_isolated_between_tasks(self) -> None:
        """Concurrent attempts in separate tasks keep their own ids."""
        results: dict[str, str | None] = {}

        async def attempt(name: str) -> None:
            with startup_attempt(f"id-{name}"):
                await asyncio.sleep(0.01)
                results[name] = current_attempt_id()

        await asyncio.gather(attempt("a"), attempt("b"))

        assert results == {"a": "id-a", "b": "id-b"}


class TestAddAttemptId:
    """Tests for the structlog processor."""

    def test_adds_id_inside_attempt(self) -> None:
        with startup_attempt("processor-test-id"):
            result = add_attempt_id(None, "info", {"event": "startup_stage_passed"})

        assert result["correlation_id"] == "processor-test-id"
        assert result["event"] == "startup_stage_passed"

    def test_no_id_outside_attempt(self) -> None:
        result = add_attempt_id(None, "info", {"event": "x"})

        assert "correlation_id" not in result

    def test_explicit_id_kept(self) -> None:
        with startup_attempt("scope-id"):
            result = add_attempt_id(None, "info", {"event": "x", "correlation_id": "given"})

        assert result["correlation_id"] == "given"
