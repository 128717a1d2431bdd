"""Unit tests for ConstraintEnforcer.

Tests that flags and config sections are checked against the constraint
table of the resolved mode and that the first violation is reported.
"""

import pytest

from promgate.application.services.constraint_enforcer import ConstraintEnforcer
from promgate.domain.errors.startup import ConstraintViolationError, ErrorKind
from promgate.domain.models.constraint_rule import (
    ConfigSectionRule,
    ConstraintRule,
    ConstraintTable,
    Policy,
)
from promgate.domain.models.flag_set import FlagSet
from promgate.domain.models.mode import Mode
from promgate.domain.models.prometheus_config import PrometheusConfig
from promgate.domain.primitives import flag_names
from promgate.domain.primitives.startup_tables import CONSTRAINT_TABLE


class TestDefaultConstraints:
    """Tests against the built-in constraint table."""

    @pytest.fixture
    def enforcer(self) -> ConstraintEnforcer:
        return ConstraintEnforcer(CONSTRAINT_TABLE)

    def test_agent_with_admin_api_rejected(self, enforcer: ConstraintEnforcer) -> None:
        """The admin API cannot be enabled in agent mode."""
        flags = FlagSet.of({"agent": "true", "web.enable-admin-api": "true"})

        with pytest.raises(ConstraintViolationError) as exc_info:
            enforcer.enforce(Mode.AGENT, flags)

        error = exc_info.value
        assert error.error_kind is ErrorKind.CONSTRAINT_VIOLATION
        assert error.subject == "web.enable-admin-api"
        assert error.mode is Mode.AGENT
        assert error.policy is Policy.FORBIDDEN
        assert "cannot be used in agent mode" in str(error)

    @pytest.mark.parametrize("name", flag_names.SERVER_ONLY_FLAGS)
    def test_every_server_only_flag_rejected_for_agent(
        self, enforcer: ConstraintEnforcer, name: str
    ) -> None:
        with pytest.raises(ConstraintViolationError) as exc_info:
            enforcer.enforce(Mode.AGENT, FlagSet.of({name: "x"}))

        assert exc_info.value.subject == name

    def test_forbidden_flag_rejected_even_when_empty(self, enforcer: ConstraintEnforcer) -> None:
        """FORBIDDEN flags may not be given at all."""
        with pytest.raises(ConstraintViolationError):
            enforcer.enforce(Mode.AGENT, FlagSet.of({"storage.tsdb.path": ""}))

    def test_first_violation_in_declaration_order(self, enforcer: ConstraintEnforcer) -> None:
        """With several violations only the first declared rule is reported."""
        flags = FlagSet.of({"storage.tsdb.path": "/data", "web.enable-admin-api": "true"})

        with pytest.raises(ConstraintViolationError) as exc_info:
            enforcer.enforce(Mode.AGENT, flags)

        assert exc_info.value.subject == "web.enable-admin-api"

    def test_agent_with_agent_flags_passes(self, enforcer: ConstraintEnforcer) -> None:
        flags = FlagSet.of(
            {
                "agent": "true",
                "storage.agent.path": "/agent",
                "storage.agent.wal-truncate-frequency": "2h",
                "config.file": "agent.yml",
            }
        )

        enforcer.enforce(Mode.AGENT, flags)

    def test_server_with_agent_flag_value_rejected(self, enforcer: ConstraintEnforcer) -> None:
        flags = FlagSet.of({"storage.agent.path": "/agent"})

        with pytest.raises(ConstraintViolationError) as exc_info:
            enforcer.enforce(Mode.SERVER, flags)

        assert exc_info.value.policy is Policy.REQUIRED_ABSENT
        assert exc_info.value.value == "/agent"
        assert "(got '/agent')" in str(exc_info.value)

    def test_server_with_empty_agent_flag_passes(self, enforcer: ConstraintEnforcer) -> None:
        """REQUIRED_ABSENT accepts an explicitly empty value."""
        enforcer.enforce(Mode.SERVER, FlagSet.of({"storage.agent.path": ""}))

    def test_server_with_server_flags_passes(self, enforcer: ConstraintEnforcer) -> None:
        flags = FlagSet.of({"web.enable-admin-api": "true", "storage.tsdb.path": "/data"})

        enforcer.enforce(Mode.SERVER, flags)

    def test_table_property(self, enforcer: ConstraintEnforcer) -> None:
        assert enforcer.table is CONSTRAINT_TABLE


class TestPolicies:
    """Tests for each policy using a dedicated table."""

    @pytest.fixture
    def enforcer(self) -> ConstraintEnforcer:
        return ConstraintEnforcer(
            ConstraintTable(
                rules=(
                    ConstraintRule(Mode.SERVER, "required", Policy.REQUIRED_PRESENT),
                    ConstraintRule(Mode.SERVER, "unset", Policy.REQUIRED_ABSENT),
                    ConstraintRule(Mode.AGENT, "never", Policy.FORBIDDEN),
                )
            )
        )

    def test_required_present_missing(self, enforcer: ConstraintEnforcer) -> None:
        with pytest.raises(ConstraintViolationError, match="is required in server mode"):
            enforcer.enforce(Mode.SERVER, FlagSet.of())

    def test_required_present_empty(self, enforcer: ConstraintEnforcer) -> None:
        with pytest.raises(ConstraintViolationError):
            enforcer.enforce(Mode.SERVER, FlagSet.of({"required": ""}))

    def test_required_present_given(self, enforcer: ConstraintEnforcer) -> None:
        enforcer.enforce(Mode.SERVER, FlagSet.of({"required": "yes"}))

    def test_rules_of_other_mode_ignored(self, enforcer: ConstraintEnforcer) -> None:
        """Agent rules never apply to a server, and the other way round."""
        enforcer.enforce(Mode.AGENT, FlagSet.of({"unset": "x"}))
        enforcer.enforce(Mode.SERVER, FlagSet.of({"required": "x", "never": "x"}))


class TestConfigSections:
    """Tests for enforce_config."""

    @pytest.fixture
    def enforcer(self) -> ConstraintEnforcer:
        return ConstraintEnforcer(CONSTRAINT_TABLE)

    def test_agent_rejects_rule_files(self, enforcer: ConstraintEnforcer) -> None:
        config = PrometheusConfig.model_validate({"rule_files": ["rules.yml"]})

        with pytest.raises(ConstraintViolationError) as exc_info:
            enforcer.enforce_config(Mode.AGENT, config)

        assert exc_info.value.subject == "rule_files"
        assert exc_info.value.policy is None

    @pytest.mark.parametrize("rule_files", [[], None])
    def test_agent_accepts_empty_rule_files(
        self, enforcer: ConstraintEnforcer, rule_files: list[str] | None
    ) -> None:
        """A forbidden section with no entries configures nothing."""
        config = PrometheusConfig.model_validate({"rule_files": rule_files})

        enforcer.enforce_config(Mode.AGENT, config)

    def test_server_accepts_empty_agent_section(self, enforcer: ConstraintEnforcer) -> None:
        enforcer.enforce_config(Mode.SERVER, PrometheusConfig.model_validate({"agent": {}}))

    def test_server_rejects_agent_section(self, enforcer: ConstraintEnforcer) -> None:
        config = PrometheusConfig.model_validate({"agent": {"wal_truncate_frequency": "2h"}})

        with pytest.raises(ConstraintViolationError, match="'agent' is not allowed in server"):
            enforcer.enforce_config(Mode.SERVER, config)

    def test_shared_sections_accepted_in_both_modes(self, enforcer: ConstraintEnforcer) -> None:
        config = PrometheusConfig.model_validate(
            {
                "global": {"scrape_interval": "15s"},
                "scrape_configs": [{"job_name": "node"}],
                "remote_write": [{"url": "http://example/write"}],
            }
        )

        enforcer.enforce_config(Mode.AGENT, config)
        enforcer.enforce_config(Mode.SERVER, config)

    def test_custom_section_rules(self) -> None:
        enforcer = ConstraintEnforcer(
            ConstraintTable(rules=(), section_rules=(ConfigSectionRule(Mode.SERVER, "otlp"),))
        )

        with pytest.raises(ConstraintViolationError):
            enforcer.enforce_config(
                Mode.SERVER,
                PrometheusConfig.model_validate({"otlp": {"translation_strategy": "NoUTF8"}}),
            )
