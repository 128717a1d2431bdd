"""Configuration file document model.

Only the top-level shape is modelled: which sections are present and the
scrape job list. Section bodies are kept as plain mappings; their
contents belong to the collaborators that run scrapes, rules and
remote-write queues.

Unknown top-level keys are rejected, like the server's strict YAML
loading does. A key written with no value (``global:``) keeps the
section's empty default.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ScrapeConfig(BaseModel):
    """A single scrape job; only the job name is checked here."""

    model_config = ConfigDict(extra="allow", frozen=True)

    job_name: str = Field(min_length=1)


class PrometheusConfig(BaseModel):
    """Top-level configuration document.

    Attributes:
        global_: Global defaults (YAML key ``global``).
        scrape_configs: Scrape jobs, with unique job names.
        agent: Agent-only WAL settings; server mode does not accept it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    global_: dict[str, Any] = Field(default_factory=dict, alias="global")
    runtime: dict[str, Any] = Field(default_factory=dict)
    scrape_configs: list[ScrapeConfig] = Field(default_factory=list)
    scrape_config_files: list[str] = Field(default_factory=list)
    rule_files: list[str] = Field(default_factory=list)
    alerting: dict[str, Any] = Field(default_factory=dict)
    remote_write: list[dict[str, Any]] = Field(default_factory=list)
    remote_read: list[dict[str, Any]] = Field(default_factory=list)
    storage: dict[str, Any] = Field(default_factory=dict)
    tracing: dict[str, Any] = Field(default_factory=dict)
    otlp: dict[str, Any] = Field(default_factory=dict)
    agent: dict[str, Any] = Field(default_factory=dict)

    @field_validator("*", mode="before")
    @classmethod
    def null_section_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v

    @field_validator("scrape_configs")
    @classmethod
    def validate_unique_job_names(cls, v: list[ScrapeConfig]) -> list[ScrapeConfig]:
        """Ensure no two scrape jobs share a name."""
        seen: set[str] = set()
        for scrape_config in v:
            if scrape_config.job_name in seen:
                raise ValueError(
                    "found multiple scrape configs with job name "
                    f"{scrape_config.job_name!r}"
                )
            seen.add(scrape_config.job_name)
        return v

    def sections(self) -> frozenset[str]:
        """Return the top-level YAML keys explicitly present in the file."""
        return frozenset(
            type(self).model_fields[name].alias or name for name in self.model_fields_set
        )

    def populated_sections(self) -> frozenset[str]:
        """Return the present top-level keys whose value is not empty."""
        return frozenset(
            type(self).model_fields[name].alias or name
            for name in self.model_fields_set
            if getattr(self, name)
        )

    @property
    def job_names(self) -> tuple[str, ...]:
        return tuple(scrape_config.job_name for scrape_config in self.scrape_configs)


__all__ = ["PrometheusConfig", "ScrapeConfig"]
