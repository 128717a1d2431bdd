"""YAML configuration loader adapter.

Reads the configuration file with PyYAML and validates its shape with the
pydantic document model. Every failure (missing file, unreadable file,
YAML syntax error, schema error) surfaces as ConfigParseError.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from promgate.application.ports.config_loader import ConfigLoaderProtocol
from promgate.domain.errors.startup import ConfigParseError
from promgate.domain.models.prometheus_config import PrometheusConfig


def _first_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


class YamlConfigLoader(ConfigLoaderProtocol):
    """Loads PrometheusConfig documents from YAML files."""

    def load(self, path: str) -> PrometheusConfig:
        """Load and validate the configuration file at path.

        An empty file is a valid, empty configuration.

        Raises:
            ConfigParseError: If the file is missing, unreadable or invalid.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigParseError(path, "no such file or directory") from e
        except IsADirectoryError as e:
            raise ConfigParseError(path, "is a directory") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigParseError(path, str(e)) from e

        return self.parse(text, path=path)

    def parse(self, text: str, path: str = "<string>") -> PrometheusConfig:
        """Validate a configuration document given as YAML text.

        Raises:
            ConfigParseError: If the text is not valid YAML or not a valid config.
        """
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(path, f"invalid YAML: {e}") from e

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ConfigParseError(
                path, f"top-level value must be a mapping, got {type(document).__name__}"
            )

        try:
            return PrometheusConfig.model_validate(document)
        except ValidationError as e:
            raise ConfigParseError(path, _first_validation_error(e)) from e


__all__ = ["YamlConfigLoader"]
