"""Infrastructure adapters implementing application ports."""

from promgate.infrastructure.adapters.yaml_config_loader import YamlConfigLoader

__all__: list[str] = ["YamlConfigLoader"]
