"""Operating mode resolution.

The mode is decided by the ``--agent`` flag. The older
``--enable-feature=agent`` switch selects agent mode too. Anything else
runs as a full server; there is no unknown-mode outcome.
"""

from __future__ import annotations

from promgate.domain.models.flag_set import FlagSet
from promgate.domain.models.mode import Mode
from promgate.domain.primitives import flag_names

FALSE_VALUES = frozenset({"false", "0", "no", "off"})
AGENT_FEATURE = "agent"


def _is_truthy(value: str) -> bool:
    # Boolean flags carry no value, so an empty string means "set".
    return value.strip().lower() not in FALSE_VALUES


class ModeResolver:
    """Derives the operating Mode from a FlagSet."""

    def resolve(self, flags: FlagSet) -> Mode:
        """Return the mode selected by the flags.

        Args:
            flags: Parsed command-line flags.

        Returns:
            Mode.AGENT if agent mode is selected, Mode.SERVER otherwise.
        """
        agent_value = flags.get(flag_names.AGENT)
        if agent_value is not None and _is_truthy(agent_value):
            return Mode.AGENT

        features = flags.get(flag_names.ENABLE_FEATURE, "")
        if AGENT_FEATURE in {item.strip() for item in features.split(",")}:
            return Mode.AGENT

        return Mode.SERVER


__all__ = ["ModeResolver"]
