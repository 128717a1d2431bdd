"""Operating mode of the metrics server.

Usage:
    from promgate.domain.models.mode import Mode

    if mode is Mode.AGENT:
        # forwarding only, no query or admin surface
        ...
"""

from enum import Enum


class Mode(str, Enum):
    """Operating mode resolved from the command-line flags.

    - SERVER: full ingestion, local storage, query and admin capability
    - AGENT: lightweight scrape-and-forward, no local query/admin surface

    A Mode is never set directly by a caller; it is always derived from
    the FlagSet by the mode resolver.
    """

    SERVER = "server"
    AGENT = "agent"


__all__ = ["Mode"]
