"""External URL computation.

The external URL is the address under which the server is reachable from
outside (behind a reverse proxy, for example). It is used to build links
and as the route prefix. When the flag is not given it is derived from
the machine hostname and the listen port.

Examples:
    compute_external_url("", "0.0.0.0:9090", "host")
        -> "http://host:9090"
    compute_external_url("http://proxy.com/prometheus/", "0.0.0.0:9090", "host")
        -> "http://proxy.com/prometheus"
    compute_external_url("'https://url/prometheus'", "0.0.0.0:9090", "host")
        -> ExternalUrlError (quoted)
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit, urlunsplit

from promgate.domain.errors.startup import ExternalUrlError

_QUOTES = ("'", '"')
_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")


def split_host_port(address: str) -> tuple[str, str]:
    """Split ``host:port`` (IPv6 hosts in brackets) into its parts.

    Raises:
        ValueError: If the address has no port or an ambiguous host.
    """
    if address.startswith("["):
        end = address.find("]")
        if end == -1:
            raise ValueError(f"address {address}: missing ']' in address")
        host, rest = address[1:end], address[end + 1 :]
        if not rest.startswith(":"):
            raise ValueError(f"address {address}: missing port in address")
        return host, rest[1:]

    host, separator, port = address.rpartition(":")
    if not separator:
        raise ValueError(f"address {address}: missing port in address")
    if ":" in host:
        raise ValueError(f"address {address}: too many colons in address")
    return host, port


def _starts_or_ends_with_quote(value: str) -> bool:
    return value.startswith(_QUOTES) or value.endswith(_QUOTES)


def compute_external_url(external_url: str, listen_address: str, hostname: str) -> str:
    """Compute the externally reachable URL of the server.

    Args:
        external_url: Value of the external URL flag, empty if not given.
        listen_address: Listen address as ``host:port``.
        hostname: Machine hostname used when no external URL is given.

    Returns:
        The normalized external URL without a trailing slash.

    Raises:
        ExternalUrlError: If the URL is quoted, unparsable, or cannot be
            derived from the listen address.
    """
    url = external_url
    if not url:
        try:
            _, port = split_host_port(listen_address)
        except ValueError as e:
            raise ExternalUrlError(url, str(e)) from e
        url = f"http://{hostname}:{port}/"

    if _starts_or_ends_with_quote(url):
        raise ExternalUrlError(url, "URL must not begin or end with quotes")
    if _CONTROL_CHARACTERS.search(url):
        raise ExternalUrlError(url, "invalid control character in URL")

    try:
        parts = urlsplit(url)
        # Accessing the port validates it.
        _ = parts.port
    except ValueError as e:
        raise ExternalUrlError(url, str(e)) from e
    if any(character.isspace() for character in parts.netloc):
        raise ExternalUrlError(url, f"invalid character in host name {parts.netloc!r}")

    path = parts.path.rstrip("/")
    if path and not path.startswith("/"):
        path = "/" + path

    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


__all__ = ["compute_external_url", "split_host_port"]
