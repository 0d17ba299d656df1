"""
URL and domain utility functions for request aggregation.
"""

from __future__ import annotations

from urllib import parse

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def _parse_absolute(url: str) -> tuple[parse.SplitResult, str] | None:
    """Split *url* into its parts and ASCII hostname.

    Returns ``None`` unless the URL has a scheme and a host.
    Internationalized hostnames are converted to punycode.
    """
    try:
        parts = parse.urlsplit(url)
        # Touch .port so malformed ports surface here as ValueError.
        _ = parts.port
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None
    hostname = parts.hostname
    if not hostname.isascii():
        try:
            hostname = hostname.encode("idna").decode("ascii")
        except UnicodeError:
            return None
    return parts, hostname


def request_hostname(url: str) -> str:
    """Return the hostname of a request URL without a leading ``www.``.

    Unparseable URLs are used verbatim as an opaque key, so a
    malformed URL never aborts ingestion.

    Args:
        url: The raw request URL supplied by the host.

    Returns:
        The hostname (e.g. ``"sub.bad.com"``), or *url* itself
        (minus any leading ``www.``) when it cannot be parsed.
    """
    parsed = _parse_absolute(url)
    hostname = parsed[1] if parsed is not None else url
    return hostname.removeprefix("www.")


def page_domain(tab_url: str) -> str:
    """Derive the page domain shown in the dashboard header.

    Uses the URL's host (hostname plus any non-default port)
    with a leading ``www.`` stripped. The tab URL is expected
    to have been validated by the caller.

    Raises:
        ValueError: If *tab_url* is not an absolute URL.
    """
    parsed = _parse_absolute(tab_url)
    if parsed is None:
        raise ValueError(f"Not an absolute URL: {tab_url!r}")
    parts, host = parsed
    if parts.port is not None and parts.port != _DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{parts.port}"
    return host.removeprefix("www.")
