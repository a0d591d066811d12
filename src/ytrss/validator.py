from __future__ import annotations

from urllib.parse import urlsplit

import httpx

from ytrss.errors import MalformedUrlError, MissingHostError, UnrecognizedDomainError
from ytrss.models import ChannelAddress

ACCEPTED_DOMAIN_MARKERS = ("youtube.com", "youtu.be")
_ALLOWED_SCHEMES = ("http", "https")


def validate_address(raw: str) -> ChannelAddress:
    """Accept *raw* as a channel address or raise an :class:`AddressError` subclass.

    Only the host is checked against the domain markers, so a marker that appears
    in the path or query string does not make an address acceptable. Addresses
    that httpx itself cannot request are rejected as malformed.
    """
    candidate = (raw or "").strip()
    if not candidate:
        raise MalformedUrlError("empty address")

    try:
        parsed = urlsplit(candidate)
        host = parsed.hostname or ""
        # port is parsed lazily; non-numeric ports only fail here
        parsed.port
    except ValueError as exc:
        raise MalformedUrlError(f"{candidate!r} is not a valid URL: {exc}") from exc

    if parsed.scheme.lower() not in _ALLOWED_SCHEMES:
        raise MalformedUrlError(f"{candidate!r} is not an http(s) URL")
    if not host:
        raise MissingHostError(f"{candidate!r} has no host")
    if not any(marker in host for marker in ACCEPTED_DOMAIN_MARKERS):
        raise UnrecognizedDomainError(f"{host} is not a YouTube host")

    try:
        httpx.URL(candidate)
    except httpx.InvalidURL as exc:
        raise MalformedUrlError(f"{candidate!r} is not a valid URL: {exc}") from exc

    return ChannelAddress(url=candidate, host=host)
