from __future__ import annotations

import asyncio
import logging

import httpx

from ytrss.config import DEFAULT_REQUEST_TIMEOUT_SECONDS, Settings
from ytrss.errors import FetchTimeoutError, HttpStatusError, MalformedUrlError, NetworkError
from ytrss.models import ChannelAddress

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> httpx.AsyncClient:
    """Create the connection pool shared by every fetch in a run."""
    return httpx.AsyncClient(
        timeout=settings.request_timeout_seconds,
        follow_redirects=True,
    )


async def fetch_page(
    client: httpx.AsyncClient,
    address: ChannelAddress,
    *,
    timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
) -> str:
    """GET *address* and return the decoded body.

    *timeout* bounds the whole request, body included. The client's own
    timeouts only bound each connect/read/write phase.
    """
    logger.debug("GET %s", address.url)
    try:
        response = await asyncio.wait_for(client.get(address.url), timeout)
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        raise FetchTimeoutError(f"timed out fetching {address.url}") from exc
    except httpx.InvalidURL as exc:
        raise MalformedUrlError(f"{address.url!r} is not a valid URL: {exc}") from exc
    except httpx.HTTPError as exc:
        raise NetworkError(f"{type(exc).__name__} fetching {address.url}: {exc}") from exc

    if not response.is_success:
        raise HttpStatusError(response.status_code, address.url)

    logger.debug("GET %s -> %s (%d bytes)", address.url, response.status_code, len(response.content))
    return response.text
