from __future__ import annotations

import asyncio
import logging

import httpx

from ytrss.config import DEFAULT_REQUEST_TIMEOUT_SECONDS, Settings, load_settings
from ytrss.errors import FeedError
from ytrss.extractor import extract_feed_url
from ytrss.fetcher import build_client, fetch_page
from ytrss.models import ItemOutcome
from ytrss.validator import validate_address

logger = logging.getLogger(__name__)


async def _resolve(raw: str, client: httpx.AsyncClient, timeout: float) -> str:
    address = validate_address(raw)
    html = await fetch_page(client, address, timeout=timeout)
    return extract_feed_url(html)


async def resolve_item(
    raw: str,
    client: httpx.AsyncClient,
    *,
    timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
) -> ItemOutcome:
    """Run validate, fetch and extract for one address and never raise.

    The outcome always carries *raw* as given, not the normalized address.
    """
    try:
        feed_url = await _resolve(raw, client, timeout)
    except FeedError as exc:
        logger.debug("%s failed: %s: %s", raw, type(exc).__name__, exc)
        return ItemOutcome(raw=raw, error=exc)
    except Exception as exc:  # pragma: no cover - unexpected failure
        logger.exception("unexpected error resolving %s", raw)
        return ItemOutcome(raw=raw, error=FeedError(f"unexpected error: {exc}"))
    return ItemOutcome(raw=raw, feed_url=feed_url)


async def _find_feed_url(raw: str, settings: Settings) -> str:
    async with build_client(settings) as client:
        return await _resolve(raw, client, settings.request_timeout_seconds)


def find_feed_url(raw: str, settings: Settings | None = None) -> str:
    """Resolve one address, raising the first :class:`FeedError` encountered."""
    return asyncio.run(_find_feed_url(raw, settings or load_settings()))
