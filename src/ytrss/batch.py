from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from functools import partial

import httpx

from ytrss.config import DEFAULT_MAX_CONCURRENCY, Settings, load_settings
from ytrss.errors import FeedError
from ytrss.fetcher import build_client
from ytrss.models import BatchReport, ItemOutcome
from ytrss.pipeline import resolve_item

logger = logging.getLogger(__name__)

Resolver = Callable[[str, httpx.AsyncClient], Awaitable[ItemOutcome]]


def filter_lines(lines: Iterable[str]) -> list[str]:
    return [line for line in lines if line.strip()]


async def run_batch(
    lines: Iterable[str],
    client: httpx.AsyncClient,
    *,
    concurrency: int = DEFAULT_MAX_CONCURRENCY,
    resolve: Resolver = resolve_item,
) -> list[ItemOutcome]:
    """Resolve every non-blank line with at most *concurrency* items in flight.

    Dispatch waits on the semaphore before each task is created, so no more
    than *concurrency* items are ever being resolved. Each task writes into its own slot;
    the returned list follows input order whatever the completion order was.
    """
    if concurrency < 1:
        raise ValueError("concurrency must be at least 1")

    items = filter_lines(lines)
    slots: list[ItemOutcome | None] = [None] * len(items)
    gate = asyncio.Semaphore(concurrency)
    logger.info("resolving %d item(s) with concurrency %d", len(items), concurrency)

    async def _run_item(index: int, raw: str) -> None:
        try:
            outcome = await resolve(raw, client)
        except Exception as exc:  # pragma: no cover - resolver contract broken
            logger.exception("resolver raised for %s", raw)
            outcome = ItemOutcome(raw=raw, error=FeedError(f"unexpected error: {exc}"))
        finally:
            gate.release()
        slots[index] = outcome
        logger.debug("item %d %s: %s", index, "succeeded" if outcome.ok else "failed", raw)

    tasks: list[asyncio.Task[None]] = []
    for index, raw in enumerate(items):
        await gate.acquire()
        logger.debug("item %d in flight: %s", index, raw)
        tasks.append(asyncio.create_task(_run_item(index, raw)))
    await asyncio.gather(*tasks)

    outcomes = [outcome for outcome in slots if outcome is not None]
    if len(outcomes) != len(items):  # pragma: no cover
        raise RuntimeError("batch finished with unfilled result slots")
    return outcomes


def partition_outcomes(outcomes: Sequence[ItemOutcome]) -> BatchReport:
    feed_urls: list[str] = []
    failures: list[tuple[str, FeedError]] = []
    for outcome in outcomes:
        if outcome.error is not None:
            failures.append((outcome.raw, outcome.error))
        else:
            feed_urls.append(outcome.feed_url)
    return BatchReport(feed_urls=feed_urls, failures=failures)


async def _resolve_batch(lines: Iterable[str], settings: Settings) -> list[ItemOutcome]:
    resolve = partial(resolve_item, timeout=settings.request_timeout_seconds)
    async with build_client(settings) as client:
        return await run_batch(lines, client, concurrency=settings.max_concurrency, resolve=resolve)


def resolve_batch(lines: Iterable[str], settings: Settings | None = None) -> list[ItemOutcome]:
    """Synchronous batch mode: one shared client, outcomes in input order."""
    settings = settings or load_settings()
    outcomes = asyncio.run(_resolve_batch(lines, settings))
    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.info("resolved %d feed(s), %d failure(s)", len(outcomes) - failed, failed)
    return outcomes
