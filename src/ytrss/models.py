from __future__ import annotations

from dataclasses import dataclass

from ytrss.errors import FeedError


@dataclass(frozen=True)
class ChannelAddress:
    url: str
    host: str


@dataclass(frozen=True)
class ItemOutcome:
    raw: str
    feed_url: str | None = None
    error: FeedError | None = None

    def __post_init__(self) -> None:
        if (self.feed_url is None) == (self.error is None):
            raise ValueError("an outcome needs exactly one of feed_url or error")

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchReport:
    feed_urls: list[str]
    failures: list[tuple[str, FeedError]]

    @property
    def success_count(self) -> int:
        return len(self.feed_urls)

    @property
    def failure_count(self) -> int:
        return len(self.failures)
