from __future__ import annotations

from bs4 import BeautifulSoup

from ytrss.errors import FeedNotFoundError

FEED_LINK_TITLE = "RSS"
FEED_LINK_TYPE = "application/rss+xml"


def _is_feed_link(tag) -> bool:
    return tag.get("title") == FEED_LINK_TITLE and tag.get("type") == FEED_LINK_TYPE


def extract_feed_url(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")

    for link in soup.find_all("link"):
        if not _is_feed_link(link):
            continue
        href = link.get("href")
        if href is None:
            raise FeedNotFoundError("RSS feed link has no href")
        return href

    raise FeedNotFoundError("RSS feed URL not found")
