import pytest

from ytrss.errors import FeedNotFoundError
from ytrss.models import ItemOutcome


def test_outcome_is_success_or_failure() -> None:
    assert ItemOutcome(raw="a", feed_url="https://feed").ok
    assert not ItemOutcome(raw="a", error=FeedNotFoundError("RSS feed URL not found")).ok


def test_outcome_rejects_neither_feed_nor_error() -> None:
    with pytest.raises(ValueError):
        ItemOutcome(raw="a")


def test_outcome_rejects_both_feed_and_error() -> None:
    with pytest.raises(ValueError):
        ItemOutcome(raw="a", feed_url="https://feed", error=FeedNotFoundError("RSS feed URL not found"))
