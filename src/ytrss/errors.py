from __future__ import annotations


class FeedError(Exception):
    """Base class for anything that stops one address from resolving to a feed."""


class AddressError(FeedError):
    pass


class MalformedUrlError(AddressError):
    pass


class MissingHostError(AddressError):
    pass


class UnrecognizedDomainError(AddressError):
    pass


class FetchError(FeedError):
    pass


class NetworkError(FetchError):
    pass


class FetchTimeoutError(FetchError):
    pass


class HttpStatusError(FetchError):
    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        detail = f"HTTP {status_code}"
        if url:
            detail = f"{detail} for {url}"
        super().__init__(detail)


class FeedNotFoundError(FeedError):
    pass
