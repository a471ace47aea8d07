# review_scraper/errors.py
from typing import Optional


class ReviewScraperError(Exception):
    pass


class ConfigError(ReviewScraperError):
    """Bad or missing input detected before any network activity."""


class FetchError(ReviewScraperError):
    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class FetchTransportError(FetchError):
    """Connection refused, DNS failure, timeout..."""


class FetchStatusError(FetchError):
    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, url=url)
        self.status_code = status_code


class EmptyDocumentError(FetchError):
    """The proxy answered 2xx but returned no HTML."""
