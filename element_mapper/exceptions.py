"""
Exceptions raised by the crawler.

Only failures that make the whole crawl meaningless are raised; problems
with secondary pages and individual links are absorbed by the crawler.
"""


class CrawlError(Exception):
    """Base class for fatal crawl errors."""


class InvalidInputError(CrawlError):
    """The seed URL is missing or malformed, or the page budget is invalid."""


class SeedFetchError(CrawlError):
    """The seed page could not be fetched or parsed."""

    def __init__(self, url: str, reason: str, status_code=None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")


class CrawlTimeoutError(CrawlError):
    """The crawl exceeded its overall deadline."""
