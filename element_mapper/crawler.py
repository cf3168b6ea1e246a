"""
Web Crawler Module

Fetches a seed page and the same-host pages it links to, extracts their
interactive elements and drops pages whose interactive shape duplicates one
already collected. Pages are fetched one at a time.
"""

import time
from typing import Dict, List, Optional, Set

import requests

from .exceptions import CrawlTimeoutError, InvalidInputError, SeedFetchError
from .extractor import ElementExtractor, page_title, parse_html
from .fingerprint import page_fingerprint
from .models import Page
from .urls import discover_links, is_valid_seed_url


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# Hard ceiling on pages fetched after the seed, whatever the budget
MAX_ADDITIONAL_PAGES = 20


class WebCrawler:
    """Crawler that maps the interactive elements of a site's pages."""

    def __init__(
        self,
        delay: float = 0.5,
        timeout: int = 10,
        verbose: bool = False,
        user_agent: Optional[str] = None,
        max_duration: Optional[float] = None,
    ):
        """
        Initialize the web crawler.

        Args:
            delay: Delay between requests in seconds
            timeout: Per-request timeout in seconds
            verbose: Enable verbose logging
            user_agent: User-Agent header sent with every request
            max_duration: Overall time limit for one crawl in seconds
        """
        self.delay = delay
        self.timeout = timeout
        self.verbose = verbose
        self.max_duration = max_duration
        self.extractor = ElementExtractor(detailed=True)
        self.single_page_extractor = ElementExtractor(detailed=False)

        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": user_agent or DEFAULT_USER_AGENT,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.5",
            }
        )

    def _deadline(self) -> Optional[float]:
        if self.max_duration is None:
            return None
        return time.monotonic() + self.max_duration

    def _check_deadline(self, deadline: Optional[float]) -> None:
        if deadline is not None and time.monotonic() >= deadline:
            raise CrawlTimeoutError(
                f"Crawl exceeded its time limit of {self.max_duration}s"
            )

    def _request_timeout(self, deadline: Optional[float]) -> float:
        """Per-request timeout, shortened to the time left before the deadline."""
        self._check_deadline(deadline)
        if deadline is None:
            return self.timeout
        return min(self.timeout, deadline - time.monotonic())

    def _fetch_page(self, url: str, timeout: Optional[float] = None) -> Dict:
        """
        Fetch a single page and return its data.

        Args:
            url: URL to fetch
            timeout: Request timeout, defaults to the crawler's timeout

        Returns:
            Dictionary with page data (always returns a dict, even for failures)
        """
        try:
            if self.verbose:
                print(f"  📄 Fetching: {url}")

            response = self.session.get(url, timeout=timeout or self.timeout)
            content_type = response.headers.get("content-type", "").lower()

            if not (200 <= response.status_code < 300):
                if self.verbose:
                    print(f"    ⚠️  HTTP {response.status_code}: {url}")
                return {
                    "url": url,
                    "content": None,
                    "status_code": response.status_code,
                    "content_type": content_type,
                    "error": f"HTTP {response.status_code}",
                    "crawl_successful": False,
                }

            return {
                "url": url,
                "content": response.text,
                "status_code": response.status_code,
                "content_type": content_type,
                "error": None,
                "crawl_successful": True,
            }

        except requests.RequestException as e:
            if self.verbose:
                print(f"    ❌ Failed to fetch {url}: {e}")
            return {
                "url": url,
                "content": None,
                "status_code": e.response.status_code
                if e.response is not None
                else None,
                "content_type": None,
                "error": str(e),
                "crawl_successful": False,
            }
        except Exception as e:
            if self.verbose:
                print(f"    ❌ Unexpected error fetching {url}: {e}")
            return {
                "url": url,
                "content": None,
                "status_code": None,
                "content_type": None,
                "error": str(e),
                "crawl_successful": False,
            }

    def _build_page(self, page_data: Dict, extractor: ElementExtractor) -> Page:
        """Parse fetched HTML into an analyzed page."""
        soup = parse_html(page_data["content"])
        return Page(
            url=page_data["url"],
            title=page_title(soup),
            elements=tuple(extractor.extract(soup)),
        )

    def _analyze_seed(
        self, url: str, extractor: ElementExtractor, deadline: Optional[float]
    ) -> Page:
        """Fetch and analyze a page whose failure ends the whole operation."""
        page_data = self._fetch_page(url, self._request_timeout(deadline))
        self._check_deadline(deadline)
        if not page_data["crawl_successful"]:
            raise SeedFetchError(url, page_data["error"], page_data["status_code"])

        try:
            return self._build_page(page_data, extractor)
        except Exception as e:
            raise SeedFetchError(url, f"Failed to parse page: {e}") from e

    def _analyze_candidate(
        self, url: str, deadline: Optional[float]
    ) -> Optional[Page]:
        """Fetch and analyze a linked page, returning None on any failure."""
        page_data = self._fetch_page(url, self._request_timeout(deadline))
        self._check_deadline(deadline)
        if not page_data["crawl_successful"]:
            if self.verbose:
                print(f"    ❌ Skipping {url}: {page_data['error']}")
            return None

        try:
            return self._build_page(page_data, self.extractor)
        except Exception as e:
            if self.verbose:
                print(f"    ❌ Error analyzing page {url}: {e}")
            return None

    def _validate_seed(self, seed_url: str) -> str:
        if not seed_url:
            raise InvalidInputError("URL is required")
        if not is_valid_seed_url(seed_url):
            raise InvalidInputError(f"Invalid URL format: {seed_url}")
        return seed_url.strip()

    def analyze_single_page(self, url: str) -> Page:
        """
        Analyze one page without following its links.

        Uses the single-page extraction passes, which include headings.

        Args:
            url: URL to analyze

        Returns:
            Analyzed page

        Raises:
            InvalidInputError: If the URL is missing or malformed
            SeedFetchError: If the page cannot be fetched or parsed
        """
        url = self._validate_seed(url)
        return self._analyze_seed(url, self.single_page_extractor, self._deadline())

    def crawl_site(self, seed_url: str, page_budget: int = 1) -> List[Page]:
        """
        Crawl a website starting from the seed URL.

        The seed page is always returned first. Pages it links to on the same
        host follow in discovery order. At most ``min(page_budget - 1, 20)``
        linked pages are fetched; failed fetches and duplicates use up a
        slot without adding a page.

        Args:
            seed_url: Starting URL for crawling
            page_budget: Maximum number of pages to return, seed included

        Returns:
            List of analyzed pages

        Raises:
            InvalidInputError: If the seed URL or budget is invalid
            SeedFetchError: If the seed page cannot be fetched or parsed
            CrawlTimeoutError: If ``max_duration`` elapses before completion
        """
        seed_url = self._validate_seed(seed_url)
        if (
            isinstance(page_budget, bool)
            or not isinstance(page_budget, int)
            or page_budget < 1
        ):
            raise InvalidInputError(
                f"Page budget must be a positive integer: {page_budget}"
            )

        deadline = self._deadline()

        if self.verbose:
            print(f"🚀 Starting crawl from: {seed_url}")

        seed_page = self._analyze_seed(seed_url, self.extractor, deadline)
        pages = [seed_page]

        if page_budget <= 1:
            if self.verbose:
                print("✅ Page budget is 1, returning seed page only")
            return pages

        visited: Set[str] = {seed_url}
        seen_fingerprints: Set[str] = {page_fingerprint(seed_page.elements)}
        candidates = discover_links(
            seed_url, seed_page.elements, exclude=visited, verbose=self.verbose
        )

        if self.verbose:
            print(f"    🔗 Found {len(candidates)} same-domain links")

        max_additional = min(page_budget - 1, MAX_ADDITIONAL_PAGES)
        attempts = 0

        for link in candidates:
            if attempts >= max_additional:
                break
            if link in visited:
                continue

            visited.add(link)
            attempts += 1

            if self.delay:
                time.sleep(self.delay)

            page = self._analyze_candidate(link, deadline)
            if page is None:
                continue

            fingerprint = page_fingerprint(page.elements)
            if fingerprint in seen_fingerprints:
                if self.verbose:
                    print(f"    ♻️  Duplicate page skipped: {link}")
                continue

            seen_fingerprints.add(fingerprint)
            pages.append(page)

        if self.verbose:
            print(
                f"✅ Crawl completed: {len(pages)} pages kept, {attempts} linked pages fetched"
            )

        return pages
