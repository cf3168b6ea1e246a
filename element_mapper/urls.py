"""
URL Module

Resolves raw anchor hrefs against the page they were found on and keeps
only links on the same host. Rejected links are dropped, never raised.
"""

import re
from typing import Iterable, List, Optional, Set
from urllib.parse import urlparse

from .models import Element


SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")

CRAWLABLE_SCHEMES = {"http", "https"}


def is_valid_seed_url(url: str) -> bool:
    """Check that a seed URL is an absolute http(s) URL with a host."""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
        return parsed.scheme in CRAWLABLE_SCHEMES and bool(parsed.hostname)
    except ValueError:
        return False


def _base_directory(path: str) -> str:
    if not path:
        return "/"
    if path.endswith("/"):
        return path
    return path[: path.rfind("/") + 1]


def absolutize(base_url: str, href: str) -> str:
    """
    Turn an href into an absolute URL string.

    Args:
        base_url: URL of the page the href was found on
        href: Raw href value

    Returns:
        Absolute URL string (not validated)
    """
    base = urlparse(base_url)
    origin = f"{base.scheme}://{base.netloc}"

    if href.startswith("//"):
        return f"{base.scheme}:{href}"
    if href.startswith("/"):
        return f"{origin}{href}"
    if not SCHEME_PATTERN.match(href):
        return f"{origin}{_base_directory(base.path)}{href}"
    return href


def resolve_link(base_url: str, href: Optional[str]) -> Optional[str]:
    """
    Resolve an href and admit it only if it stays on the base host.

    Args:
        base_url: URL of the page the href was found on
        href: Raw href value, possibly None

    Returns:
        Absolute URL, or None if the link is rejected
    """
    if href is None:
        return None
    href = href.strip()
    # Empty and fragment-only hrefs point back at the same document
    if not href or href.startswith("#"):
        return None

    full_url = absolutize(base_url, href)
    try:
        parsed = urlparse(full_url)
        hostname = parsed.hostname
        base_hostname = urlparse(base_url).hostname
    except ValueError:
        return None

    if parsed.scheme.lower() not in CRAWLABLE_SCHEMES:
        return None
    if not hostname or hostname != base_hostname:
        return None
    return full_url


def discover_links(
    base_url: str,
    elements: Iterable[Element],
    exclude: Optional[Set[str]] = None,
    verbose: bool = False,
) -> List[str]:
    """
    Build the ordered candidate list from a page's link elements.

    Args:
        base_url: URL of the page being scanned
        elements: Elements extracted from that page
        exclude: URLs already visited, never returned
        verbose: Print rejected links

    Returns:
        Same-host URLs in discovery order, without duplicates
    """
    exclude = exclude or set()
    candidates = {}

    for element in elements:
        if element.kind != "link":
            continue
        href = getattr(element, "href", None)
        if not href:
            continue

        resolved = resolve_link(base_url, href)
        if resolved is None:
            if verbose:
                print(f"    ⏭️  Skipping link: {href}")
            continue

        if resolved in exclude or resolved in candidates:
            continue
        candidates[resolved] = None

    return list(candidates)
