"""
Output Formatter Module

Formats the crawl results into a structured JSON-ready report that test
generators can consume.
"""

from typing import Dict, List
from datetime import datetime, timezone

from . import __version__
from .fingerprint import page_fingerprint
from .models import Page


# Selectors built from an id or attribute rather than the tag/class fallback
STABLE_SELECTOR_PREFIXES = ("#", "[")


class OutputFormatter:
    """Formats analysis results into structured output."""

    def _format_page(self, page: Page) -> Dict:
        """
        Format a single analyzed page for output.

        Args:
            page: Analyzed page

        Returns:
            Formatted page data
        """
        formatted_page = page.to_dict()
        formatted_page["fingerprint"] = page_fingerprint(page.elements)
        formatted_page["element_count"] = len(page.elements)
        formatted_page["element_counts"] = page.element_counts()
        return formatted_page

    def _generate_crawl_summary(
        self, seed_url: str, pages: List[Page], crawl_time: float
    ) -> Dict:
        """
        Generate summary information about the crawl.

        Args:
            seed_url: URL the crawl started from
            pages: Analyzed pages
            crawl_time: Time taken for crawl in seconds

        Returns:
            Summary dictionary
        """
        kind_counts: Dict[str, int] = {}
        for page in pages:
            for kind, count in page.element_counts().items():
                kind_counts[kind] = kind_counts.get(kind, 0) + count

        return {
            "seed_url": seed_url,
            "crawl_timestamp": datetime.now(timezone.utc).isoformat(),
            "crawl_duration_seconds": round(crawl_time, 2),
            "pages_analyzed": len(pages),
            "total_elements": sum(len(page.elements) for page in pages),
            "elements_by_kind": dict(sorted(kind_counts.items())),
        }

    def _generate_selector_summary(self, pages: List[Page]) -> Dict:
        """
        Find selectors shared by more than one page.

        Shared selectors usually belong to site-wide components such as
        navigation bars, and are candidates for a common page object.

        Args:
            pages: Analyzed pages

        Returns:
            Mapping of ``kind:selector`` to the paths that contain it
        """
        usage: Dict[str, List[str]] = {}
        for page in pages:
            for signature in sorted(
                {f"{element.kind}:{element.selector}" for element in page.elements}
            ):
                usage.setdefault(signature, []).append(page.path)

        return {
            signature: {"pages": paths, "page_count": len(paths)}
            for signature, paths in sorted(usage.items())
            if len(paths) > 1
        }

    def _generate_insights(self, pages: List[Page]) -> Dict:
        """Point out things that make generated tests brittle."""
        insights = {
            "pages_without_elements": [],
            "fallback_selector_count": 0,
            "potential_issues": [],
        }

        for page in pages:
            if not page.elements:
                insights["pages_without_elements"].append(page.url)
            insights["fallback_selector_count"] += sum(
                1
                for element in page.elements
                if not element.selector.startswith(STABLE_SELECTOR_PREFIXES)
            )

        if insights["pages_without_elements"]:
            insights["potential_issues"].append(
                "Some pages have no interactive elements - content may be rendered by JavaScript"
            )
        if insights["fallback_selector_count"]:
            insights["potential_issues"].append(
                f"{insights['fallback_selector_count']} elements rely on tag/class "
                "selectors - consider adding ids or data-testid attributes"
            )

        return insights

    def format_output(
        self,
        seed_url: str,
        pages: List[Page],
        crawl_time: float,
        **kwargs,
    ) -> Dict:
        """
        Format all analysis results into final output structure.

        Args:
            seed_url: URL the crawl started from
            pages: Analyzed pages, seed first
            crawl_time: Time taken for crawl in seconds
            **kwargs: Run parameters (page_budget, delay, timeout, etc.)

        Returns:
            Complete formatted output dictionary
        """
        return {
            "crawl_summary": self._generate_crawl_summary(seed_url, pages, crawl_time),
            "pages": [self._format_page(page) for page in pages],
            "selector_summary": self._generate_selector_summary(pages),
            "insights": self._generate_insights(pages),
            "metadata": self._generate_metadata(kwargs),
        }

    def _generate_metadata(self, kwargs: Dict) -> Dict:
        """
        Generate metadata including run parameters.

        Args:
            kwargs: Additional parameters passed to format_output

        Returns:
            Metadata dictionary
        """
        metadata = {
            "format_version": "1.0",
            "tool_name": "Site Element Mapper",
            "tool_version": __version__,
            "generation_timestamp": datetime.now(timezone.utc).isoformat(),
            "run_parameters": {
                "mode": kwargs.get("mode", "crawl"),
                "page_budget": kwargs.get("page_budget"),
                "request_delay": kwargs.get("delay"),
                "timeout": kwargs.get("timeout"),
                "max_duration": kwargs.get("max_duration"),
            },
        }

        # Remove None values from run_parameters
        metadata["run_parameters"] = {
            k: v for k, v in metadata["run_parameters"].items() if v is not None
        }

        return metadata
