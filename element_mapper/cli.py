"""
CLI Module - Command Line Interface for Site Element Mapper

Handles command-line argument parsing and orchestrates the crawling,
element extraction, and output generation process.
"""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List, Optional

from .crawler import WebCrawler
from .exceptions import CrawlError
from .output_formatter import OutputFormatter


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Map the interactive elements of a website's pages for end-to-end tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py https://qa-practice.netlify.app
  python main.py https://example.com --output results.json --max-pages 10
  python main.py https://site.com --single-page --verbose
  python main.py https://site.com --max-pages 21 --max-duration 120
        """,
    )

    parser.add_argument("url", help="URL to start crawling from")

    parser.add_argument(
        "--output",
        "-o",
        help="Output file path (default: data/element_map.json)",
        default="data/element_map.json",
    )

    parser.add_argument(
        "--max-pages",
        type=int,
        default=1,
        help="Maximum number of pages to return, seed included (default: 1)",
    )

    parser.add_argument(
        "--single-page",
        action="store_true",
        help="Analyze only the given page, including its headings",
    )

    parser.add_argument(
        "--delay",
        type=float,
        default=0.5,
        help="Delay between requests in seconds (default: 0.5)",
    )

    parser.add_argument(
        "--timeout",
        type=int,
        default=10,
        help="Request timeout in seconds (default: 10)",
    )

    parser.add_argument(
        "--max-duration",
        type=float,
        help="Abort the crawl if it takes longer than this many seconds",
    )

    parser.add_argument(
        "--user-agent",
        help="User-Agent header to send (default: a desktop Chrome string)",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)
    if args.max_pages < 1:
        parser.error("--max-pages must be at least 1")
    return args


def _print_summary(pages, output_path: str) -> None:
    print(f"\n{'=' * 60}")
    print("📋 ELEMENT MAPPING SUMMARY")
    print("=" * 60)

    for page in pages[:5]:  # Show first 5 pages
        print(f"\n🌐 {page.url}")
        if page.title:
            print(f"   📝 {page.title}")
        counts = page.element_counts()
        if counts:
            summary = ", ".join(f"{count} {kind}" for kind, count in counts.items())
            print(f"   🧩 {summary}")
        else:
            print("   🧩 No interactive elements found")

    if len(pages) > 5:
        print(
            f"\n... and {len(pages) - 5} more pages (see {output_path} for full results)"
        )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI application."""
    args = parse_arguments(argv)

    output_path = Path(args.output)

    if args.verbose:
        print(f"🚀 Starting analysis of: {args.url}")
        if args.single_page:
            print("📊 Mode: single page")
        else:
            print(f"📊 Max pages: {args.max_pages}")
        print(f"⏱️  Request delay: {args.delay}s")
        print(f"💾 Output file: {args.output}")
        print("-" * 50)

    start_time = time.time()

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)

        crawler = WebCrawler(
            delay=args.delay,
            timeout=args.timeout,
            verbose=args.verbose,
            user_agent=args.user_agent,
            max_duration=args.max_duration,
        )
        output_formatter = OutputFormatter()

        if args.single_page:
            pages = [crawler.analyze_single_page(args.url)]
        else:
            if args.verbose:
                print("🕷️  Starting website crawl...")
            pages = crawler.crawl_site(args.url, page_budget=args.max_pages)

        crawl_time = time.time() - start_time
        output_data = output_formatter.format_output(
            seed_url=args.url,
            pages=pages,
            crawl_time=crawl_time,
            mode="single_page" if args.single_page else "crawl",
            page_budget=None if args.single_page else args.max_pages,
            delay=args.delay,
            timeout=args.timeout,
            max_duration=args.max_duration,
        )

        json_output = json.dumps(output_data, indent=2, ensure_ascii=False)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(json_output)

        if args.verbose:
            print(f"✅ Results saved to: {args.output}")
            print(f"\n🎉 Analysis completed in {crawl_time:.2f} seconds")
            total = output_data["crawl_summary"]["total_elements"]
            print(f"📊 Found {len(pages)} pages and {total} interactive elements")
            _print_summary(pages, args.output)
        else:
            print(f"Analysis complete. Results saved to: {args.output}")

    except KeyboardInterrupt:
        print("\n❌ Analysis interrupted by user")
        sys.exit(1)
    except (CrawlError, OSError) as e:
        print(f"❌ Error during analysis: {str(e)}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
