#!/usr/bin/env python3
"""
Site Mirror - mirror a website to local disk.

Starting from a seed URL, the tool downloads the page, follows the
same-site links configured in config.json, and reproduces the remote path
structure under <output>/<host>, finishing with a README.txt manifest.

Usage:
    python -m site_mirror.main --url https://example.com --config config.json --output ./mirrors
"""

import argparse
import asyncio
import logging
import os
import sys
from urllib.parse import urlparse

from rich.prompt import Prompt

from site_mirror.config import load_config
from site_mirror.crawler import SiteCrawler, PageRecord, PageStatus
from site_mirror.errors import ConfigError, InputError
from site_mirror.utils.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TIMEOUT,
)
from site_mirror.utils.log import (
    console,
    setup_logger,
    print_status,
    print_success,
    print_error,
    print_info
)


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='site_mirror',
        description='Mirror a website to local disk',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --url https://example.com
    %(prog)s --url https://example.com --config ./config.json --output ./mirrors
    %(prog)s                 (prompts for the URL)
        """
    )

    parser.add_argument(
        '--url', '-u',
        type=str,
        help='URL of the website to mirror; prompted for when omitted'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        default=DEFAULT_CONFIG_FILE,
        help=f'Path to the JSON configuration file (default: {DEFAULT_CONFIG_FILE})'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=DEFAULT_OUTPUT_DIR,
        help=f'Base output directory (default: {DEFAULT_OUTPUT_DIR})'
    )

    parser.add_argument(
        '--max-pages', '-m',
        type=int,
        default=None,
        help='Maximum number of pages to fetch (default: no limit)'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f'Request timeout in seconds (default: {DEFAULT_TIMEOUT})'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress output except errors'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write log records to this file'
    )

    return parser.parse_args(argv)


def validate_url(url: str) -> str:
    """
    Validate a seed URL.

    Args:
        url: URL string to validate

    Returns:
        The stripped URL

    Raises:
        InputError: If the URL is not an absolute http(s) URL
    """
    url = (url or '').strip()
    parsed = urlparse(url)

    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise InputError(f"Invalid URL: {url!r}")

    return url


def prompt_for_url(message: str = "Enter the URL of the website") -> str:
    """
    Ask for a seed URL until a valid one is entered.

    Args:
        message: Prompt text

    Returns:
        Validated URL
    """
    while True:
        answer = Prompt.ask(message, console=console)
        try:
            return validate_url(answer)
        except InputError as e:
            print_error(str(e))


def report_page(record: PageRecord) -> None:
    """Print one progress line for a processed URL."""
    if record.status is PageStatus.SAVED:
        print_status(record.url, "green")
    else:
        print_status(f"{record.url} ({record.error})", "red")


def print_summary(result) -> None:
    """
    Print the crawl summary.

    Args:
        result: CrawlResult object
    """
    print("\n" + "=" * 60)
    print_success("CRAWL SUMMARY")
    print("=" * 60)
    print(f"  Pages saved:       {result.pages_saved}")
    print(f"  Pages failed:      {result.pages_failed}")
    print(f"  Manifest:          {result.manifest_path}")
    print(f"  Duration:          {result.duration_seconds:.1f} seconds")
    print("=" * 60 + "\n")


async def main(argv=None) -> int:
    """
    Main entry point for the site mirror.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    setup_logger(level=log_level, log_file=args.log_file)

    try:
        config = load_config(args.config)

        url = validate_url(args.url) if args.url else prompt_for_url()

        if not args.quiet:
            print_info(f"Target URL: {url}")
            print_info(f"Output: {os.path.abspath(args.output)}")

        crawler = SiteCrawler(
            url=url,
            config=config,
            output_dir=args.output,
            max_pages=args.max_pages,
            timeout=args.timeout,
            on_page=None if args.quiet else report_page
        )

        result = await crawler.crawl()

        if not args.quiet:
            print_summary(result)

        if result.manifest_path is None:
            print_error(f"Could not write the manifest into {result.output_root}")
            return 1

        print_success(f"Done! Website mirrored to: {result.output_root}")
        return 0

    except KeyboardInterrupt:
        print_error("\nCrawl interrupted by user")
        return 1
    except ConfigError as e:
        print_error(f"Configuration error: {e}")
        return 1
    except InputError as e:
        print_error(f"Invalid input: {e}")
        return 1


def run() -> None:
    """Entry point wrapper for running as module."""
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
