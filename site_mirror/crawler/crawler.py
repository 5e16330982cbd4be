"""
Main site crawler module.

Orchestrates the mirroring process: frontier management, page fetching,
link discovery and classification, and persistence.
"""

import os
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .classifier import classify
from .extractor import LinkExtractor
from .fetcher import PageFetcher
from .frontier import CrawlTarget, Frontier, PageStatus
from .manifest import write_manifest
from .persister import PagePersister
from ..config import MirrorConfig
from ..errors import EmptyFrontier, FetchFailure, FileSystemFailure
from ..utils.constants import DEFAULT_OUTPUT_DIR, DEFAULT_TIMEOUT
from ..utils.log import get_logger
from ..utils.paths import get_host, map_path, normalize_url


@dataclass
class PageRecord:
    """Outcome of one fetch attempt."""

    url: str
    local_path: str
    status: PageStatus
    error: Optional[str] = None


@dataclass
class CrawlResult:
    """Results of the crawling operation."""

    seed_url: str
    output_root: str
    pages: List[PageRecord] = field(default_factory=list)
    manifest_path: Optional[str] = None
    duration_seconds: float = 0.0

    @property
    def pages_saved(self) -> int:
        return sum(1 for page in self.pages if page.status is PageStatus.SAVED)

    @property
    def pages_failed(self) -> int:
        return sum(1 for page in self.pages if page.status is PageStatus.FAILED)


class SiteCrawler:
    """
    Main site crawler class.

    Crawls breadth-first from a seed URL, one page at a time, and mirrors
    every local page under ``<output_dir>/<seed host>``.
    """

    def __init__(
        self,
        url: str,
        config: MirrorConfig,
        output_dir: str = DEFAULT_OUTPUT_DIR,
        max_pages: Optional[int] = None,
        timeout: float = DEFAULT_TIMEOUT,
        fetcher=None,
        persister: Optional[PagePersister] = None,
        on_page: Optional[Callable[[PageRecord], None]] = None
    ):
        """
        Initialize the site crawler.

        Args:
            url: Absolute seed URL
            config: Mirror configuration
            output_dir: Base directory; the mirror goes in a subdirectory
                        named after the seed host
            max_pages: Stop after this many fetch attempts (None = no limit)
            timeout: Request timeout in seconds for the default fetcher
            fetcher: Object with an async ``fetch(url)``, used as an async
                     context manager (default: PageFetcher)
            persister: Page persister (default: PagePersister)
            on_page: Called with each PageRecord as it is produced
        """
        self.seed_url = normalize_url(url)
        self.config = config
        self.seed_host = get_host(self.seed_url)
        self.output_dir = os.path.abspath(output_dir)
        self.output_root = os.path.join(self.output_dir, self.seed_host)
        self.max_pages = max_pages
        self.on_page = on_page

        self.logger = get_logger("crawler")

        # Initialize components
        self.frontier = Frontier()
        self.fetcher = fetcher if fetcher is not None else PageFetcher(timeout=timeout)
        self.extractor = LinkExtractor(config.link_types)
        self.persister = persister if persister is not None else PagePersister()

    async def crawl(self) -> CrawlResult:
        """
        Run the crawl until the frontier is exhausted.

        Returns:
            CrawlResult with per-page outcomes
        """
        start_time = time.time()
        result = CrawlResult(seed_url=self.seed_url, output_root=self.output_root)

        self.logger.info(f"Starting crawl of {self.seed_url}")
        self.logger.info(f"Output directory: {self.output_root}")

        self.frontier.enqueue(CrawlTarget(self.seed_url, self.seed_url))

        async with self.fetcher:
            while self.max_pages is None or len(result.pages) < self.max_pages:
                try:
                    target = self.frontier.dequeue()
                except EmptyFrontier:
                    break

                record = await self._crawl_page(target)
                self.frontier.mark_visited(target.url, record.status)
                result.pages.append(record)

                if self.on_page:
                    self.on_page(record)

        if self.frontier:
            self.logger.warning(
                f"Page limit of {self.max_pages} reached, "
                f"{len(self.frontier)} URLs left unvisited"
            )

        try:
            result.manifest_path = write_manifest(
                self.output_root, self.seed_url, self.config.metadata
            )
        except FileSystemFailure as e:
            self.logger.error(f"Could not write manifest {e.path}: {e.reason}")

        result.duration_seconds = time.time() - start_time

        self.logger.info(
            f"Crawled {len(result.pages)} pages "
            f"({result.pages_saved} saved, {result.pages_failed} failed) "
            f"in {result.duration_seconds:.1f}s"
        )
        return result

    async def _crawl_page(self, target: CrawlTarget) -> PageRecord:
        """
        Fetch, scan and save a single page.

        Args:
            target: Target taken from the frontier

        Returns:
            PageRecord describing the outcome
        """
        url = target.url
        local_path = os.path.join(self.output_dir, map_path(url, self.seed_host))

        self.logger.debug(f"Fetching {url} (found on {target.source_url})")

        try:
            content = await self.fetcher.fetch(url)
        except FetchFailure as e:
            self.logger.warning(f"Fetch failed for {url}: {e.reason}")
            return PageRecord(url, local_path, PageStatus.FAILED, e.reason)

        self._discover_links(content, url)

        try:
            self.persister.save(local_path, content)
        except FileSystemFailure as e:
            self.logger.error(f"Could not save {url} to {e.path}: {e.reason}")
            return PageRecord(url, local_path, PageStatus.FAILED, e.reason)

        return PageRecord(url, local_path, PageStatus.SAVED)

    def _discover_links(self, content: bytes, page_url: str) -> None:
        """Extract links from fetched content and enqueue the local ones."""
        added = 0
        for raw_link in self.extractor.extract(content, page_url):
            classification = classify(
                raw_link, page_url, self.seed_host, self.config.block_names
            )
            if not classification.is_local:
                continue

            if self.frontier.enqueue(CrawlTarget(classification.url, page_url)):
                added += 1

        if added:
            self.logger.debug(f"Queued {added} new links from {page_url}")
