"""
Crawler module for site mirroring.

Contains components for frontier management, fetching, extracting,
classifying and persisting pages.
"""

from .crawler import SiteCrawler, CrawlResult, PageRecord
from .frontier import Frontier, CrawlTarget, PageStatus
from .extractor import LinkExtractor
from .classifier import classify, Classification, LinkKind
from .fetcher import PageFetcher
from .persister import PagePersister
from .manifest import write_manifest, render_manifest

__all__ = [
    "SiteCrawler",
    "CrawlResult",
    "PageRecord",
    "Frontier",
    "CrawlTarget",
    "PageStatus",
    "LinkExtractor",
    "classify",
    "Classification",
    "LinkKind",
    "PageFetcher",
    "PagePersister",
    "write_manifest",
    "render_manifest",
]
