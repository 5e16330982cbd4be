"""
Crawl frontier: the pending queue plus the set of handled URLs.

The frontier is the only place that decides whether a URL may still be
fetched, which keeps every URL to a single fetch attempt.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Deque, Dict, Mapping, Set

from ..errors import EmptyFrontier


class PageStatus(Enum):
    """Outcome of a fetch attempt."""

    SAVED = "saved"
    FAILED = "failed"


@dataclass(frozen=True)
class CrawlTarget:
    """A URL waiting to be fetched and the page it was found on."""

    url: str
    source_url: str


class Frontier:
    """
    FIFO queue of crawl targets with de-duplication.

    A URL moves pending -> in flight -> visited and never goes back.
    """

    def __init__(self):
        self._pending: Deque[CrawlTarget] = deque()
        self._pending_urls: Set[str] = set()
        self._in_flight: Set[str] = set()
        self._visited: Dict[str, PageStatus] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    @property
    def visited(self) -> Mapping[str, PageStatus]:
        """Read-only view of handled URLs and their outcome."""
        return MappingProxyType(self._visited)

    def is_known(self, url: str) -> bool:
        """Check whether a URL is pending, in flight or already visited."""
        return (
            url in self._pending_urls or
            url in self._in_flight or
            url in self._visited
        )

    def enqueue(self, target: CrawlTarget) -> bool:
        """
        Add a target unless its URL has been seen before.

        Args:
            target: Target to schedule

        Returns:
            True if the target was added, False if it was a duplicate
        """
        if self.is_known(target.url):
            return False

        self._pending.append(target)
        self._pending_urls.add(target.url)
        return True

    def dequeue(self) -> CrawlTarget:
        """
        Remove and return the earliest pending target.

        Raises:
            EmptyFrontier: If nothing is pending
        """
        if not self._pending:
            raise EmptyFrontier("No pending targets")

        target = self._pending.popleft()
        self._pending_urls.discard(target.url)
        self._in_flight.add(target.url)
        return target

    def mark_visited(self, url: str, status: PageStatus) -> None:
        """
        Record the outcome of a dequeued URL.

        Args:
            url: URL previously returned by dequeue()
            status: Outcome of the fetch attempt

        Raises:
            ValueError: If the URL is not in flight
        """
        if url not in self._in_flight:
            raise ValueError(f"URL was not dequeued or is already visited: {url}")

        self._in_flight.discard(url)
        self._visited[url] = status
