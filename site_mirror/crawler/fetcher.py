"""
Page fetcher for retrieving raw page content.

Uses aiohttp for HTTP requests. One attempt is made per URL.
"""

import asyncio
from typing import Optional

import aiohttp
from aiohttp import ClientTimeout, ClientError

from ..errors import FetchFailure
from ..utils.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..utils.log import get_logger


class PageFetcher:
    """
    Fetches pages over HTTP.

    Must be used as an async context manager so the underlying session is
    opened and closed around the crawl.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize the page fetcher.

        Args:
            timeout: Total request timeout in seconds
            user_agent: User agent string for requests
        """
        self.timeout = ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self.logger = get_logger("fetcher")
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "PageFetcher":
        self._session = aiohttp.ClientSession(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent}
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def fetch(self, url: str) -> bytes:
        """
        Retrieve the body of a URL.

        Args:
            url: Absolute URL to fetch

        Returns:
            Raw response body

        Raises:
            FetchFailure: On connection errors, timeouts, non-success
                          statuses or malformed responses
        """
        if self._session is None:
            raise RuntimeError("PageFetcher must be used inside 'async with'")

        try:
            async with self._session.get(url, allow_redirects=True) as response:
                if not 200 <= response.status < 300:
                    raise FetchFailure(url, f"HTTP {response.status}")

                content = await response.read()
                self.logger.debug(f"Fetched {len(content)} bytes from {url}")
                return content

        except asyncio.TimeoutError as e:
            raise FetchFailure(url, "timed out") from e
        except ClientError as e:
            raise FetchFailure(url, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            # yarl rejects some malformed URLs before a request is made
            raise FetchFailure(url, f"invalid URL: {e}") from e
