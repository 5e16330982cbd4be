import pytest

from site_mirror.config import ManifestMetadata, MirrorConfig
from site_mirror.errors import FetchFailure


class FakeFetcher:
    """In-memory stand-in for PageFetcher keyed by URL."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []
        self.opened = False
        self.closed = False

    async def __aenter__(self):
        self.opened = True
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True

    async def fetch(self, url):
        self.calls.append(url)
        if url not in self.pages:
            raise FetchFailure(url, "HTTP 404")
        return self.pages[url]


@pytest.fixture
def config():
    return MirrorConfig(
        link_types=(("a", "href"),),
        block_names=("mailto:",),
        metadata=ManifestMetadata(
            author="Jane Doe",
            license="MIT",
            version="2.1",
            project="Mirror Test",
        ),
    )


@pytest.fixture
def make_fetcher():
    return FakeFetcher
