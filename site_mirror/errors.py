"""
Exception types for the site mirror.

Only configuration errors are fatal; per-URL failures are recorded by the
crawler and the crawl carries on.
"""


class MirrorError(Exception):
    """Base class for all site mirror errors."""


class ConfigError(MirrorError):
    """Configuration file is missing, unreadable or malformed."""


class InputError(MirrorError):
    """Seed URL is not a well-formed http(s) URL."""


class EmptyFrontier(MirrorError):
    """Raised by the frontier when no pending targets remain."""


class FetchFailure(MirrorError):
    """A URL could not be retrieved."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class FileSystemFailure(MirrorError):
    """Fetched content could not be written to disk."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
