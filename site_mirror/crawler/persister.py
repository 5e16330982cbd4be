"""
Persistence of fetched pages to the local mirror.
"""

from ..errors import FileSystemFailure
from ..utils.log import get_logger
from ..utils.paths import ensure_parent_dir


class PagePersister:
    """
    Writes page content to disk.

    Existing files are overwritten, so re-running a crawl refreshes the
    mirror in place.
    """

    def __init__(self):
        self.logger = get_logger("persister")

    def save(self, path: str, content: bytes) -> str:
        """
        Write content to a path, creating parent directories as needed.

        Args:
            path: Local file path
            content: Raw bytes to write

        Returns:
            The path written

        Raises:
            FileSystemFailure: If a directory or the file cannot be written
        """
        try:
            ensure_parent_dir(path)
            with open(path, 'wb') as f:
                f.write(content)
        except (OSError, ValueError) as e:
            # ValueError: paths with an embedded NUL (from a decoded %00)
            raise FileSystemFailure(path, getattr(e, 'strerror', None) or str(e)) from e

        self.logger.debug(f"Saved {len(content)} bytes to {path}")
        return path
