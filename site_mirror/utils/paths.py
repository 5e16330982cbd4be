"""
Path and URL utilities for the site mirror.

Provides host extraction, URL to local path mapping, and directory management.
"""

import os
import posixpath
from urllib.parse import urlparse, urlunparse, unquote

from .constants import INDEX_FILENAME, DEFAULT_PAGE_EXTENSION


def normalize_url(url: str) -> str:
    """
    Normalize an absolute URL for de-duplication.

    Lower-cases scheme and host, removes the fragment and gives a bare host
    the root path, so 'https://Example.com' and 'https://example.com/#top'
    both become 'https://example.com/'.

    Args:
        url: Absolute URL

    Returns:
        Normalized URL string
    """
    parsed = urlparse(url.strip())
    return urlunparse((
        parsed.scheme.lower(),
        parsed.netloc.lower(),
        parsed.path or '/',
        parsed.params,
        parsed.query,
        ''  # Remove fragment
    ))


def get_host(url: str) -> str:
    """
    Extract the host (network location) from a URL.

    Args:
        url: URL to extract the host from

    Returns:
        Lower-cased host string (e.g., 'example.com' or 'localhost:8080')
    """
    return urlparse(url).netloc.lower()


def map_path(url: str, seed_host: str) -> str:
    """
    Map a remote URL to a local path inside the mirror.

    The scheme, host, query and fragment are dropped and the remaining path
    is rooted at a directory named after the seed host. A bare host maps to
    ``index.html``; a final segment without an extension gets ``.html``.

    Args:
        url: Absolute URL of a page on the seed host
        seed_host: Host of the seed URL, used as the root directory name

    Returns:
        Relative POSIX path, e.g. 'example.com/about.html'
    """
    path = unquote(urlparse(url).path)

    # Keep the mapping inside the mirror root
    segments = [s for s in path.split('/') if s not in ('', '.', '..')]

    if not segments:
        segments = [INDEX_FILENAME]
    elif '.' not in segments[-1]:
        segments[-1] += DEFAULT_PAGE_EXTENSION

    return posixpath.join(seed_host, *segments)


def ensure_dir(path: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    os.makedirs(path, exist_ok=True)


def ensure_parent_dir(file_path: str) -> None:
    """
    Ensure the parent directory of a file exists.

    Args:
        file_path: File path whose parent directory should exist
    """
    parent = os.path.dirname(file_path)
    if parent:
        ensure_dir(parent)
