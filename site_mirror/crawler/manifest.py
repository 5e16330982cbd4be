"""
Manifest written at the root of every mirror.
"""

import os

from ..config import ManifestMetadata
from ..errors import FileSystemFailure
from ..utils.constants import MANIFEST_FILENAME
from ..utils.paths import ensure_dir


def render_manifest(seed_url: str, metadata: ManifestMetadata) -> str:
    """Format the manifest text for a mirror."""
    return (
        "/*\n\n"
        f"@author: {metadata.author}\n"
        f"@license: {metadata.license}\n"
        f"@version: {metadata.version}\n"
        f"@project: {metadata.project}\n\n"
        f"Web Site URL: {seed_url}\n"
        "*/\n"
    )


def write_manifest(output_root: str, seed_url: str, metadata: ManifestMetadata) -> str:
    """
    Write the manifest file into the mirror root.

    Args:
        output_root: Root directory of the mirror
        seed_url: URL the crawl started from
        metadata: Descriptive fields from the configuration

    Returns:
        Path of the written manifest

    Raises:
        FileSystemFailure: If the root or the file cannot be written
    """
    manifest_path = os.path.join(output_root, MANIFEST_FILENAME)

    try:
        ensure_dir(output_root)
        with open(manifest_path, 'w', encoding='utf-8') as f:
            f.write(render_manifest(seed_url, metadata))
    except OSError as e:
        raise FileSystemFailure(manifest_path, e.strerror or str(e)) from e

    return manifest_path
