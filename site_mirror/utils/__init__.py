"""
Utility modules for the site mirror.

Contains logging, path handling utilities, and constants.
"""

from .log import setup_logger, get_logger
from .paths import get_host, map_path, ensure_dir, ensure_parent_dir
from .constants import (
    DEFAULT_USER_AGENT,
    DEFAULT_TIMEOUT,
    DEFAULT_CONFIG_FILE,
    DEFAULT_OUTPUT_DIR,
    MANIFEST_FILENAME,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "get_host",
    "map_path",
    "ensure_dir",
    "ensure_parent_dir",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_OUTPUT_DIR",
    "MANIFEST_FILENAME",
]
