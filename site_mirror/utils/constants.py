"""
Shared constants for the site mirror.

Contains common configuration values used across multiple modules.
"""

# Default user agent string for all HTTP requests
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Default request timeout in seconds
DEFAULT_TIMEOUT = 30

# Default configuration file, relative to the working directory
DEFAULT_CONFIG_FILE = "config.json"

# Default base directory; each crawl writes into <base>/<seed host>
DEFAULT_OUTPUT_DIR = "mirrors"

# Manifest written once at the root of every mirror
MANIFEST_FILENAME = "README.txt"

# Name given to the page stored for a bare host URL
INDEX_FILENAME = "index.html"

# Extension appended to paths whose final segment has none
DEFAULT_PAGE_EXTENSION = ".html"

# Tag -> attribute pairs used when the configuration does not name any
DEFAULT_LINK_TYPES = (
    ("a", "href"),
    ("link", "href"),
    ("img", "src"),
    ("script", "src"),
)
