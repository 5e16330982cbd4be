"""
Link classification.

Decides whether a discovered link belongs to the mirrored site, points
elsewhere, or is blocked by configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional
from urllib.parse import urljoin, urlparse

from ..utils.paths import normalize_url


class LinkKind(Enum):
    """Classification of a discovered link."""

    LOCAL = "local"
    FOREIGN = "foreign"
    EXCLUDED = "excluded"
    EMPTY = "empty"


@dataclass(frozen=True)
class Classification:
    """Result of classifying one link; ``url`` is set for local links only."""

    kind: LinkKind
    url: Optional[str] = None

    @property
    def is_local(self) -> bool:
        return self.kind is LinkKind.LOCAL


def classify(
    raw_link: str,
    base_url: str,
    seed_host: str,
    exclude_patterns: Iterable[str]
) -> Classification:
    """
    Classify a raw link found on a page.

    Rules are applied in order: empty links, excluded patterns, relative
    links (resolved against the page and always local), then absolute
    links compared by host with the seed.

    Args:
        raw_link: Attribute value as found in the document
        base_url: URL of the page the link was found on
        seed_host: Host of the seed URL
        exclude_patterns: Substrings that block a link

    Returns:
        Classification of the link
    """
    link = (raw_link or '').strip()

    if not link:
        return Classification(LinkKind.EMPTY)

    if any(pattern in link for pattern in exclude_patterns):
        return Classification(LinkKind.EXCLUDED)

    # Protocol-relative links carry a host, so they are treated as absolute
    if link.startswith('//'):
        link = f"{urlparse(base_url).scheme}:{link}"

    parsed = urlparse(link)

    if not parsed.scheme:
        resolved = normalize_url(urljoin(base_url, link))
        return Classification(LinkKind.LOCAL, resolved)

    if parsed.netloc.lower() == seed_host.lower():
        resolved = normalize_url(link)
        return Classification(LinkKind.LOCAL, resolved)

    return Classification(LinkKind.FOREIGN)
