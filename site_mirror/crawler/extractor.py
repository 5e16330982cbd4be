"""
Link extractor for parsing fetched HTML.

Uses BeautifulSoup for HTML parsing to find link-bearing attributes.
"""

from typing import Iterable, List, Tuple, Union

from bs4 import BeautifulSoup

from ..utils.log import get_logger


class LinkExtractor:
    """
    Extracts raw link strings from HTML content.

    Which elements are inspected is driven by configured (tag, attribute)
    pairs, e.g. ``("a", "href")`` or ``("img", "src")``.
    """

    def __init__(self, link_types: Iterable[Tuple[str, str]]):
        """
        Initialize the link extractor.

        Args:
            link_types: Ordered (tag, attribute) pairs to scan for
        """
        self.link_types = tuple(link_types)
        self.logger = get_logger("extractor")

    def extract(self, content: Union[bytes, str], page_url: str) -> List[str]:
        """
        Extract raw links from HTML content.

        Links are returned in configured tag order, and in document order
        within each tag. Values are returned as written in the document;
        resolving them is up to the caller.

        Args:
            content: HTML content to parse
            page_url: URL of the page (for logging)

        Returns:
            List of raw attribute values
        """
        soup = self._parse(content, page_url)
        if soup is None:
            return []

        links = []
        for tag, attribute in self.link_types:
            for element in soup.find_all(tag):
                value = element.get(attribute)

                # Multi-valued attributes (rel, class) come back as lists
                if not isinstance(value, str):
                    continue

                value = value.strip()
                if value:
                    links.append(value)

        self.logger.debug(f"Extracted {len(links)} links from {page_url}")
        return links

    def _parse(self, content: Union[bytes, str], page_url: str):
        """Parse content, tolerating broken markup and parser failures."""
        try:
            return BeautifulSoup(content, 'lxml')
        except Exception as e:
            self.logger.debug(f"lxml failed on {page_url}, retrying with html.parser: {e}")

        try:
            return BeautifulSoup(content, 'html.parser')
        except Exception as e:
            self.logger.warning(f"Could not parse {page_url}: {e}")
            return None
