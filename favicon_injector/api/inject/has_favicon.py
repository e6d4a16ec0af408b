"""Favicon presence check."""

from bs4 import BeautifulSoup

from ._constants import FAVICON_RELS


def has_favicon(soup: BeautifulSoup) -> bool:
    """Check whether a parsed document already links a favicon.

    A document has a favicon if any <link> element's rel attribute is exactly
    one of "icon", "shortcut icon" or "apple-touch-icon" (case-sensitive).
    """
    for link in soup.find_all("link"):
        rel = link.get("rel")
        if isinstance(rel, list):
            rel = " ".join(rel)
        if rel in FAVICON_RELS:
            return True
    return False
