"""Anchor extraction from HTML documents."""

from typing import Optional

from bs4 import BeautifulSoup, FeatureNotFound


def _parse(html: str) -> BeautifulSoup:
    """Parse HTML with lxml, falling back to the stdlib parser if it is missing."""
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html, "html.parser")


def extract_all_links(html: str) -> list[str]:
    """Extract href values from every anchor tag in the document.

    Nothing is filtered: duplicates, empty hrefs, fragment-only anchors and
    javascript:/mailto: targets are all returned, in document order.
    Anchors without an href attribute are skipped.

    Args:
        html: Raw HTML content.

    Returns:
        List of href strings (may contain relative or absolute URLs).
    """
    return extract_links_by_text(html)


def extract_links_by_text(html: str, text: Optional[str] = None) -> list[str]:
    """Extract href values of anchors whose text equals the given text.

    The comparison is exact: no whitespace trimming and no case folding, so
    "<a href='/c'> Contact </a>" does not match "Contact".

    Args:
        html: Raw HTML content.
        text: Link text to match. None returns every link.

    Returns:
        List of href strings in document order.
    """
    soup = _parse(html)
    hrefs = []

    for anchor in soup.find_all("a", href=True):
        if text is not None and anchor.get_text() != text:
            continue
        hrefs.append(anchor["href"])

    return hrefs
