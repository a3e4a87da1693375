"""Filters that narrow an extracted link list down to crawl candidates.

Each filter takes a list and returns a new one, keeping the relative order
of the links it keeps. Duplicates are never removed here.

The filters are order-sensitive when chained; the crawl order is
absolutize -> remove_external_links -> drop_anchor_links -> drop_asset_links
(see pipeline.candidate_links).
"""

from pathlib import PurePosixPath
from urllib.parse import urlsplit

from .classifier import FILE_SCHEME, classify_as_file
from .url_resolver import same_authority

# Case-sensitive: "Jpg" is not an asset, "JPG" is
ASSET_EXTENSIONS = frozenset({
    "css",
    "less",
    "js",
    "jpg",
    "JPG",
    "jpeg",
    "JPEG",
    "png",
    "PNG",
    "svg",
    "doc",
    "docx",
    "ppt",
    "odt",
    "rtf",
})


def remove_query_params(links: list[str]) -> list[str]:
    """Cut every link at its first "?".

    remove_query_params(["a?x=1&y=2", "b"])  # ["a", "b"]
    """
    return [link.partition("?")[0] for link in links]


def _suffix(link: str) -> str:
    """Return the extension of the last path segment, without the dot."""
    try:
        path = urlsplit(link).path
    except ValueError:
        path = link
    return PurePosixPath(path).suffix[1:]


def drop_asset_links(links: list[str], extensions=ASSET_EXTENSIONS) -> list[str]:
    """Drop links to stylesheets, scripts, images and documents.

    Query strings are removed first, both so that "a.css?v=2" is recognised
    as a stylesheet and in the returned links themselves.

    Args:
        links: Link list.
        extensions: Suffixes to drop, compared case-sensitively.

    Returns:
        Query-free links whose suffix is not in extensions.
    """
    return [link for link in remove_query_params(links) if _suffix(link) not in extensions]


def drop_anchor_links(links: list[str]) -> list[str]:
    """Drop links to a position on the same page, like "#rec31047364"."""
    return [link for link in links if not link.startswith("#")]


def remove_external_links(
    links: list[str],
    domain_prefix: str,
    strict: bool = False,
) -> list[str]:
    """Keep only links on the given domain, plus host-relative paths.

    By default a link is on the domain when it literally starts with
    domain_prefix, which also accepts "http://example.com.attacker.com" for
    "http://example.com". With strict=True the scheme and host are compared
    instead.

    Links like "/rel/c" are kept either way so that not-yet-absolutized
    links survive.

    Args:
        links: Link list.
        domain_prefix: Domain root, e.g. "http://example.com".
        strict: Compare URL authorities instead of string prefixes.

    Returns:
        Filtered list.

    Raises:
        ValueError: If domain_prefix is empty.
    """
    if not domain_prefix:
        raise ValueError("remove_external_links() requires a non-empty domain")

    kept = []
    for link in links:
        if strict:
            on_domain = same_authority(link, domain_prefix)
        else:
            on_domain = link.startswith(domain_prefix)

        if on_domain or classify_as_file(FILE_SCHEME + link):
            kept.append(link)

    return kept
