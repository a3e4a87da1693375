"""Composition of the loader, extractor, resolver and filters.

This is the sequence a crawl loop runs for each page it visits:
load -> extract -> absolutize -> remove external -> drop anchors -> drop assets.
"""

from typing import Optional

from .classifier import classify_as_url
from .config import DEFAULT_CONFIG, HarvestConfig
from .html_filter import extract_links_by_text
from .link_filters import drop_anchor_links, drop_asset_links, remove_external_links
from .loader import _flush, load_address_content
from .url_resolver import absolutize, get_domain_root


def candidate_links(
    links: list[str],
    base: str,
    domain: Optional[str] = None,
    config: Optional[HarvestConfig] = None,
) -> list[str]:
    """Turn raw hrefs from a page into the links worth visiting next.

    Absolutization runs before anchor removal, so a same-page "#c" becomes
    "http://example.com#c" and is kept. That matches how the harvester has
    always chained these filters.

    Args:
        links: Href values in document order.
        base: Address relative links are resolved against, normally the
            URL of the page they were found on.
        domain: Domain to stay on. Defaults to the domain root of base when
            base is a URL, otherwise to base itself.
        config: Pipeline configuration (strict_host, verbose).

    Returns:
        Candidate links, in their original relative order.

    Raises:
        ValueError: If base is empty.
    """
    config = config or DEFAULT_CONFIG

    absolute = absolutize(links, base)
    if not domain:
        domain = get_domain_root(base) if classify_as_url(base) else base

    internal = remove_external_links(absolute, domain, strict=config.strict_host)
    if config.verbose and len(internal) < len(absolute):
        print(f"  [OUT-OF-SCOPE] Dropped {len(absolute) - len(internal)} external link(s)")
        _flush()

    candidates = drop_asset_links(drop_anchor_links(internal))
    if config.verbose:
        print(f"  [LINKS] {len(candidates)} candidate(s) from {len(links)} href(s)")
        _flush()

    return candidates


def discover_links(
    address: str,
    origin: Optional[str] = None,
    text: Optional[str] = None,
    config: Optional[HarvestConfig] = None,
) -> list[str]:
    """Load an address and return its candidate links.

    Args:
        address: URL or local file path of the page.
        origin: Base address for relative links. Defaults to address itself
            when address is a URL. The domain to stay on is the domain root
            of whichever is used.
        text: Only follow anchors whose text equals this string.
        config: Pipeline configuration.

    Returns:
        Candidate links, or an empty list if the address could not be loaded.

    Raises:
        ValueError: If address is a file path and no origin is given.
    """
    config = config or DEFAULT_CONFIG

    if not origin:
        if not classify_as_url(address):
            raise ValueError(f"An origin is required to resolve links found in {address}")
        origin = address

    html = load_address_content(address, config)
    if html is None:
        return []

    return candidate_links(extract_links_by_text(html, text), origin, config=config)
