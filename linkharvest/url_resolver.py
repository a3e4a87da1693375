"""Resolution of relative links against an origin address."""

from urllib.parse import urljoin, urlsplit

from .classifier import looks_like_relative


def absolutize(links: list[str], origin: str) -> list[str]:
    """Make every relative link in a list absolute.

    Links that already are http(s) URLs are copied unchanged. Everything
    else, including "#anchor" and "mailto:" links, goes through standard
    relative-reference resolution, so "#c" against "http://example.com"
    becomes "http://example.com#c".

    Examples:
        absolutize(["/a", "http://x.com/b"], "http://example.com")
        -> ["http://example.com/a", "http://x.com/b"]

        absolutize(["d/e"], "https://example.com/a/b/c")
        -> ["https://example.com/a/b/d/e"]

    Args:
        links: Href values as extracted from a page.
        origin: Base address to resolve against.

    Returns:
        New list of the same length and order.

    Raises:
        ValueError: If origin is empty.
    """
    if not origin:
        raise ValueError("absolutize() requires a non-empty origin")

    resolved = []
    for link in links:
        if looks_like_relative(link):
            link = urljoin(origin, link)
        resolved.append(link)

    return resolved


def get_domain_root(url: str) -> str:
    """Extract the domain root (scheme + netloc) from a URL.

    Args:
        url: Full URL.

    Returns:
        Domain root, e.g. 'https://www.example.com'
    """
    parsed = urlsplit(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def same_authority(link: str, domain: str) -> bool:
    """Check whether a link points at the same scheme and host as a domain.

    Unlike a string prefix test, "http://example.com.attacker.com" does not
    match "http://example.com".

    Args:
        link: Absolute URL to check.
        domain: Domain root or any URL on the expected host.

    Returns:
        True if scheme and host (case-insensitive) and port are equal.
    """
    try:
        link_parts = urlsplit(link)
        domain_parts = urlsplit(domain)
    except ValueError:
        return False

    if not link_parts.netloc:
        return False

    return (
        link_parts.scheme.lower() == domain_parts.scheme.lower()
        and link_parts.netloc.lower() == domain_parts.netloc.lower()
    )
