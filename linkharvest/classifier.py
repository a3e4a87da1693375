"""Address classification: HTTP(S) URL, file path, or relative link.

Every function here is total. Malformed input is reported as "not this
kind" and never raises.
"""

import os
import re
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

URL_SCHEMES = ("http://", "https://")
FILE_SCHEME = "file://"

# Host part of a file URI: empty, "localhost", or a plain host name
_FILE_HOST_RE = re.compile(r"^[A-Za-z0-9.\-]*$")


def classify_as_url(address: str) -> Optional[str]:
    """Detect whether a string is an http or https URL.

    Examples:
        classify_as_url("http://example.com")          -> "http://example.com"
        classify_as_url("https://example.com/a?x=1")   -> "https://example.com/a"
        classify_as_url("/root/somefolder")            -> None
        classify_as_url("mailto:info@example.com")     -> None

    Args:
        address: Any string.

    Returns:
        The URL without its query and fragment, or None if the string is not
        an http(s) URL with a host.
    """
    if not address or not address.startswith(URL_SCHEMES):
        return None

    try:
        parts = urlsplit(address)
    except ValueError:
        # Unbalanced IPv6 brackets and similar
        return None

    if not parts.hostname or any(ch.isspace() for ch in parts.netloc):
        # No host, as in "http://:80" or "http://@/x"
        return None

    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def classify_as_file(uri: str) -> bool:
    """Detect whether a string is a syntactically valid file URI.

    Only the shape of the string is checked; the filesystem is never touched,
    so a True result does not mean the file exists.

    Examples:
        classify_as_file("file:///root/somefolder")      -> True
        classify_as_file("file://localhost/etc/hosts")   -> True
        classify_as_file("file://http://example.com/a")  -> False
        classify_as_file("http://example.com")           -> False

    Args:
        uri: Any string, usually "file://" followed by a path.

    Returns:
        True if the string is a file URI with an optional host and an absolute path.
    """
    if not uri or not uri.startswith(FILE_SCHEME):
        return False

    try:
        parts = urlsplit(uri)
    except ValueError:
        return False

    return bool(_FILE_HOST_RE.match(parts.netloc)) and parts.path.startswith("/")


def looks_like_relative(link: str) -> bool:
    """Return True unless the link is an http(s) URL.

    This is a coarse split: mailto:, ftp:, javascript: and "#anchor" links
    all count as relative.
    """
    return classify_as_url(link) is None


def get_abs_path(filename: str) -> str:
    """Return the path of a file under the current working directory.

    A leading slash does not escape the working directory:
    get_abs_path("/test") is "/root/test" if cwd is /root.
    """
    return os.path.join(os.getcwd(), filename.lstrip(os.sep))


def get_file_uri(filename: str) -> str:
    """Build a file URI for a path relative to the current working directory.

    get_file_uri("test.html")  # 'file:///root/test.html' if cwd is /root
    get_file_uri("/test")      # 'file:///root/test' if cwd is /root
    """
    return FILE_SCHEME + get_abs_path(filename)
