"""Load the raw content of an address from HTTP or the local filesystem."""

import sys
from dataclasses import dataclass
from typing import Optional

import requests

from .classifier import classify_as_file, classify_as_url, get_abs_path, get_file_uri
from .config import DEFAULT_CONFIG, HarvestConfig
from .errors import FileNotFound, InvalidAddress, NetworkError, RetrievalError


def _flush() -> None:
    """Flush stdout so diagnostics appear immediately in piped/buffered contexts."""
    sys.stdout.flush()


@dataclass
class LoadResult:
    """Outcome of loading an address: either content or the error that prevented it."""

    address: str
    content: Optional[str] = None
    error: Optional[RetrievalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_address(address: str, config: Optional[HarvestConfig] = None) -> str:
    """Return the content of an http(s) URL or a file path.

    URLs are fetched with a single GET and no retry. The body is returned
    whatever the status code, so the text of a 404 page comes back as-is.
    Anything else is treated as a path relative to the current working
    directory and read as UTF-8.

    Args:
        address: URL or file path.
        config: Verbosity, timeout and User-Agent. Defaults to HarvestConfig().

    Returns:
        The response body or file content.

    Raises:
        NetworkError: The HTTP request failed.
        InvalidAddress: The address is neither a URL nor a valid file path.
        FileNotFound: The path does not exist or is a directory.
        RetrievalError: The file could not be read or decoded.
    """
    config = config or DEFAULT_CONFIG

    if classify_as_url(address):
        if config.verbose:
            print(f"  [URL] {address}")
            _flush()
        return _fetch_url(address, config)

    if config.verbose:
        print(f"  [FILE] {address}")
        _flush()

    if not classify_as_file(get_file_uri(address)):
        raise InvalidAddress(
            address, f"No such file: {address} or it is not a file or http uri"
        )
    return _read_file(address)


def _fetch_url(url: str, config: HarvestConfig) -> str:
    try:
        response = requests.get(
            url,
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout,
        )
    except requests.exceptions.RequestException as e:
        raise NetworkError(url, f"Request failed for {url}: {e}") from e

    if config.verbose:
        print(f"  [HTTP {response.status_code}] {url}")
        _flush()

    response.encoding = response.apparent_encoding or "utf-8"
    return response.text


def _read_file(address: str) -> str:
    filepath = get_abs_path(address)
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
        raise FileNotFound(address, f"No such file: {filepath}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RetrievalError(address, f"Could not read {filepath}: {e}") from e
    except ValueError as e:
        # e.g. an embedded null byte in the path
        raise InvalidAddress(address, f"Not a valid file path: {address!r}") from e


def load_address(address: str, config: Optional[HarvestConfig] = None) -> LoadResult:
    """Load an address and report the outcome instead of raising.

    Args:
        address: URL or file path.
        config: Pipeline configuration.

    Returns:
        LoadResult holding the content on success, or the RetrievalError.
    """
    try:
        return LoadResult(address=address, content=fetch_address(address, config))
    except RetrievalError as e:
        if config is not None and config.verbose:
            print(f"  [FAIL] {e}")
            _flush()
        return LoadResult(address=address, error=e)


def load_address_content(
    address: str,
    config: Optional[HarvestConfig] = None,
) -> Optional[str]:
    """Load an address, returning None on any failure.

    This keeps the historical contract of the harvester: the caller cannot
    tell an unreachable page from a missing file, and the cause is only
    visible as a verbose diagnostic. Use fetch_address() or load_address()
    to see the error.
    """
    try:
        return fetch_address(address, config)
    except Exception as e:
        if config is not None and config.verbose:
            print(f"  [FAIL] {address}: {e}")
            _flush()
        return None
