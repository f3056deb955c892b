"""Source classification rules."""

from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import urlsplit, urlunsplit

from jsonfetch.common.constants import HTTP_SCHEMES


@dataclass(frozen=True, slots=True)
class NetworkLocator:
    """A source reachable over HTTP(S)."""

    url: str

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class FilePath:
    """A source read from the local filesystem."""

    path: str

    def __str__(self) -> str:
        return self.path


Source = Union[NetworkLocator, FilePath]


def normalize_locator(source: str) -> Optional[str]:
    """
    Return the http(s) URL a source names, or None for anything else.

    Special schemes do not need the slashes: ``http:example.com/a.json`` and
    ``http:/example.com/a.json`` both name ``http://example.com/a.json``.

    Args:
        source: Caller-provided source string

    Returns:
        URL with an explicit host, or None if the source is not an http(s) URL

    Examples:
        >>> normalize_locator("https://example.com/data.json")
        'https://example.com/data.json'
        >>> normalize_locator("http:example.com/data.json")
        'http://example.com/data.json'
        >>> normalize_locator("https://") is None
        True
    """
    try:
        parts = urlsplit(source)
    except ValueError:
        return None

    # urlsplit lower-cases the scheme
    if parts.scheme not in HTTP_SCHEMES:
        return None
    if parts.netloc:
        return source

    rest = parts.path.lstrip("/\\").replace("\\", "/")
    host, sep, path = rest.partition("/")
    if not host:
        return None

    url = urlunsplit((parts.scheme, host, sep + path, parts.query, parts.fragment))
    try:
        urlsplit(url)
    except ValueError:
        return None
    return url


def is_network_locator(source: str) -> bool:
    """
    Check if source is an http or https URL.

    Args:
        source: Caller-provided source string

    Returns:
        True if the string parses as a URL with an http(s) scheme and a host

    Examples:
        >>> is_network_locator("https://example.com/data.json")
        True
        >>> is_network_locator("./data.json")
        False
        >>> is_network_locator("ftp://example.com/data.json")
        False
    """
    return normalize_locator(source) is not None


def resolve_source(source: str) -> Source:
    """
    Classify a source string once, defaulting to a file path.

    Args:
        source: Caller-provided source string

    Returns:
        NetworkLocator for http(s) URLs, FilePath for anything else
    """
    url = normalize_locator(source)
    if url is not None:
        return NetworkLocator(url)
    return FilePath(source)
