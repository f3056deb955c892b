"""Fetchers package."""

from typing import Callable, Dict, Type

from jsonfetch.schemas import FilePath, NetworkLocator, Source
from .base_fetcher import BaseFetcher
from .file_fetcher import FileFetcher
from .http_fetcher import HTTPFetcher

# Source kind -> factory taking the source and returning its fetcher
FETCHERS: Dict[Type, Callable[[Source], BaseFetcher]] = {
    NetworkLocator: lambda source: HTTPFetcher(source.url),
    FilePath: lambda source: FileFetcher(source.path),
}


def create_fetcher(source: Source) -> BaseFetcher:
    """
    Build the fetcher for a classified source.

    Args:
        source: NetworkLocator or FilePath

    Returns:
        Fetcher instance for the source kind

    Raises:
        TypeError: If no fetcher is registered for the source kind
    """
    factory = FETCHERS.get(type(source))
    if factory is None:
        raise TypeError(f"No fetcher registered for {type(source).__name__}")
    return factory(source)


__all__ = ["BaseFetcher", "FileFetcher", "HTTPFetcher", "FETCHERS", "create_fetcher"]
