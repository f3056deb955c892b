"""Schemas package."""

from jsonfetch.schemas.options import FetchOptions
from jsonfetch.schemas.source import (
    FilePath,
    NetworkLocator,
    Source,
    is_network_locator,
    normalize_locator,
    resolve_source,
)

__all__ = [
    "FetchOptions",
    "FilePath",
    "NetworkLocator",
    "Source",
    "is_network_locator",
    "normalize_locator",
    "resolve_source",
]
