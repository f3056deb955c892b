"""Fetch JSON from a URL or file with validation and retries."""

from jsonfetch.common import (
    JsonFetchException,
    ConfigurationError,
    FetchError,
    HttpError,
    NetworkError,
    RequestError,
    SourceNotFoundError,
    FileReadError,
    JsonParseError,
    ValidatorError,
    ValidationError,
    SchemaUnsupportedError,
)
from jsonfetch.schemas import FetchOptions
from jsonfetch.pipeline import FetchPipeline, fetch, fetch_sync

__version__ = "0.1.0"

__all__ = [
    "fetch",
    "fetch_sync",
    "FetchPipeline",
    "FetchOptions",
    "JsonFetchException",
    "ConfigurationError",
    "FetchError",
    "HttpError",
    "NetworkError",
    "RequestError",
    "SourceNotFoundError",
    "FileReadError",
    "JsonParseError",
    "ValidatorError",
    "ValidationError",
    "SchemaUnsupportedError",
]
