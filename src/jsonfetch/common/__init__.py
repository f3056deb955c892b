"""Common utilities package."""

from jsonfetch.common.logging import setup_logging
from jsonfetch.common.exceptions import (
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
from jsonfetch.common.utils import get_env, truncate
from jsonfetch.common import constants

__all__ = [
    "setup_logging",
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
    "get_env",
    "truncate",
    "constants",
]
