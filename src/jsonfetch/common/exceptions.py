"""Exception hierarchy for the fetch pipeline."""

from typing import Optional, Dict, Any


class JsonFetchException(Exception):
    """Base exception for all jsonfetch errors.

    Attributes:
        message: Error message
        context: Additional context about the error
        original_error: Original exception if this wraps another error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[BaseException] = None,
    ):
        """Initialize exception with context.

        Args:
            message: Error message
            context: Additional context (e.g., source, status_code)
            original_error: Original exception if wrapping
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        """String representation with context."""
        base = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({ctx_str})"
        if self.original_error:
            base = f"{base} [caused by: {type(self.original_error).__name__}: {self.original_error}]"
        return base


class ConfigurationError(JsonFetchException):
    """Raised when fetch options are invalid.

    Common context fields:
        - field: Invalid field name
    """

    pass


class FetchError(JsonFetchException):
    """Raised when loading raw content from a source fails."""

    pass


class HttpError(FetchError):
    """Raised when the server answers with a non-2xx status.

    Common context fields:
        - url: URL that failed
        - status_code: HTTP status code
        - reason: HTTP status text
    """

    def __init__(
        self,
        status_code: int,
        reason: Optional[str],
        context: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.reason = reason or ""
        super().__init__(
            f"HTTP error: {status_code} {self.reason}".rstrip(),
            context=context,
        )


class NetworkError(FetchError):
    """Raised when the connection fails before a response completes.

    Common context fields:
        - url: URL that failed
    """

    pass


class RequestError(FetchError):
    """Raised when the request could not be issued at all."""

    pass


class SourceNotFoundError(FetchError):
    """Raised when a local source file does not exist.

    Common context fields:
        - path: Missing path
    """

    pass


class FileReadError(FetchError):
    """Raised when a local source file exists but cannot be read."""

    pass


class JsonParseError(JsonFetchException):
    """Raised when loaded content is not valid JSON.

    Common context fields:
        - line_number: Line where parsing failed
        - column: Column where parsing failed
    """

    pass


class ValidatorError(JsonFetchException):
    """Raised when the caller's validator itself raises."""

    pass


class ValidationError(JsonFetchException):
    """Raised when the caller's validator rejects the parsed data."""

    pass


class SchemaUnsupportedError(JsonFetchException):
    """Raised whenever a schema is supplied; only validator callables are supported."""

    pass
