"""Configuration constants for the fetch pipeline."""

from typing import Final

# Retry Defaults
DEFAULT_RETRY: Final[int] = 0
DEFAULT_DELAY_MS: Final[float] = 0

# HTTP
SUCCESS_STATUS_MIN: Final[int] = 200
SUCCESS_STATUS_MAX: Final[int] = 300  # exclusive
HTTP_SCHEMES: Final[frozenset] = frozenset({"http", "https"})

# Content
DEFAULT_ENCODING: Final[str] = "utf-8"

# Service Defaults
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
SERVICE_NAME: Final[str] = "jsonfetch"

# Environment variables read by the CLI
ENV_RETRY: Final[str] = "JSONFETCH_RETRY"
ENV_DELAY_MS: Final[str] = "JSONFETCH_DELAY_MS"
ENV_LOG_LEVEL: Final[str] = "JSONFETCH_LOG_LEVEL"
