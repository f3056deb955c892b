"""Pytest configuration and shared fixtures."""

import pytest
import structlog

# Import all fixtures to make them available to tests
from fixtures.mock_servers import (
    request_counter,
    mock_json_server,
    mock_unreliable_server,
    mock_dropping_server,
    mock_error_responses_server,
    mock_malformed_server,
)

from fixtures.sample_data import (
    sample_json_document,
    sample_large_document,
    sample_json_texts,
    write_json_file,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by a test."""
    yield
    structlog.reset_defaults()


__all__ = [
    # Mock server fixtures
    "request_counter",
    "mock_json_server",
    "mock_unreliable_server",
    "mock_dropping_server",
    "mock_error_responses_server",
    "mock_malformed_server",
    # Sample data fixtures
    "sample_json_document",
    "sample_large_document",
    "sample_json_texts",
    "write_json_file",
]
