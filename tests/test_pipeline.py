"""Tests for the fetch pipeline."""

import time
import pytest
from pathlib import Path
from unittest.mock import AsyncMock, patch
from aiohttp.test_utils import unused_port
from jsonfetch import (
    fetch,
    fetch_sync,
    FetchPipeline,
    FetchOptions,
    ConfigurationError,
    FileReadError,
    HttpError,
    JsonParseError,
    NetworkError,
    SchemaUnsupportedError,
    SourceNotFoundError,
    ValidationError,
    ValidatorError,
)
from jsonfetch.fetchers import FileFetcher
from jsonfetch.schemas import FilePath, NetworkLocator


# ==================== File Sources ====================


@pytest.mark.asyncio
async def test_fetch_file_values(write_json_file, sample_json_texts):
    """Test any valid JSON text in a file parses to the same value."""
    for index, (text, expected) in enumerate(sample_json_texts):
        path = write_json_file(text, name=f"doc-{index}.json")

        assert await fetch(path) == expected


@pytest.mark.asyncio
async def test_fetch_missing_file(tmp_path):
    """Test a missing path fails with SourceNotFoundError."""
    path = str(tmp_path / "nope.json")

    with pytest.raises(SourceNotFoundError) as exc_info:
        await fetch(path)

    assert path in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_file_not_json(write_json_file):
    """Test a file with invalid JSON fails with JsonParseError."""
    path = write_json_file("not json")

    with pytest.raises(JsonParseError):
        await fetch(path)


@pytest.mark.asyncio
async def test_fetch_is_repeatable(write_json_file):
    """Test repeated fetches of unchanged content are equal."""
    path = write_json_file({"items": [1, 2, 3], "name": "fixture"})

    first = await fetch(path)
    second = await fetch(path)

    assert first == second == {"items": [1, 2, 3], "name": "fixture"}
    assert first is not second


def test_fetch_sync(write_json_file):
    """Test the blocking wrapper."""
    path = write_json_file([1, 2])

    assert fetch_sync(path, {"retry": 1}) == [1, 2]


# ==================== HTTP Sources ====================


@pytest.mark.asyncio
async def test_fetch_url(mock_json_server):
    """Test fetching a JSON document over HTTP."""
    url = str(mock_json_server.make_url("/hello.json"))

    assert await fetch(url) == {"hello": "world"}


@pytest.mark.asyncio
async def test_fetch_url_404(mock_error_responses_server):
    """Test a 404 fails with HttpError mentioning the status."""
    url = str(mock_error_responses_server.make_url("/404"))

    with pytest.raises(HttpError) as exc_info:
        await fetch(url)

    assert "404" in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_url_not_json(mock_malformed_server):
    """Test an HTTP body that is not JSON fails with JsonParseError."""
    url = str(mock_malformed_server.make_url("/not-json"))

    with pytest.raises(JsonParseError):
        await fetch(url)


@pytest.mark.asyncio
async def test_fetch_url_connection_refused():
    """Test an unreachable host fails with NetworkError."""
    with pytest.raises(NetworkError):
        await fetch(f"http://127.0.0.1:{unused_port()}/data.json")


@pytest.mark.asyncio
async def test_retry_recovers_from_transient_failures(mock_unreliable_server, request_counter):
    """Test retries recover once the server starts answering."""
    url = str(mock_unreliable_server.make_url("/unreliable"))

    start = time.monotonic()
    result = await fetch(url, {"retry": 3, "delay": 10})
    elapsed = time.monotonic() - start

    assert result == {"ok": True}
    assert request_counter["count"] == 3
    # Two waits of 10ms; allow for timer granularity
    assert elapsed >= 0.019


@pytest.mark.asyncio
async def test_retry_recovers_from_dropped_connections(mock_dropping_server, request_counter):
    """Test retries recover after the server drops the first connections."""
    url = str(mock_dropping_server.make_url("/dropping"))

    start = time.monotonic()
    result = await fetch(url, {"retry": 3, "delay": 10})
    elapsed = time.monotonic() - start

    assert result == {"ok": True}
    assert request_counter["count"] == 3
    assert elapsed >= 0.019


@pytest.mark.asyncio
async def test_dropped_connections_exhaust_retries(mock_dropping_server, request_counter):
    """Test dropped connections surface as NetworkError once retries run out."""
    url = str(mock_dropping_server.make_url("/dropping"))

    with pytest.raises(NetworkError) as exc_info:
        await fetch(url, {"retry": 1})

    assert exc_info.value.message.startswith("Network error:")
    assert request_counter["count"] == 2


@pytest.mark.asyncio
async def test_retry_exhausted_on_http_errors(mock_unreliable_server, request_counter):
    """Test retry budget smaller than the failure streak."""
    url = str(mock_unreliable_server.make_url("/unreliable"))

    with pytest.raises(HttpError) as exc_info:
        await fetch(url, {"retry": 1})

    assert exc_info.value.status_code == 503
    assert request_counter["count"] == 2


@pytest.mark.asyncio
async def test_retry_parse_errors_reload_source(mock_malformed_server, request_counter):
    """Test parse failures are retried and the URL is requested every time."""
    url = str(mock_malformed_server.make_url("/not-json"))

    with pytest.raises(JsonParseError):
        await fetch(url, {"retry": 2})

    assert request_counter["count"] == 3


# ==================== Validation ====================


@pytest.mark.asyncio
async def test_validator_false(write_json_file):
    """Test a rejecting validator fails with ValidationError."""
    path = write_json_file({"a": 1})

    with pytest.raises(ValidationError):
        await fetch(path, {"validator": lambda data: False})


@pytest.mark.asyncio
async def test_validator_true(write_json_file):
    """Test an accepting validator leaves the value unchanged."""
    path = write_json_file({"a": 1})

    assert await fetch(path, {"validator": lambda data: data["a"] == 1}) == {"a": 1}


@pytest.mark.asyncio
async def test_validator_raises(write_json_file):
    """Test a raising validator fails with ValidatorError."""
    path = write_json_file([])

    with pytest.raises(ValidatorError) as exc_info:
        await fetch(path, {"validator": lambda data: data["a"]})

    assert exc_info.value.message.startswith("Validation function error:")


@pytest.mark.asyncio
async def test_schema_always_unsupported(write_json_file, mock_json_server):
    """Test a schema fails the fetch even when everything else passes."""
    path = write_json_file({"a": 1})
    url = str(mock_json_server.make_url("/hello.json"))

    for source in (path, url):
        with pytest.raises(SchemaUnsupportedError):
            await fetch(source, {"schema": {}})

        with pytest.raises(SchemaUnsupportedError):
            await fetch(source, FetchOptions(schema={}, validator=lambda data: True))


@pytest.mark.asyncio
async def test_schema_error_is_retried(write_json_file):
    """Test schema failures use up the retry budget like any other failure."""
    pipeline = FetchPipeline(write_json_file({"a": 1}), {"retry": 2, "schema": {}})

    with pytest.raises(SchemaUnsupportedError):
        await pipeline.run()

    assert pipeline.attempts == 3


@pytest.mark.asyncio
async def test_retry_rereads_changed_file(write_json_file):
    """Test each attempt reads the file again."""
    path = write_json_file({"version": 1})
    seen = []

    def validator(data):
        seen.append(data["version"])
        if data["version"] == 1:
            Path(path).write_text('{"version": 2}', encoding="utf-8")
            return False
        return True

    result = await fetch(path, {"retry": 1, "validator": validator})

    assert result == {"version": 2}
    assert seen == [1, 2]


# ==================== Retry Budget ====================


@pytest.mark.asyncio
@pytest.mark.parametrize("retry", [0, 1, 4])
async def test_retry_attempt_count(tmp_path, retry):
    """Test an always failing source is loaded exactly retry + 1 times."""
    pipeline = FetchPipeline(str(tmp_path / "missing.json"), {"retry": retry})

    with pytest.raises(SourceNotFoundError):
        await pipeline.run()

    assert pipeline.attempts == retry + 1


@pytest.mark.asyncio
async def test_last_error_is_propagated(write_json_file):
    """Test the caller sees the last attempt's error, not an earlier one."""
    errors = [
        SourceNotFoundError("File not found: first"),
        FileReadError("File read error: second"),
        FileReadError("File read error: third"),
    ]
    mock_fetch = AsyncMock(side_effect=errors)

    with patch.object(FileFetcher, "fetch", mock_fetch):
        with pytest.raises(FileReadError) as exc_info:
            await fetch(write_json_file({}), {"retry": 2})

    assert exc_info.value is errors[-1]
    assert mock_fetch.call_count == 3


@pytest.mark.asyncio
async def test_success_stops_retrying(write_json_file):
    """Test no further attempts happen after a success."""
    mock_fetch = AsyncMock(
        side_effect=[
            FileReadError("File read error: busy"),
            {"content": "[1]", "metadata": {}},
        ]
    )

    with patch.object(FileFetcher, "fetch", mock_fetch):
        assert await fetch(write_json_file({}), {"retry": 5}) == [1]

    assert mock_fetch.call_count == 2


@pytest.mark.asyncio
async def test_delay_between_attempts(tmp_path):
    """Test each retry waits the configured delay."""
    start = time.monotonic()

    with pytest.raises(SourceNotFoundError):
        await fetch(str(tmp_path / "missing.json"), {"retry": 2, "delay": 25})

    assert time.monotonic() - start >= 0.049


@pytest.mark.asyncio
async def test_unexpected_errors_are_not_retried(write_json_file):
    """Test errors outside the fetch taxonomy propagate immediately."""
    mock_fetch = AsyncMock(side_effect=KeyError("content"))

    with patch.object(FileFetcher, "fetch", mock_fetch):
        with pytest.raises(KeyError):
            await fetch(write_json_file({}), {"retry": 3})

    assert mock_fetch.call_count == 1


# ==================== Pipeline Construction ====================


def test_pipeline_classifies_source_once(tmp_path):
    """Test the source kind is fixed at construction."""
    assert isinstance(FetchPipeline("https://example.com/a.json").source, NetworkLocator)
    assert isinstance(FetchPipeline(str(tmp_path / "a.json")).source, FilePath)


def test_pipeline_invalid_options():
    """Test invalid options fail before any attempt."""
    with pytest.raises(ConfigurationError):
        FetchPipeline("a.json", {"retry": -1})


def test_pipeline_defaults():
    """Test default options and attempt counter."""
    pipeline = FetchPipeline("a.json")

    assert pipeline.options == FetchOptions()
    assert pipeline.attempts == 0


@pytest.mark.asyncio
async def test_deeply_nested_document_is_retried(write_json_file):
    """Test recursion limits surface as JsonParseError inside the retry budget."""
    pipeline = FetchPipeline(
        write_json_file("[" * 100000 + "]" * 100000), {"retry": 1}
    )

    with pytest.raises(JsonParseError):
        await pipeline.run()

    assert pipeline.attempts == 2
