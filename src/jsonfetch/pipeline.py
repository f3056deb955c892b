"""Fetch pipeline orchestration: load, parse, validate, retry."""

import asyncio
from typing import Any, Mapping, Optional, Union
import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    stop_after_attempt,
    wait_fixed,
    retry_if_exception_type,
)
from jsonfetch.common import JsonFetchException
from jsonfetch.schemas import FetchOptions, resolve_source
from jsonfetch.fetchers import create_fetcher
from jsonfetch.parsers import JsonParser
from jsonfetch.validators import PredicateValidator

logger = structlog.get_logger()

OptionsLike = Union[FetchOptions, Mapping[str, Any], None]


class FetchPipeline:
    """Runs load -> parse -> validate for one source, retrying the whole pass."""

    def __init__(self, source: str, options: OptionsLike = None):
        """
        Initialize fetch pipeline.

        Args:
            source: URL (http/https) or filesystem path
            options: FetchOptions, a mapping of option fields, or None

        Raises:
            ConfigurationError: If options are invalid
        """
        self.raw_source = source
        self.options = FetchOptions.build(options)
        # Classified once; every attempt uses the same kind
        self.source = resolve_source(source)
        self.parser = JsonParser()
        self.validator = PredicateValidator(
            predicate=self.options.validator,
            schema=self.options.schema_,
        )
        self.attempts = 0

    async def _attempt(self) -> Any:
        """One full pass. Nothing is cached between passes."""
        self.attempts += 1
        fetcher = create_fetcher(self.source)

        result = await fetcher.fetch()
        logger.debug(
            "Content loaded",
            source=self.raw_source,
            attempt=self.attempts,
            **result["metadata"],
        )

        data = self.parser.parse(result["content"], result["metadata"])
        return await self.validator.validate(data)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception()
        logger.warning(
            "Fetch attempt failed, retrying",
            source=self.raw_source,
            attempt=retry_state.attempt_number,
            retry=self.options.retry,
            delay_ms=self.options.delay,
            error=getattr(error, "message", str(error)),
            error_type=type(error).__name__,
        )

    async def run(self) -> Any:
        """
        Fetch, parse and validate the source.

        Returns:
            Parsed JSON value

        Raises:
            JsonFetchException: The failure of the last attempt, once the
                retry budget is spent
        """
        logger.info(
            "Starting fetch",
            source=self.raw_source,
            kind=type(self.source).__name__,
            retry=self.options.retry,
            delay_ms=self.options.delay,
        )

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.options.retry + 1),
                wait=wait_fixed(self.options.delay_seconds),
                retry=retry_if_exception_type(JsonFetchException),
                before_sleep=self._log_retry,
                reraise=True,
            ):
                with attempt:
                    data = await self._attempt()

        except JsonFetchException as e:
            logger.error(
                "Fetch failed",
                source=self.raw_source,
                attempts=self.attempts,
                error=e.message,
                error_type=type(e).__name__,
            )
            raise

        logger.info(
            "Fetch successful",
            source=self.raw_source,
            attempts=self.attempts,
        )
        return data


async def fetch(source: str, options: OptionsLike = None) -> Any:
    """
    Fetch a JSON document from a URL or a local file.

    Args:
        source: http(s) URL or filesystem path
        options: FetchOptions or mapping with retry, delay (ms), validator, schema

    Returns:
        Parsed JSON value

    Raises:
        ConfigurationError: If options are invalid
        JsonFetchException: The last attempt's failure when retries run out
    """
    return await FetchPipeline(source, options).run()


def fetch_sync(source: str, options: OptionsLike = None) -> Any:
    """Blocking variant of fetch for callers without an event loop."""
    return asyncio.run(fetch(source, options))
