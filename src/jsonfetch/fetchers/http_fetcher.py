"""HTTP fetcher."""

import asyncio
import aiohttp
import structlog
from typing import Dict, Any
from jsonfetch.common import HttpError, NetworkError, RequestError
from jsonfetch.common.constants import (
    DEFAULT_ENCODING,
    SUCCESS_STATUS_MIN,
    SUCCESS_STATUS_MAX,
)
from .base_fetcher import BaseFetcher

logger = structlog.get_logger()


class HTTPFetcher(BaseFetcher):
    """Fetcher issuing a single GET per call, without connection reuse."""

    def __init__(self, url: str):
        """
        Initialize HTTP fetcher.

        Args:
            url: http or https URL to fetch from
        """
        super().__init__(url)

    async def fetch(self) -> Dict[str, Any]:
        """
        Fetch data from HTTP source.

        Returns:
            Dictionary containing:
                - content: The response body as string
                - metadata: Metadata (http_status, content_length, etc.)

        Raises:
            HttpError: If the server answers with a non-2xx status
            NetworkError: If the connection fails before the response completes
            RequestError: If the request cannot be issued
        """
        logger.debug("Starting HTTP fetch", url=self.location)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.location) as response:
                    status = response.status
                    if status is not None and not (
                        SUCCESS_STATUS_MIN <= status < SUCCESS_STATUS_MAX
                    ):
                        # Drop the body so the connection is freed
                        response.release()
                        raise HttpError(
                            status,
                            response.reason,
                            context={"url": self.location},
                        )

                    chunks = []
                    async for chunk in response.content.iter_any():
                        chunks.append(chunk)
                    content = b"".join(chunks).decode(
                        DEFAULT_ENCODING, errors="replace"
                    )

                    metadata = {
                        "http_status": status,
                        "content_length": len(content),
                        "content_type": response.headers.get("Content-Type", ""),
                        "source_url": self.location,
                    }

        except HttpError:
            raise

        except (
            aiohttp.ClientConnectionError,
            aiohttp.ClientPayloadError,
            asyncio.TimeoutError,
        ) as e:
            raise NetworkError(
                f"Network error: {e}",
                context={"url": self.location},
                original_error=e,
            ) from e

        except Exception as e:
            raise RequestError(
                f"Request failed: {e}",
                context={"url": self.location},
                original_error=e,
            ) from e

        logger.debug(
            "HTTP fetch successful",
            url=self.location,
            status=status,
            content_length=len(content),
        )

        return {
            "content": content,
            "metadata": metadata,
        }
