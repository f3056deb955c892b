"""Local file fetcher."""

import asyncio
import structlog
from pathlib import Path
from typing import Dict, Any
from jsonfetch.common import SourceNotFoundError, FileReadError
from jsonfetch.common.constants import DEFAULT_ENCODING
from .base_fetcher import BaseFetcher

logger = structlog.get_logger()


class FileFetcher(BaseFetcher):
    """Fetcher reading a local file as text."""

    def __init__(self, path: str):
        """
        Initialize file fetcher.

        Args:
            path: Filesystem path to read
        """
        super().__init__(path)

    def _read(self) -> str:
        return Path(self.location).read_text(encoding=DEFAULT_ENCODING, errors="replace")

    async def fetch(self) -> Dict[str, Any]:
        """
        Read the file in a worker thread.

        Returns:
            Dictionary containing:
                - content: The file content as string
                - metadata: Metadata (file_size_bytes, content_length, source_path)

        Raises:
            SourceNotFoundError: If the file does not exist
            FileReadError: If the file cannot be read
        """
        logger.debug("Reading file", path=self.location)

        try:
            content = await asyncio.to_thread(self._read)
        except FileNotFoundError as e:
            raise SourceNotFoundError(
                f"File not found: {self.location}",
                context={"path": self.location},
                original_error=e,
            ) from e
        except OSError as e:
            raise FileReadError(
                f"File read error: {e}",
                context={"path": self.location},
                original_error=e,
            ) from e

        metadata = {
            "file_size_bytes": len(content.encode(DEFAULT_ENCODING)),
            "content_length": len(content),
            "source_path": self.location,
        }

        logger.debug(
            "File read successful",
            path=self.location,
            content_length=len(content),
        )

        return {
            "content": content,
            "metadata": metadata,
        }
