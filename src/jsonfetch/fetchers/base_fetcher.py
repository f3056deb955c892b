"""Base fetcher abstract class."""

from abc import ABC, abstractmethod
from typing import Dict, Any


class BaseFetcher(ABC):
    """Abstract base class for content fetchers."""

    def __init__(self, location: str):
        """
        Initialize fetcher.

        Args:
            location: URL or path to fetch from
        """
        self.location = location

    @abstractmethod
    async def fetch(self) -> Dict[str, Any]:
        """
        Fetch raw text from source.

        Returns:
            Dictionary containing:
                - content: The fetched content as string
                - metadata: Metadata about the fetch (status, size, etc.)

        Raises:
            FetchError: If fetching fails
        """
        pass
