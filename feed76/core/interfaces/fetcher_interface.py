"""
Abstract fetcher interface for feed76.

The extraction core never touches the network. Documents reach it through
a DocumentFetcher, which hands back already-decoded page text.
"""

from abc import ABC, abstractmethod
from typing import Optional


class DocumentFetcher(ABC):
    """
    Abstract base class for document fetchers.

    Implementations retrieve one source document per call and return its
    body text, or raise a FetchError.
    """

    @abstractmethod
    async def fetch_html(self, url: str) -> str:
        """
        Fetch the raw markup of a document.

        Args:
            url: Document address

        Returns:
            Decoded response body

        Raises:
            FetchError: If the document could not be retrieved
        """
        pass

    @abstractmethod
    async def fetch_text(self, url: str) -> str:
        """
        Fetch a document and return the text content of its body.

        Args:
            url: Document address

        Returns:
            Body text with the markup's line structure preserved

        Raises:
            FetchError: If the document could not be retrieved
        """
        pass

    async def close(self):
        """Release any held resources."""
        pass


class FetchError(Exception):
    """Base exception for fetch errors."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class FetchConnectionError(FetchError):
    """Raised when the source cannot be reached or the request times out."""
    pass


class FetchStatusError(FetchError):
    """Raised when the source answers with a non-success HTTP status."""

    def __init__(self, status: int, url: str):
        super().__init__(f"Fetch failed {status} for {url}", url)
        self.status = status
