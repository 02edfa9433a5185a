"""
Abstract feed repository interface for feed76.

Feed repositories persist the enveloped snapshot dictionaries the
orchestrator produces.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class FeedRepository(ABC):
    """
    Abstract base class for feed storage.
    """

    @abstractmethod
    async def save(self, name: str, feed: Dict[str, Any]) -> str:
        """
        Persist a feed.

        Args:
            name: Feed file name (e.g. "score.json")
            feed: JSON-serialisable feed dictionary

        Returns:
            Location the feed was written to
        """
        pass

    @abstractmethod
    async def load(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Read a previously written feed.

        Args:
            name: Feed file name

        Returns:
            Feed dictionary, or None if it does not exist
        """
        pass

    @abstractmethod
    async def list_feeds(self) -> List[str]:
        """
        List stored feed names.

        Returns:
            Sorted feed file names
        """
        pass
