"""
Interfaces package for feed76.

This package contains the abstract collaborators of the extraction core:
- fetcher_interface: DocumentFetcher and the fetch error hierarchy
- repository_interface: FeedRepository
"""

from .fetcher_interface import (
    DocumentFetcher,
    FetchError,
    FetchConnectionError,
    FetchStatusError,
)
from .repository_interface import FeedRepository

__all__ = [
    'DocumentFetcher',
    'FetchError',
    'FetchConnectionError',
    'FetchStatusError',
    'FeedRepository',
]
