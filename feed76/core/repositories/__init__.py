"""
Repositories package for feed76.

- feed_repository: JSON files in an output directory
"""

from .feed_repository import JsonFeedRepository

__all__ = [
    'JsonFeedRepository',
]
