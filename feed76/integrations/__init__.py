"""
External integrations for feed76.

This package contains modules for integrating with external services:
- web: HTTP fetching and HTML text extraction
"""

from .web import AiohttpFetcher, body_text

__all__ = [
    'AiohttpFetcher',
    'body_text',
]
