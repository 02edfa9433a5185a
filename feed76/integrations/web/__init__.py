"""
Web integration module.

This package provides:
- AiohttpFetcher: DocumentFetcher over HTTP
- body_text: HTML -> body text content
"""

from .html import body_text
from .fetcher import AiohttpFetcher

__all__ = [
    'AiohttpFetcher',
    'body_text',
]
