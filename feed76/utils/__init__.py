"""
Shared utilities for feed76.

This module provides common utility functions used across the application:
- Filesystem helpers
- Logging configuration and setup
- Date/time helpers
- Async helpers and decorators
- String helpers
"""

import os
import logging
import asyncio
from datetime import datetime, timezone
from typing import Optional, Callable
from functools import wraps


# =============================================================================
# Filesystem Utilities
# =============================================================================

def ensure_directory(path: str) -> None:
    """Ensure a directory exists, creating it if necessary."""
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# =============================================================================
# Logging Utilities
# =============================================================================

def setup_logging(
    name: str = 'feed76',
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging with console and optional file handlers.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Optional file path for log output
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        ensure_directory(os.path.dirname(log_file))
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f'feed76.{name}')


# =============================================================================
# Date/Time Utilities
# =============================================================================

def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(tz=timezone.utc)


def to_iso(dt: datetime) -> str:
    """
    Format a datetime as ISO-8601 UTC with millisecond precision and a Z suffix.

    Naive datetimes are assumed to be UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime('%Y-%m-%dT%H:%M:%S.') + f"{dt.microsecond // 1000:03d}Z"


# =============================================================================
# Async Utilities
# =============================================================================

def async_retry(
    retries: int = 3,
    delay: float = 1.0,
    backoff: float = 2.0,
    exceptions: tuple = (Exception,),
):
    """
    Decorator for retrying async functions with exponential backoff.

    Args:
        retries: Maximum number of retry attempts
        delay: Initial delay between retries in seconds
        backoff: Multiplier for delay after each retry
        exceptions: Tuple of exceptions to catch and retry
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            current_delay = delay
            last_exception = None

            for attempt in range(retries + 1):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    last_exception = e
                    if attempt < retries:
                        await asyncio.sleep(current_delay)
                        current_delay *= backoff
                    continue

            raise last_exception

        return wrapper
    return decorator


# =============================================================================
# String Utilities
# =============================================================================

def truncate(text: str, max_length: int = 100, suffix: str = '…') -> str:
    """Cut text to max_length characters and append suffix when anything was cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


__all__ = [
    # Filesystem
    'ensure_directory',
    # Logging
    'setup_logging',
    'get_logger',
    # Date/Time
    'utc_now',
    'to_iso',
    # Async
    'async_retry',
    # String
    'truncate',
]
