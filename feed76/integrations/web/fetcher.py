"""
aiohttp document fetcher for feed76.
"""

import asyncio
from typing import Optional

import aiohttp

from ...core.interfaces import (
    DocumentFetcher,
    FetchConnectionError,
    FetchStatusError,
)
from ...utils import async_retry, get_logger
from ... import global_config
from .html import body_text

logger = get_logger('fetcher')


class AiohttpFetcher(DocumentFetcher):
    """
    Fetches documents over HTTP with a shared aiohttp session.

    Connection failures and timeouts are retried with exponential backoff;
    HTTP error statuses are not.

    Usage:
        async with AiohttpFetcher() as fetcher:
            text = await fetcher.fetch_text(url)
    """

    def __init__(
        self,
        user_agent: str = global_config.USER_AGENT,
        timeout: float = global_config.REQUEST_TIMEOUT,
        retries: int = global_config.FETCH_RETRIES,
        retry_delay: float = 1.0,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            user_agent: User-Agent header sent with every request
            timeout: Total request timeout in seconds
            retries: Retry attempts after a connection failure
            retry_delay: Initial delay between retries in seconds
            session: Existing session to use (not closed by close())
        """
        self.user_agent = user_agent
        self.timeout = timeout
        self.retries = retries
        self.retry_delay = retry_delay
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> 'AiohttpFetcher':
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": self.user_agent},
            )
            self._owns_session = True
        return self._session

    async def _fetch_once(self, url: str) -> str:
        session = self._get_session()
        try:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise FetchStatusError(response.status, url)
                return await response.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Request to {url} failed: {e!r}")
            raise FetchConnectionError(f"Could not fetch {url}: {e!r}", url) from e

    async def fetch_html(self, url: str) -> str:
        fetch = async_retry(
            retries=self.retries,
            delay=self.retry_delay,
            exceptions=(FetchConnectionError,),
        )(self._fetch_once)
        html = await fetch(url)
        logger.debug(f"Fetched {url} ({len(html)} chars)")
        return html

    async def fetch_text(self, url: str) -> str:
        return body_text(await self.fetch_html(url))

    async def close(self):
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None
