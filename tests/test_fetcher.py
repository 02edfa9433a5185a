"""
Tests for AiohttpFetcher against a local aiohttp server.
"""

import asyncio

import aiohttp
import pytest
from aiohttp import test_utils, web

from feed76.core.interfaces import FetchConnectionError, FetchStatusError
from feed76.integrations.web import AiohttpFetcher


BAD_BYTE_PAGE = b"<body>Daily Ops\nUplink caf\xe9</body>"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def hits():
    """Paths requested from the page server, in order."""
    return []


@pytest.fixture
async def page_server(hits):
    """Local HTTP server with a few fixed routes."""

    async def bad_byte(request):
        hits.append(request.path)
        return web.Response(body=BAD_BYTE_PAGE, content_type="text/html", charset="utf-8")

    async def missing(request):
        hits.append(request.path)
        return web.Response(status=404, text="Not Found")

    async def user_agent(request):
        hits.append(request.path)
        return web.Response(
            text=f"<body>{request.headers.get('User-Agent', '')}</body>",
            content_type="text/html",
        )

    app = web.Application()
    app.router.add_get("/bad-byte", bad_byte)
    app.router.add_get("/missing", missing)
    app.router.add_get("/user-agent", user_agent)

    server = test_utils.TestServer(app)
    await server.start_server()
    yield server
    await server.close()


class FailingSession:
    """Stands in for a ClientSession whose every request fails."""

    def __init__(self, error):
        self.error = error
        self.calls = 0
        self.closed = False

    def get(self, url):
        self.calls += 1
        raise self.error


# =============================================================================
# AiohttpFetcher Tests
# =============================================================================

class TestAiohttpFetcher:
    """Tests for AiohttpFetcher."""

    async def test_invalid_bytes_replaced(self, page_server):
        """An undecodable byte does not fail the page."""
        async with AiohttpFetcher(retries=0) as fetcher:
            text = await fetcher.fetch_text(str(page_server.make_url("/bad-byte")))

        assert "Daily Ops" in text
        assert "Uplink caf\ufffd" in text

    async def test_error_status_not_retried(self, page_server, hits):
        """A 404 raises FetchStatusError after a single request."""
        url = str(page_server.make_url("/missing"))
        async with AiohttpFetcher(retries=2, retry_delay=0) as fetcher:
            with pytest.raises(FetchStatusError) as exc_info:
                await fetcher.fetch_html(url)

        assert exc_info.value.status == 404
        assert exc_info.value.url == url
        assert hits == ["/missing"]

    async def test_user_agent_sent(self, page_server):
        """The configured User-Agent goes out with the request."""
        async with AiohttpFetcher(user_agent="feed76-test/1.0", retries=0) as fetcher:
            text = await fetcher.fetch_text(str(page_server.make_url("/user-agent")))

        assert text.strip() == "feed76-test/1.0"

    @pytest.mark.parametrize("error", [
        aiohttp.ClientConnectionError("refused"),
        asyncio.TimeoutError(),
    ])
    async def test_connection_errors_retried(self, error):
        """Connection failures and timeouts are attempted retries + 1 times."""
        session = FailingSession(error)
        fetcher = AiohttpFetcher(retries=2, retry_delay=0, session=session)

        with pytest.raises(FetchConnectionError) as exc_info:
            await fetcher.fetch_html("https://nk.example/en/")

        assert session.calls == 3
        assert exc_info.value.url == "https://nk.example/en/"
        assert isinstance(exc_info.value.__cause__, type(error))

    async def test_close_leaves_shared_session_open(self):
        """A session passed in belongs to the caller."""
        async with aiohttp.ClientSession() as session:
            fetcher = AiohttpFetcher(session=session)
            await fetcher.close()
            assert not session.closed
