"""
Pytest configuration and shared fixtures for testing.

This file contains sample page texts and fakes shared across test files.
"""

import pytest

from feed76.core.interfaces import DocumentFetcher
from feed76.core.repositories import JsonFeedRepository


NK_HOME_TEXT = """
Home
Daily Challenges
Weekly Challenges
Daily Ops
Axolotl of the month

#### Daily Challenges
  • Collect 10 Aluminum
250
* Scrap a weapon
150
Noise line
Kill 5   Scorched
12.5
Craft a Stimpak
300
#### Weekly Challenges
- Complete 3 Daily Ops
1000
Explore Vaults
5001
Take a photo
500
Daily Ops
Since Tuesday, 4th Mar 2025 (18:00)
Europe/Berlin
Uplink
Blaster Ray
Ghostly
Vault 94
Mole Miners
#### Axolotl of the month
March
Golden Axolotl
Start: 1st Mar 2025
End: 31st Mar 2025
Europe/Berlin
Found in freshwater.
Rare spawn.
### Current Fallout 76 Event Calendar Dates:
Mo, 3rd Mar 2025 (18:00)
Mo, 10th Mar 2025 (18:00)
Double XP Weekend
Mo, 3rd Mar 2025 (18:00)
Mo, 10th Mar 2025 (18:00)
Double XP Weekend   \r
Tu, 11th Mar 2025 (18:00)
Tu, 18th Mar 2025 (18:00)
Mutated Events
#### Nuka Knights Discord
Join us
"""

NUKECODES_TEXT = """
Nuke Codes
  Alpha. 12345678
  Bravo. 87654321
  Charlie.   11223344
Resets in: 2 days 4 hours.
"""

MINERVA_TEXT = """
Where is Minerva?
Location: Foundation.
Next visit soon
"""

NK_HOME_URL = "https://nk.example/en/"
MINERVA_URL = "https://minerva.example/"
NUKECODES_URL = "https://nukes.example/"


class FakeFetcher(DocumentFetcher):
    """Serves canned page texts; values that are exceptions are raised."""

    def __init__(self, pages):
        self.pages = pages
        self.requested = []

    async def fetch_html(self, url):
        self.requested.append(url)
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        return page

    async def fetch_text(self, url):
        return await self.fetch_html(url)


@pytest.fixture
def nk_home_text():
    return NK_HOME_TEXT


@pytest.fixture
def nukecodes_text():
    return NUKECODES_TEXT


@pytest.fixture
def minerva_text():
    return MINERVA_TEXT


@pytest.fixture
def pages():
    """Page texts keyed by URL."""
    return {
        NK_HOME_URL: NK_HOME_TEXT,
        MINERVA_URL: MINERVA_TEXT,
        NUKECODES_URL: NUKECODES_TEXT,
    }


@pytest.fixture
def urls():
    """Source URLs used by the fake pages."""
    return {
        "home": NK_HOME_URL,
        "minerva": MINERVA_URL,
        "nukecodes": NUKECODES_URL,
    }


@pytest.fixture
def make_builder(urls):
    """Build a FeedBuilder over FakeFetcher pages."""
    from feed76.app import FeedBuilder

    def factory(pages, repository):
        return FeedBuilder(
            FakeFetcher(pages),
            repository,
            nk_home_url=urls["home"],
            minerva_url=urls["minerva"],
            nukecodes_url=urls["nukecodes"],
        )
    return factory


@pytest.fixture
def repository(tmp_path):
    """
    Provide a feed repository in a temporary directory.

    Args:
        tmp_path: pytest's built-in temporary directory fixture
    """
    return JsonFeedRepository(str(tmp_path / "public"))
