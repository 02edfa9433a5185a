"""
Application module for feed76.

Fetches the source pages, runs the extraction core over each one, wraps
the snapshots in the feed envelope and hands them to the feed repository.

A failed fetch only costs the feeds built from that page; their previous
files are left in place.

Usage:
    from feed76.app import FeedBuilder

    async with AiohttpFetcher() as fetcher:
        report = await FeedBuilder(fetcher, JsonFeedRepository("public")).build()
"""

import asyncio
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from feed76 import global_config
from feed76.core.interfaces import DocumentFetcher, FeedRepository
from feed76.core.models import FeedName
from feed76.core.repositories import JsonFeedRepository
from feed76.core.services import (
    HomePageSnapshot,
    SnapshotService,
    TimezoneService,
)
from feed76.integrations.web import AiohttpFetcher
from feed76.utils import get_logger, setup_logging, to_iso, utc_now

logger = get_logger('app')


@dataclass
class BuildReport:
    """Outcome of one build run."""
    fetched_at: str
    written: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True when every source was fetched."""
        return not self.failed


class FeedBuilder:
    """
    Builds every feed in one run.

    Responsibilities:
    - Fetch the three source pages concurrently
    - Extract snapshots per page (sequential within a page)
    - Wrap each snapshot in {version, fetchedAt, source}
    - Persist feeds, skipping those whose source failed
    """

    def __init__(
        self,
        fetcher: DocumentFetcher,
        repository: FeedRepository,
        snapshots: Optional[SnapshotService] = None,
        timezones: Optional[TimezoneService] = None,
        nk_home_url: str = global_config.NK_HOME_URL,
        minerva_url: str = global_config.MINERVA_URL,
        nukecodes_url: str = global_config.NUKECODES_URL,
    ):
        self.fetcher = fetcher
        self.repository = repository
        self.snapshots = snapshots or SnapshotService()
        self.timezones = timezones or TimezoneService(global_config.DEFAULT_TIMEZONE)
        self.nk_home_url = nk_home_url
        self.minerva_url = minerva_url
        self.nukecodes_url = nukecodes_url

    def envelope(self, fetched_at: str, source: Optional[str] = None, **payload: Any) -> Dict[str, Any]:
        """Wrap a payload in the feed envelope."""
        feed = {'version': global_config.SCHEMA_VERSION, 'fetchedAt': fetched_at}
        if source is not None:
            feed['source'] = source
        feed.update(payload)
        return feed

    # =========================================================================
    # Per-page feed assembly
    # =========================================================================

    def home_feeds(
        self,
        home: HomePageSnapshot,
        fetched_at: str,
        now: datetime,
    ) -> Dict[str, Dict[str, Any]]:
        """Feeds built from the home page."""
        source = self.nk_home_url
        tz_name = home.daily_ops.timezone if home.daily_ops else None

        events = []
        for event in home.events:
            entry = event.to_dict()
            status = self.timezones.event_status(event, now, tz_name)
            if status is not None:
                entry['status'] = status.value
            events.append(entry)

        return {
            FeedName.SCORE.value: self.envelope(
                fetched_at, source, **home.score.to_dict()
            ),
            FeedName.DAILY_OPS.value: self.envelope(
                fetched_at, source,
                dailyOps=home.daily_ops.to_dict() if home.daily_ops else None,
            ),
            FeedName.AXOLOTL.value: self.envelope(
                fetched_at, source,
                axolotlOfTheMonth=home.axolotl.to_dict() if home.axolotl else None,
            ),
            FeedName.EVENTS.value: self.envelope(fetched_at, source, events=events),
        }

    def nukecodes_feed(self, body_text: str, fetched_at: str) -> Dict[str, Any]:
        nukes = self.snapshots.extract_nuke_codes(body_text)
        return self.envelope(fetched_at, self.nukecodes_url, **nukes.to_dict())

    def minerva_feed(self, body_text: str, fetched_at: str) -> Dict[str, Any]:
        minerva = self.snapshots.extract_minerva(body_text)
        return self.envelope(fetched_at, self.minerva_url, **minerva.to_dict())

    def recipes_feed(self, fetched_at: str) -> Dict[str, Any]:
        return {
            'version': global_config.SCHEMA_VERSION,
            'updatedAt': fetched_at,
            'recipes': [],
        }

    # =========================================================================
    # Build
    # =========================================================================

    async def _fetch_all(self) -> Dict[str, Any]:
        urls = [self.nk_home_url, self.minerva_url, self.nukecodes_url]
        results = await asyncio.gather(
            *(self.fetcher.fetch_text(url) for url in urls),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, asyncio.CancelledError):
                raise result
        return dict(zip(urls, results))

    async def build(self) -> BuildReport:
        """
        Run one build.

        Returns:
            BuildReport listing written feeds and failed sources
        """
        now = utc_now()
        fetched_at = to_iso(now)
        report = BuildReport(fetched_at=fetched_at)

        documents = await self._fetch_all()
        feeds: Dict[str, Dict[str, Any]] = {}

        for url, result in documents.items():
            if isinstance(result, Exception):
                logger.error(f"Skipping feeds from {url}: {result}")
                report.failed[url] = str(result)
                continue

            if url == self.nk_home_url:
                home = self.snapshots.extract_home(result)
                feeds.update(self.home_feeds(home, fetched_at, now))
                logger.info(
                    f"Home page: {len(home.score.daily)} daily, "
                    f"{len(home.score.weekly)} weekly challenges, "
                    f"{len(home.events)} events"
                )
            elif url == self.minerva_url:
                feeds[FeedName.MINERVA.value] = self.minerva_feed(result, fetched_at)
            elif url == self.nukecodes_url:
                feeds[FeedName.NUKE_CODES.value] = self.nukecodes_feed(result, fetched_at)

        feeds[FeedName.RECIPES.value] = self.recipes_feed(fetched_at)

        for name in FeedName.all_feeds():
            if name not in feeds:
                continue
            await self.repository.save(name, feeds[name])
            report.written.append(name)
            logger.info(f"Wrote {name}")

        return report


async def run(output_dir: str = global_config.OUTPUT_DIR) -> BuildReport:
    """Build all feeds into output_dir with the default fetcher."""
    repository = JsonFeedRepository(output_dir)
    async with AiohttpFetcher() as fetcher:
        return await FeedBuilder(fetcher, repository).build()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point.

    Args:
        argv: Optional [output_dir]

    Returns:
        Process exit code (1 if any source failed)
    """
    argv = sys.argv[1:] if argv is None else argv
    output_dir = argv[0] if argv else global_config.OUTPUT_DIR

    setup_logging('feed76', log_file=global_config.LOG_FILE)
    logger.info("=== Feed build starting ===")

    report = asyncio.run(run(output_dir))

    logger.info(f"Feeds built into {output_dir}: {', '.join(report.written)}")
    for url, error in report.failed.items():
        logger.error(f"Source failed: {url}: {error}")
    return 0 if report.ok else 1
