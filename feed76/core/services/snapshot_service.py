"""
Snapshot Service for feed76.

Assembles typed snapshots from the body text of each source page by
running the normalizer, the section locator and the field extractors in
order. Pure: no I/O, no shared state.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..models import (
    AxolotlSnapshot,
    DailyOpsSnapshot,
    EventEntry,
    MinervaSnapshot,
    NormalizedBuffer,
    NukeCodesSnapshot,
    ScoreSnapshot,
    SectionMarkers,
    MAX_DESCRIPTION_LINES,
)
from .event_list_extractor import extract_events
from .key_value_extractor import (
    ALPHA_PATTERN,
    BRAVO_PATTERN,
    CHARLIE_PATTERN,
    LOCATION_PATTERN,
    RESETS_IN_PATTERN,
    extract_key_value,
    flatten,
)
from .pair_extractor import extract_pairs
from .section_locator import section_between_any
from .text_normalizer import clean_lines, normalize
from .validation_service import ValidationService
from .windowed_extractor import (
    DAILY_OPS_ANCHOR,
    DAILY_OPS_WINDOW,
    extract_windowed,
    is_timezone_line,
)
from ...utils import get_logger, truncate

logger = get_logger('snapshot_service')

RAW_SUMMARY_LENGTH = 300


@dataclass
class HomePageSnapshot:
    """Everything extracted from the Nuka Knights home page."""
    score: ScoreSnapshot = field(default_factory=ScoreSnapshot)
    daily_ops: Optional[DailyOpsSnapshot] = None
    axolotl: Optional[AxolotlSnapshot] = None
    events: List[EventEntry] = field(default_factory=list)


class SnapshotService:
    """
    Service that turns page text into snapshots.

    Responsibilities:
    - Score (daily/weekly challenges), Daily Ops, Axolotl and event
      calendar from the home page
    - Nuke codes from the code page
    - Minerva location from the Minerva page
    """

    def __init__(
        self,
        validator: Optional[ValidationService] = None,
        daily_ops_window: int = DAILY_OPS_WINDOW,
    ):
        """
        Initialize the service.

        Args:
            validator: Record acceptance rules
            daily_ops_window: Lines scanned after the Daily Ops label
        """
        self.validator = validator or ValidationService()
        self.daily_ops_window = daily_ops_window

    # =========================================================================
    # Home page
    # =========================================================================

    def extract_home(self, body_text: str) -> HomePageSnapshot:
        """
        Extract every home page snapshot from one body text.

        Args:
            body_text: Text content of the page body

        Returns:
            HomePageSnapshot
        """
        buffer = normalize(body_text)
        if not buffer:
            logger.warning("Home page body is empty")

        return HomePageSnapshot(
            score=self.extract_score(buffer),
            daily_ops=self.extract_daily_ops(buffer),
            axolotl=self.extract_axolotl(buffer),
            events=self.extract_events(buffer),
        )

    def extract_score(self, buffer: NormalizedBuffer) -> ScoreSnapshot:
        """Daily and weekly challenge lists."""
        daily_block = section_between_any(
            buffer,
            SectionMarkers.DAILY_CHALLENGES,
            SectionMarkers.WEEKLY_CHALLENGES,
        )
        weekly_block = section_between_any(
            buffer,
            SectionMarkers.WEEKLY_CHALLENGES,
            SectionMarkers.AXOLOTL + SectionMarkers.EVENT_CALENDAR,
        )
        return ScoreSnapshot(
            daily=extract_pairs(daily_block, self.validator),
            weekly=extract_pairs(weekly_block, self.validator),
        )

    def extract_daily_ops(self, buffer: NormalizedBuffer) -> Optional[DailyOpsSnapshot]:
        """Current Daily Ops rotation, None when the block is absent."""
        return extract_windowed(buffer, DAILY_OPS_ANCHOR, self.daily_ops_window)

    def extract_axolotl(self, buffer: NormalizedBuffer) -> Optional[AxolotlSnapshot]:
        """
        Axolotl of the month.

        The first two lines of the section are the month and the name. Start,
        end and timezone lines are picked by prefix; whatever else follows is
        description.

        Returns:
            AxolotlSnapshot, or None when neither month nor name resolve
        """
        block = section_between_any(
            buffer,
            SectionMarkers.AXOLOTL,
            SectionMarkers.EVENT_CALENDAR,
        )
        lines = clean_lines(block)

        month = lines[0] if len(lines) > 0 else None
        name = lines[1] if len(lines) > 1 else None
        if not month and not name:
            return None

        start = next((l for l in lines if l.lower().startswith("start:")), None)
        end = next((l for l in lines if l.lower().startswith("end:")), None)
        timezone = next((l for l in lines if is_timezone_line(l)), None)

        rest = [
            l for l in lines
            if not l.lower().startswith("start:")
            and not l.lower().startswith("end:")
            and not is_timezone_line(l)
        ]
        description = rest[2:2 + MAX_DESCRIPTION_LINES]

        return AxolotlSnapshot(
            month=month,
            name=name,
            start=start,
            end=end,
            timezone=timezone,
            description=description,
        )

    def extract_events(self, buffer: NormalizedBuffer) -> List[EventEntry]:
        """Event calendar entries."""
        block = section_between_any(
            buffer,
            SectionMarkers.EVENT_CALENDAR,
            SectionMarkers.DISCORD,
        )
        return extract_events(block, self.validator)

    # =========================================================================
    # Other pages
    # =========================================================================

    def extract_nuke_codes(self, body_text: str) -> NukeCodesSnapshot:
        """Launch codes and reset countdown from the nuke code page."""
        flat = flatten(body_text)
        return NukeCodesSnapshot(
            alpha=extract_key_value(flat, ALPHA_PATTERN),
            bravo=extract_key_value(flat, BRAVO_PATTERN),
            charlie=extract_key_value(flat, CHARLIE_PATTERN),
            resets_in=extract_key_value(flat, RESETS_IN_PATTERN),
        )

    def extract_minerva(self, body_text: str) -> MinervaSnapshot:
        """
        Minerva's location plus a short raw summary of the page.

        The page exposes no stable text for dates or inventory, so those stay
        empty.
        """
        flat = flatten(body_text)
        return MinervaSnapshot(
            location=extract_key_value(flat, LOCATION_PATTERN),
            raw_summary=truncate(flat, RAW_SUMMARY_LENGTH),
        )
