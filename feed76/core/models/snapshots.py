"""
Snapshot entity models for feed76.

This module defines the typed records the extractors produce. Each record
converts to the JSON shape the published feeds use via to_dict().
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .enums import EnemyFaction, EventStatus, OpsMode

# Score bounds for a challenge entry
MIN_CHALLENGE_SCORE = 1
MAX_CHALLENGE_SCORE = 5000

# Titles must be longer than this many characters
MIN_TITLE_LENGTH = 4

MAX_MUTATIONS = 2
MAX_DESCRIPTION_LINES = 8


@dataclass(frozen=True)
class ChallengeEntry:
    """
    One daily or weekly challenge.

    Attributes:
        title: Challenge text (more than 3 characters)
        score: Points awarded, in (0, 5000]
    """

    title: str
    score: int

    def __post_init__(self):
        """Validate entry bounds."""
        if len(self.title) < MIN_TITLE_LENGTH:
            raise ValueError(f"Challenge title too short: {self.title!r}")
        if not MIN_CHALLENGE_SCORE <= self.score <= MAX_CHALLENGE_SCORE:
            raise ValueError(f"Challenge score out of range: {self.score}")

    def to_dict(self) -> dict:
        return {'title': self.title, 'score': self.score}


@dataclass
class ScoreSnapshot:
    """Daily and weekly challenge lists."""

    daily: List[ChallengeEntry] = field(default_factory=list)
    weekly: List[ChallengeEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'daily': [entry.to_dict() for entry in self.daily],
            'weekly': [entry.to_dict() for entry in self.weekly],
        }


@dataclass
class DailyOpsSnapshot:
    """
    Current Daily Ops rotation.

    Attributes:
        since: Raw "Since ..." line
        timezone: Raw timezone line (e.g. "Europe/Berlin")
        mode: Game mode
        mutations: Up to two mutation names following the mode
        location: Location name, inferred by position
        enemy: Enemy faction
    """

    since: Optional[str] = None
    timezone: Optional[str] = None
    mode: Optional[OpsMode] = None
    mutations: List[str] = field(default_factory=list)
    location: Optional[str] = None
    enemy: Optional[EnemyFaction] = None

    def __post_init__(self):
        if len(self.mutations) > MAX_MUTATIONS:
            raise ValueError(f"At most {MAX_MUTATIONS} mutations allowed")

    def to_dict(self) -> dict:
        return {
            'since': self.since,
            'timezone': self.timezone,
            'mode': self.mode.value if self.mode else None,
            'mutations': list(self.mutations),
            'location': self.location,
            'enemy': self.enemy.value if self.enemy else None,
        }


@dataclass
class AxolotlSnapshot:
    """Axolotl of the month."""

    month: Optional[str] = None
    name: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    timezone: Optional[str] = None
    description: List[str] = field(default_factory=list)

    def __post_init__(self):
        if len(self.description) > MAX_DESCRIPTION_LINES:
            raise ValueError(f"At most {MAX_DESCRIPTION_LINES} description lines allowed")

    def to_dict(self) -> dict:
        return {
            'month': self.month,
            'name': self.name,
            'start': self.start,
            'end': self.end,
            'timezone': self.timezone,
            'description': list(self.description),
        }


@dataclass(frozen=True)
class EventEntry:
    """
    One entry of the event calendar.

    Attributes:
        name: Event name, free text
        starts: Start date line, e.g. "Mo, 3rd Mar 2025 (18:00)"
        ends: End date line in the same format
    """

    name: str
    starts: str
    ends: str

    @property
    def key(self) -> tuple:
        """Identity used for de-duplication."""
        return (self.name, self.starts)

    def status_at(
        self,
        now: datetime,
        starts_at: Optional[datetime],
        ends_at: Optional[datetime],
    ) -> Optional[EventStatus]:
        """
        Classify the event relative to now.

        Args:
            now: Aware reference time
            starts_at: Resolved start, None if unresolved
            ends_at: Resolved end, None if unresolved

        Returns:
            EventStatus, or None when either bound is unresolved
        """
        if starts_at is None or ends_at is None:
            return None
        if now < starts_at:
            return EventStatus.UPCOMING
        if now < ends_at:
            return EventStatus.ONGOING
        return EventStatus.ENDED

    def to_dict(self) -> dict:
        return {'name': self.name, 'starts': self.starts, 'ends': self.ends}


@dataclass
class NukeCodesSnapshot:
    """This week's nuke silo launch codes."""

    alpha: Optional[str] = None
    bravo: Optional[str] = None
    charlie: Optional[str] = None
    resets_in: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'alpha': self.alpha,
            'bravo': self.bravo,
            'charlie': self.charlie,
            'resetsIn': self.resets_in,
        }


@dataclass
class MinervaSnapshot:
    """Where Minerva is, as far as the page text tells."""

    location: Optional[str] = None
    starts: Optional[str] = None
    ends: Optional[str] = None
    inventory: List[str] = field(default_factory=list)
    raw_summary: str = ""

    def to_dict(self) -> dict:
        return {
            'location': self.location,
            'starts': self.starts,
            'ends': self.ends,
            'inventory': list(self.inventory),
            'rawSummary': self.raw_summary,
        }
