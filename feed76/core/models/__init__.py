"""
Core models package for feed76.

This package contains the value types passed through the extraction core
and the snapshot records it produces.
"""

from .enums import (
    OpsMode,
    EnemyFaction,
    LineKind,
    EventStatus,
    FeedName,
)
from .markers import EmptyMarkerSetError, MarkerSet, SectionMarkers
from .text import NormalizedBuffer, Section
from .snapshots import (
    MIN_CHALLENGE_SCORE,
    MAX_CHALLENGE_SCORE,
    MIN_TITLE_LENGTH,
    MAX_MUTATIONS,
    MAX_DESCRIPTION_LINES,
    ChallengeEntry,
    ScoreSnapshot,
    DailyOpsSnapshot,
    AxolotlSnapshot,
    EventEntry,
    NukeCodesSnapshot,
    MinervaSnapshot,
)

__all__ = [
    # Enums
    'OpsMode',
    'EnemyFaction',
    'LineKind',
    'EventStatus',
    'FeedName',
    # Markers
    'EmptyMarkerSetError',
    'MarkerSet',
    'SectionMarkers',
    # Text
    'NormalizedBuffer',
    'Section',
    # Snapshots
    'MIN_CHALLENGE_SCORE',
    'MAX_CHALLENGE_SCORE',
    'MIN_TITLE_LENGTH',
    'MAX_MUTATIONS',
    'MAX_DESCRIPTION_LINES',
    'ChallengeEntry',
    'ScoreSnapshot',
    'DailyOpsSnapshot',
    'AxolotlSnapshot',
    'EventEntry',
    'NukeCodesSnapshot',
    'MinervaSnapshot',
]
