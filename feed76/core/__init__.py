"""
Core package for feed76.

This package contains the extraction core and the types around it:
- models: Text types, marker sets and snapshot records
- interfaces: Abstract collaborators (fetcher, feed repository)
- repositories: Feed storage implementations
- services: Normalizer, section locator, field extractors, assembly
"""

from .models import (
    # Enums
    OpsMode,
    EnemyFaction,
    LineKind,
    EventStatus,
    FeedName,
    # Markers
    EmptyMarkerSetError,
    MarkerSet,
    SectionMarkers,
    # Models
    NormalizedBuffer,
    Section,
    ChallengeEntry,
    ScoreSnapshot,
    DailyOpsSnapshot,
    AxolotlSnapshot,
    EventEntry,
    NukeCodesSnapshot,
    MinervaSnapshot,
)

from .interfaces import (
    DocumentFetcher,
    FetchError,
    FetchConnectionError,
    FetchStatusError,
    FeedRepository,
)

from .repositories import JsonFeedRepository

from .services import (
    normalize,
    locate,
    extract_pairs,
    extract_windowed,
    extract_events,
    extract_key_value,
    ValidationService,
    TimezoneService,
    SnapshotService,
    HomePageSnapshot,
)

__all__ = [
    # Models
    'OpsMode',
    'EnemyFaction',
    'LineKind',
    'EventStatus',
    'FeedName',
    'EmptyMarkerSetError',
    'MarkerSet',
    'SectionMarkers',
    'NormalizedBuffer',
    'Section',
    'ChallengeEntry',
    'ScoreSnapshot',
    'DailyOpsSnapshot',
    'AxolotlSnapshot',
    'EventEntry',
    'NukeCodesSnapshot',
    'MinervaSnapshot',
    # Interfaces
    'DocumentFetcher',
    'FetchError',
    'FetchConnectionError',
    'FetchStatusError',
    'FeedRepository',
    # Repositories
    'JsonFeedRepository',
    # Services
    'normalize',
    'locate',
    'extract_pairs',
    'extract_windowed',
    'extract_events',
    'extract_key_value',
    'ValidationService',
    'TimezoneService',
    'SnapshotService',
    'HomePageSnapshot',
]
