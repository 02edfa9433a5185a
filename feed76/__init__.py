"""
feed76 - Fallout 76 status feeds

Turns the text of game-status dashboard pages into typed snapshots and
publishes them as JSON feeds.

Package structure:
- core/: Extraction core (models, interfaces, repositories, services)
- integrations/: External services (HTTP fetching, HTML text)
- utils/: Shared utilities (logging, retry, time and string helpers)
- app.py: Feed build orchestration and entry point

Usage:
    from feed76.core.services import normalize, locate, extract_pairs
    from feed76.core.models import SectionMarkers
    from feed76.app import FeedBuilder, main
"""

__version__ = "1.0.0"

# Convenience imports for common use cases
from feed76.core.models import (
    MarkerSet,
    SectionMarkers,
    EmptyMarkerSetError,
    NormalizedBuffer,
    Section,
    ChallengeEntry,
    DailyOpsSnapshot,
    AxolotlSnapshot,
    EventEntry,
    NukeCodesSnapshot,
    MinervaSnapshot,
)
from feed76.core.services import (
    normalize,
    locate,
    extract_pairs,
    extract_windowed,
    extract_events,
    extract_key_value,
    SnapshotService,
)
from feed76.utils import setup_logging, get_logger

__all__ = [
    # Version
    '__version__',
    # Models
    'MarkerSet',
    'SectionMarkers',
    'EmptyMarkerSetError',
    'NormalizedBuffer',
    'Section',
    'ChallengeEntry',
    'DailyOpsSnapshot',
    'AxolotlSnapshot',
    'EventEntry',
    'NukeCodesSnapshot',
    'MinervaSnapshot',
    # Core operations
    'normalize',
    'locate',
    'extract_pairs',
    'extract_windowed',
    'extract_events',
    'extract_key_value',
    'SnapshotService',
    # Utils
    'setup_logging',
    'get_logger',
]
