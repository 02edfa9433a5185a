"""
Services package for feed76.

This package contains the extraction core and the services around it:
- text_normalizer: body text -> trimmed, blank-free lines
- section_locator: marker-bounded sections with latest-start/nearest-end rules
- pair_extractor: title/score challenge pairs
- windowed_extractor: Daily Ops fields after a repeating anchor label
- event_list_extractor: start/end/name calendar triplets
- key_value_extractor: single labelled values in flat text
- validation_service: acceptance rules and de-duplication
- timezone_service: event date lines -> aware datetimes
- snapshot_service: per-page snapshot assembly
"""

from .text_normalizer import clean_lines, normalize

from .section_locator import locate, section_between_any

from .pair_extractor import extract_pairs

from .windowed_extractor import (
    DAILY_OPS_ANCHOR,
    DAILY_OPS_WINDOW,
    classify_line,
    classify_window,
    extract_windowed,
    infer_location,
)

from .event_list_extractor import extract_events

from .key_value_extractor import (
    ALPHA_PATTERN,
    BRAVO_PATTERN,
    CHARLIE_PATTERN,
    RESETS_IN_PATTERN,
    LOCATION_PATTERN,
    flatten,
    extract_key_value,
)

from .validation_service import (
    EVENT_DATE_PATTERN,
    ValidationService,
    ValidationError,
    ValidationResult,
)

from .timezone_service import TimezoneService, DEFAULT_TIMEZONE

from .snapshot_service import SnapshotService, HomePageSnapshot


__all__ = [
    # Normalizer
    'clean_lines',
    'normalize',
    # Locator
    'locate',
    'section_between_any',
    # Extractors
    'extract_pairs',
    'DAILY_OPS_ANCHOR',
    'DAILY_OPS_WINDOW',
    'classify_line',
    'classify_window',
    'extract_windowed',
    'infer_location',
    'extract_events',
    'ALPHA_PATTERN',
    'BRAVO_PATTERN',
    'CHARLIE_PATTERN',
    'RESETS_IN_PATTERN',
    'LOCATION_PATTERN',
    'flatten',
    'extract_key_value',
    # Validation
    'EVENT_DATE_PATTERN',
    'ValidationService',
    'ValidationError',
    'ValidationResult',
    # Timezone
    'TimezoneService',
    'DEFAULT_TIMEZONE',
    # Snapshots
    'SnapshotService',
    'HomePageSnapshot',
]
