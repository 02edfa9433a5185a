"""
Event calendar extraction for feed76.

The calendar lists each event as three lines: start date, end date, name.
"""

from typing import List, Optional

from ..models import EventEntry
from .text_normalizer import clean_lines
from .validation_service import ValidationService

_validator = ValidationService()


def extract_events(
    section_text: str,
    validator: Optional[ValidationService] = None,
) -> List[EventEntry]:
    """
    Extract calendar entries from a section.

    A three-line window is accepted when its first two lines are both date
    lines and the third line, the name, is not blank. The name is taken
    verbatim. Entries sharing a (name, starts) pair are collapsed to the
    first one.

    Args:
        section_text: Section content
        validator: Acceptance rules (defaults to ValidationService())

    Returns:
        Unique entries in section order
    """
    validator = validator or _validator
    lines = clean_lines(section_text)
    events = []

    for i in range(len(lines) - 2):
        starts, ends, name = lines[i], lines[i + 1], lines[i + 2]
        event = EventEntry(name=name, starts=starts, ends=ends)
        if validator.validate_event(event).is_valid:
            events.append(event)

    return validator.dedupe_events(events)
