"""
Title/score pair extraction for feed76.

Challenge sections list a title line immediately followed by a score
line. Nothing marks the pairing except position.
"""

from typing import List, Optional

from ..models import ChallengeEntry
from .text_normalizer import clean_lines
from .validation_service import ValidationService

_validator = ValidationService()


def extract_pairs(
    section_text: str,
    validator: Optional[ValidationService] = None,
) -> List[ChallengeEntry]:
    """
    Extract challenge entries from a section.

    An accepted pair consumes both lines, so a score is never read as the
    next title. Lines that do not start a valid pair are skipped one at a
    time.

    Args:
        section_text: Section content
        validator: Acceptance rules (defaults to ValidationService())

    Returns:
        Entries in section order
    """
    validator = validator or _validator
    lines = clean_lines(section_text)
    entries = []

    i = 0
    while i < len(lines) - 1:
        title = validator.clean_title(lines[i])
        score = validator.parse_score(lines[i + 1])

        if validator.validate_challenge(title, score).is_valid:
            entries.append(ChallengeEntry(title=title, score=score))
            i += 2
        else:
            i += 1

    return entries
