"""
Validation Service for feed76.

Holds the acceptance rules for extracted records: challenge title/score
bounds, the event date-line pattern, and duplicate detection.
"""

import re
from typing import Any, Iterable, List, Optional
from dataclasses import dataclass

from ..models import (
    EventEntry,
    MAX_CHALLENGE_SCORE,
    MIN_CHALLENGE_SCORE,
    MIN_TITLE_LENGTH,
)

# "Mo, 3rd Mar 2025 (18:00)": weekday, ordinal day, month, year, (HH:MM)
EVENT_DATE_PATTERN = re.compile(
    r'^[A-Z][a-z],\s+\d{1,2}(?:st|nd|rd|th)\s+[A-Za-z]{3}\s+\d{4}.*\(\d{1,2}:\d{2}\)',
    re.ASCII,
)

_STRICT_INTEGER = re.compile(r'^[+-]?\d+$', re.ASCII)

# Applied in order, each at most once
_BULLET_PREFIXES = (
    re.compile(r'^•\s*'),
    re.compile(r'^\*\s*'),
    re.compile(r'^-\s*'),
)


@dataclass
class ValidationError:
    """Represents a validation error."""
    field: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Result of a validation check."""
    is_valid: bool
    errors: List[ValidationError]

    @classmethod
    def success(cls) -> 'ValidationResult':
        return cls(is_valid=True, errors=[])

    @classmethod
    def failure(cls, errors: List[ValidationError]) -> 'ValidationResult':
        return cls(is_valid=False, errors=errors)


class ValidationService:
    """
    Service for validating and cleaning extracted records.

    Responsibilities:
    - Decide whether a title/score pair is a challenge entry
    - Decide whether a line is an event date line
    - Remove duplicate events
    """

    MIN_TITLE_LENGTH = MIN_TITLE_LENGTH
    MIN_SCORE = MIN_CHALLENGE_SCORE
    MAX_SCORE = MAX_CHALLENGE_SCORE

    def clean_title(self, title: str) -> str:
        """
        Strip bullet prefixes and collapse whitespace in a title line.

        Args:
            title: Raw title line

        Returns:
            Cleaned title
        """
        if not title:
            return ""

        for prefix in _BULLET_PREFIXES:
            title = prefix.sub('', title, count=1)

        return re.sub(r'\s+', ' ', title).strip()

    def parse_score(self, text: str) -> Optional[int]:
        """
        Parse a score line as a strict integer.

        Decimals, thousands separators and anything else non-digit are
        rejected.

        Args:
            text: Candidate score line

        Returns:
            The integer, or None if the line is not a strict integer
        """
        if text is None:
            return None
        text = text.strip()
        if not _STRICT_INTEGER.match(text):
            return None
        return int(text)

    def validate_challenge(self, title: str, score: Optional[int]) -> ValidationResult:
        """
        Validate a cleaned title and parsed score.

        Args:
            title: Cleaned title
            score: Parsed score (None when the score line was not an integer)

        Returns:
            ValidationResult with any errors found
        """
        errors = []

        if not title or len(title) < self.MIN_TITLE_LENGTH:
            errors.append(ValidationError(
                "title",
                f"Title too short (min {self.MIN_TITLE_LENGTH} chars)",
                title
            ))

        if score is None:
            errors.append(ValidationError("score", "Score is not an integer"))
        elif not self.MIN_SCORE <= score <= self.MAX_SCORE:
            errors.append(ValidationError(
                "score",
                f"Score out of range ({self.MIN_SCORE}-{self.MAX_SCORE})",
                score
            ))

        if errors:
            return ValidationResult.failure(errors)
        return ValidationResult.success()

    def is_event_date_line(self, line: str) -> bool:
        """Check if a line looks like an event calendar date line."""
        return bool(line) and bool(EVENT_DATE_PATTERN.match(line))

    def validate_event(self, event: EventEntry) -> ValidationResult:
        """
        Validate an event calendar entry.

        Args:
            event: The entry to validate

        Returns:
            ValidationResult with any errors found
        """
        errors = []

        if not event.name or not event.name.strip():
            errors.append(ValidationError("name", "Name is required"))

        if not self.is_event_date_line(event.starts):
            errors.append(ValidationError("starts", "Not an event date line", event.starts))

        if not self.is_event_date_line(event.ends):
            errors.append(ValidationError("ends", "Not an event date line", event.ends))

        if errors:
            return ValidationResult.failure(errors)
        return ValidationResult.success()

    def dedupe_events(self, events: Iterable[EventEntry]) -> List[EventEntry]:
        """
        Drop events whose (name, starts) pair was already seen.

        Args:
            events: Entries in extraction order

        Returns:
            Entries with the first occurrence of each key kept, order preserved
        """
        unique = []
        seen = set()
        for event in events:
            if event.key in seen:
                continue
            seen.add(event.key)
            unique.append(event)
        return unique
