"""
Timezone Service for feed76.

Resolves event calendar date lines ("Mo, 3rd Mar 2025 (18:00)") to aware
datetimes in the page's timezone so events can be classified as upcoming,
ongoing or ended.
"""

import re
from datetime import datetime
from typing import Optional, Tuple
import pytz
from pytz.tzinfo import BaseTzInfo
from dateparser import parse as dateparse

from ..models import EventEntry, EventStatus
from ...utils import get_logger

logger = get_logger('timezone_service')

DEFAULT_TIMEZONE = "Europe/Berlin"

_DATE_PARTS = re.compile(
    r'(\d{1,2})(?:st|nd|rd|th)\s+([A-Za-z]{3})\s+(\d{4}).*\((\d{1,2}):(\d{2})\)'
)


class TimezoneService:
    """
    Service for handling page timezones.

    The Nuka Knights calendar prints local times without an offset; the
    zone they are in is printed separately (the Daily Ops timezone line).
    """

    def __init__(self, default_timezone: str = DEFAULT_TIMEZONE):
        """
        Initialize the service.

        Args:
            default_timezone: IANA zone used when the page names none

        Raises:
            ValueError: If default_timezone is not a known zone
        """
        self.default = self.get_timezone(default_timezone)

    def get_timezone(self, name: str) -> BaseTzInfo:
        """
        Get the pytz timezone object for an IANA name.

        Args:
            name: Zone name (e.g. "Europe/Berlin")

        Returns:
            pytz timezone object

        Raises:
            ValueError: If the zone is not recognized
        """
        try:
            return pytz.timezone(name.strip())
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {name}")

    def resolve_timezone(self, candidate: Optional[str]) -> BaseTzInfo:
        """The zone named by candidate if it is valid, otherwise the default."""
        if candidate:
            try:
                return self.get_timezone(candidate)
            except ValueError:
                logger.debug(f"'{candidate}' is not a timezone, using {self.default.zone}")
        return self.default

    def parse_event_time(
        self,
        line: str,
        tz_name: Optional[str] = None,
    ) -> Optional[datetime]:
        """
        Parse an event date line into an aware datetime.

        Args:
            line: Date line, e.g. "Mo, 3rd Mar 2025 (18:00)"
            tz_name: Zone the printed time is in (default zone if None/invalid)

        Returns:
            Aware datetime, or None if parsing fails
        """
        if not line:
            return None

        tz = self.resolve_timezone(tz_name)

        match = _DATE_PARTS.search(line)
        if match:
            day, month, year, hour, minute = match.groups()
            try:
                naive = datetime.strptime(
                    f"{day} {month} {year} {hour}:{minute}", "%d %b %Y %H:%M"
                )
                return tz.localize(naive)
            except ValueError:
                pass

        # Loose fallback: drop weekday, ordinal suffix and parentheses
        cleaned = re.sub(r'^[A-Za-z]{2,3},\s*', '', line)
        cleaned = re.sub(r'(\d)(?:st|nd|rd|th)\b', r'\1', cleaned)
        cleaned = cleaned.replace('(', ' ').replace(')', ' ')
        dt = dateparse(cleaned, settings={
            'TIMEZONE': tz.zone,
            'RETURN_AS_TIMEZONE_AWARE': True,
            'DATE_ORDER': 'DMY',
        })
        if dt is None:
            logger.debug(f"Could not parse event time '{line}'")
        return dt

    def event_bounds(
        self,
        event: EventEntry,
        tz_name: Optional[str] = None,
    ) -> Tuple[Optional[datetime], Optional[datetime]]:
        """Resolved (start, end) of an event."""
        return (
            self.parse_event_time(event.starts, tz_name),
            self.parse_event_time(event.ends, tz_name),
        )

    def event_status(
        self,
        event: EventEntry,
        now: datetime,
        tz_name: Optional[str] = None,
    ) -> Optional[EventStatus]:
        """
        Classify an event relative to now.

        Args:
            event: Calendar entry
            now: Aware reference time
            tz_name: Zone the calendar times are in

        Returns:
            EventStatus, or None if either date line cannot be resolved
        """
        starts_at, ends_at = self.event_bounds(event, tz_name)
        return event.status_at(now, starts_at, ends_at)
