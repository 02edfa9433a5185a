"""
Marker sets for feed76.

Every logical boundary on a source page is a small closed set of accepted
spellings. New spellings are added here rather than special-cased in the
locator.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple


class EmptyMarkerSetError(ValueError):
    """Raised when a marker set with no markers is used."""
    pass


@dataclass(frozen=True)
class MarkerSet:
    """
    Accepted spellings of one semantic boundary.

    Order carries no priority: the locator tries every marker.

    Attributes:
        name: Human-readable name of the boundary
        markers: Literal spellings
    """

    name: str
    markers: Tuple[str, ...]

    def __post_init__(self):
        """Reject empty sets and empty spellings."""
        if not self.markers:
            raise EmptyMarkerSetError(f"Marker set '{self.name}' has no markers")
        if any(not m for m in self.markers):
            raise EmptyMarkerSetError(f"Marker set '{self.name}' contains an empty marker")

    def __iter__(self) -> Iterator[str]:
        return iter(self.markers)

    def __len__(self) -> int:
        return len(self.markers)

    def __add__(self, other: 'MarkerSet') -> 'MarkerSet':
        """Union of two marker sets, keeping first-seen order."""
        merged = tuple(dict.fromkeys(self.markers + other.markers))
        return MarkerSet(f"{self.name} | {other.name}", merged)

    @classmethod
    def heading(cls, title: str, *extra: str) -> 'MarkerSet':
        """
        Build the usual spellings of a page heading.

        Headings render as "#### Title", sometimes with a double space after
        the hashes, and sometimes bare.

        Args:
            title: Heading text without hashes
            extra: Additional literal spellings

        Returns:
            MarkerSet named after the title
        """
        return cls(title, (f"#### {title}", f"####  {title}", title) + tuple(extra))


class SectionMarkers:
    """Known boundaries on the Nuka Knights home page."""

    DAILY_CHALLENGES = MarkerSet.heading("Daily Challenges")
    WEEKLY_CHALLENGES = MarkerSet.heading("Weekly Challenges")
    AXOLOTL = MarkerSet.heading("Axolotl of the month")
    EVENT_CALENDAR = MarkerSet(
        "Current Fallout 76 Event Calendar Dates:",
        (
            "### Current Fallout 76 Event Calendar Dates:",
            "Current Fallout 76 Event Calendar Dates:",
        ),
    )
    DISCORD = MarkerSet.heading("Nuka Knights Discord")
