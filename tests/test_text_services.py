"""
Tests for text normalization and section location.
"""

import pytest

from feed76.core.models import (
    EmptyMarkerSetError,
    MarkerSet,
    NormalizedBuffer,
    Section,
    SectionMarkers,
)
from feed76.core.services import (
    clean_lines,
    locate,
    normalize,
    section_between_any,
)


# =============================================================================
# Text Normalizer Tests
# =============================================================================

class TestNormalize:
    """Tests for normalize() and clean_lines()."""

    def test_trims_and_drops_blank_lines(self):
        """Lines are trimmed, blank lines removed, order kept."""
        buffer = normalize("  first \r\n\r\n\t second\n   \nthird")
        assert buffer.lines == ("first", "second", "third")

    def test_joined_text(self):
        """The search text is the lines joined by newlines."""
        buffer = normalize("a\n\n b ")
        assert buffer.text == "a\nb"

    def test_empty_input(self):
        """Empty input produces an empty buffer."""
        assert normalize("").lines == ()
        assert not normalize("   \n \r\n")
        assert clean_lines(None) == []

    def test_buffer_is_immutable(self):
        """NormalizedBuffer cannot be modified after creation."""
        buffer = normalize("a")
        with pytest.raises(AttributeError):
            buffer.lines = ("b",)


# =============================================================================
# Marker Set Tests
# =============================================================================

class TestMarkerSet:
    """Tests for MarkerSet."""

    def test_heading_spellings(self):
        """Headings cover hashed, double-spaced and bare spellings."""
        markers = MarkerSet.heading("Daily Challenges")
        assert list(markers) == [
            "#### Daily Challenges",
            "####  Daily Challenges",
            "Daily Challenges",
        ]

    def test_empty_marker_set_rejected(self):
        """An empty marker set is a caller error."""
        with pytest.raises(EmptyMarkerSetError):
            MarkerSet("nothing", ())

    def test_empty_marker_rejected(self):
        """An empty spelling would match everywhere."""
        with pytest.raises(EmptyMarkerSetError):
            MarkerSet("blank", ("Title", ""))

    def test_union_keeps_order_without_duplicates(self):
        """Adding marker sets merges spellings in first-seen order."""
        merged = MarkerSet("a", ("x", "y")) + MarkerSet("b", ("y", "z"))
        assert merged.markers == ("x", "y", "z")


# =============================================================================
# Section Locator Tests
# =============================================================================

class TestLocate:
    """Tests for locate()."""

    def test_basic_section(self):
        """Section text lies between the start and end markers."""
        buffer = normalize("\n".join([
            "Daily Challenges",
            "Collect 10 Aluminum",
            "250",
            "Weekly Challenges",
            "Explore Vaults",
            "500",
        ]))
        section = locate(buffer, ["Daily Challenges"], ["Weekly Challenges"])
        assert section.text == "Collect 10 Aluminum\n250"
        assert section.start_marker_used == "Daily Challenges"
        assert section.start_offset == 0
        assert section.end_offset == buffer.text.index("Weekly Challenges")

    def test_last_start_occurrence_wins(self):
        """A heading repeated in the navigation is ignored in favour of the last one."""
        buffer = normalize("Menu\nDaily Challenges\nWeekly Challenges\nDaily Challenges\nReal\n10\nWeekly Challenges\nMore")
        section = locate(buffer, ["Daily Challenges"], ["Weekly Challenges"])
        assert section.text == "Real\n10"
        assert section.start_offset == buffer.text.rindex("Daily Challenges")

    def test_largest_offset_across_markers(self):
        """Across several spellings, the one found furthest into the text wins."""
        buffer = normalize("####  Scores\nold\n## Scores\nnew\nEnd")
        section = locate(buffer, ["####  Scores", "## Scores"], ["End"])
        assert section.start_marker_used == "## Scores"
        assert section.text == "new"

    def test_bare_marker_inside_heading(self):
        """A bare spelling found inside a hashed heading starts after the heading text."""
        buffer = normalize("#### Daily Challenges\nA challenge\n100\n#### Weekly Challenges")
        section = locate(buffer, SectionMarkers.DAILY_CHALLENGES, SectionMarkers.WEEKLY_CHALLENGES)
        assert section.start_marker_used == "Daily Challenges"
        assert section.text == "A challenge\n100"

    def test_nearest_end_marker_wins(self):
        """The earliest end marker after the start bounds the section, whichever spelling it is."""
        buffer = normalize("Start\none\nStop B\ntwo\nStop A\nthree")
        section = locate(buffer, ["Start"], ["Stop A", "Stop B"])
        assert section.text == "one"

    def test_end_marker_before_start_ignored(self):
        """End markers are only searched after the start marker."""
        buffer = normalize("Stop\nStart\nbody\nStop")
        assert locate(buffer, ["Start"], ["Stop"]).text == "body"

    def test_runs_to_end_without_end_marker(self):
        """With no end marker the section runs to the end of the text."""
        buffer = normalize("Start\nbody\ntail")
        section = locate(buffer, ["Start"], ["Missing"])
        assert section.text == "body\ntail"
        assert section.end_offset is None

    def test_missing_start_is_empty_section(self):
        """No start marker means an absent section, not an error."""
        section = locate(normalize("nothing here"), ["Daily Challenges"], ["Weekly Challenges"])
        assert section == Section.absent()
        assert section.text == ""
        assert not section.found

    def test_empty_buffer(self):
        """An empty buffer yields an absent section."""
        assert not locate(NormalizedBuffer(), ["A"], ["B"]).found

    def test_empty_marker_sets_raise(self):
        """Empty marker sets are a precondition violation, distinct from not-found."""
        buffer = normalize("Start\nbody")
        with pytest.raises(EmptyMarkerSetError):
            locate(buffer, [], ["End"])
        with pytest.raises(EmptyMarkerSetError):
            locate(buffer, ["Start"], [])

    def test_accepts_joined_text(self):
        """The locator also works on already-joined text."""
        assert section_between_any("Start\nbody\nEnd", ["Start"], ["End"]) == "body"
