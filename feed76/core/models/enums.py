"""
Core enums for feed76.

This module defines the closed value sets the extractors match against
and the names of the feeds the orchestrator writes.
"""

from enum import Enum
from typing import Optional


class OpsMode(str, Enum):
    """Daily Ops game modes."""
    DECRYPTION = "decryption"
    UPLINK = "uplink"

    @classmethod
    def from_string(cls, value: str) -> Optional['OpsMode']:
        """Convert a line to an OpsMode (case-insensitive, exact match)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class EnemyFaction(str, Enum):
    """Enemy factions a Daily Ops rotation can feature."""
    MOLE_MINERS = "mole miners"
    SUPER_MUTANTS = "super mutants"
    ROBOTS = "robots"
    BLOOD_EAGLES = "blood eagles"
    CULTISTS = "cultists"
    FERAL_GHOULS = "feral ghouls"

    @classmethod
    def all_factions(cls) -> list[str]:
        """Get list of all faction values."""
        return [faction.value for faction in cls]

    @classmethod
    def from_string(cls, value: str) -> Optional['EnemyFaction']:
        """Convert a line to an EnemyFaction (case-insensitive, exact match)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class LineKind(str, Enum):
    """Token kinds assigned to Daily Ops window lines."""
    ANCHOR = "anchor"
    SINCE = "since"
    TIMEZONE = "timezone"
    MODE = "mode"
    ENEMY = "enemy"
    UNKNOWN = "unknown"


class EventStatus(str, Enum):
    """Where an event sits relative to the build time."""
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    ENDED = "ended"


class FeedName(str, Enum):
    """Feed files produced by a build."""
    SCORE = "score.json"
    DAILY_OPS = "dailyops.json"
    AXOLOTL = "axolotl.json"
    EVENTS = "events.json"
    NUKE_CODES = "nukecodes.json"
    MINERVA = "minerva.json"
    RECIPES = "recipes.json"

    @classmethod
    def all_feeds(cls) -> list[str]:
        """Get list of all feed file names."""
        return [feed.value for feed in cls]
