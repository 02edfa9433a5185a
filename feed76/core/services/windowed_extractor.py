"""
Windowed field extraction for feed76.

The Daily Ops block has no markup worth anchoring on: it is a run of
lines after a "Daily Ops" label, with labelled values (a "Since ..." line,
a timezone), closed-set values (mode, enemy faction), and one unlabelled
value (the location) that can only be recovered by position.

Each window line is classified into a LineKind first. Fields are then
picked from the classified lines, and the location is whatever is left:
the nearest unclaimed, plausible-length line before the enemy.
"""

from typing import List, Optional, Sequence, Set, Union

from ..models import (
    DailyOpsSnapshot,
    EnemyFaction,
    LineKind,
    NormalizedBuffer,
    OpsMode,
    MAX_MUTATIONS,
)
from ...utils import get_logger

logger = get_logger('windowed_extractor')

DAILY_OPS_ANCHOR = "Daily Ops"
DAILY_OPS_WINDOW = 30

TIMEZONE_MAX_LENGTH = 40
LOCATION_MIN_LENGTH = 4
LOCATION_MAX_LENGTH = 60


def is_since_line(line: str) -> bool:
    """A "Since <date>" line."""
    return line.lower().startswith("since ")


def is_timezone_line(line: str) -> bool:
    """A short line with a path-like separator, e.g. "Europe/Berlin"."""
    return "/" in line and len(line) < TIMEZONE_MAX_LENGTH


def classify_line(line: str, anchor_label: str = DAILY_OPS_ANCHOR) -> LineKind:
    """
    Assign a token kind to a single window line.

    Args:
        line: Window line
        anchor_label: The label that opens the window

    Returns:
        LineKind
    """
    low = line.lower()
    if low == anchor_label.lower():
        return LineKind.ANCHOR
    if is_since_line(line):
        return LineKind.SINCE
    if "/" in line:
        return LineKind.TIMEZONE
    if OpsMode.from_string(line):
        return LineKind.MODE
    if EnemyFaction.from_string(line):
        return LineKind.ENEMY
    return LineKind.UNKNOWN


def classify_window(window: Sequence[str], anchor_label: str = DAILY_OPS_ANCHOR) -> List[LineKind]:
    """Classify every line of a window."""
    return [classify_line(line, anchor_label) for line in window]


def find_anchor(lines: Sequence[str], anchor_label: str) -> int:
    """
    Index of the last line equal (case-insensitively) to anchor_label.

    Earlier occurrences are navigation links.

    Returns:
        Line index, or -1 if the label does not occur
    """
    target = anchor_label.lower()
    for i in range(len(lines) - 1, -1, -1):
        if lines[i].lower() == target:
            return i
    return -1


def collect_mutations(
    window: Sequence[str],
    kinds: Sequence[LineKind],
    mode_index: int,
) -> List[str]:
    """Up to two lines after the mode that are neither since nor timezone lines."""
    mutations = []
    for line, kind in zip(window[mode_index + 1:], kinds[mode_index + 1:]):
        if kind in (LineKind.SINCE, LineKind.TIMEZONE):
            continue
        mutations.append(line)
        if len(mutations) == MAX_MUTATIONS:
            break
    return mutations


def infer_location(
    window: Sequence[str],
    kinds: Sequence[LineKind],
    enemy_index: int,
    claimed: Set[str],
) -> Optional[str]:
    """
    Recover the unlabelled location by elimination.

    Walks backward from the enemy line and returns the first line that is
    UNKNOWN, not in the claimed set (lowercased values), and between 4 and
    60 characters long.

    Args:
        window: Window lines
        kinds: LineKind per window line
        enemy_index: Index of the enemy line in the window
        claimed: Lowercased values already assigned to other fields

    Returns:
        Location line, or None
    """
    for j in range(enemy_index - 1, -1, -1):
        line = window[j]
        if kinds[j] is not LineKind.UNKNOWN:
            continue
        if line.lower() in claimed:
            continue
        if LOCATION_MIN_LENGTH <= len(line) <= LOCATION_MAX_LENGTH:
            return line
    return None


def _first_index(kinds: Sequence[LineKind], kind: LineKind) -> int:
    for i, k in enumerate(kinds):
        if k is kind:
            return i
    return -1


def extract_windowed(
    buffer: Union[NormalizedBuffer, Sequence[str]],
    anchor_label: str = DAILY_OPS_ANCHOR,
    window_size: int = DAILY_OPS_WINDOW,
) -> Optional[DailyOpsSnapshot]:
    """
    Extract the Daily Ops record from the lines after the last anchor.

    Args:
        buffer: NormalizedBuffer or plain line sequence
        anchor_label: Label line that opens the block
        window_size: Number of lines (anchor included) to scan

    Returns:
        DailyOpsSnapshot with unresolved fields left None/empty, or None
        when the anchor label does not occur
    """
    if window_size < 1:
        raise ValueError(f"window_size must be positive, got {window_size}")

    lines = buffer.lines if isinstance(buffer, NormalizedBuffer) else list(buffer)
    start = find_anchor(lines, anchor_label)
    if start == -1:
        logger.debug(f"Anchor '{anchor_label}' not found")
        return None

    window = lines[start:start + window_size]
    kinds = classify_window(window, anchor_label)

    since = next((line for line in window if is_since_line(line)), None)
    timezone = next((line for line in window if is_timezone_line(line)), None)

    mode = None
    mutations = []
    mode_index = _first_index(kinds, LineKind.MODE)
    if mode_index != -1:
        mode = OpsMode.from_string(window[mode_index])
        mutations = collect_mutations(window, kinds, mode_index)

    enemy = None
    location = None
    enemy_index = _first_index(kinds, LineKind.ENEMY)
    if enemy_index != -1:
        enemy = EnemyFaction.from_string(window[enemy_index])
        claimed = {m.lower() for m in mutations}
        location = infer_location(window, kinds, enemy_index, claimed)

    return DailyOpsSnapshot(
        since=since,
        timezone=timezone,
        mode=mode,
        mutations=mutations,
        location=location,
        enemy=enemy,
    )
