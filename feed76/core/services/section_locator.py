"""
Section location for feed76.

Finds a named section inside a normalized buffer when its heading may be
spelled several ways and may also appear earlier in navigation menus.

Rules:
- Start: the rightmost occurrence of any start marker wins.
- End: the nearest occurrence of any end marker after the start wins.
- No start marker: an empty Section, never an error.
"""

from typing import Iterable, Tuple, Union

from ..models import EmptyMarkerSetError, NormalizedBuffer, Section
from ...utils import get_logger

logger = get_logger('section_locator')

BufferLike = Union[NormalizedBuffer, str]


def _as_markers(markers: Iterable[str], role: str) -> Tuple[str, ...]:
    if isinstance(markers, str):
        markers = (markers,)
    markers = tuple(markers)
    if not markers:
        raise EmptyMarkerSetError(f"No {role} markers given")
    if any(not m for m in markers):
        raise EmptyMarkerSetError(f"Empty string in {role} markers")
    return markers


def locate(
    buffer: BufferLike,
    start_markers: Iterable[str],
    end_markers: Iterable[str],
) -> Section:
    """
    Locate the section between the best start marker and the nearest end marker.

    Args:
        buffer: NormalizedBuffer, or already-joined text
        start_markers: Accepted spellings of the section heading
        end_markers: Accepted spellings of whatever follows the section

    Returns:
        Section (Section.absent() when no start marker occurs)

    Raises:
        EmptyMarkerSetError: If either marker set is empty
    """
    starts = _as_markers(start_markers, "start")
    ends = _as_markers(end_markers, "end")
    text = buffer.text if isinstance(buffer, NormalizedBuffer) else buffer

    start = -1
    used_start = None
    for marker in starts:
        idx = text.rfind(marker)
        if idx > start:
            start = idx
            used_start = marker

    if used_start is None:
        logger.debug(f"None of {list(starts)} found")
        return Section.absent()

    after_start = start + len(used_start)

    end = None
    for marker in ends:
        idx = text.find(marker, after_start)
        if idx != -1 and (end is None or idx < end):
            end = idx

    body = text[after_start:] if end is None else text[after_start:end]

    return Section(
        text=body.strip(),
        start_marker_used=used_start,
        start_offset=start,
        end_offset=end,
    )


def section_between_any(
    buffer: BufferLike,
    start_markers: Iterable[str],
    end_markers: Iterable[str],
) -> str:
    """Text of locate(); empty string when the section is absent."""
    return locate(buffer, start_markers, end_markers).text
