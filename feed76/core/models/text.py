"""
Text models for feed76.

NormalizedBuffer and Section are the intermediate values passed between
the normalizer, the section locator and the field extractors.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class NormalizedBuffer:
    """
    Ordered, trimmed, blank-free lines of a source document.

    Attributes:
        lines: The non-empty lines in document order
    """

    lines: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """Lines joined by newlines, used for substring search."""
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)


@dataclass(frozen=True)
class Section:
    """
    A slice of a NormalizedBuffer's joined text between two markers.

    Attributes:
        text: Trimmed content between the start marker and the end marker
        start_marker_used: The start marker spelling that won, None if absent
        start_offset: Offset of the start marker in the joined text (-1 if absent)
        end_offset: Offset of the end marker, None when the section runs to the end
    """

    text: str = ""
    start_marker_used: Optional[str] = None
    start_offset: int = -1
    end_offset: Optional[int] = None

    @property
    def found(self) -> bool:
        """Whether a start marker was located."""
        return self.start_marker_used is not None

    @classmethod
    def absent(cls) -> 'Section':
        """The empty section returned when no start marker occurs."""
        return cls()
