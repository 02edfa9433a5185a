"""
Text normalization for feed76.

Turns page body text into the ordered, trimmed, blank-free line sequence
every extractor works on.
"""

from typing import List

from ..models import NormalizedBuffer


def clean_lines(text: str) -> List[str]:
    """
    Split text into trimmed, non-empty lines.

    Carriage returns are removed before splitting on newlines.

    Args:
        text: Raw text (may be empty)

    Returns:
        Lines in their original order
    """
    if not text:
        return []
    lines = (line.strip() for line in text.replace("\r", "").split("\n"))
    return [line for line in lines if line]


def normalize(raw_text: str) -> NormalizedBuffer:
    """Build a NormalizedBuffer from raw body text."""
    return NormalizedBuffer(tuple(clean_lines(raw_text)))
