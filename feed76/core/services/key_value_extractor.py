"""
Inline value extraction for feed76.

For pages with no usable line structure: the text is collapsed to a single
line and a labelled value is pulled out with a regular expression.
"""

import re
from typing import Optional, Pattern, Union

# Nuke code page
ALPHA_PATTERN = re.compile(r'Alpha\.\s*([0-9]{8})')
BRAVO_PATTERN = re.compile(r'Bravo\.\s*([0-9]{8})')
CHARLIE_PATTERN = re.compile(r'Charlie\.\s*([0-9]{8})')
RESETS_IN_PATTERN = re.compile(r'Resets in:\s*([0-9a-z\s]+)\.', re.IGNORECASE)

# Minerva page
LOCATION_PATTERN = re.compile(r'Location:\s*([^.\n\r]+?)(?:\s{2,}|\.|$)', re.IGNORECASE)


def flatten(raw_text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    if not raw_text:
        return ""
    return re.sub(r'\s+', ' ', raw_text).strip()


def extract_key_value(
    flat_text: str,
    label_pattern: Union[str, Pattern],
) -> Optional[str]:
    """
    Return the trimmed first capture group of label_pattern in flat_text.

    Args:
        flat_text: Whitespace-collapsed text (see flatten())
        label_pattern: Regex with at least one capturing group

    Returns:
        The captured value, or None if the pattern does not match or the
        capture is empty
    """
    if isinstance(label_pattern, str):
        label_pattern = re.compile(label_pattern)
    if label_pattern.groups < 1:
        raise ValueError(f"Pattern {label_pattern.pattern!r} has no capturing group")

    match = label_pattern.search(flat_text or "")
    if not match or match.group(1) is None:
        return None
    value = match.group(1).strip()
    return value or None
