"""
HTML helpers for feed76.

The extraction core works on plain text. This module reduces a page to the
text content of its body while keeping the line breaks present in the
markup, which is what the section markers and positional rules rely on.
"""

from bs4 import BeautifulSoup


def body_text(html: str) -> str:
    """
    Text content of the page body.

    Script and style contents are left out. Pages without a <body> (bare
    fragments) fall back to the whole document's text.

    Args:
        html: Page markup

    Returns:
        Concatenated text nodes, newlines preserved
    """
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    root = soup.body if soup.body is not None else soup
    return root.get_text()
