"""
Page-number peeling.

OCR of a printed page usually ends with the folio, e.g.::

    ...and so the argument ends here.

    42

Left in place, those numbers end up glued into the running prose once
lines are reflowed. ``peel_page_number`` removes a trailing all-digit
token from a page's text and reports it separately.
"""

from __future__ import annotations

import re

# Last whitespace boundary followed by an all-ASCII-digit token at the very end.
# The greedy head makes the split happen at the *last* whitespace character.
TRAILING_PAGE_NUMBER = re.compile(r"\A(.*)\s([0-9]+)\Z", re.DOTALL)


def peel_page_number(text: str) -> tuple[str, int | None]:
    """
    Strip a trailing page-number token from one page of OCR text.

    Trailing whitespace is trimmed first. The text is then split at its
    last whitespace character into ``(head, tail)``; when ``tail`` consists
    only of ASCII digits it is parsed as the page number and ``head`` is
    returned with its trailing whitespace trimmed.

    Text without any whitespace has no split point and is returned
    unchanged, even when it is entirely numeric.

    Args:
        text: Raw text of a single page.

    Returns:
        Tuple of (text without the page number, page number or None).

    Example:
        >>> peel_page_number("Chapter One\\n\\n42")
        ('Chapter One', 42)
        >>> peel_page_number("Chapter One")
        ('Chapter One', None)
    """
    trimmed = text.rstrip()

    match = TRAILING_PAGE_NUMBER.match(trimmed)
    if match is None:
        return trimmed, None

    head, tail = match.groups()
    return head.rstrip(), int(tail)
