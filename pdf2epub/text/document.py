"""
Cross-page driving of the text reconstruction engine.

Takes the OCR text of every page of a document, in page order, peels
page numbers when asked to and feeds the lines through a single
ParagraphReconstructor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pdf2epub.text.pagenum import peel_page_number
from pdf2epub.text.paragraphs import (
    PARAGRAPH_SEPARATOR,
    ParagraphReconstructor,
    ReconstructionStats,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass
class DocumentText:
    """Cleaned text of a whole document plus what was learned on the way."""

    text: str
    page_numbers: list[int | None] = field(default_factory=list)
    stats: ReconstructionStats = field(default_factory=ReconstructionStats)

    @property
    def paragraphs(self) -> list[str]:
        """The cleaned paragraphs, in reading order."""
        if not self.text:
            return []
        return self.text.split(PARAGRAPH_SEPARATOR)

    @property
    def page_count(self) -> int:
        return len(self.page_numbers)


def reconstruct_pages(
    pages: Iterable[str],
    strip_page_numbers: bool = True,
) -> DocumentText:
    """
    Reconstruct paragraphs across all pages of a document.

    A blank line is pushed after every page so the reconstructor sees
    the page boundary even when OCR did not emit one.

    Args:
        pages: OCR text of each page, in page order.
        strip_page_numbers: Whether to peel a trailing page number off each page.

    Returns:
        DocumentText with the cleaned text and the peeled page numbers
        (None for pages where peeling was off or found nothing).
    """
    reconstructor = ParagraphReconstructor()
    page_numbers: list[int | None] = []

    for index, page_text in enumerate(pages):
        number = None
        if strip_page_numbers:
            page_text, number = peel_page_number(page_text)
            if number is not None:
                logger.debug("Page %d: stripped page number %d", index, number)
        page_numbers.append(number)

        reconstructor.push_page(page_text)

    text = reconstructor.finish()
    return DocumentText(text=text, page_numbers=page_numbers, stats=reconstructor.stats)
