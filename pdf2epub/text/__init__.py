"""
Text reconstruction engine.

Turns raw, hard-wrapped OCR text into clean paragraphs:
- Page-number peeling (trailing folio tokens)
- Line reflow and hyphenation rejoining
- Paragraph vs. page-boundary blank line classification

Example:
    >>> from pdf2epub.text import reconstruct_pages
    >>> doc = reconstruct_pages(["The cat sat on\\n\\n1", "the mat.\\n\\n2"])
    >>> doc.text
    'The cat sat on the mat.'
    >>> doc.page_numbers
    [1, 2]
"""

from pdf2epub.text.document import DocumentText, reconstruct_pages
from pdf2epub.text.pagenum import peel_page_number
from pdf2epub.text.paragraphs import (
    PARAGRAPH_SEPARATOR,
    ParagraphReconstructor,
    ReconstructionStats,
)

__all__ = [
    # Glue
    "reconstruct_pages",
    "DocumentText",
    # Page numbers
    "peel_page_number",
    # Paragraphs
    "ParagraphReconstructor",
    "ReconstructionStats",
    "PARAGRAPH_SEPARATOR",
]
