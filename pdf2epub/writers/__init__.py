"""Output writers (EPUB via EbookLib, plain text)."""

from pdf2epub.writers.epub import paragraphs_to_xhtml, write_epub, write_text

__all__ = [
    "paragraphs_to_xhtml",
    "write_epub",
    "write_text",
]
