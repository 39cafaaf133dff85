"""
E-book packaging.

Wraps the cleaned paragraphs in XHTML ``<p>`` elements and writes them
as a single-chapter EPUB with EbookLib, or as plain UTF-8 text.
"""

from __future__ import annotations

import html
import logging
import uuid
from pathlib import Path

from ebooklib import epub

from pdf2epub.exceptions import PackagingError
from pdf2epub.text.paragraphs import PARAGRAPH_SEPARATOR

logger = logging.getLogger(__name__)

CHAPTER_FILE_NAME = "text.xhtml"
DEFAULT_TITLE = "Untitled"


def paragraphs_to_xhtml(text: str) -> str:
    """
    Escape each paragraph and wrap it in a ``<p>`` element.

    Args:
        text: Cleaned text, paragraphs separated by a blank line.

    Returns:
        XHTML body fragment, one ``<p>`` per line.
    """
    if not text:
        return ""
    paragraphs = text.split(PARAGRAPH_SEPARATOR)
    return "\n".join(f"<p>{html.escape(p, quote=False)}</p>" for p in paragraphs)


def write_epub(
    text: str,
    path: str | Path,
    *,
    title: str | None = None,
    author: str | None = None,
    language: str = "en",
    identifier: str | None = None,
) -> Path:
    """
    Write cleaned text as a single-chapter EPUB.

    Args:
        text: Cleaned text, paragraphs separated by a blank line.
        path: Destination ``.epub`` path.
        title: Book title (defaults to "Untitled").
        author: Optional author name.
        language: Language tag for the book and its chapter.
        identifier: Unique identifier (a random UUID URN if omitted).

    Returns:
        The path written.

    Raises:
        PackagingError: If the EPUB can't be built or written.
    """
    path = Path(path)
    title = title or DEFAULT_TITLE

    book = epub.EpubBook()
    book.set_identifier(identifier or f"urn:uuid:{uuid.uuid4()}")
    book.set_title(title)
    book.set_language(language)
    if author:
        book.add_author(author)

    chapter = epub.EpubHtml(title=title, file_name=CHAPTER_FILE_NAME, lang=language)
    body = paragraphs_to_xhtml(text) or "<p></p>"
    chapter.content = f"<h1>{html.escape(title, quote=False)}</h1>\n{body}"
    book.add_item(chapter)

    book.toc = (chapter,)
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        epub.write_epub(str(path), book, {})
    except Exception as e:
        raise PackagingError(f"Failed to write EPUB {path}: {e}") from e

    # Some EbookLib releases swallow IOError inside write_epub
    if not path.is_file():
        raise PackagingError(f"Failed to write EPUB {path}")

    logger.info("Wrote EPUB %s (%d chars)", path, len(text))
    return path


def write_text(text: str, path: str | Path) -> Path:
    """
    Write cleaned text as UTF-8 plain text with a trailing newline.

    Raises:
        PackagingError: If the file can't be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n" if text else "", encoding="utf-8")
    except OSError as e:
        raise PackagingError(f"Failed to write {path}: {e}") from e

    logger.info("Wrote text %s (%d chars)", path, len(text))
    return path
