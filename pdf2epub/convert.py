"""
Document conversion orchestrator.

This module provides the main `convert()` function that turns a scanned
PDF into an e-book by wiring together:
- PDFRasterizer (page images)
- PageRecognizer (OCR text per page)
- reconstruct_pages (page numbers, reflow, paragraph breaks)
- write_epub / write_text (packaging)

Pages are processed strictly in order: the paragraph heuristics depend
on the text that came immediately before.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from pdf2epub.config import ConversionConfig
from pdf2epub.exceptions import ConversionError, Pdf2EPubError, UnsupportedFormatError
from pdf2epub.ocr.engine import PageRecognizer
from pdf2epub.readers.pdf_reader import PDFRasterizer
from pdf2epub.text.document import DocumentText, reconstruct_pages
from pdf2epub.writers.epub import write_epub, write_text

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = {
    ".epub": "epub",
    ".txt": "text",
}


# ═══════════════════════════════════════════════════════════════════════════════
# Results
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass
class ConversionResult:
    """Outcome of converting one document."""

    source_path: Path
    output_path: Path | None
    document: DocumentText
    metadata: dict[str, str | None] = field(default_factory=dict)
    processing_time_s: float = 0.0

    @property
    def text(self) -> str:
        """The cleaned document text."""
        return self.document.text

    @property
    def page_count(self) -> int:
        return self.document.page_count


# ═══════════════════════════════════════════════════════════════════════════════
# Document Converter
# ═══════════════════════════════════════════════════════════════════════════════


class DocumentConverter:
    """
    Converts scanned PDFs using a rasterizer and an OCR recognizer.

    Both collaborators are built from the config unless given explicitly.
    """

    def __init__(
        self,
        config: ConversionConfig | None = None,
        *,
        rasterizer: PDFRasterizer | None = None,
        recognizer: PageRecognizer | None = None,
    ) -> None:
        """Initialize the converter."""
        self.config = config or ConversionConfig()
        self.rasterizer = rasterizer or PDFRasterizer(
            dpi=self.config.dpi,
            grayscale=self.config.grayscale,
        )
        self._recognizer = recognizer

    @property
    def recognizer(self) -> PageRecognizer:
        """OCR recognizer, created on first use (engine detection is slow)."""
        if self._recognizer is None:
            self._recognizer = PageRecognizer(
                preferred_engine=self.config.ocr.engine,
                language=self.config.ocr.language,
            )
        return self._recognizer

    def recognize_pages(self, source: Path) -> Iterator[str]:
        """Yield the OCR text of each page, in page order."""
        for page in self.rasterizer.iter_pages(source, self.config.page_range):
            start_time = time.time()
            text = self.recognizer.recognize(page.image)
            logger.debug(
                "Page %s (%dx%d): %d chars in %.2fs",
                page.label,
                page.size[0],
                page.size[1],
                len(text),
                time.time() - start_time,
            )
            yield text

    def extract_text(self, source: Path) -> DocumentText:
        """OCR every page and reconstruct the paragraphs."""
        document = reconstruct_pages(
            self.recognize_pages(source),
            strip_page_numbers=self.config.strip_page_numbers,
        )
        logger.info(
            "%s: %d pages, %d paragraphs",
            source.name,
            document.page_count,
            document.stats.paragraphs,
        )
        return document

    def convert_file(self, source: Path, output: Path | None) -> ConversionResult:
        """Extract the text of ``source`` and write it to ``output`` (if given)."""
        start_time = time.time()

        metadata = self.rasterizer.read_metadata(source)
        document = self.extract_text(source)

        if output is not None:
            self._write(document.text, output, metadata, source)

        return ConversionResult(
            source_path=source,
            output_path=output,
            document=document,
            metadata=metadata,
            processing_time_s=time.time() - start_time,
        )

    def _write(
        self,
        text: str,
        output: Path,
        metadata: dict[str, str | None],
        source: Path,
    ) -> None:
        fmt = detect_output_format(output)
        if fmt == "text":
            write_text(text, output)
            return

        write_epub(
            text,
            output,
            title=self.config.title or metadata.get("title") or source.stem,
            author=self.config.author or metadata.get("author"),
            language=self.config.language,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════════


def convert(
    source: str | Path,
    output: str | Path | None = None,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """
    Convert a scanned PDF to an e-book.

    Args:
        source: Path to the PDF file
        output: Destination file (``.epub`` or ``.txt``); defaults to
            the source path with an ``.epub`` suffix
        config: Conversion configuration (uses defaults if None)

    Returns:
        ConversionResult with the cleaned text and output path

    Raises:
        FileNotFoundError: If source doesn't exist
        UnsupportedFormatError: If source isn't a PDF or output suffix is unknown
        Pdf2EPubError: If rasterization, OCR or packaging fails

    Example:
        >>> result = convert("scan.pdf")
        >>> print(result.output_path)
        scan.epub
    """
    source = Path(source)
    output = Path(output) if output is not None else source.with_suffix(".epub")

    if not source.exists():
        raise FileNotFoundError(f"Source file not found: {source}")

    detect_format(source)
    detect_output_format(output)

    logger.info("Converting %s -> %s", source, output)

    try:
        return DocumentConverter(config).convert_file(source, output)
    except Pdf2EPubError:
        raise
    except Exception as e:
        raise ConversionError(f"Failed to convert {source}: {e}") from e


def convert_batch(
    sources: list[str | Path],
    output_dir: str | Path | None = None,
    config: ConversionConfig | None = None,
):
    """
    Convert multiple documents, yielding results as completed.

    A failure only ends the document it occurred in.

    Args:
        sources: Paths to PDF files
        output_dir: Directory for the EPUBs (next to each source if None)
        config: Conversion configuration

    Yields:
        (path, result) tuples where result is ConversionResult or Exception
    """
    config = config or ConversionConfig()

    for source in sources:
        source = Path(source)
        output = None
        if output_dir is not None:
            output = Path(output_dir) / f"{source.stem}.epub"
        try:
            yield (source, convert(source, output, config))
        except (Pdf2EPubError, FileNotFoundError) as e:
            logger.error("Conversion failed for %s: %s", source, e)
            yield (source, e)


def detect_format(path: str | Path) -> str:
    """
    Detect document format from file extension and magic bytes.

    Args:
        path: Path to document file

    Returns:
        "pdf", the only accepted input format

    Raises:
        UnsupportedFormatError: If the file is not a PDF
    """
    path = Path(path)

    if path.suffix.lower() == ".pdf":
        return "pdf"

    # Try magic bytes for PDF
    try:
        with open(path, "rb") as f:
            header = f.read(8)
            if header.startswith(b"%PDF"):
                return "pdf"
    except OSError:
        pass

    raise UnsupportedFormatError(f"Cannot detect format for: {path}")


def detect_output_format(path: str | Path) -> str:
    """
    Output format for a destination path, from its suffix.

    Raises:
        UnsupportedFormatError: If the suffix is neither .epub nor .txt
    """
    ext = Path(path).suffix.lower()
    if ext not in OUTPUT_FORMATS:
        raise UnsupportedFormatError(
            f"Cannot write '{ext or path}'. Supported outputs: {sorted(OUTPUT_FORMATS)}"
        )
    return OUTPUT_FORMATS[ext]
