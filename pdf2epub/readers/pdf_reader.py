"""
PDF rasterization using PyMuPDF (fitz).

Renders each page of a scanned PDF to a PIL image for OCR. Pages are
yielded one at a time so only a single rendered page is held in memory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import fitz  # PyMuPDF
from PIL import Image

from pdf2epub.exceptions import RasterizationError

if TYPE_CHECKING:
    from collections.abc import Iterator

DEFAULT_DPI = 300
POINTS_PER_INCH = 72.0


@dataclass
class PageImage:
    """A single rasterized PDF page."""

    index: int  # 0-based page index
    label: str  # Page label (e.g., "42", "xiv")
    image: Image.Image

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) in pixels."""
        return self.image.size


class PDFRasterizer:
    """Renders PDF pages to images using PyMuPDF.

    The target size is the page's paper size in inches times ``dpi``.

    Usage:
        rasterizer = PDFRasterizer(dpi=300)
        for page in rasterizer.iter_pages("/path/to/scan.pdf"):
            text = recognizer.recognize(page.image)
    """

    def __init__(
        self,
        *,
        dpi: int = DEFAULT_DPI,
        grayscale: bool = True,
    ):
        """Initialize the rasterizer.

        Args:
            dpi: Rendering resolution in dots per inch.
            grayscale: Render in grayscale instead of RGB.
        """
        self.dpi = dpi
        self.grayscale = grayscale

    def iter_pages(
        self,
        path: str | Path,
        page_range: tuple[int, int] | None = None,
    ) -> Iterator[PageImage]:
        """Render pages of a PDF in page order.

        Args:
            path: Path to PDF file.
            page_range: Optional inclusive 0-based (first, last) page indices.

        Yields:
            PageImage for each rendered page.

        Raises:
            FileNotFoundError: If file doesn't exist.
            RasterizationError: If the PDF can't be opened or a page can't be rendered.
        """
        doc = self._open(path)
        try:
            for page_idx in self._page_indices(len(doc), page_range):
                yield self._render_page(doc[page_idx], page_idx)
        finally:
            doc.close()

    def page_count(self, path: str | Path) -> int:
        """Number of pages in the PDF."""
        doc = self._open(path)
        try:
            return len(doc)
        finally:
            doc.close()

    def read_metadata(self, path: str | Path) -> dict[str, str | None]:
        """Extract PDF metadata (title, author, ...)."""
        doc = self._open(path)
        try:
            meta = doc.metadata or {}
        finally:
            doc.close()

        return {
            "title": meta.get("title") or None,
            "author": meta.get("author") or None,
            "subject": meta.get("subject") or None,
            "creator": meta.get("creator") or None,
            "producer": meta.get("producer") or None,
        }

    def _open(self, path: str | Path) -> fitz.Document:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"PDF not found: {path}")

        try:
            return fitz.open(path)
        except Exception as e:
            raise RasterizationError(f"Failed to open PDF {path}: {e}") from e

    @staticmethod
    def _page_indices(count: int, page_range: tuple[int, int] | None) -> range:
        if page_range is None:
            return range(count)
        first, last = page_range
        return range(first, min(last + 1, count))

    def _render_page(self, page: fitz.Page, page_idx: int) -> PageImage:
        """Render a single page at the configured resolution."""
        scale = self.dpi / POINTS_PER_INCH
        colorspace = fitz.csGRAY if self.grayscale else fitz.csRGB
        mode = "L" if self.grayscale else "RGB"

        try:
            pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale), colorspace=colorspace)
            image = Image.frombytes(mode, (pix.width, pix.height), pix.samples)
        except Exception as e:
            raise RasterizationError(f"Failed to render page {page_idx}: {e}") from e

        label = page.get_label() or str(page_idx + 1)
        return PageImage(index=page_idx, label=label, image=image)
