"""PDF reading module.

Rasterizes scanned PDF pages with PyMuPDF for OCR.
"""

from pdf2epub.readers.pdf_reader import (
    DEFAULT_DPI,
    PageImage,
    PDFRasterizer,
)

__all__ = [
    "PDFRasterizer",
    "PageImage",
    "DEFAULT_DPI",
]
