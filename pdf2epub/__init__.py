"""
pdf2epub: Convert scanned PDFs into clean, paragraph-structured e-books.

Pages are rasterized with PyMuPDF, recognized with Tesseract or docTR,
and the hard-wrapped OCR text is reflowed into paragraphs: hyphenated
line breaks are rejoined, page numbers are stripped and blank lines
left behind by page boundaries are told apart from real paragraph
breaks.

Example:
    >>> import pdf2epub
    >>> result = pdf2epub.convert("scan.pdf", "scan.epub")
    >>> print(result.text[:100])

    >>> # The text engine on its own
    >>> pdf2epub.reconstruct_pages(["exam-\\nple text\\n\\n7"]).text
    'example text'
"""

from pdf2epub.config import ConversionConfig, OCRConfig
from pdf2epub.convert import (
    ConversionResult,
    DocumentConverter,
    convert,
    convert_batch,
    detect_format,
)
from pdf2epub.exceptions import (
    ConversionError,
    OCRError,
    PackagingError,
    Pdf2EPubError,
    RasterizationError,
    UnsupportedFormatError,
)
from pdf2epub.text import (
    DocumentText,
    ParagraphReconstructor,
    ReconstructionStats,
    peel_page_number,
    reconstruct_pages,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "convert",
    "convert_batch",
    "detect_format",
    "DocumentConverter",
    "ConversionResult",
    # Configuration
    "ConversionConfig",
    "OCRConfig",
    # Text engine
    "reconstruct_pages",
    "peel_page_number",
    "ParagraphReconstructor",
    "ReconstructionStats",
    "DocumentText",
    # Exceptions
    "Pdf2EPubError",
    "UnsupportedFormatError",
    "RasterizationError",
    "OCRError",
    "PackagingError",
    "ConversionError",
]
