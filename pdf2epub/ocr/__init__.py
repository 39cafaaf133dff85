"""
OCR for rasterized PDF pages.

Example:
    >>> from pdf2epub.ocr import PageRecognizer
    >>> recognizer = PageRecognizer()
    >>> recognizer.active_engine
    <OCREngine.TESSERACT: 'tesseract'>
"""

from pdf2epub.ocr.engine import (
    OCREngine,
    PageRecognizer,
    detect_available_engines,
    resolve_engine,
)

__all__ = [
    "PageRecognizer",
    "OCREngine",
    "detect_available_engines",
    "resolve_engine",
]
