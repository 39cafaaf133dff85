"""
Exception classes for pdf2epub.

All pdf2epub exceptions inherit from Pdf2EPubError,
making it easy to catch all library errors.

The text reconstruction engine itself never raises: these errors
belong to the collaborators around it (rasterization, OCR, packaging)
and are fatal for the document being converted.

Example:
    >>> try:
    ...     result = pdf2epub.convert("scan.pdf")
    ... except pdf2epub.OCRError as e:
    ...     print(f"Recognition failed: {e}")
    ... except pdf2epub.Pdf2EPubError as e:
    ...     print(f"pdf2epub error: {e}")
"""


class Pdf2EPubError(Exception):
    """
    Base exception for all pdf2epub errors.

    Catch this to handle any pdf2epub-specific error.
    """

    pass


class UnsupportedFormatError(Pdf2EPubError):
    """
    Raised when the input document is not a PDF.

    Example:
        >>> pdf2epub.convert("notes.docx")
        UnsupportedFormatError: Format 'docx' is not supported. Only PDF input is accepted.
    """

    pass


class RasterizationError(Pdf2EPubError):
    """Raised when a PDF cannot be opened or a page cannot be rendered."""

    pass


class OCRError(Pdf2EPubError):
    """
    Raised when no OCR engine is available or recognition fails.

    Install pytesseract (plus the tesseract binary) or python-doctr.
    """

    pass


class PackagingError(Pdf2EPubError):
    """Raised when the cleaned text cannot be written as EPUB or plain text."""

    pass


class ConversionError(Pdf2EPubError):
    """
    Raised when converting a document fails for any other reason.

    The underlying exception is chained as ``__cause__``.
    """

    pass
