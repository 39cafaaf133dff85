"""
Configuration for pdf2epub document conversion.

Options are grouped by pipeline stage: rasterization, OCR, text reconstruction
and e-book metadata.
"""

from dataclasses import dataclass, field

VALID_OCR_ENGINES = ("auto", "tesseract", "doctr", "doctr_gpu", "doctr_cpu")

MIN_DPI = 72
MAX_DPI = 1200


@dataclass
class OCRConfig:
    """
    Configuration for the OCR step.

    Example:
        >>> config = ConversionConfig(ocr=OCRConfig(engine="tesseract", language="deu"))
        >>> result = pdf2epub.convert("scan.pdf", config=config)
    """

    # "auto" picks the best available engine (docTR GPU > Tesseract > docTR CPU)
    engine: str = "auto"

    # Tesseract language code; ignored by docTR
    language: str = "eng"

    def __post_init__(self):
        """Validate configuration."""
        if self.engine not in VALID_OCR_ENGINES:
            raise ValueError(f"engine must be one of {VALID_OCR_ENGINES}, got {self.engine!r}")
        if not self.language:
            raise ValueError("language must be a non-empty tesseract language code")


@dataclass
class ConversionConfig:
    """
    Configuration for document conversion.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = ConversionConfig(dpi=200, strip_page_numbers=False)
        >>> result = pdf2epub.convert("book.pdf", config=config)
    """

    # Rasterization
    dpi: int = 300
    grayscale: bool = True

    # Text reconstruction
    strip_page_numbers: bool = True  # Peel a trailing page number off each page

    # OCR
    ocr: OCRConfig = field(default_factory=OCRConfig)

    # E-book metadata (None = take from the PDF metadata)
    title: str | None = None
    author: str | None = None
    language: str = "en"

    # Inclusive, 0-based (first, last) page indices; None = all pages
    page_range: tuple[int, int] | None = None

    def __post_init__(self):
        """Validate configuration."""
        if not MIN_DPI <= self.dpi <= MAX_DPI:
            raise ValueError(f"dpi must be between {MIN_DPI} and {MAX_DPI}, got {self.dpi}")

        if self.page_range is not None:
            first, last = self.page_range
            if first < 0 or last < first:
                raise ValueError(
                    f"page_range must satisfy 0 <= first <= last, got {self.page_range!r}"
                )
