"""
Page-level OCR.

Turns one rasterized page into plain text: one output line per
recognized text line and a blank line between text blocks. The blank
lines are what the paragraph reconstructor uses to find paragraph and
page boundaries, so they are kept.

Engines, best first: docTR on GPU, Tesseract, docTR on CPU.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from PIL import Image

from pdf2epub.exceptions import OCRError

logger = logging.getLogger(__name__)


class OCREngine(Enum):
    """Available OCR engines."""

    DOCTR_GPU = "doctr_gpu"
    DOCTR_CPU = "doctr_cpu"
    TESSERACT = "tesseract"
    NONE = "none"


# "doctr" asks for the GPU and settles for the CPU
ENGINE_ALIASES = {
    "doctr": (OCREngine.DOCTR_GPU, OCREngine.DOCTR_CPU),
    "doctr_gpu": (OCREngine.DOCTR_GPU, OCREngine.DOCTR_CPU),
    "doctr_cpu": (OCREngine.DOCTR_CPU,),
    "tesseract": (OCREngine.TESSERACT,),
}


def _has_doctr() -> bool:
    try:
        import doctr.models  # noqa: F401
    except ImportError:
        return False
    return True


def _has_cuda() -> bool:
    try:
        import torch
    except ImportError:
        return False
    return torch.cuda.is_available()


def _has_tesseract() -> bool:
    try:
        import pytesseract
    except ImportError:
        return False

    try:
        pytesseract.get_tesseract_version()
    except pytesseract.TesseractNotFoundError:
        logger.debug("pytesseract installed but the tesseract binary is missing")
        return False
    return True


def detect_available_engines() -> list[OCREngine]:
    """Installed engines, best first."""
    doctr = _has_doctr()
    engines = []

    if doctr and _has_cuda():
        engines.append(OCREngine.DOCTR_GPU)
    if _has_tesseract():
        engines.append(OCREngine.TESSERACT)
    if doctr:
        engines.append(OCREngine.DOCTR_CPU)

    if not engines:
        logger.warning("No OCR engines available. Install pytesseract or python-doctr.")
    return engines


def resolve_engine(preferred: str, available: list[OCREngine]) -> OCREngine:
    """
    Pick the engine for a preference ("auto" or an ENGINE_ALIASES key).

    An unavailable preference falls back to the best available engine.
    """
    for engine in ENGINE_ALIASES.get(preferred.lower(), ()):
        if engine in available:
            return engine

    if preferred != "auto":
        logger.warning("OCR engine '%s' not available; using the best available", preferred)
    return available[0] if available else OCREngine.NONE


@dataclass
class PageRecognizer:
    """
    Recognizes the text of whole page images.

    Attributes:
        preferred_engine: "auto", "tesseract", "doctr", "doctr_gpu" or "doctr_cpu".
        language: Tesseract language code.

    Example:
        >>> recognizer = PageRecognizer(preferred_engine="tesseract")
        >>> text = recognizer.recognize(page.image)
    """

    preferred_engine: str = "auto"
    language: str = "eng"

    _available_engines: list[OCREngine] = field(default_factory=list)
    _doctr_predictor: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._available_engines = detect_available_engines()

    @property
    def is_available(self) -> bool:
        return bool(self._available_engines)

    @property
    def active_engine(self) -> OCREngine:
        return resolve_engine(self.preferred_engine, self._available_engines)

    def recognize(self, image: Image.Image) -> str:
        """
        Recognize the text of one page image.

        Returns:
            Page text with ``\\n`` line separators.

        Raises:
            OCRError: If no engine is available or recognition fails.
        """
        engine = self.active_engine
        if engine == OCREngine.NONE:
            raise OCRError("No OCR engine available. Install pytesseract or python-doctr.")

        try:
            if engine == OCREngine.TESSERACT:
                text = self._recognize_with_tesseract(image)
            else:
                text = self._recognize_with_doctr(image, use_gpu=engine == OCREngine.DOCTR_GPU)
        except OCRError:
            raise
        except Exception as e:
            raise OCRError(f"{engine.value} recognition failed: {e}") from e

        return text.replace("\r\n", "\n").replace("\r", "\n")

    def _recognize_with_tesseract(self, image: Image.Image) -> str:
        import pytesseract

        # Tesseract already separates blocks with blank lines
        return pytesseract.image_to_string(image, lang=self.language)

    def _recognize_with_doctr(self, image: Image.Image, use_gpu: bool) -> str:
        import numpy as np

        result = self._load_doctr(use_gpu)([np.asarray(image.convert("RGB"))])

        blocks = []
        for page in result.pages:
            for block in page.blocks:
                blocks.append(
                    "\n".join(" ".join(word.value for word in line.words) for line in block.lines)
                )
        return "\n\n".join(blocks)

    def _load_doctr(self, use_gpu: bool) -> Any:
        """The docTR predictor, loaded once (model weights are large)."""
        if self._doctr_predictor is None:
            device = "cuda" if use_gpu else "cpu"
            logger.info("Loading docTR predictor on %s", device)
            try:
                from doctr.models import ocr_predictor

                self._doctr_predictor = ocr_predictor(pretrained=True).to(device)
            except Exception as e:
                raise OCRError(f"Failed to load docTR: {e}") from e
        return self._doctr_predictor

    def get_engine_info(self) -> dict[str, Any]:
        """Available and active engines, for diagnostics."""
        return {
            "available_engines": [e.value for e in self._available_engines],
            "active_engine": self.active_engine.value,
            "preferred_engine": self.preferred_engine,
            "language": self.language,
        }
