"""
Pytest configuration and fixtures for pdf2epub tests.
"""

from pathlib import Path

import fitz
import pytest


class FakeRecognizer:
    """Stands in for PageRecognizer: returns canned text per page, in order."""

    def __init__(self, page_texts: list[str]):
        self.page_texts = list(page_texts)
        self.images = []

    def recognize(self, image) -> str:
        self.images.append(image)
        return self.page_texts[len(self.images) - 1]


@pytest.fixture(scope="session")
def sample_config():
    """Return a sample ConversionConfig for testing."""
    from pdf2epub import ConversionConfig

    return ConversionConfig()


@pytest.fixture
def make_pdf(tmp_path):
    """Factory building a small PDF with one page per text entry."""

    def _make_pdf(
        page_texts: list[str],
        name: str = "sample.pdf",
        metadata: dict | None = None,
    ) -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for text in page_texts:
            page = doc.new_page(width=612, height=792)  # US Letter
            page.insert_text((72, 72), text, fontsize=12)
        if metadata:
            doc.set_metadata(metadata)
        doc.save(path)
        doc.close()
        return path

    return _make_pdf


@pytest.fixture
def fake_recognizer_factory():
    """Factory for FakeRecognizer instances."""
    return FakeRecognizer
