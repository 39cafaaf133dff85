#!/usr/bin/env python3
"""
Basic pdf2epub Usage Example

This example demonstrates the core workflow:
1. Convert a scanned PDF to EPUB
2. Customize the conversion
3. Use the text reconstruction engine on its own
"""

from pdf2epub import ParagraphReconstructor, convert, reconstruct_pages
from pdf2epub.config import ConversionConfig, OCRConfig


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Basic Conversion
    # ─────────────────────────────────────────────────────────────────────────

    result = convert("path/to/scan.pdf")

    print(f"Converted: {result.metadata.get('title') or result.source_path.name}")
    print(f"  Pages: {result.page_count}")
    print(f"  Paragraphs: {len(result.document.paragraphs)}")
    print(f"  Written to: {result.output_path}")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Custom Configuration
    # ─────────────────────────────────────────────────────────────────────────

    config = ConversionConfig(
        dpi=200,  # Faster, slightly less accurate OCR
        strip_page_numbers=True,  # Drop folios at the foot of each page
        ocr=OCRConfig(engine="tesseract", language="eng"),
        title="My Scanned Book",
    )

    result = convert("path/to/scan.pdf", "path/to/book.txt", config=config)
    print(result.text[:500])

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Text Engine Only
    # ─────────────────────────────────────────────────────────────────────────

    # Page texts from any OCR source, in page order
    pages = [
        "It was the best of times, it was the worst\nof times, it was the age of wis-\n\n1",
        "dom, it was the age of foolishness.\n\n2",
    ]
    doc = reconstruct_pages(pages)
    print(doc.text)  # One paragraph, hyphenation and page seam undone
    print(doc.page_numbers)  # [1, 2]

    # Or drive the reconstructor line by line
    reconstructor = ParagraphReconstructor()
    for line in ["The end.", "", "A new chapter begins."]:
        reconstructor.push_line(line)
    print(reconstructor.finish())


if __name__ == "__main__":
    main()
