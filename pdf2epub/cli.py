"""
Command-line interface for pdf2epub.

Usage:
    pdf2epub <input.pdf> [-o output.epub] [options]

Examples:
    # Convert a scan to EPUB next to the input
    pdf2epub scan.pdf

    # Plain text, keep page numbers, only the first ten pages
    pdf2epub scan.pdf -o scan.txt --keep-page-numbers --first-page 0 --last-page 9
"""

from __future__ import annotations

import argparse
import logging
import sys

from pdf2epub.config import VALID_OCR_ENGINES, ConversionConfig, OCRConfig
from pdf2epub.convert import convert
from pdf2epub.exceptions import Pdf2EPubError

logger = logging.getLogger(__name__)


def setup_argparser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="pdf2epub",
        description="Convert scanned PDFs into paragraph-structured EPUBs via OCR",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Convert a scan to EPUB:
    pdf2epub scan.pdf

  Write plain text instead:
    pdf2epub scan.pdf -o scan.txt
        """,
    )

    parser.add_argument("input", help="Input PDF file")

    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Output .epub or .txt file (default: input name with .epub)",
    )

    parser.add_argument(
        "--dpi",
        type=int,
        default=300,
        help="Rasterization resolution (default: 300)",
    )

    parser.add_argument(
        "--color",
        action="store_true",
        help="Render pages in color instead of grayscale",
    )

    parser.add_argument(
        "--keep-page-numbers",
        action="store_true",
        help="Do not strip trailing page numbers from each page",
    )

    parser.add_argument(
        "--ocr-engine",
        choices=VALID_OCR_ENGINES,
        default="auto",
        help="OCR engine (default: auto)",
    )

    parser.add_argument(
        "--lang",
        default="eng",
        help="Tesseract language code (default: eng)",
    )

    parser.add_argument("--title", default=None, help="Book title (default: PDF metadata)")
    parser.add_argument("--author", default=None, help="Book author (default: PDF metadata)")
    parser.add_argument(
        "--language",
        default="en",
        help="E-book language tag (default: en)",
    )

    parser.add_argument("--first-page", type=int, default=None, help="First page (0-based)")
    parser.add_argument("--last-page", type=int, default=None, help="Last page (0-based)")

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def build_config(args: argparse.Namespace) -> ConversionConfig:
    """Build a ConversionConfig from parsed arguments."""
    page_range = None
    if args.first_page is not None or args.last_page is not None:
        first = args.first_page if args.first_page is not None else 0
        last = args.last_page if args.last_page is not None else sys.maxsize
        page_range = (first, last)

    return ConversionConfig(
        dpi=args.dpi,
        grayscale=not args.color,
        strip_page_numbers=not args.keep_page_numbers,
        ocr=OCRConfig(engine=args.ocr_engine, language=args.lang),
        title=args.title,
        author=args.author,
        language=args.language,
        page_range=page_range,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = setup_argparser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        result = convert(args.input, args.output, config)
    except (Pdf2EPubError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    logger.info(
        "Done: %d pages, %d paragraphs -> %s (%.1fs)",
        result.page_count,
        result.document.stats.paragraphs,
        result.output_path,
        result.processing_time_s,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
