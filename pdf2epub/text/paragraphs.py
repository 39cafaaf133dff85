"""
Paragraph reconstruction for hard-wrapped OCR text.

OCR returns text exactly as it was laid out on the page: one output line
per printed line, words split with a hyphen at the right margin, and a
blank line wherever a page ends. This module reflows that text into
paragraphs.

Blank lines are the ambiguous part. A blank line may be a real paragraph
break or just the seam between two pages. The decision is deferred until
the next non-blank line arrives and then made from two signals:

- did the buffered paragraph end a sentence (``.``, ``?`` or ``!``)?
- does the incoming line start with a lowercase letter?

Only when the paragraph is mid-sentence AND the next line starts in
lowercase is the blank treated as a page-boundary artifact. Everything
else is a paragraph break.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_TERMINATORS = frozenset(".?!")
HYPHEN = "-"


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass
class ReconstructionStats:
    """Statistics for paragraph reconstruction."""

    lines_pushed: int = 0
    blank_lines: int = 0
    paragraph_breaks: int = 0
    page_artifacts_suppressed: int = 0
    hyphens_joined: int = 0
    paragraphs: int = 0


# =============================================================================
# PARAGRAPH RECONSTRUCTOR
# =============================================================================


class ParagraphReconstructor:
    """
    Folds raw OCR lines into paragraphs, one line at a time.

    Feed every line of every page in reading order, including the blank
    lines between pages, then call ``finish()`` once to get the cleaned
    text. Paragraphs in the result are separated by a single blank line.

    The reconstructor is single-use: after ``finish()`` it refuses
    further input.

    Attributes:
        stats: Counters describing the decisions taken so far.

    Example:
        >>> reconstructor = ParagraphReconstructor()
        >>> for line in ["the cat sat on", "", "the mat."]:
        ...     reconstructor.push_line(line)
        >>> reconstructor.finish()
        'the cat sat on the mat.'
    """

    def __init__(self) -> None:
        self.stats = ReconstructionStats()
        # Open paragraph as stripped line fragments; joined only when flushed
        self._parts: list[str] = []
        self._last_char = ""
        self._output: list[str] = []
        self._pending_blank = False
        self._finished = False

    @property
    def awaiting_blank_decision(self) -> bool:
        """Whether a blank line has been seen but not yet classified."""
        return self._pending_blank

    @property
    def buffer(self) -> str:
        """Text of the paragraph currently being assembled."""
        return "".join(self._parts)

    def push_line(self, raw_line: str) -> None:
        """
        Process one line of OCR text.

        Args:
            raw_line: The line as produced by OCR, surrounding whitespace included.
        """
        self._check_open()
        self.stats.lines_pushed += 1

        line = raw_line.strip()
        if not line:
            self.stats.blank_lines += 1
            self._pending_blank = True
            return

        if self._pending_blank:
            self._resolve_blank(line)
            self._pending_blank = False

        self._append(line)

    def push_lines(self, lines: Iterable[str]) -> None:
        """Push several lines in order."""
        for line in lines:
            self.push_line(line)

    def push_page(self, page_text: str) -> None:
        """
        Push every line of one page followed by a page-boundary blank line.

        Args:
            page_text: OCR text of the page, lines separated by ``\\n``.
        """
        self.push_lines(page_text.split("\n"))
        self.push_line("")

    def finish(self) -> str:
        """
        Flush the open paragraph and return the cleaned document text.

        Must be called exactly once, after the last line was pushed.

        Returns:
            Paragraphs joined by a blank line, without leading or
            trailing separators. Empty input gives an empty string.
        """
        self._check_open()
        self._finished = True

        if self._parts:
            self._output.append(self._take_paragraph())
            self.stats.paragraphs += 1

        logger.debug(
            "Reconstructed %d paragraphs from %d lines "
            "(%d breaks, %d page artifacts suppressed, %d hyphens joined)",
            self.stats.paragraphs,
            self.stats.lines_pushed,
            self.stats.paragraph_breaks,
            self.stats.page_artifacts_suppressed,
            self.stats.hyphens_joined,
        )

        return "".join(self._output)

    def _resolve_blank(self, next_line: str) -> None:
        """Decide whether the pending blank line was a paragraph break."""
        prev_ended_sentence = self._last_char in SENTENCE_TERMINATORS
        this_starts_lower = next_line[0].islower()

        if prev_ended_sentence or not this_starts_lower:
            self.stats.paragraph_breaks += 1
            self._flush()
        else:
            self.stats.page_artifacts_suppressed += 1

    def _flush(self) -> None:
        """Move the buffered paragraph to the output."""
        # Blank lines before any text must not produce a leading separator
        if not self._parts:
            return
        self._output.append(self._take_paragraph() + PARAGRAPH_SEPARATOR)
        self.stats.paragraphs += 1

    def _take_paragraph(self) -> str:
        """Join and clear the open paragraph."""
        paragraph = "".join(self._parts)
        self._parts = []
        self._last_char = ""
        return paragraph

    def _append(self, line: str) -> None:
        """Join a non-blank, stripped line onto the open paragraph."""
        if not self._parts:
            self._parts.append(line)
        elif self._last_char == HYPHEN:
            # Fragments are single lines, so trimming the last one is cheap
            self._parts[-1] = self._parts[-1][:-1]
            self._parts.append(line)
            self.stats.hyphens_joined += 1
        else:
            self._parts.append(" ")
            self._parts.append(line)
        self._last_char = line[-1]

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError("ParagraphReconstructor.finish() was already called")
