"""
Unit tests for paragraph reconstruction (pdf2epub/text/paragraphs.py).

Covers:
- Hard-wrap and hyphenation rejoining
- Paragraph break vs. page-boundary artifact decisions
- Finalization and single-use behavior
"""

import time

import pytest

from pdf2epub.text.paragraphs import (
    PARAGRAPH_SEPARATOR,
    ParagraphReconstructor,
)


def reconstruct(*lines: str) -> str:
    """Push lines into a fresh reconstructor and finish it."""
    reconstructor = ParagraphReconstructor()
    reconstructor.push_lines(lines)
    return reconstructor.finish()


@pytest.fixture
def reconstructor():
    """Create a reconstructor instance for testing."""
    return ParagraphReconstructor()


# =============================================================================
# Line joining
# =============================================================================


class TestLineJoining:
    """Tests for joining consecutive non-blank lines."""

    def test_hyphen_rejoin(self, reconstructor):
        """A trailing hyphen is removed and the next line glued on without space."""
        reconstructor.push_line("exam-")
        reconstructor.push_line("ple")
        assert reconstructor.buffer == "example"

    def test_hard_wrap_rejoin(self, reconstructor):
        """Wrapped lines are joined with a single space."""
        reconstructor.push_line("The quick brown")
        reconstructor.push_line("fox jumps.")
        assert reconstructor.buffer == "The quick brown fox jumps."

    def test_lines_are_trimmed(self, reconstructor):
        """Surrounding whitespace never reaches the buffer."""
        reconstructor.push_line("   The quick brown  ")
        reconstructor.push_line("\tfox jumps. ")
        assert reconstructor.buffer == "The quick brown fox jumps."

    def test_hyphen_with_trailing_space_in_raw_line(self, reconstructor):
        """The hyphen check happens after trimming."""
        reconstructor.push_line("exam-   ")
        reconstructor.push_line("  ple")
        assert reconstructor.buffer == "example"

    def test_hyphen_on_first_line_kept_until_join(self, reconstructor):
        """A lone hyphenated line keeps its hyphen if nothing follows."""
        reconstructor.push_line("well-")
        assert reconstructor.finish() == "well-"

    def test_only_one_hyphen_removed(self, reconstructor):
        reconstructor.push_line("dash--")
        reconstructor.push_line("on")
        assert reconstructor.buffer == "dash-on"

    def test_stats_count_hyphens(self, reconstructor):
        reconstructor.push_lines(["exam-", "ple of hy-", "phenation"])
        assert reconstructor.buffer == "example of hyphenation"
        assert reconstructor.stats.hyphens_joined == 2


# =============================================================================
# Blank line decisions
# =============================================================================


class TestBlankLineDecisions:
    """Tests for classifying blank lines."""

    def test_page_boundary_artifact_suppressed(self):
        """Mid-sentence text followed by a lowercase line is one paragraph."""
        assert reconstruct("the cat sat on", "", "the mat.") == "the cat sat on the mat."

    def test_genuine_break_preserved(self):
        """Sentence end followed by an uppercase line is a paragraph break."""
        result = reconstruct("The end.", "", "A new chapter begins.")
        assert result == "The end." + PARAGRAPH_SEPARATOR + "A new chapter begins."

    def test_sentence_end_before_lowercase_still_breaks(self):
        """A finished sentence forces a break even if the next line is lowercase."""
        assert reconstruct("Is it over?", "", "yes, it is.") == "Is it over?\n\nyes, it is."

    def test_uppercase_after_mid_sentence_breaks(self):
        """An uppercase start forces a break even without terminal punctuation."""
        assert reconstruct("Chapter One", "", "It was a dark night.") == (
            "Chapter One\n\nIt was a dark night."
        )

    @pytest.mark.parametrize("first", ["1848 was a year.", "“Quoted.", "(aside)", "[note]"])
    def test_non_lowercase_start_breaks(self, first):
        """Digits and punctuation are not lowercase, so they break."""
        assert reconstruct("no terminal punctuation", "", first) == (
            f"no terminal punctuation\n\n{first}"
        )

    @pytest.mark.parametrize("terminator", [".", "?", "!"])
    def test_each_terminator_ends_sentence(self, terminator):
        result = reconstruct(f"Done{terminator}", "", "lowercase follows")
        assert result == f"Done{terminator}\n\nlowercase follows"

    def test_other_punctuation_does_not_end_sentence(self):
        """Commas, colons and semicolons are mid-sentence."""
        assert reconstruct("first clause;", "", "second clause.") == (
            "first clause; second clause."
        )

    def test_hyphen_across_page_boundary(self):
        """A word hyphenated across a page seam is rejoined."""
        assert reconstruct("a remark-", "", "able thing.") == "a remarkable thing."

    def test_multiple_blank_lines_act_as_one(self):
        """Runs of blank lines are classified once."""
        assert reconstruct("the cat sat on", "", "", "   ", "the mat.") == (
            "the cat sat on the mat."
        )
        assert reconstruct("The end.", "", "", "Next.") == "The end.\n\nNext."

    def test_pending_blank_cleared_after_decision(self, reconstructor):
        reconstructor.push_line("the cat sat on")
        reconstructor.push_line("")
        assert reconstructor.awaiting_blank_decision
        reconstructor.push_line("the mat.")
        assert not reconstructor.awaiting_blank_decision

    def test_no_blank_lines_gives_single_paragraph(self):
        assert reconstruct("One.", "Two.", "Three.") == "One. Two. Three."

    def test_stats(self, reconstructor):
        reconstructor.push_lines(["the cat sat on", "", "the mat.", "", "Then it left."])
        reconstructor.finish()
        stats = reconstructor.stats
        assert stats.lines_pushed == 5
        assert stats.blank_lines == 2
        assert stats.page_artifacts_suppressed == 1
        assert stats.paragraph_breaks == 1
        assert stats.paragraphs == 2


# =============================================================================
# Finalization
# =============================================================================


class TestFinish:
    """Tests for finish()."""

    def test_empty_input(self, reconstructor):
        """No lines at all gives an empty string."""
        assert reconstructor.finish() == ""

    def test_all_blank_input(self):
        assert reconstruct("", "  ", "\t", "") == ""

    def test_final_buffer_flushed(self):
        """The last paragraph is emitted without an extra blank line."""
        assert reconstruct("Last words") == "Last words"

    def test_trailing_blank_ignored(self):
        """A blank line at the very end adds no separator."""
        assert reconstruct("Last words.", "", "") == "Last words."

    def test_leading_blank_lines_no_leading_separator(self):
        """Blank lines before any text don't produce an empty paragraph."""
        assert reconstruct("", "", "Title", "", "Body text.") == "Title\n\nBody text."

    def test_no_leading_or_trailing_separator(self):
        result = reconstruct("", "A.", "", "B.", "", "C.", "")
        assert result == "A.\n\nB.\n\nC."
        assert not result.startswith("\n")
        assert not result.endswith("\n")

    def test_push_after_finish_raises(self, reconstructor):
        """The reconstructor is single-use."""
        reconstructor.push_line("text")
        reconstructor.finish()
        with pytest.raises(RuntimeError):
            reconstructor.push_line("more")

    def test_finish_twice_raises(self, reconstructor):
        reconstructor.finish()
        with pytest.raises(RuntimeError):
            reconstructor.finish()


# =============================================================================
# Pages
# =============================================================================


class TestPushPage:
    """Tests for push_page()."""

    def test_page_boundary_added(self, reconstructor):
        """push_page ends each page with a blank line."""
        reconstructor.push_page("the cat sat on")
        assert reconstructor.awaiting_blank_decision
        reconstructor.push_page("the mat.")
        assert reconstructor.finish() == "the cat sat on the mat."

    def test_pages_without_blank_separator(self, reconstructor):
        """Pages with no blank line of their own still get a boundary."""
        reconstructor.push_page("First page ends.")
        reconstructor.push_page("Second page starts.")
        assert reconstructor.finish() == "First page ends.\n\nSecond page starts."

    def test_malformed_input_never_fails(self, reconstructor):
        """OCR garbage produces some output instead of an error."""
        reconstructor.push_page("-\n-\n\n\x0c\n%$#@\n \n-")
        result = reconstructor.finish()
        assert isinstance(result, str)


# =============================================================================
# Long paragraphs
# =============================================================================


def _merged_page_lines(n: int) -> list[str]:
    """n lines of running text with a page seam every 40 lines, never a break."""
    lines = []
    for i in range(n):
        if i and i % 40 == 0:
            lines.append("")
        lines.append(f"word{i:07d} continues the sentence without ending it at all")
    return lines


def _time_reconstruction(lines: list[str]) -> float:
    start = time.perf_counter()
    reconstructor = ParagraphReconstructor()
    reconstructor.push_lines(lines)
    reconstructor.finish()
    return time.perf_counter() - start


class TestLongParagraphs:
    """A paragraph merged across many pages stays cheap to build."""

    def test_many_page_seams_make_one_paragraph(self):
        lines = _merged_page_lines(20000)
        reconstructor = ParagraphReconstructor()
        reconstructor.push_lines(lines)
        result = reconstructor.finish()

        assert PARAGRAPH_SEPARATOR not in result
        assert result == " ".join(line for line in lines if line)
        assert reconstructor.stats.page_artifacts_suppressed == 499
        assert reconstructor.stats.paragraphs == 1

    def test_cost_grows_linearly(self):
        """Four times the input takes roughly four times as long, not sixteen."""
        small = _merged_page_lines(20000)
        large = _merged_page_lines(80000)

        small_time = min(_time_reconstruction(small) for _ in range(3))
        large_time = min(_time_reconstruction(large) for _ in range(3))

        assert large_time < 16 * max(small_time, 1e-3)
