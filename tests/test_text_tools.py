"""Tests for the notes summarizer and the essay rewriter."""

import pytest

from studyhub.errors import InvalidInputError
from studyhub.tools.rewriter import ENHANCEMENT_NOTE, rewrite
from studyhub.tools.summarizer import MAX_KEY_POINTS, summarize
from studyhub.tools.text import split_sentences


class TestSplitSentences:

    def test_splits_on_terminators(self):
        text = "First long sentence here. Second long sentence!! Third long one?"
        assert split_sentences(text) == [
            "First long sentence here",
            "Second long sentence",
            "Third long one",
        ]

    def test_drops_short_fragments(self):
        # "Exactly 10" is ten characters, the cut-off is more than ten
        assert split_sentences("Tiny. Exactly 10. Eleven char.") == ["Eleven char"]


class TestSummarize:

    def test_key_points_capped(self):
        notes = " ".join(f"Key point number {i} is here." for i in range(9))
        result = summarize(notes)
        assert len(result.key_points) == MAX_KEY_POINTS
        assert result.key_points[0] == "Key point number 0 is here"
        assert result.summary.startswith(f"This content covers {MAX_KEY_POINTS} key concepts.")

    def test_as_text(self):
        result = summarize("Cells divide by mitosis. Meiosis produces gametes.")
        assert result.as_text() == (
            "Summary:\n" + result.summary + "\n\nKey Points:\n"
            "• Cells divide by mitosis\n• Meiosis produces gametes"
        )

    def test_no_long_sentences(self):
        result = summarize("Tiny. Notes.")
        assert result.key_points == []
        assert "covers 0 key concepts" in result.summary

    def test_empty(self):
        with pytest.raises(InvalidInputError):
            summarize("  ")


class TestRewrite:

    def test_substitutions(self):
        out = rewrite("I get that this is a very good thing to make, not bad.")
        assert out.startswith(
            "I obtain which this is a extremely excellent aspect to create, not inadequate."
        )

    def test_whole_words_only(self):
        out = rewrite("Goodness, everything together.")
        assert out.startswith("Goodness, everything together.")

    def test_case_sensitive(self):
        assert rewrite("Very Good").startswith("Very Good")

    def test_note_appended(self):
        assert rewrite("hello").endswith("\n\n" + ENHANCEMENT_NOTE)

    def test_empty(self):
        with pytest.raises(InvalidInputError, match="rewrite"):
            rewrite("")
