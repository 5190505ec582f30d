"""Tests for text.py - Label wrapping."""

from taxotree.render.text import estimate_width, wrap_label


class TestWrapLabel:
    """Tests for wrap_label()."""

    def test_short_label_is_one_line(self):
        assert wrap_label("Film", 120) == ["Film"]

    def test_greedy_wrap(self):
        assert wrap_label("Science Fiction and Fantasy Films", 120) == [
            "Science Fiction",
            "and Fantasy",
            "Films",
        ]

    def test_long_word_gets_its_own_line(self):
        assert wrap_label("Supercalifragilistic short", 40) == ["Supercalifragilistic", "short"]

    def test_blank(self):
        assert wrap_label("   ", 120) == []

    def test_custom_measure(self):
        lines = wrap_label("a b c d", 3, measure=len)
        assert lines == ["a b", "c d"]

    def test_estimate_width(self):
        assert estimate_width("abcd") == 32
