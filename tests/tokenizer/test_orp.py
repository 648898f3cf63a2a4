"""Tests for pivot (Optimal Recognition Point) calculation."""

import pytest

from speedread.services.tokenizer.orp import PivotCalculator, pivot_index, split_for_display


# =============================================================================
# Pivot Index Tests
# =============================================================================


class TestPivotIndex:
    """Tests for the pivot formula ceil(L/2) - 1."""

    @pytest.mark.parametrize(
        "word,expected",
        [
            # Empty and single character
            ("", 0),
            ("a", 0),
            # Short words
            ("to", 0),
            ("the", 1),
            ("word", 1),
            ("hello", 2),
            # Longer words
            ("system", 2),
            ("reading", 3),
            ("computer", 3),
            ("algorithm", 4),
            ("processing", 4),
            ("information", 5),
            ("international", 6),
        ],
    )
    def test_pivot_positions(self, word, expected):
        assert pivot_index(word) == expected

    @pytest.mark.parametrize("length", range(1, 40))
    def test_pivot_within_word(self, length):
        """The pivot is always a valid index into the word."""
        index = pivot_index("x" * length)
        assert 0 <= index < length

    def test_counts_punctuation(self):
        """Length is the raw character count, punctuation included."""
        assert pivot_index("end.") == 1
        assert pivot_index("end") == 1
        assert pivot_index("ends.") == 2


# =============================================================================
# Display Split Tests
# =============================================================================


class TestSplitForDisplay:
    """Tests for the left/pivot/right display split."""

    def test_split(self):
        assert split_for_display("reading") == ("rea", "d", "ing")

    def test_single_char(self):
        assert split_for_display("I") == ("", "I", "")

    def test_empty(self):
        assert split_for_display("") == ("", "", "")

    @pytest.mark.parametrize("word", ["a", "ab", "abc", "speed", "読書"])
    def test_parts_rebuild_word(self, word):
        assert "".join(split_for_display(word)) == word


class TestPivotCalculator:
    """Tests for the calculator wrapper."""

    def test_delegates(self):
        calculator = PivotCalculator()
        assert calculator.calculate("hello") == 2
        assert calculator.split_for_display("hello") == ("he", "l", "lo")
