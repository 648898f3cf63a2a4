"""Tests for progress conversions."""

import pytest

from speedread.services.progress import (
    PageProgress,
    cursor_from_page,
    estimate_total_tokens,
    from_percentage,
    page_from_cursor,
    page_from_percentage,
    percentage_from_page,
    to_percentage,
)


# =============================================================================
# Token Progress Tests
# =============================================================================


class TestTokenProgress:
    """Tests for cursor <-> percentage conversion."""

    @pytest.mark.parametrize(
        "cursor,length,expected",
        [(0, 10, 0.0), (5, 10, 50.0), (9, 10, 90.0), (0, 0, 0.0), (1, 3, 100 / 3)],
    )
    def test_to_percentage(self, cursor, length, expected):
        assert to_percentage(cursor, length) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "percentage,length,expected",
        [
            (0, 10, 0),
            (50, 10, 5),
            (99.9, 10, 9),
            (100, 10, 9),
            (250, 10, 9),
            (-5, 10, 0),
            (40, 0, 0),
            (50, 1, 0),
        ],
    )
    def test_from_percentage(self, percentage, length, expected):
        assert from_percentage(percentage, length) == expected

    @pytest.mark.parametrize("length", [1, 3, 7, 10, 49, 100, 333, 1000, 12345])
    def test_round_trip(self, length):
        """Every cursor survives cursor -> percentage -> cursor."""
        for cursor in range(0, length, max(1, length // 97)):
            assert from_percentage(to_percentage(cursor, length), length) == cursor
        assert from_percentage(to_percentage(length - 1, length), length) == length - 1


# =============================================================================
# Page Progress Tests
# =============================================================================


class TestPageProgress:
    """Tests for page <-> percentage conversion."""

    @pytest.mark.parametrize(
        "page,total,expected",
        [(1, 5, 0.0), (3, 5, 50.0), (5, 5, 100.0), (1, 1, 0.0), (9, 5, 100.0), (0, 5, 0.0)],
    )
    def test_percentage_from_page(self, page, total, expected):
        assert percentage_from_page(page, total) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "percentage,total,expected",
        [(0, 5, 1), (50, 5, 3), (100, 5, 5), (150, 5, 5), (10, 0, 1)],
    )
    def test_page_from_percentage(self, percentage, total, expected):
        assert page_from_percentage(percentage, total) == expected

    @pytest.mark.parametrize("total", [1, 2, 3, 7, 100, 999])
    def test_page_round_trip(self, total):
        for page in range(1, total + 1):
            assert page_from_percentage(percentage_from_page(page, total), total) == page

    def test_page_progress_value(self):
        progress = PageProgress.from_percentage(50.0, 5)
        assert progress == PageProgress(page=3, total_pages=5)
        assert progress.percentage == pytest.approx(50.0)


class TestPageTokenMapping:
    """Tests for moving between paginated and RSVP positions."""

    def test_cursor_from_page(self):
        assert cursor_from_page(3, 5, 1000) == 500
        assert cursor_from_page(1, 5, 1000) == 0
        assert cursor_from_page(5, 5, 1000) == 999

    def test_page_from_cursor(self):
        assert page_from_cursor(0, 1000, 5) == 1
        assert page_from_cursor(999, 1000, 5) == 5

    @pytest.mark.parametrize(
        "tokens,parsed,total,expected",
        [(600, 3, 10, 2000), (100, 0, 10, 100), (0, 3, 10, 0), (500, 10, 10, 500), (10, 3, 4, 14)],
    )
    def test_estimate_total_tokens(self, tokens, parsed, total, expected):
        assert estimate_total_tokens(tokens, parsed, total) == expected
