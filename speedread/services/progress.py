"""
Progress math shared by RSVP playback and paginated reading.

Token-based progress maps a cursor to a percentage of the sequence and
back. Page-based progress (paginated full-document reading, PDFs) maps a
page number to a percentage and back to the same whole page.
"""

import math
from dataclasses import dataclass

# Absorbs float error in pct/100*length so exact cursors survive a round-trip
_FLOOR_EPSILON = 1e-9


def to_percentage(cursor: int, length: int) -> float:
    """
    Convert a cursor into a percentage of the sequence.

    Examples:
        >>> to_percentage(50, 200)
        25.0
        >>> to_percentage(0, 0)
        0.0
    """
    if length <= 0:
        return 0.0
    return cursor / length * 100


def from_percentage(percentage: float, length: int) -> int:
    """
    Convert a percentage back into a cursor within ``[0, length - 1]``.

    Examples:
        >>> from_percentage(25.0, 200)
        50
        >>> from_percentage(100, 200)
        199
        >>> from_percentage(40, 0)
        0
    """
    if length <= 0:
        return 0
    index = math.floor(percentage / 100 * length + _FLOOR_EPSILON)
    return max(0, min(length - 1, index))


@dataclass(frozen=True)
class PageProgress:
    """Position in a paginated document (pages are 1-based)."""

    page: int
    total_pages: int

    @property
    def percentage(self) -> float:
        return percentage_from_page(self.page, self.total_pages)

    @classmethod
    def from_percentage(cls, percentage: float, total_pages: int) -> "PageProgress":
        return cls(page=page_from_percentage(percentage, total_pages), total_pages=total_pages)


def percentage_from_page(page: int, total_pages: int) -> float:
    """
    Express a page position as a percentage; the first page is 0%, the last 100%.

    Examples:
        >>> percentage_from_page(1, 5)
        0.0
        >>> percentage_from_page(3, 5)
        50.0
        >>> percentage_from_page(1, 1)
        0.0
    """
    if total_pages <= 0:
        return 0.0
    page = max(1, min(total_pages, page))
    return (page - 1) / (total_pages - 1 or 1) * 100


def page_from_percentage(percentage: float, total_pages: int) -> int:
    """
    Convert a percentage into a whole page number in ``[1, total_pages]``.

    Inverse of ``percentage_from_page``: every page survives the round-trip.

    Examples:
        >>> page_from_percentage(50.0, 5)
        3
        >>> page_from_percentage(0, 5)
        1
    """
    if total_pages <= 0:
        return 1
    fraction = min(1.0, max(0.0, percentage / 100))
    page = math.ceil(fraction * total_pages - _FLOOR_EPSILON)
    return max(1, min(total_pages, page))


def cursor_from_page(page: int, total_pages: int, total_tokens: int) -> int:
    """
    Map a page of the paginated view onto a token cursor for RSVP resume.

    Example:
        >>> cursor_from_page(3, 5, 1000)
        500
    """
    return from_percentage(percentage_from_page(page, total_pages), total_tokens)


def page_from_cursor(cursor: int, total_tokens: int, total_pages: int) -> int:
    """Map a token cursor onto a page of the paginated view."""
    return page_from_percentage(to_percentage(cursor, total_tokens), total_pages)


def estimate_total_tokens(tokens_so_far: int, pages_parsed: int, total_pages: int) -> int:
    """
    Estimate a document's token count before it is fully parsed.

    Extrapolates the tokens-per-page rate of the pages parsed so far.

    Example:
        >>> estimate_total_tokens(600, 3, 10)
        2000
    """
    if pages_parsed <= 0 or tokens_so_far <= 0:
        return max(0, tokens_so_far)
    if pages_parsed >= total_pages:
        return tokens_so_far
    return math.ceil(tokens_so_far / pages_parsed * total_pages)
