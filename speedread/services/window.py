"""
Bounded slice of a token sequence for full-text display.

Rendering a whole book as clickable words is expensive, so the full-text
view only materializes the tokens within ``radius`` of the cursor. The
window keeps its absolute start offset so slice-local positions can be
mapped back to sequence indexes for click-to-seek and active-token checks.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Literal, Optional, Tuple

from speedread.services.tokenizer.types import Token, TokenSequence

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_RADIUS = 1000


@dataclass(frozen=True)
class DisplayItem:
    """One renderable word of the window.

    Attributes:
        index: Absolute index of the token in the sequence.
        token: The token itself (never a pause marker).
        paragraph_break: Whether a paragraph break precedes the word.
        is_active: Whether the word is under the playback cursor.
    """

    index: int
    token: Token
    paragraph_break: bool
    is_active: bool


@dataclass(frozen=True)
class TextWindow:
    """A contiguous slice ``[start, end)`` of a token sequence."""

    tokens: Tuple[Token, ...]
    start: int
    end: int
    total: int

    @property
    def truncated_head(self) -> bool:
        """Whether tokens before the window were left out."""
        return self.start > 0

    @property
    def truncated_tail(self) -> bool:
        """Whether tokens after the window were left out."""
        return self.end < self.total

    def __len__(self) -> int:
        return len(self.tokens)

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end

    def to_absolute(self, local_index: int) -> int:
        """Map a slice-local index onto the sequence."""
        if not 0 <= local_index < len(self.tokens):
            raise IndexError(f"Local index {local_index} outside window of {len(self.tokens)}")
        return self.start + local_index

    def to_local(self, index: int) -> Optional[int]:
        """Map a sequence index into the slice, or None if it lies outside."""
        if not self.contains(index):
            return None
        return index - self.start

    def display_items(self, cursor: int) -> Iterator[DisplayItem]:
        """Yield renderable words; pause markers are skipped."""
        for local, token in enumerate(self.tokens):
            if token.is_pause_marker:
                continue
            index = self.start + local
            yield DisplayItem(
                index=index,
                token=token,
                paragraph_break=token.is_paragraph_start,
                is_active=index == cursor,
            )


def visible_window(
    sequence: TokenSequence,
    cursor: int,
    radius: int = DEFAULT_WINDOW_RADIUS,
) -> TextWindow:
    """
    Slice the tokens within ``radius`` of the cursor.

    Args:
        sequence: The full token sequence.
        cursor: Current playback position.
        radius: Number of tokens to keep on each side of the cursor.

    Returns:
        TextWindow covering ``[max(0, cursor - radius), min(len, cursor + radius))``.

    Example:
        >>> from speedread.services.tokenizer import segment_words
        >>> window = visible_window(segment_words("a b c d e f"), cursor=3, radius=2)
        >>> (window.start, window.end, window.truncated_head, window.truncated_tail)
        (1, 5, True, True)
    """
    if radius < 0:
        raise ValueError(f"Window radius must not be negative, got {radius}")

    total = len(sequence)
    start = max(0, cursor - radius)
    end = min(total, cursor + radius)
    if start > end:
        start = end
    return TextWindow(tokens=sequence.slice(start, end), start=start, end=end, total=total)


@dataclass(frozen=True)
class Viewport:
    """Absolute indexes of the first and last tokens currently visible."""

    first_index: int
    last_index: int

    def contains(self, index: int) -> bool:
        return self.first_index <= index <= self.last_index


@dataclass(frozen=True)
class ScrollRequest:
    """Ask the renderer to scroll a token into view."""

    index: int
    block: Literal["center"] = "center"


class FullTextView:
    """
    Track the materialized window and scrolling for the full-text display.

    The window is recomputed whenever the cursor or sequence changes;
    slicing is cheap compared with rendering the whole document.
    """

    def __init__(self, radius: int = DEFAULT_WINDOW_RADIUS) -> None:
        if radius < 0:
            raise ValueError(f"Window radius must not be negative, got {radius}")
        self.radius = radius
        self._window: Optional[TextWindow] = None
        self._sequence: Optional[TokenSequence] = None
        self._cursor: Optional[int] = None

    @property
    def window(self) -> Optional[TextWindow]:
        return self._window

    def update(self, sequence: TokenSequence, cursor: int) -> TextWindow:
        """Return the window for the cursor, recomputing it if anything moved."""
        if self._window is None or sequence is not self._sequence or cursor != self._cursor:
            self._window = visible_window(sequence, cursor, self.radius)
            self._sequence = sequence
            self._cursor = cursor
        return self._window

    def scroll_request(self, cursor: int, viewport: Optional[Viewport]) -> Optional[ScrollRequest]:
        """
        Decide whether the active token must be scrolled into view.

        The active token is centered as soon as it falls above or below the
        visible viewport; while it stays visible nothing moves.
        """
        if viewport is None or viewport.contains(cursor):
            return None
        if self._window is not None and not self._window.contains(cursor):
            logger.debug("Cursor %d is outside the materialized window", cursor)
        return ScrollRequest(index=cursor)

    def resolve_click(self, local_index: int) -> int:
        """Map a click on a slice-local word back to its sequence index."""
        if self._window is None:
            raise LookupError("No window has been materialized yet")
        return self._window.to_absolute(local_index)
