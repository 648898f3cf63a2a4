"""
Reader facade tying segmentation, playback, display and sessions together.

A Reader is what a UI binds to: it loads text, exposes the word on screen
split around its pivot, drives the playback clock, keeps the full-text
window in sync with the cursor, and saves or resumes sessions.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from speedread.config import get_settings
from speedread.models.enums import ReaderStatus
from speedread.schemas.session import ReaderPreferences
from speedread.services.playback.clock import PlaybackClock
from speedread.services.session import SessionStore
from speedread.services.tokenizer.orp import PivotCalculator
from speedread.services.tokenizer.segmenter import Segmenter
from speedread.services.tokenizer.types import TokenSequence
from speedread.services.window import (
    FullTextView,
    ScrollRequest,
    TextWindow,
    Viewport,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayWord:
    """The word on screen, split around its pivot letter."""

    word: str
    pivot_index: int
    left: str
    pivot: str
    right: str


class Reader:
    """Single-document RSVP reader."""

    def __init__(
        self,
        clock: PlaybackClock,
        segmenter: Optional[Segmenter] = None,
        sessions: Optional[SessionStore] = None,
        window_radius: Optional[int] = None,
    ) -> None:
        self.clock = clock
        self.segmenter = segmenter if segmenter is not None else Segmenter()
        self.sessions = sessions
        if window_radius is None:
            window_radius = get_settings().window_radius
        self.view = FullTextView(window_radius)
        self.pivot = PivotCalculator()
        self.language = clock.sequence.language

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def load(self, text: str, language: str = "en") -> TokenSequence:
        """Segment text and load it into the clock, Idle at the first token."""
        sequence = self.segmenter.segment(text, language)
        self._load_sequence(sequence)
        logger.info("Loaded %d tokens for reading (%s)", len(sequence), language)
        return sequence

    def load_html(self, html: str, language: str = "en") -> TokenSequence:
        sequence = self.segmenter.segment_html(html, language)
        self._load_sequence(sequence)
        return sequence

    def change_language(self, language: str) -> None:
        """Switching language discards the current content."""
        self._load_sequence(TokenSequence.empty(language))

    def _load_sequence(self, sequence: TokenSequence) -> None:
        self.language = sequence.language
        self.clock.load(sequence)

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    @property
    def sequence(self) -> TokenSequence:
        return self.clock.sequence

    @property
    def status(self) -> ReaderStatus:
        return self.clock.status

    @property
    def cursor(self) -> int:
        return self.clock.cursor

    @property
    def percentage(self) -> float:
        return self.clock.percentage

    def toggle_play(self) -> None:
        self.clock.toggle_play()

    def restart(self) -> None:
        self.clock.reset_to_idle()

    def restart_paused(self) -> None:
        self.clock.reset_to_paused()

    def seek(self, percentage: float) -> None:
        self.clock.seek(percentage)

    def select_word(self, index: int) -> None:
        self.clock.select_word(index)

    def set_words_per_minute(self, wpm: float) -> None:
        self.clock.set_words_per_minute(wpm)

    def set_pause_on_punctuation(self, enabled: bool) -> None:
        self.clock.set_pause_on_punctuation(enabled)

    def apply_preferences(self, preferences: ReaderPreferences) -> None:
        config = self.clock.config.with_words_per_minute(preferences.words_per_minute)
        self.clock.set_config(config.with_pause_on_punctuation(preferences.pause_on_punctuation))

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def current_display(self) -> Optional[DisplayWord]:
        """
        Return the word to flash, or None while a pause marker (or nothing) is current.
        """
        token = self.clock.current_token
        if token is None or token.is_pause_marker:
            return None
        left, pivot, right = self.pivot.split_for_display(token.word)
        return DisplayWord(
            word=token.word,
            pivot_index=self.pivot.calculate(token.word),
            left=left,
            pivot=pivot,
            right=right,
        )

    def text_window(self) -> TextWindow:
        return self.view.update(self.clock.sequence, self.clock.cursor)

    def scroll_request(self, viewport: Optional[Viewport]) -> Optional[ScrollRequest]:
        return self.view.scroll_request(self.clock.cursor, viewport)

    def select_visible_word(self, local_index: int, window: Optional[TextWindow] = None) -> None:
        """
        Handle a click on a word of the full-text window.

        ``local_index`` is resolved against the window the UI rendered, which
        may lag the cursor while playing. Without an explicit ``window`` the
        last materialized one is used.
        """
        if window is None:
            index = self.view.resolve_click(local_index)
        else:
            index = window.to_absolute(local_index)
        self.clock.select_word(index)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def save_session(self, key: str) -> bool:
        """Persist the current position. Returns False when nothing is loaded."""
        if self.sessions is None:
            raise RuntimeError("Reader has no session store")
        if not self.clock.sequence:
            return False
        self.sessions.save(key, self.clock.sequence, self.clock.cursor, self.language)
        return True

    def resume_session(self, key: str) -> bool:
        """
        Load a saved session and pause on its cursor.

        Returns:
            False when no usable session exists under ``key``.
        """
        if self.sessions is None:
            raise RuntimeError("Reader has no session store")
        restored = self.sessions.load(key)
        if restored is None:
            return False
        self._load_sequence(restored.sequence)
        self.clock.select_word(restored.cursor)
        logger.info("Resumed session %s at %.1f%%", key, restored.percentage)
        return True
