"""
Timed playback state machine for RSVP reading.

The PlaybackClock owns the cursor into a TokenSequence and advances it one
token per tick while playing. Ticks are single-shot callbacks armed on an
injected Scheduler; every transition other than the tick's own advance
cancels the pending tick first and rearms it from the new state, so at most
one tick is ever pending and no two ticks can race on the cursor.

States:
    IDLE -> PLAYING <-> PAUSED
    PLAYING -> COMPLETED (end of sequence) -> PLAYING (toggle restarts)

Example usage:
    >>> from speedread.services.playback.scheduler import ManualScheduler
    >>> from speedread.services.tokenizer import segment
    >>> scheduler = ManualScheduler()
    >>> clock = PlaybackClock(scheduler)
    >>> clock.load(segment("one two three"))
    >>> clock.toggle_play()
    >>> scheduler.advance(200)
    1
    >>> clock.current_token.word
    'two'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from speedread.models.enums import ReaderStatus
from speedread.services.progress import from_percentage, to_percentage
from speedread.services.tokenizer.timing import PlaybackConfig, calculate_token_delay_ms
from speedread.services.tokenizer.types import Token, TokenSequence

from .scheduler import ScheduledTask, Scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaybackState:
    """Snapshot of the clock handed to listeners and persisted by sessions."""

    cursor: int
    status: ReaderStatus
    words_per_minute: float
    pause_on_punctuation: bool
    length: int

    @property
    def percentage(self) -> float:
        return to_percentage(self.cursor, self.length)


StateListener = Callable[[PlaybackState], None]


class PlaybackClock:
    """
    Advance a cursor through a token sequence at a configured reading speed.

    Empty sequences are a valid state: every operation degrades to a no-op
    and no tick is ever armed.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: Optional[PlaybackConfig] = None,
        sequence: Optional[TokenSequence] = None,
    ) -> None:
        """
        Initialize the clock in the Idle state with the cursor at 0.

        Args:
            scheduler: Source of cancellable delayed callbacks.
            config: Timing configuration. Defaults to application settings.
            sequence: Initial token sequence. Defaults to an empty one.
        """
        self._scheduler = scheduler
        self._config = config if config is not None else PlaybackConfig.from_settings()
        self._sequence = sequence if sequence is not None else TokenSequence.empty()
        self._cursor = 0
        self._status = ReaderStatus.IDLE
        self._pending: Optional[ScheduledTask] = None
        self._listeners: List[StateListener] = []

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def sequence(self) -> TokenSequence:
        return self._sequence

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def status(self) -> ReaderStatus:
        return self._status

    @property
    def config(self) -> PlaybackConfig:
        return self._config

    @property
    def is_tick_pending(self) -> bool:
        return self._pending is not None

    @property
    def current_token(self) -> Optional[Token]:
        if not self._sequence:
            return None
        return self._sequence[self._cursor]

    @property
    def percentage(self) -> float:
        return to_percentage(self._cursor, len(self._sequence))

    @property
    def next_delay_ms(self) -> float:
        """Delay the next tick would use if it were armed now."""
        return calculate_token_delay_ms(self.current_token, self._config)

    @property
    def state(self) -> PlaybackState:
        return PlaybackState(
            cursor=self._cursor,
            status=self._status,
            words_per_minute=self._config.words_per_minute,
            pause_on_punctuation=self._config.pause_on_punctuation,
            length=len(self._sequence),
        )

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with a state snapshot after each transition.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def load(self, sequence: TokenSequence) -> None:
        """Replace the sequence, rewind to the start and go Idle."""
        self._cancel_tick()
        self._sequence = sequence
        self._cursor = 0
        self._status = ReaderStatus.IDLE
        logger.debug("Loaded %d tokens (%s)", len(sequence), sequence.language)
        self._commit()

    def toggle_play(self) -> None:
        """Start, pause or resume playback. Restarts from 0 after completion."""
        if not self._sequence:
            return

        self._cancel_tick()
        if self._status is ReaderStatus.COMPLETED:
            self._cursor = 0
            self._status = ReaderStatus.PLAYING
        elif self._status is ReaderStatus.PLAYING:
            self._status = ReaderStatus.PAUSED
        else:
            self._status = ReaderStatus.PLAYING
        self._commit()

    def play(self) -> None:
        """Start or resume playback if not already playing."""
        if self._status is not ReaderStatus.PLAYING:
            self.toggle_play()

    def pause(self) -> None:
        """Pause playback if currently playing."""
        if self._status is ReaderStatus.PLAYING:
            self.toggle_play()

    def reset_to_idle(self) -> None:
        """Rewind to the first token and stop (the main reader's restart)."""
        self._reset(ReaderStatus.IDLE)

    def reset_to_paused(self) -> None:
        """Rewind to the first token, paused so the first word stays on screen."""
        self._reset(ReaderStatus.PAUSED)

    # The main reader's restart returns to Idle
    restart = reset_to_idle

    def seek(self, percentage: float) -> None:
        """Move the cursor to a percentage of the sequence without changing status."""
        self._cancel_tick()
        self._cursor = from_percentage(percentage, len(self._sequence))
        self._commit()

    def select_word(self, index: int) -> None:
        """Jump to a token (click in the full-text view) and pause there."""
        if not 0 <= index < len(self._sequence):
            logger.warning(
                "Ignoring selection of token %d outside sequence of %d", index, len(self._sequence)
            )
            return

        self._cancel_tick()
        self._cursor = index
        self._status = ReaderStatus.PAUSED
        self._commit()

    def set_words_per_minute(self, wpm: float) -> None:
        """Change reading speed; a pending tick is rearmed with the new delay."""
        config = self._config.with_words_per_minute(wpm)
        self._cancel_tick()
        self._config = config
        self._commit()

    def set_pause_on_punctuation(self, enabled: bool) -> None:
        """Toggle punctuation holds; a pending tick is rearmed with the new delay."""
        self._cancel_tick()
        self._config = self._config.with_pause_on_punctuation(enabled)
        self._commit()

    def set_config(self, config: PlaybackConfig) -> None:
        """Replace the whole timing configuration."""
        self._cancel_tick()
        self._config = config
        self._commit()

    def stop(self) -> None:
        """Cancel any pending tick without changing state (e.g. on shutdown)."""
        self._cancel_tick()

    # ------------------------------------------------------------------
    # Tick machinery
    # ------------------------------------------------------------------

    def _reset(self, status: ReaderStatus) -> None:
        self._cancel_tick()
        self._cursor = 0
        self._status = status
        self._commit()

    def _on_tick(self) -> None:
        self._pending = None
        if self._status is not ReaderStatus.PLAYING or not self._sequence:
            return

        next_index = self._cursor + 1
        if next_index >= len(self._sequence):
            # The cursor stays on the last token
            self._status = ReaderStatus.COMPLETED
            logger.debug("Playback completed at token %d", self._cursor)
        else:
            self._cursor = next_index
        self._commit()

    def _commit(self) -> None:
        """Rearm the tick for the current state and notify listeners."""
        self._arm_tick()
        state = self.state
        for listener in list(self._listeners):
            listener(state)

    def _arm_tick(self) -> None:
        if self._status is not ReaderStatus.PLAYING or not self._sequence:
            return
        delay = self.next_delay_ms
        self._pending = self._scheduler.call_later(delay, self._on_tick)
        logger.debug("Armed tick for token %d in %.1fms", self._cursor, delay)

    def _cancel_tick(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
