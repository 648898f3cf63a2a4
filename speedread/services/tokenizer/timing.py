"""
Timing calculations for RSVP playback.

This module converts a words-per-minute setting into per-token display
durations. The playback clock reads its configuration from an explicit
PlaybackConfig rather than from global settings, so every tick is computed
from the configuration in force when it is armed.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .constants import (
    DEFAULT_WPM,
    MS_PER_MINUTE,
    PAUSE_MULTIPLIER,
    WPM_LABEL_MAX,
    WPM_LABELS,
)
from .types import Token, TokenSequence


@dataclass(frozen=True)
class PlaybackConfig:
    """Settings that drive tick timing.

    Attributes:
        words_per_minute: Target reading speed; must be positive.
        pause_on_punctuation: Whether tokens flagged ``has_pause`` are held longer.
        pause_multiplier: Delay factor for flagged tokens.
    """

    words_per_minute: float = DEFAULT_WPM
    pause_on_punctuation: bool = True
    pause_multiplier: float = PAUSE_MULTIPLIER

    def __post_init__(self) -> None:
        if self.words_per_minute <= 0:
            raise ValueError(f"WPM must be positive, got {self.words_per_minute}")
        if self.pause_multiplier <= 0:
            raise ValueError(f"Pause multiplier must be positive, got {self.pause_multiplier}")

    @classmethod
    def from_settings(cls, settings=None) -> "PlaybackConfig":
        """Build a config from application settings."""
        if settings is None:
            from speedread.config import get_settings

            settings = get_settings()
        return cls(
            words_per_minute=settings.default_wpm,
            pause_on_punctuation=settings.pause_on_punctuation,
            pause_multiplier=settings.pause_multiplier,
        )

    def with_words_per_minute(self, wpm: float) -> "PlaybackConfig":
        return replace(self, words_per_minute=wpm)

    def with_pause_on_punctuation(self, enabled: bool) -> "PlaybackConfig":
        return replace(self, pause_on_punctuation=enabled)


def calculate_base_duration_ms(wpm: float) -> float:
    """
    Calculate the base word display duration from WPM (words per minute).

    Args:
        wpm: Target reading speed in words per minute.

    Returns:
        Base duration in milliseconds for one word.

    Raises:
        ValueError: If wpm is not positive.

    Examples:
        >>> calculate_base_duration_ms(300)
        200.0
        >>> calculate_base_duration_ms(600)
        100.0
    """
    if wpm <= 0:
        raise ValueError(f"WPM must be positive, got {wpm}")

    # 60,000 ms per minute / words per minute = ms per word
    return MS_PER_MINUTE / wpm


def calculate_token_delay_ms(token: Optional[Token], config: PlaybackConfig) -> float:
    """
    Calculate how long a token stays on screen before the cursor advances.

    Args:
        token: The token under the cursor (None is treated as a plain word).
        config: Playback configuration in force when the tick is armed.

    Returns:
        Display duration in milliseconds.

    Examples:
        >>> config = PlaybackConfig(words_per_minute=300)
        >>> calculate_token_delay_ms(Token("w", "word", "word"), config)
        200.0
        >>> round(calculate_token_delay_ms(Token("w", "end.", "end.", has_pause=True), config), 6)
        440.0
    """
    delay = calculate_base_duration_ms(config.words_per_minute)
    if token is not None and token.has_pause and config.pause_on_punctuation:
        delay *= config.pause_multiplier
    return delay


def estimate_reading_time_ms(sequence: TokenSequence, config: PlaybackConfig) -> float:
    """
    Estimate the total playback time of a sequence.

    Unlike a word-count estimate this sums the actual per-token delays,
    so pause tokens and punctuation holds are included.
    """
    return sum(calculate_token_delay_ms(token, config) for token in sequence)


def format_duration(total_ms: float) -> str:
    """
    Format a duration as a short reading-time string.

    Examples:
        >>> format_duration(360_000)
        '6 min'
        >>> format_duration(4_140_000)
        '1 hr 9 min'
    """
    total_minutes = int(total_ms / 1000 / 60)

    if total_minutes < 60:
        return f"{max(1, total_minutes)} min"

    hours = total_minutes // 60
    minutes = total_minutes % 60

    if minutes == 0:
        return f"{hours} hr"

    return f"{hours} hr {minutes} min"


def estimate_reading_time_formatted(sequence: TokenSequence, config: PlaybackConfig) -> str:
    """Estimate total reading time and return it as a formatted string."""
    return format_duration(estimate_reading_time_ms(sequence, config))


def wpm_label(wpm: float) -> str:
    """
    Return the reading-speed label for a WPM setting.

    Examples:
        >>> wpm_label(180)
        'slow'
        >>> wpm_label(300)
        'good'
        >>> wpm_label(1000)
        'superhuman'
    """
    for upper_bound, label in WPM_LABELS:
        if wpm < upper_bound:
            return label
    return WPM_LABEL_MAX
