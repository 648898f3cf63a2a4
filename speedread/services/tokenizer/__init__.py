"""
Tokenizer package for RSVP text processing.

This package contains modules for turning document text into playback
tokens, including:
- segmenter: Segmenter class (primary entry point)
- types: Token and TokenSequence value types
- text_utils: HTML stripping, CJK detection and pause detection
- word_segmenter: Locale-aware word segmentation for CJK text
- orp: Optimal Recognition Point (pivot) calculation
- timing: Tick delays and reading-time estimates
- constants: Character classes, punctuation sets and timing defaults

Primary usage:
    >>> from speedread.services.tokenizer import Segmenter, segment
    >>> sequence = Segmenter().segment("Hello world.", "en")
    >>> # Or use the convenience function:
    >>> sequence = segment("Hello world.")
"""

from .types import Token, TokenSequence

from .segmenter import Segmenter, segment, segment_paragraphs, segment_words

from .text_utils import contains_cjk, has_cjk_pause, has_latin_pause, strip_html

from .word_segmenter import (
    JiebaWordSegmenter,
    WordSegment,
    WordSegmenter,
    cjk_segmentation_available,
    get_default_word_segmenter,
)

from .orp import PivotCalculator, pivot_index, split_for_display

from .timing import (
    PlaybackConfig,
    calculate_base_duration_ms,
    calculate_token_delay_ms,
    estimate_reading_time_formatted,
    estimate_reading_time_ms,
    format_duration,
    wpm_label,
)

from .constants import (
    CJK_PAUSE_PUNCTUATION,
    LATIN_PAUSE_PUNCTUATION,
    PAUSE_MULTIPLIER,
    SUPPORTED_LANGUAGES,
    TOKENIZER_VERSION,
)


def get_tokenizer_version() -> str:
    """Return the current tokenizer version string."""
    return TOKENIZER_VERSION


__all__ = [
    # Value types
    "Token",
    "TokenSequence",
    # Segmentation (primary API)
    "Segmenter",
    "segment",
    "segment_paragraphs",
    "segment_words",
    # Text utilities
    "strip_html",
    "contains_cjk",
    "has_cjk_pause",
    "has_latin_pause",
    # Word segmentation capability
    "WordSegment",
    "WordSegmenter",
    "JiebaWordSegmenter",
    "get_default_word_segmenter",
    "cjk_segmentation_available",
    # Pivot
    "PivotCalculator",
    "pivot_index",
    "split_for_display",
    # Timing
    "PlaybackConfig",
    "calculate_base_duration_ms",
    "calculate_token_delay_ms",
    "estimate_reading_time_ms",
    "estimate_reading_time_formatted",
    "format_duration",
    "wpm_label",
    # Constants
    "TOKENIZER_VERSION",
    "SUPPORTED_LANGUAGES",
    "LATIN_PAUSE_PUNCTUATION",
    "CJK_PAUSE_PUNCTUATION",
    "PAUSE_MULTIPLIER",
    "get_tokenizer_version",
]
