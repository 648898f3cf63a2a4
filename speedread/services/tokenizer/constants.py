"""
Tokenizer constants for segmentation and playback timing.

This module contains the character classes used for CJK detection,
the punctuation sets that mark pause points, and timing defaults.
"""

import re

# Tokenizer version - increment when logic changes
TOKENIZER_VERSION = "1.0.0"

# Content languages offered by the reader
SUPPORTED_LANGUAGES = {"en", "es", "fr", "de", "ja", "ru", "uk", "it", "pt", "zh"}

# -----------------------------------------------------------------------------
# CJK Detection
# -----------------------------------------------------------------------------

CJK_RANGES = (
    ("\u3000", "\u303f"),  # CJK symbols and punctuation
    ("\u3040", "\u309f"),  # Hiragana
    ("\u30a0", "\u30ff"),  # Katakana
    ("\u3100", "\u312f"),  # Bopomofo
    ("\u31a0", "\u31bf"),  # Bopomofo extended
    ("\u3400", "\u4dbf"),  # CJK unified ideographs extension A
    ("\u4e00", "\u9fff"),  # CJK unified ideographs
    ("\uff00", "\uff9f"),  # Fullwidth forms and halfwidth katakana
)

CJK_PATTERN = re.compile("[" + "".join(f"{lo}-{hi}" for lo, hi in CJK_RANGES) + "]")

# -----------------------------------------------------------------------------
# Pause Punctuation
# -----------------------------------------------------------------------------

# Sentence/clause marks that end a space-delimited word
LATIN_PAUSE_PUNCTUATION = {".", ",", ";", "!", "?"}

# Sentence/clause marks anywhere inside a CJK segment
CJK_PAUSE_PUNCTUATION = {
    "\u3002",  # 。 ideographic full stop
    "\u3001",  # 、 ideographic comma
    "\uff01",  # ！ fullwidth exclamation mark
    "\uff1f",  # ？ fullwidth question mark
    "\uff0c",  # ， fullwidth comma
    "\uff1a",  # ： fullwidth colon
    "\uff1b",  # ； fullwidth semicolon
}

# -----------------------------------------------------------------------------
# Structure
# -----------------------------------------------------------------------------

# A blank line (only whitespace) between two newlines separates paragraphs
PARAGRAPH_SPLIT_PATTERN = re.compile(r"\n\s*\n")

WHITESPACE_PATTERN = re.compile(r"\s+")

# -----------------------------------------------------------------------------
# HTML
# -----------------------------------------------------------------------------

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")

HTML_ENTITIES = {
    "&nbsp;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
}

HTML_ENTITY_PATTERN = re.compile("|".join(re.escape(e) for e in HTML_ENTITIES))

# -----------------------------------------------------------------------------
# Timing
# -----------------------------------------------------------------------------

MS_PER_MINUTE = 60_000.0

# Delay multiplier applied to tokens flagged with a pause
PAUSE_MULTIPLIER = 2.2

DEFAULT_WPM = 300

# Reading speed labels, checked in order (upper bound exclusive)
WPM_LABELS = (
    (200, "slow"),
    (250, "normal"),
    (300, "average"),
    (450, "good"),
    (600, "fast"),
    (800, "speed"),
)
WPM_LABEL_MAX = "superhuman"
