"""
Segmentation of document text into playback tokens.

This module provides the Segmenter class that turns plain text (or HTML
stripped to plain text) into an ordered TokenSequence for RSVP display.

Segmentation paths:
1. CJK: locale-aware word segmentation, keeping word-like segments only
2. Paragraph-aware: blank-line paragraphs, whitespace words, and a silent
   pause token after every paragraph (the primary reading flow)
3. Whitespace: one token per whitespace-delimited word (lightweight fallback)

Example usage:
    >>> segmenter = Segmenter()
    >>> sequence = segmenter.segment("Para one.\\n\\nPara two.", "en")
    >>> [token.word for token in sequence]
    ['Para', 'one.', '', 'Para', 'two.', '']
"""

import logging
from typing import List, Optional

from .constants import PARAGRAPH_SPLIT_PATTERN, WHITESPACE_PATTERN
from .text_utils import (
    contains_cjk,
    has_cjk_pause,
    has_latin_pause,
    split_words,
    strip_html,
)
from .types import Token, TokenSequence
from .word_segmenter import WordSegmenter, get_default_word_segmenter

logger = logging.getLogger(__name__)

_UNSET = object()


class Segmenter:
    """
    Split raw text into a TokenSequence.

    The Segmenter is stateless apart from its word segmentation capability,
    which is used only for text containing CJK code points. Pass
    ``word_segmenter=None`` to force the whitespace fallback.
    """

    def __init__(self, word_segmenter=_UNSET) -> None:
        """
        Initialize the segmenter.

        Args:
            word_segmenter: Capability used for CJK text. Defaults to the
                best installed implementation; None disables the CJK path.
        """
        if word_segmenter is _UNSET:
            word_segmenter = get_default_word_segmenter()
        self._word_segmenter: Optional[WordSegmenter] = word_segmenter

    @property
    def supports_cjk(self) -> bool:
        return self._word_segmenter is not None

    def segment(self, text: str, language: str = "en") -> TokenSequence:
        """
        Segment text for the primary reading flow.

        CJK text goes through the word segmenter when one is available;
        everything else uses the paragraph-aware variant.

        Args:
            text: Plain text with markup already removed.
            language: Language tag of the content (e.g. "en", "ja").

        Returns:
            TokenSequence, empty for empty or whitespace-only input.

        Example:
            >>> sequence = Segmenter().segment("Hello, world! Next.", "en")
            >>> [(t.word, t.has_pause) for t in sequence][:3]
            [('Hello,', True), ('world!', True), ('Next.', True)]
        """
        if self._use_cjk_path(text):
            return self._segment_cjk(text, language)
        return self.segment_paragraphs(text, language)

    def segment_html(self, html: str, language: str = "en") -> TokenSequence:
        """Strip markup from an HTML payload, then segment it."""
        return self.segment(strip_html(html), language)

    def segment_words(self, text: str, language: str = "en") -> TokenSequence:
        """
        Lightweight segmentation without paragraph structure.

        CJK text goes through the word segmenter when one is available;
        otherwise every whitespace-delimited word becomes one token.
        No pause tokens are inserted and no paragraph starts are marked.
        """
        if self._use_cjk_path(text):
            return self._segment_cjk(text, language)

        tokens = [
            Token(
                id=f"word-{index}",
                word=word,
                raw=word,
                has_pause=has_latin_pause(word),
            )
            for index, word in enumerate(split_words(text))
        ]
        return TokenSequence(tokens=tuple(tokens), language=language)

    def segment_paragraphs(self, text: str, language: str = "en") -> TokenSequence:
        """
        Segment text into words with paragraph structure.

        Paragraphs are separated by blank lines. Within a paragraph single
        newlines are treated as spaces. The first word of every paragraph
        after the first is marked as a paragraph start, and each paragraph
        is followed by an empty pause token that adds a reading beat.

        Args:
            text: Plain text with markup already removed.
            language: Language tag stored on the resulting sequence.

        Returns:
            TokenSequence with word and pause tokens.
        """
        if not text:
            return TokenSequence.empty(language)

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        tokens: List[Token] = []

        for paragraph in PARAGRAPH_SPLIT_PATTERN.split(text):
            clean = paragraph.replace("\n", " ").strip()
            if not clean:
                continue

            for index, word in enumerate(WHITESPACE_PATTERN.split(clean)):
                tokens.append(
                    Token(
                        id=f"word-{len(tokens)}",
                        word=word,
                        raw=word,
                        has_pause=has_latin_pause(word),
                        # The very first word of the document is never a paragraph start
                        is_paragraph_start=index == 0 and len(tokens) > 0,
                    )
                )

            tokens.append(
                Token(id=f"pause-{len(tokens)}", word="", raw="", has_pause=True)
            )

        return TokenSequence(tokens=tuple(tokens), language=language)

    def _use_cjk_path(self, text: str) -> bool:
        if not contains_cjk(text):
            return False
        if self._word_segmenter is None:
            logger.debug("No word segmenter available; splitting CJK text on whitespace")
            return False
        return True

    def _segment_cjk(self, text: str, language: str) -> TokenSequence:
        """
        Segment CJK text with the word segmenter.

        Only word-like segments become tokens. Paragraph starts are not
        tracked on this path.
        """
        tokens: List[Token] = []
        for piece in self._word_segmenter.segment(text, language):
            if not piece.is_word_like:
                continue
            tokens.append(
                Token(
                    id=f"token-{len(tokens)}",
                    word=piece.text,
                    raw=piece.text,
                    has_pause=has_cjk_pause(piece.text),
                )
            )
        return TokenSequence(tokens=tuple(tokens), language=language)


_default_segmenter: Optional[Segmenter] = None


def _get_default_segmenter() -> Segmenter:
    global _default_segmenter
    if _default_segmenter is None:
        _default_segmenter = Segmenter()
    return _default_segmenter


# Convenience functions for simple use cases
def segment(text: str, language: str = "en") -> TokenSequence:
    """
    Segment text using the default segmenter.

    Example:
        >>> len(segment("Hello world"))
        3
    """
    return _get_default_segmenter().segment(text, language)


def segment_paragraphs(text: str, language: str = "en") -> TokenSequence:
    """Paragraph-aware segmentation using the default segmenter."""
    return _get_default_segmenter().segment_paragraphs(text, language)


def segment_words(text: str, language: str = "en") -> TokenSequence:
    """Lightweight whitespace/CJK segmentation using the default segmenter."""
    return _get_default_segmenter().segment_words(text, language)
