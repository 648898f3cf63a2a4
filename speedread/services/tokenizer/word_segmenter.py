"""
Locale-aware word boundary segmentation for CJK text.

Space-delimited scripts can be split on whitespace, but Chinese and
Japanese need a dictionary-driven segmenter. This module defines the
capability the Segmenter depends on and a jieba-backed implementation.
When jieba is not installed the capability is simply absent and the
Segmenter falls back to whitespace splitting.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

try:
    import jieba
except ImportError:  # pragma: no cover - depends on the environment
    jieba = None

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordSegment:
    """One segment produced by a word segmenter.

    Attributes:
        text: The segment's surface text.
        is_word_like: False for pure whitespace or punctuation runs.
    """

    text: str
    is_word_like: bool


class WordSegmenter(Protocol):
    """Word-boundary segmentation parameterized by a language tag."""

    def segment(self, text: str, language: str) -> List[WordSegment]:
        ...


def is_word_like(segment: str) -> bool:
    """A segment is word-like when it holds at least one letter or digit."""
    return any(char.isalnum() for char in segment)


class JiebaWordSegmenter:
    """
    Word segmenter backed by jieba.

    jieba's dictionary is Chinese; Japanese text is segmented with the same
    model, which keeps kanji compounds together and splits kana runs.

    Example usage:
        >>> segmenter = JiebaWordSegmenter()
        >>> [s.text for s in segmenter.segment("我爱读书。", "zh") if s.is_word_like]
        ['我', '爱', '读书']
    """

    def __init__(self, use_hmm: bool = True) -> None:
        if jieba is None:
            raise RuntimeError("jieba is not installed")
        self.use_hmm = use_hmm
        jieba.setLogLevel(logging.WARNING)

    def segment(self, text: str, language: str) -> List[WordSegment]:
        if not text:
            return []
        pieces = jieba.lcut(text, cut_all=False, HMM=self.use_hmm)
        return [WordSegment(text=piece, is_word_like=is_word_like(piece)) for piece in pieces]


_missing_reported = False


def get_default_word_segmenter() -> Optional[WordSegmenter]:
    """
    Return the best available word segmenter, or None when none is installed.
    """
    global _missing_reported
    if jieba is None:
        if not _missing_reported:
            logger.warning("jieba is not installed; CJK text will be split on whitespace")
            _missing_reported = True
        return None
    return JiebaWordSegmenter()


def cjk_segmentation_available() -> bool:
    return jieba is not None
