"""
Shared text processing utilities for the tokenizer package.

These functions provide the markup stripping, script detection and pause
detection used by the Segmenter.
"""

from .constants import (
    CJK_PATTERN,
    CJK_PAUSE_PUNCTUATION,
    HTML_ENTITIES,
    HTML_ENTITY_PATTERN,
    HTML_TAG_PATTERN,
    LATIN_PAUSE_PUNCTUATION,
)


def strip_html(html: str) -> str:
    """
    Reduce an HTML payload to plain text.

    Every tag is replaced with a single space, then the five standard
    entities are decoded in one pass so that ``&amp;lt;`` stays ``&lt;``.

    Args:
        html: Markup extracted from a document (e.g. an EPUB chapter).

    Returns:
        Plain text suitable for segmentation.

    Examples:
        >>> strip_html("<p>Hello&nbsp;<b>world</b></p>")
        ' Hello  world  '
        >>> strip_html("Fish &amp; chips")
        'Fish & chips'
    """
    if not html:
        return ""

    text = HTML_TAG_PATTERN.sub(" ", html)
    return HTML_ENTITY_PATTERN.sub(lambda match: HTML_ENTITIES[match.group(0)], text)


def contains_cjk(text: str) -> bool:
    """
    Check whether the text contains any CJK-range code point.

    Detection is a presence test over the whole input, not per word.

    Examples:
        >>> contains_cjk("速読")
        True
        >>> contains_cjk("speed reading")
        False
    """
    if not text:
        return False
    return CJK_PATTERN.search(text) is not None


def has_latin_pause(word: str) -> bool:
    """
    Check whether a space-delimited word ends in sentence/clause punctuation.

    Examples:
        >>> has_latin_pause("Hello,")
        True
        >>> has_latin_pause('said."')
        False
    """
    return bool(word) and word[-1] in LATIN_PAUSE_PUNCTUATION


def has_cjk_pause(segment: str) -> bool:
    """Check whether a CJK segment contains any sentence/clause mark."""
    return any(char in CJK_PAUSE_PUNCTUATION for char in segment)


def split_words(text: str) -> list[str]:
    """Split text on whitespace runs, dropping empty strings."""
    return text.split()
