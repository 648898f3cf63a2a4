"""Tests for text segmentation into playback tokens."""

import pytest

from speedread.services.tokenizer import Segmenter, WordSegment
from speedread.services.tokenizer.word_segmenter import is_word_like


class FakeWordSegmenter:
    """Splits on a '|' delimiter so CJK tests do not depend on a dictionary."""

    def __init__(self):
        self.calls = []

    def segment(self, text, language):
        self.calls.append((text, language))
        return [WordSegment(text=piece, is_word_like=is_word_like(piece)) for piece in text.split("|")]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fake_word_segmenter():
    return FakeWordSegmenter()


@pytest.fixture
def cjk_segmenter(fake_word_segmenter):
    return Segmenter(word_segmenter=fake_word_segmenter)


# =============================================================================
# Paragraph-aware Segmentation Tests
# =============================================================================


class TestSegmentParagraphs:
    """Tests for the paragraph-aware segmentation variant."""

    def test_sentence_punctuation_pauses(self, plain_segmenter):
        sequence = plain_segmenter.segment("Hello, world! Next.")
        words = [t for t in sequence if not t.is_pause_marker]

        assert [t.word for t in words] == ["Hello,", "world!", "Next."]
        assert [t.has_pause for t in words] == [True, True, True]

    def test_two_paragraphs(self, plain_segmenter):
        """Each paragraph is followed by a pause token."""
        sequence = plain_segmenter.segment_paragraphs("Para one.\n\nPara two.")

        assert sequence.words == ["Para", "one.", "", "Para", "two.", ""]
        assert [t.id for t in sequence] == [
            "word-0",
            "word-1",
            "pause-2",
            "word-3",
            "word-4",
            "pause-5",
        ]

    def test_paragraph_start_flags(self, plain_segmenter):
        """Only the first word of later paragraphs is a paragraph start."""
        sequence = plain_segmenter.segment_paragraphs("Para one.\n\nPara two.")

        starts = [t.is_paragraph_start for t in sequence]
        assert starts == [False, False, False, True, False, False]

    def test_pause_tokens(self, plain_segmenter):
        """Pause tokens are empty and flagged for an extended delay."""
        sequence = plain_segmenter.segment_paragraphs("One\n\nTwo")
        pause = sequence[1]

        assert pause.word == ""
        assert pause.raw == ""
        assert pause.has_pause is True
        assert pause.is_pause_marker

    def test_single_newlines_are_spaces(self, plain_segmenter):
        sequence = plain_segmenter.segment_paragraphs("line one\nline two")
        assert sequence.words == ["line", "one", "line", "two", ""]

    def test_blank_paragraphs_skipped(self, plain_segmenter):
        """Runs of blank lines do not create empty paragraphs."""
        sequence = plain_segmenter.segment_paragraphs("\n\nA\n\n   \n\n\nB\n\n")
        assert sequence.words == ["A", "", "B", ""]

    def test_windows_line_endings(self, plain_segmenter):
        sequence = plain_segmenter.segment_paragraphs("A\r\n\r\nB")
        assert sequence.words == ["A", "", "B", ""]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\n", "\t \n"])
    def test_empty_input(self, plain_segmenter, text):
        assert len(plain_segmenter.segment_paragraphs(text)) == 0

    def test_latin_pause_detection(self, plain_segmenter):
        sequence = plain_segmenter.segment_paragraphs("Hello, world; wait! why? end. no")
        flags = [t.has_pause for t in sequence if not t.is_pause_marker]
        assert flags == [True, True, True, True, True, False]

    def test_trailing_quote_is_not_pause(self, plain_segmenter):
        """Only the last character is checked."""
        sequence = plain_segmenter.segment_paragraphs('He said "go."')
        assert sequence[2].word == '"go."'
        assert sequence[2].has_pause is False

    def test_language_recorded(self, plain_segmenter):
        assert plain_segmenter.segment_paragraphs("Hola", "es").language == "es"


# =============================================================================
# Whitespace Segmentation Tests
# =============================================================================


class TestSegmentWords:
    """Tests for the lightweight whitespace variant."""

    def test_whitespace_split(self, plain_segmenter):
        sequence = plain_segmenter.segment_words("  The   quick\nbrown\tfox.  ")

        assert sequence.words == ["The", "quick", "brown", "fox."]
        assert [t.id for t in sequence] == ["word-0", "word-1", "word-2", "word-3"]
        assert [t.has_pause for t in sequence] == [False, False, False, True]

    def test_no_paragraph_structure(self, plain_segmenter):
        sequence = plain_segmenter.segment_words("A\n\nB")
        assert sequence.words == ["A", "B"]
        assert not any(t.is_paragraph_start for t in sequence)

    def test_raw_matches_word(self, plain_segmenter):
        for token in plain_segmenter.segment_words("alpha beta"):
            assert token.raw == token.word

    def test_empty_input(self, plain_segmenter):
        assert len(plain_segmenter.segment_words("")) == 0


# =============================================================================
# CJK Segmentation Tests
# =============================================================================


class TestSegmentCJK:
    """Tests for the CJK path with an injected word segmenter."""

    def test_word_like_segments_only(self, cjk_segmenter):
        """Punctuation and whitespace segments are dropped."""
        sequence = cjk_segmenter.segment("我|爱|读书|。", "zh")

        assert sequence.words == ["我", "爱", "读书"]
        assert [t.id for t in sequence] == ["token-0", "token-1", "token-2"]
        assert sequence.language == "zh"

    def test_pause_inside_word_like_segment(self, cjk_segmenter):
        """A pause mark carried inside a kept segment sets has_pause."""
        sequence = cjk_segmenter.segment("读书。|好", "zh")
        assert [t.has_pause for t in sequence] == [True, False]

    def test_language_passed_to_word_segmenter(self, cjk_segmenter, fake_word_segmenter):
        cjk_segmenter.segment("日本語", "ja")
        assert fake_word_segmenter.calls == [("日本語", "ja")]

    def test_no_paragraph_starts_or_pause_tokens(self, cjk_segmenter):
        sequence = cjk_segmenter.segment("一\n\n二", "zh")
        assert not any(t.is_paragraph_start for t in sequence)
        assert not any(t.is_pause_marker for t in sequence)

    def test_mixed_text_uses_cjk_path(self, cjk_segmenter, fake_word_segmenter):
        """Any CJK code point routes the whole input through the word segmenter."""
        cjk_segmenter.segment("Hello 世界", "en")
        assert len(fake_word_segmenter.calls) == 1

    def test_latin_text_skips_word_segmenter(self, cjk_segmenter, fake_word_segmenter):
        sequence = cjk_segmenter.segment("Hello world", "en")
        assert fake_word_segmenter.calls == []
        assert sequence.words == ["Hello", "world", ""]

    def test_segment_words_uses_cjk_path(self, cjk_segmenter):
        sequence = cjk_segmenter.segment_words("我|爱", "zh")
        assert sequence.words == ["我", "爱"]

    def test_fallback_without_word_segmenter(self, plain_segmenter):
        """Without a word segmenter CJK text is split on whitespace."""
        assert plain_segmenter.supports_cjk is False
        sequence = plain_segmenter.segment_words("我爱 读书", "zh")
        assert sequence.words == ["我爱", "读书"]


# =============================================================================
# HTML Segmentation Tests
# =============================================================================


class TestSegmentHtml:
    """Tests for segmenting markup payloads."""

    def test_tags_become_word_boundaries(self, plain_segmenter):
        sequence = plain_segmenter.segment_html("<p>Hello<b>world</b></p>")
        assert sequence.words == ["Hello", "world", ""]

    def test_entities_decoded(self, plain_segmenter):
        sequence = plain_segmenter.segment_html("Fish&nbsp;&amp;&nbsp;chips")
        assert sequence.words == ["Fish", "&", "chips", ""]


# =============================================================================
# Identity Invariants
# =============================================================================


class TestTokenIds:
    """Token ids are unique within a sequence."""

    @pytest.mark.parametrize(
        "text",
        [
            "one two three",
            "A.\n\nB.\n\nC.",
            "word\n\n\n\nword\n\nword",
        ],
    )
    def test_unique_ids(self, plain_segmenter, text):
        sequence = plain_segmenter.segment(text)
        ids = [t.id for t in sequence]
        assert len(ids) == len(set(ids))
