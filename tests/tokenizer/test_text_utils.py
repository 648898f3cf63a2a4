"""Tests for tokenizer text utilities."""

import pytest

from speedread.services.tokenizer.text_utils import (
    contains_cjk,
    has_cjk_pause,
    has_latin_pause,
    split_words,
    strip_html,
)


class TestStripHtml:
    """Tests for markup stripping."""

    def test_tags_replaced_with_space(self):
        assert strip_html("<p>a</p><p>b</p>") == " a  b "

    @pytest.mark.parametrize(
        "html,expected",
        [
            ("&amp;", "&"),
            ("&lt;tag&gt;", "<tag>"),
            ("&quot;q&quot;", '"q"'),
            ("a&nbsp;b", "a b"),
        ],
    )
    def test_entities(self, html, expected):
        assert strip_html(html) == expected

    def test_single_pass_decoding(self):
        """Decoded text is not decoded a second time."""
        assert strip_html("&amp;lt;") == "&lt;"

    def test_unknown_entities_kept(self):
        assert strip_html("&copy;") == "&copy;"

    def test_empty(self):
        assert strip_html("") == ""


class TestContainsCjk:
    """Tests for CJK detection."""

    def test_reading_examples(self):
        assert contains_cjk("速読") is True
        assert contains_cjk("speed reading") is False

    @pytest.mark.parametrize(
        "text",
        [
            "日本語",  # CJK ideographs
            "ひらがな",  # Hiragana
            "カタカナ",  # Katakana
            "mixed 中 text",
            "。",  # CJK punctuation
            "ＡＢＣ",  # Fullwidth forms
        ],
    )
    def test_detects_cjk(self, text):
        assert contains_cjk(text)

    @pytest.mark.parametrize("text", ["", "hello", "Привет", "café"])
    def test_non_cjk(self, text):
        assert not contains_cjk(text)


class TestPauseDetection:
    """Tests for punctuation pause detection."""

    @pytest.mark.parametrize("word", ["end.", "comma,", "semi;", "wow!", "why?"])
    def test_latin_pause(self, word):
        assert has_latin_pause(word)

    @pytest.mark.parametrize("word", ["", "word", "colon:", "dash-", "(paren)", 'quote."'])
    def test_latin_no_pause(self, word):
        assert not has_latin_pause(word)

    @pytest.mark.parametrize("segment", ["読む。", "、", "何？", "はい！", "例，", "注：", "止；"])
    def test_cjk_pause(self, segment):
        assert has_cjk_pause(segment)

    def test_cjk_no_pause(self):
        assert not has_cjk_pause("読書")


def test_split_words():
    assert split_words("  a \n b\t\tc ") == ["a", "b", "c"]
    assert split_words("") == []
