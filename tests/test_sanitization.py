"""Tests for text sanitization."""
from videoshare.utils.sanitization import (
    clean_multiline,
    clean_single_line,
    parse_tags,
    remove_zero_width_chars,
    sanitize_text,
)


class TestSanitizeText:
    """Test cases for sanitize_text."""

    def test_control_characters_removed(self):
        assert sanitize_text("Hello\x00\x01World") == "HelloWorld"

    def test_zero_width_characters_removed(self):
        assert remove_zero_width_chars("Hello\u200bWor\u200dld\ufeff") == "HelloWorld"

    def test_unicode_preserved(self):
        """Accents, Cyrillic and emoji survive."""
        text = "Café Привет 🤖"
        assert sanitize_text(text) == text

    def test_nfc_normalization(self):
        decomposed = "Cafe\u0301"
        assert sanitize_text(decomposed) == "Caf\u00e9"

    def test_empty_and_non_string(self):
        assert sanitize_text("") == ""
        assert sanitize_text(None) == ""

    def test_truncation(self):
        assert sanitize_text("abcdef", max_length=3) == "abc"


class TestLineCleaning:
    """Test cases for single and multi-line fields."""

    def test_single_line_collapses_whitespace(self):
        assert clean_single_line("  My \n  Video\tTitle  ") == "My Video Title"

    def test_multiline_keeps_paragraphs(self):
        text = "First  line\r\nSecond line\n\n\n\nThird"
        assert clean_multiline(text) == "First line\nSecond line\n\nThird"

    def test_tabs_and_newlines_separate_words(self):
        """Tabs and line breaks in single-line fields become spaces."""
        assert clean_single_line("Cooking\tTips") == "Cooking Tips"
        assert clean_single_line("Line one\nLine two") == "Line one Line two"
        assert sanitize_text("a\r\nb", preserve_newlines=False) == "a b"

    def test_whitespace_only_becomes_empty(self):
        assert clean_multiline("   \n\t  ") == ""


class TestParseTags:
    """Test cases for comma-separated tags."""

    def test_split_and_trim(self):
        assert parse_tags(" gaming , music,tech ") == ["gaming", "music", "tech"]

    def test_empty_entries_dropped(self):
        assert parse_tags("a,, ,b,") == ["a", "b"]
        assert parse_tags("") == []
        assert parse_tags(None) == []

    def test_duplicates_removed_case_insensitive(self):
        assert parse_tags("Gaming, gaming, GAMING, fun") == ["Gaming", "fun"]

    def test_max_tags(self):
        raw = ",".join(f"tag{i}" for i in range(40))
        assert len(parse_tags(raw, max_tags=30)) == 30
