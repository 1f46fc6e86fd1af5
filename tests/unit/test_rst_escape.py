#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_rst_escape.py
"""Unit tests for reStructuredText text escaping."""

import pytest

from all2rst.utils.escape import can_follow_markup, can_precede_markup, escape_rst, unsmartify


@pytest.mark.unit
class TestEscapeFastPath:
    """Text without special characters is returned untouched."""

    def test_plain_text_is_same_object(self) -> None:
        text = "nothing to see here, really."
        assert escape_rst(text) is text

    def test_smart_characters_ignored_without_smart(self) -> None:
        text = "it's -- done..."
        assert escape_rst(text) is text


@pytest.mark.unit
class TestEscapeContexts:
    """Markup characters are escaped only where they could be read as markup."""

    @pytest.mark.parametrize("text", ["snake_case", "2*3", "a * b", "a|b", "mid`tick"])
    def test_harmless_positions_unchanged(self, text: str) -> None:
        assert escape_rst(text) == text

    def test_emphasis_delimiters_escaped(self) -> None:
        assert escape_rst("*not emphasis*") == "\\*not emphasis\\*"

    def test_interpreted_text_escaped(self) -> None:
        assert escape_rst("`code`") == "\\`code\\`"

    def test_substitution_escaped(self) -> None:
        assert escape_rst("|sub|") == "\\|sub\\|"

    def test_trailing_reference_underscore(self) -> None:
        assert escape_rst("see target_ here") == "see target\\_ here"
        assert escape_rst("word_") == "word\\_"

    def test_leading_underscore(self) -> None:
        assert escape_rst("_private") == "\\_private"

    def test_underscore_before_punctuation(self) -> None:
        assert escape_rst("a__ b") == "a\\_\\_ b"

    def test_backslash_doubled(self) -> None:
        assert escape_rst("a\\b") == "a\\\\b"

    def test_end_string_after_word(self) -> None:
        assert escape_rst("x a* b") == "x a\\* b"

    def test_start_after_opening_bracket(self) -> None:
        assert escape_rst("(*a)") == "(\\*a)"


@pytest.mark.unit
class TestSmartEscaping:
    """Smart mode protects punctuation from smart-quote processing."""

    def test_quotes(self) -> None:
        assert escape_rst("it's", smart=True) == "it\\'s"
        assert escape_rst('say "hi"', smart=True) == 'say \\"hi\\"'

    def test_double_hyphen(self) -> None:
        assert escape_rst("a--b", smart=True) == "a\\--b"

    def test_ellipsis(self) -> None:
        assert escape_rst("wait...", smart=True) == "wait\\..."


@pytest.mark.unit
class TestUnsmartify:
    """Typographic punctuation maps back to ASCII triggers."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("it’s", "it's"),
            ("a–b", "a--b"),
            ("a—b", "a---b"),
            ("wait…", "wait..."),
            ("“quoted”", '"quoted"'),
        ],
    )
    def test_mapping(self, text: str, expected: str) -> None:
        assert unsmartify(text) == expected

    def test_plain_text_is_same_object(self) -> None:
        text = "plain"
        assert unsmartify(text) is text


@pytest.mark.unit
class TestBoundaryPredicates:
    """Character classes around inline markup."""

    @pytest.mark.parametrize("char", [" ", "(", "[", "-", ":", "/", "'", '"', "<", "{", "«", "—"])
    def test_can_precede(self, char: str) -> None:
        assert can_precede_markup(char)

    @pytest.mark.parametrize("char", ["a", "1", ")", "*", "."])
    def test_cannot_precede(self, char: str) -> None:
        assert not can_precede_markup(char)

    @pytest.mark.parametrize("char", [" ", ".", ",", ")", "]", "!", "?", ";", "»", "—"])
    def test_can_follow(self, char: str) -> None:
        assert can_follow_markup(char)

    @pytest.mark.parametrize("char", ["a", "1", "(", "*"])
    def test_cannot_follow(self, char: str) -> None:
        assert not can_follow_markup(char)
