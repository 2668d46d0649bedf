# tests/unit/extraction/test_unit_identifier.py — v1
"""Tests for extraction/identifier.py — identifier under the cursor."""

from __future__ import annotations

import pytest

from xlhover.extraction.identifier import identifier_at, word_range_at


class TestWordMode:
    @pytest.mark.parametrize("offset", [0, 1, 2, 3])
    def test_cursor_inside_or_after_word(self, offset: int):
        assert identifier_at('BTN = "//button[1]"', offset, "word") == "BTN"

    def test_cursor_on_space_between_tokens(self):
        # "BTN = " : offset 4 is "=", offset 3 touches BTN from the right
        assert identifier_at('BTN = "x"', 4, "word") is None

    def test_dollar_identifier(self):
        assert identifier_at("const $btn = '#go';", 7, "word") == "$btn"

    def test_attribute_access_yields_attribute(self):
        line = "driver.find_element(By.XPATH, page.SUBMIT)"
        assert identifier_at(line, line.index("SUBMIT") + 2, "word") == "SUBMIT"

    def test_leading_digit_rejected(self):
        assert identifier_at("x = 1abc", 5, "word") is None

    def test_empty_line(self):
        assert identifier_at("", 0, "word") is None

    def test_out_of_range_offset(self):
        assert identifier_at("BTN", 10, "word") is None
        assert identifier_at("BTN", -1, "word") is None


class TestWordRange:
    def test_range_covers_whole_token(self):
        assert word_range_at("foo bar_baz qux", 6) == (4, 11)

    def test_no_word(self):
        assert word_range_at("a  b", 2) is None


class TestBracketMode:
    def test_cursor_inside_variable(self):
        line = "Click Element    ${BTN}"
        assert identifier_at(line, line.index("BTN"), "bracket") == "BTN"

    def test_span_includes_dollar_and_braces(self):
        line = "${BTN}    //button[1]"
        assert identifier_at(line, 0, "bracket") == "BTN"
        assert identifier_at(line, line.index("}"), "bracket") == "BTN"

    def test_cursor_after_closing_brace(self):
        line = "${BTN}    //button[1]"
        assert identifier_at(line, line.index("}") + 1, "bracket") is None

    def test_picks_variable_containing_cursor(self):
        line = "Input Text    ${FIELD}    ${VALUE}"
        assert identifier_at(line, line.index("VALUE"), "bracket") == "VALUE"
        assert identifier_at(line, line.index("FIELD"), "bracket") == "FIELD"

    def test_plain_word_not_an_identifier(self):
        assert identifier_at("Click Element    BTN", 18, "bracket") is None

    def test_invalid_name_not_matched(self):
        assert identifier_at("${1BAD}    x", 3, "bracket") is None
