"""Tests for case restoration and string helpers."""

import pytest

from pluralizer.helpers.strings import capfirst, restore_case, trim


class TestRestoreCase:
    def test_exact_match_kept(self):
        assert restore_case("HoUsE", "HoUsE") == "HoUsE"

    def test_lower_case_word(self):
        assert restore_case("house", "HOUSES") == "houses"

    def test_upper_case_word(self):
        assert restore_case("WHISKY", "whiskies") == "WHISKIES"

    def test_title_case_capitalizes_first_letter_only(self):
        assert restore_case("Title", "titles") == "Titles"

    def test_title_case_keeps_inner_capitals(self):
        assert restore_case("House", "big House") == "Big House"

    def test_title_case_without_capitalization(self):
        assert restore_case("Wolves", "ol", capitalize=False) == "ol"

    def test_mixed_case_falls_back_to_lower(self):
        assert restore_case("iPhone", "IPHONES") == "iphones"

    @pytest.mark.parametrize(
        "word, token, expected",
        [
            ("", "", ""),
            ("", "Token", "token"),
            ("House", "", ""),
            ("HOUSE", "", ""),
        ],
    )
    def test_empty_strings_do_not_raise(self, word, token, expected):
        assert restore_case(word, token) == expected


class TestHelpers:
    def test_capfirst(self):
        assert capfirst("house") == "House"

    def test_capfirst_empty(self):
        assert capfirst("") == ""

    def test_trim_collapses_spaces(self):
        assert trim("  a   b  c ") == "a b c"
