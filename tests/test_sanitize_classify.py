"""Tests for token cleanup, classification and zone padding."""

import pytest

from zone_arranger.classify import (
    TokenClass,
    classify_token,
    is_contract,
    is_new_zone,
    is_old_zone,
    is_zone_candidate,
)
from zone_arranger.sanitize import sanitize_token, split_columns, split_lines
from zone_arranger.zones import add_zeros


# ---------------------------------------------------------------------------
# Sanitizer
# ---------------------------------------------------------------------------


class TestSanitize:
    def test_none_and_empty(self):
        assert sanitize_token(None) == ""
        assert sanitize_token("") == ""

    def test_trims(self):
        assert sanitize_token("  FBB325\t") == "FBB325"

    def test_nbsp_to_space(self):
        assert sanitize_token("FBB325\u00a0FBB325-3") == "FBB325 FBB325-3"

    def test_quotes_removed(self):
        assert sanitize_token('"FBB325"') == "FBB325"
        assert sanitize_token("\u201cFBB325\u201d") == "FBB325"

    @pytest.mark.parametrize("mark", ["\u200e", "\u200f", "\u202a", "\u202e", "\u2066", "\u2069"])
    def test_bidi_marks_removed(self, mark):
        assert sanitize_token(f"{mark}FDT325FAT22-001{mark}") == "FDT325FAT22-001"

    def test_bom_removed(self):
        assert sanitize_token("\ufeffFDT325FAT22-001") == "FDT325FAT22-001"
        assert split_lines("\ufeffFBB325\nFBB326") == ["FBB325", "FBB326"]

    def test_split_lines_keeps_blanks(self):
        assert split_lines("a\r\n\r\n  b  \n") == ["a", "", "b", ""]

    def test_split_columns(self):
        assert split_columns("A \t B  \u200fC") == ["A", "B", "C"]


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------


TOKENS = [
    "FDT325FAT22-001",
    "fbb333fat42-10",
    "FDT325FAT22",
    "FBB325",
    "fbb325",
    "FBB325-3",
    "FBB325-12",
    "FBB25",
    "FBB3251",
    "FBB325-A",
    "hello",
    "",
]


class TestClassify:
    def test_contract(self):
        assert is_contract("FDT325FAT22-001")
        assert is_contract("fbb333fat42-10")
        assert is_contract("FDT325FAT22")
        assert not is_contract("FDT325FAT-1")
        assert not is_contract("FBB325")

    def test_old_zone(self):
        assert is_old_zone("FBB325")
        assert is_old_zone("fbb325")
        assert not is_old_zone("FBB25")
        assert not is_old_zone("FBB325-3")

    def test_new_zone(self):
        assert is_new_zone("FBB325-3")
        assert not is_new_zone("FBB325")
        assert not is_new_zone("FBB325-A")

    def test_zone_candidate_is_looser(self):
        assert is_zone_candidate("FBB3251")
        assert is_zone_candidate("FBB325-A1")
        assert is_zone_candidate("بغد325")
        assert not is_zone_candidate("FBB25")
        assert not is_zone_candidate("FDT325FAT22-001")

    @pytest.mark.parametrize("token", TOKENS)
    def test_predicates_mutually_exclusive(self, token):
        hits = [is_contract(token), is_old_zone(token), is_new_zone(token)]
        assert sum(hits) <= 1

    def test_classify_token(self):
        assert classify_token("FDT325FAT22-001") is TokenClass.CONTRACT
        assert classify_token("FBB325") is TokenClass.OLD_ZONE
        assert classify_token("FBB325-3") is TokenClass.NEW_ZONE
        assert classify_token("FBB25") is TokenClass.UNKNOWN

    @pytest.mark.parametrize("token", ["\u212aBB325", "\u212aBB325-3", "FB\u0131325", "\u017fBB325", "\u212aDT325FAT22"])
    def test_only_ascii_letters_match(self, token):
        assert classify_token(token) is TokenClass.UNKNOWN

    def test_fat_literal_case_insensitive(self):
        assert is_contract("FDT325fat22")
        assert is_contract("FDT325FaT22-1")


# ---------------------------------------------------------------------------
# Zone padding
# ---------------------------------------------------------------------------


class TestAddZeros:
    def test_two_digits_padded(self):
        assert add_zeros("FBB25") == "FBB025"

    def test_one_digit_padded(self):
        assert add_zeros("FBB5") == "FBB005"

    def test_three_and_four_digits_untouched(self):
        assert add_zeros("FBB325") == "FBB325"
        assert add_zeros("FBB3251") == "FBB3251"

    def test_suffix_disables_padding(self):
        assert add_zeros("FBB25-3") == "FBB25-3"
        assert add_zeros("FBB325-3") == "FBB325-3"

    def test_arabic_prefix(self):
        assert add_zeros("بغد7") == "بغد007"

    def test_non_zone_untouched(self):
        assert add_zeros("hello") == "hello"
        assert add_zeros("FDT325FAT22-001") == "FDT325FAT22-001"
        assert add_zeros("") == ""
        assert add_zeros(None) is None

    @pytest.mark.parametrize("token", TOKENS + ["FBB5", "FBB12345", "بغد7"])
    def test_idempotent(self, token):
        assert add_zeros(add_zeros(token)) == add_zeros(token)

    @pytest.mark.parametrize("token", ["FBB5", "FBB25-3", "FBB25", "abc1-xyz"])
    def test_prefix_and_suffix_preserved(self, token):
        out = add_zeros(token)
        assert out[:3] == token[:3]
        if "-" in token:
            assert out.split("-", 1)[1] == token.split("-", 1)[1]
