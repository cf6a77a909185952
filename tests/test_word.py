"""
Unit tests for word-level transforms.
"""

import pytest

from puzzletools.letter import is_roman_numeral_letter
from puzzletools.word import (
    all_unique_letters, alphagram, anagram_difference, ciphergram, deleted_letters,
    double_letters, is_addition, is_intertwine, num_unique_letters, repeated_bigrams,
    reversed_slug, slug_len, slugify, special_letter_block,
)


class TestSlugify:
    """Tests for slug normalization."""

    def test_removes_spaces_and_digits(self):
        assert slugify("ONE 2 THREE") == "ONETHREE"

    def test_removes_punctuation(self):
        assert slugify("ROCK 'N' ROLL!") == "ROCKNROLL"

    @pytest.mark.parametrize("raw", ["ICE CREAM", "o'clock", "A-B c,D", "", "ÉCOLE 42"])
    def test_only_uppercase_letters(self, raw):
        slug = slugify(raw)
        assert all("A" <= c <= "Z" for c in slug)

    @pytest.mark.parametrize("raw", ["ICE CREAM", "Mixed Case", "X-RAY"])
    def test_idempotent(self, raw):
        assert slugify(slugify(raw)) == slugify(raw)

    def test_accepts_bytes(self):
        assert slugify(b"X RAY") == "XRAY"

    def test_slug_len(self):
        assert slug_len("ASCII STRING") == 11

    def test_reversed_slug(self):
        assert reversed_slug("STAR S") == "SRATS"


class TestLetterPatterns:
    """Tests for anagram and cipher keys."""

    def test_alphagram(self):
        assert alphagram("POTATO") == "AOOPTT"
        assert alphagram("SPOON") == alphagram("SNOOP")
        assert alphagram("SPOON") != alphagram("SPONN")

    def test_ciphergram(self):
        assert ciphergram("POTATO") == "ABCDCB"
        assert ciphergram("POTATO") == ciphergram("UNEVEN")

    def test_unique_letters(self):
        assert all_unique_letters("THUNDERCLAPS")
        assert not all_unique_letters("LETTERS")
        assert num_unique_letters("LETTERS") == 5
        assert num_unique_letters("POTATO") == 4

    def test_double_letters(self):
        assert double_letters("PUZZLETOOLS") == "ZO"
        assert double_letters("NEEDLESS") == "ES"

    def test_repeated_bigrams(self):
        assert repeated_bigrams("ONGOING") == ["NG"]
        assert repeated_bigrams("APPLEDUMPLING") == ["PL"]


class TestAdditions:
    """Tests for letter insertion and deletion."""

    def test_is_addition(self):
        assert is_addition("PORE", "SPORE", 1)
        assert is_addition("POTATO", "POTATOS", 1)
        assert not is_addition("POTATO", "POTATO", 1)
        assert not is_addition("POTATO", "POTATOES", 1)
        assert not is_addition("MESSAGE", "MESO", 1)

    def test_deleted_letters(self):
        items = list(deleted_letters("ABC"))
        assert {i.text for i in items} == {"AB", "AC", "BC"}
        assert [i.deleted_char for i in items] == ["A", "B", "C"]
        assert items[1].position == 1

    def test_is_intertwine(self):
        assert is_intertwine("INTERTWINE", "INERT", "TWINE")
        assert not is_intertwine("INTERTWINE", "INERT", "TWIN")
        assert not is_intertwine("INTERTWINE", "INERT", "SWINE")

    def test_anagram_difference(self):
        assert anagram_difference("DIFFERENCE", "FRIEDFENCE") == (0, 0)
        assert anagram_difference("DIFFERENCE", "FIERCEEND") == (1, 0)
        assert anagram_difference("DIFFERENCE", "REFINEDFACE") == (0, 1)
        assert anagram_difference("DIFFERENCE", "AIRDEFENCE") == (1, 1)


class TestSpecialLetterBlock:
    """Tests for finding a single block of letters."""

    def test_single_block(self):
        assert special_letter_block("ARXIV", is_roman_numeral_letter) == range(2, 5)

    def test_two_blocks(self):
        assert special_letter_block("REFLEXIVE", is_roman_numeral_letter) is None

    def test_no_block(self):
        assert special_letter_block("THROUGHOUT", is_roman_numeral_letter) is None
