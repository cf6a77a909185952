"""Properties of individual letters. A letter is a one-character str or a byte value."""

from __future__ import annotations

from typing import Dict, Union

Letter = Union[str, int]

DNA_LETTERS = frozenset("ACGT")
RNA_LETTERS = frozenset("ACGU")
VOWELS = frozenset("AEIOU")
VOWELS_Y = VOWELS | {"Y"}
NEWS_LETTERS = frozenset("NEWS")
ROMAN_NUMERAL_LETTERS = frozenset("IVXLCDM")
ASCENDERS = frozenset("BDFHKLT")
DESCENDERS = frozenset("GJPQY")

SCRABBLE_VALUES: Dict[str, int] = {
    **dict.fromkeys("AEIOULNSTR", 1),
    **dict.fromkeys("DG", 2),
    **dict.fromkeys("BCMP", 3),
    **dict.fromkeys("FHVWY", 4),
    "K": 5,
    **dict.fromkeys("JX", 8),
    **dict.fromkeys("QZ", 10),
    # blank tile
    ".": 0,
}


def as_letter(c: Letter) -> str:
    return chr(c) if isinstance(c, int) else c


def lett_to_num_0(c: Letter) -> int:
    """A -> 0, B -> 1, ..."""
    n = ord(as_letter(c)) - ord("A")
    if not 0 <= n < 26:
        raise ValueError(f"not an uppercase letter: {as_letter(c)!r}")
    return n


def lett_to_num_1(c: Letter) -> int:
    """A -> 1, B -> 2, ..."""
    return lett_to_num_0(c) + 1


def num_to_lett_1(n: int) -> str:
    if not 1 <= n <= 26:
        raise ValueError(f"no letter at position {n}")
    return chr(ord("A") + n - 1)


def is_dna_letter(c: Letter) -> bool:
    return as_letter(c) in DNA_LETTERS


def is_rna_letter(c: Letter) -> bool:
    return as_letter(c) in RNA_LETTERS


def is_vowel_y(c: Letter) -> bool:
    return as_letter(c) in VOWELS_Y


def is_vowel_no_y(c: Letter) -> bool:
    return as_letter(c) in VOWELS


def is_news_letter(c: Letter) -> bool:
    return as_letter(c) in NEWS_LETTERS


def is_roman_numeral_letter(c: Letter) -> bool:
    return as_letter(c) in ROMAN_NUMERAL_LETTERS


def is_ascender(c: Letter) -> bool:
    return as_letter(c) in ASCENDERS


def is_descender(c: Letter) -> bool:
    return as_letter(c) in DESCENDERS


def scrabble_value(c: Letter) -> int:
    try:
        return SCRABBLE_VALUES[as_letter(c)]
    except KeyError:
        raise ValueError(f"invalid letter: {as_letter(c)!r}") from None
