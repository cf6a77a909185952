"""
Codes: Morse, the genetic code, Braille.

The Morse and genetic code tables are tab-delimited files shipped in
``puzzletools/tables`` and read once, on first use.
"""

from __future__ import annotations

import csv
from functools import lru_cache
from importlib.resources import files
from typing import Dict, List, Optional, Tuple

from .letter import Letter, as_letter, lett_to_num_0
from .text import TextLike, as_str

# Dot bits 1-6 of each letter's Braille cell, A through Z.
BRAILLE_BITS = (
    0x1, 0x3, 0x9, 0x19, 0x11, 0xb, 0x1b, 0x13, 0xa, 0x1a, 0x5, 0x7, 0xd,
    0x1d, 0x15, 0xf, 0x1f, 0x17, 0xe, 0x1e, 0x25, 0x27, 0x3a, 0x2d, 0x3d, 0x35,
)


def read_table(name: str) -> List[List[str]]:
    """Rows of a tab-delimited table under ``puzzletools/tables``."""
    text = (files("puzzletools") / "tables" / name).read_text(encoding="utf-8")
    return [row for row in csv.reader(text.splitlines(), delimiter="\t", quoting=csv.QUOTE_NONE) if row]


@lru_cache(maxsize=None)
def _morse_tables() -> Tuple[Dict[str, str], Dict[str, str]]:
    to_morse = {k: v for k, v in read_table("morse.tsv")}
    return to_morse, {v: k for k, v in to_morse.items()}


@lru_cache(maxsize=None)
def _genetic_code() -> Tuple[Dict[str, str], Dict[str, str]]:
    dna = {codon: amino for codon, amino in read_table("genetic_code.tsv")}
    rna = {codon.replace("T", "U"): amino for codon, amino in dna.items()}
    return dna, rna


def to_morse(c: Letter) -> Optional[str]:
    """Morse code for a letter or digit, case-insensitive: ``to_morse('m') == '--'``."""
    return _morse_tables()[0].get(as_letter(c).upper())


def from_morse(s: TextLike) -> Optional[str]:
    return _morse_tables()[1].get(as_str(s))


def dna_letter(s: TextLike) -> Optional[str]:
    """Amino acid letter for a DNA codon (``*`` for stop codons)."""
    return _genetic_code()[0].get(as_str(s))


def rna_letter(s: TextLike) -> Optional[str]:
    return _genetic_code()[1].get(as_str(s))


def braille_bits(c: Letter) -> int:
    return BRAILLE_BITS[lett_to_num_0(c)]


def braille_distance(c1: Letter, c2: Letter) -> int:
    """Number of dots that differ between two Braille letters."""
    return bin(braille_bits(c1) ^ braille_bits(c2)).count("1")
