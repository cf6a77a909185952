"""
Unit tests for code tables and the data sets built on them.
"""

from puzzletools.code import braille_distance, dna_letter, from_morse, rna_letter, to_morse
from puzzletools.data import chemical_elements, map_by, nato_alphabet, parse_as_element_symbols


class TestMorse:
    def test_to_morse(self):
        assert to_morse("m") == "--"
        assert to_morse("S") == "..."
        assert to_morse("?") is None

    def test_from_morse(self):
        assert from_morse("--") == "M"
        assert from_morse(b".-") == "A"
        assert from_morse("......") is None


class TestGeneticCode:
    def test_dna(self):
        assert dna_letter("ATA") == "I"
        assert dna_letter("ATG") == "M"
        assert dna_letter("TAA") == "*"

    def test_rna(self):
        assert rna_letter("AUA") == "I"
        assert rna_letter("ATA") is None


class TestBraille:
    def test_distance(self):
        assert braille_distance("Q", "W") == 3
        assert braille_distance("Q", "R") == 1
        assert braille_distance("C", "W") == 4


class TestDataSets:
    def test_nato(self):
        alphabet = nato_alphabet()
        assert len(alphabet) == 26
        assert alphabet[16] == "QUEBEC"

    def test_elements_by_symbol(self):
        by_symbol = map_by(chemical_elements(), lambda e: e.symbol)
        assert by_symbol["Be"].number == 4
        assert len(chemical_elements()) == 118

    def test_parse_as_element_symbols(self):
        count, split = parse_as_element_symbols("THESOUTH")
        assert count == 1
        assert [e.symbol for e in split] == ["Th", "Es", "O", "U", "Th"]

    def test_unparseable(self):
        assert parse_as_element_symbols("JQ") == (0, None)
