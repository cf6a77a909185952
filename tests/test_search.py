"""
Unit tests for ranking search results.
"""

from dataclasses import dataclass

from puzzletools.search import format_result, print_result, sort_results, top_results
from puzzletools.wordlist import Pair, WordFreq, WordlistEntry


@dataclass
class Scored:
    data: str
    score: int


class TestSortResults:
    """Tests for heap-based ranking."""

    def test_descending_order(self):
        results = [Scored("a", 3), Scored("b", 7), Scored("c", 1), Scored("d", 7)]
        ranked = list(sort_results(results))
        assert [r.score for r in ranked] == [7, 7, 3, 1]
        assert {r.data for r in ranked[:2]} == {"b", "d"}

    def test_ties_keep_input_order(self):
        results = [Scored("first", 5), Scored("second", 5), Scored("third", 5)]
        assert [r.data for r in sort_results(results)] == ["first", "second", "third"]

    def test_consumes_input_up_front(self):
        """The whole input is drained before the first result is returned."""
        consumed = []

        def stream():
            for n in range(5):
                consumed.append(n)
                yield Scored(str(n), n)

        ranked = sort_results(stream())
        assert consumed == [0, 1, 2, 3, 4]
        assert next(ranked).score == 4

    def test_empty(self):
        assert list(sort_results([])) == []

    def test_custom_key(self):
        words = [WordFreq("ZZ", 100), WordFreq("ABCDEF", 1)]
        ranked = list(sort_results(words, key=len))
        assert ranked[0].word == "ABCDEF"

    def test_mixed_record_types(self):
        results = [WordFreq("LOW", 1), WordlistEntry.from_word("HIGH", 10)]
        assert [r.data for r in sort_results(results)] == ["HIGH", "LOW"]


class TestTopResults:
    def test_top_k(self):
        results = [Scored(str(n), n) for n in range(100)]
        assert [r.score for r in top_results(results, 3)] == [99, 98, 97]

    def test_fewer_than_k(self):
        assert len(top_results([Scored("x", 1)], 10)) == 1


class TestPrinting:
    def test_format_entry(self):
        assert format_result(WordFreq("ICE CREAM", 60)) == "ICE CREAM, 60"

    def test_format_pair(self):
        pair = Pair(WordFreq("STAR", 3), WordlistEntry.from_word("RATS", 4))
        assert format_result(pair) == "STAR, RATS, 12"

    def test_print_result(self, capsys):
        print_result(Scored("TWO", 2))
        assert capsys.readouterr().out == "TWO, 2\n"
