"""
Tests for the wordfreq-backed corpus.
"""

import itertools

from puzzletools.sources import wordfreq_iter, zipf
from puzzletools.wordlist import Wordlist


class TestWordfreqIter:
    def test_top_words(self):
        records = list(wordfreq_iter(n=200))
        slugs = {r.slug for r in records}
        assert "THE" in slugs
        assert all(r.word == r.word.upper() for r in records)

    def test_frequencies_are_ranked(self):
        freqs = [r.freq for r in itertools.islice(wordfreq_iter(n=20), 20)]
        assert all(isinstance(f, int) and f >= 0 for f in freqs)
        assert freqs == sorted(freqs, reverse=True)

    def test_builds_an_index(self):
        wl = Wordlist(wordfreq_iter(n=500))
        assert wl.freq("THE") > 0
        assert wl.freq("THE") >= wl.freq("OF")


class TestZipf:
    def test_common_word(self):
        assert zipf("the") > 6
