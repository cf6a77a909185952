"""Tools for solving word puzzles against a frequency-weighted word list."""

from .errors import (
    ConfigurationError, CorpusNotFoundError, DuplicateSlugError, IndexOutOfRange,
    ParseError, PuzzleToolsError,
)
from .search import format_result, print_result, score_of, sort_results, top_results
from .text import TextView, as_bytes, as_str
from .word import slugify
from .wordlist import (
    DuplicatePolicy, Pair, WordFreq, Wordlist, WordlistEntry, WordlistReader, load_wordlist_file,
    load_wordlist_iter, pairs, pairs_filter, pairs_iter, wordlist_iter,
)

build_index = Wordlist.build
rank = sort_results

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError", "CorpusNotFoundError", "DuplicatePolicy", "DuplicateSlugError",
    "IndexOutOfRange", "Pair", "ParseError", "PuzzleToolsError", "TextView", "WordFreq",
    "Wordlist", "WordlistEntry", "WordlistReader", "as_bytes", "as_str", "build_index", "format_result",
    "load_wordlist_file", "load_wordlist_iter", "pairs", "pairs_filter", "pairs_iter",
    "print_result", "rank", "score_of", "slugify", "sort_results", "top_results",
    "wordlist_iter",
]
