#!/usr/bin/env python3
"""
puzzletools command line.

Usage:
  puzzletools lookup PAIRS AIRS
  puzzletools --min-length 4 --top 50 reversals
  puzzletools --min-length 4 replace "[B-E]" A
  puzzletools --min-freq 10000 insertions
  puzzletools anagrams "SNOOP"
  puzzletools --source wordfreq reversals
"""

from __future__ import annotations

import argparse
import itertools
import logging
import re
import string
import sys
from typing import Iterable, Iterator, List, Optional

from . import config
from .errors import PuzzleToolsError
from .search import format_result, print_result, top_results
from .sources import wordfreq_iter
from .wordlist import Pair, Record, Wordlist, load_wordlist_iter, pairs, pairs_filter, pairs_iter
from .word import alphagram, reversed_slug, slugify

logger = logging.getLogger(__name__)


# ============================================================================ #
#                              CORPUS                                          #
# ============================================================================ #

def load_records(args: argparse.Namespace) -> Iterator[Record]:
    """Stream the selected corpus, dropping entries that are too short or too rare."""
    if args.source == "wordfreq":
        records: Iterable[Record] = wordfreq_iter(n=args.wordfreq_n)
    else:
        records = load_wordlist_iter(args.wordlist)
    for record in records:
        if len(record) >= args.min_length and record.freq >= args.min_freq:
            yield record


def load_index(args: argparse.Namespace) -> Wordlist:
    return Wordlist(load_records(args), progress=args.progress)


def show_ranked(results: Iterable[Pair], args: argparse.Namespace) -> None:
    candidates = itertools.islice(results, args.limit)
    for result in top_results(candidates, args.top):
        print_result(result)


# ============================================================================ #
#                              COMMANDS                                        #
# ============================================================================ #

def cmd_lookup(args: argparse.Namespace) -> None:
    wl = load_index(args)
    for word in args.words:
        slug = slugify(word.upper())
        entry = wl.get(slug)
        print(format_result(entry) if entry is not None else f"{word}, 0")


def cmd_reversals(args: argparse.Namespace) -> None:
    wl = load_index(args)
    show_ranked(pairs(wl, wl, lambda w: reversed_slug(w.slug)), args)


def cmd_replace(args: argparse.Namespace) -> None:
    pattern = re.compile(args.pattern)

    def replaced(w: Record) -> Optional[str]:
        new = pattern.sub(args.replacement, w.slug)
        # Only words the pattern actually changes.
        return new if new != w.slug else None

    wl = load_index(args)
    show_ranked(pairs_filter(wl, wl, replaced), args)


def cmd_insertions(args: argparse.Namespace) -> None:
    def inserted(w: Record) -> List[str]:
        slug = w.slug
        candidates = (
            slug[:i] + c + slug[i:]
            for i in range(len(slug) + 1)
            for c in string.ascii_uppercase
        )
        return list(dict.fromkeys(candidates))

    wl = load_index(args)
    show_ranked(pairs_iter(wl, wl, inserted), args)


def cmd_anagrams(args: argparse.Namespace) -> None:
    slug = slugify(args.word.upper())
    key = alphagram(slug)
    matches = (r for r in load_records(args) if r.slug != slug and alphagram(r.slug) == key)
    for result in top_results(itertools.islice(matches, args.limit), args.top):
        print_result(result)


# ============================================================================ #
#                              MAIN                                            #
# ============================================================================ #

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="puzzletools", description="Search a frequency word list for puzzle answers")
    parser.add_argument('--wordlist', default=config.DEFAULT_WORDLIST,
                        help=f'Word list file, relative to ${config.WORDLIST_DIR_VAR} (default: {config.DEFAULT_WORDLIST})')
    parser.add_argument('--source', choices=('file', 'wordfreq'), default='file',
                        help='Read the word list file, or use the wordfreq package (default: file)')
    parser.add_argument('--wordfreq-n', type=int, default=config.WORDFREQ_N,
                        help=f'Number of wordfreq words to use (default: {config.WORDFREQ_N})')
    parser.add_argument('--top', type=int, default=config.DEFAULT_TOP, help=f'Show top N results (default: {config.DEFAULT_TOP})')
    parser.add_argument('--limit', type=int, default=config.DEFAULT_CANDIDATE_LIMIT,
                        help=f'Rank at most N matches (default: {config.DEFAULT_CANDIDATE_LIMIT})')
    parser.add_argument('--min-length', type=int, default=config.DEFAULT_MIN_LENGTH, help='Skip shorter words')
    parser.add_argument('--min-freq', type=int, default=0, help='Skip rarer words')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar while indexing')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('lookup', help='Print the frequency of each word')
    p.add_argument('words', nargs='+')
    p.set_defaults(func=cmd_lookup)

    p = sub.add_parser('reversals', help='Words whose reversal is also a word')
    p.set_defaults(func=cmd_reversals)

    p = sub.add_parser('replace', help='Words that become other words under a regex substitution')
    p.add_argument('pattern')
    p.add_argument('replacement')
    p.set_defaults(func=cmd_replace)

    p = sub.add_parser('insertions', help='Words that become other words by inserting one letter')
    p.set_defaults(func=cmd_insertions)

    p = sub.add_parser('anagrams', help='Anagrams of a word')
    p.add_argument('word')
    p.set_defaults(func=cmd_anagrams)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except PuzzleToolsError as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
