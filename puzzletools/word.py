"""
Utilities for working with individual words.

Everything here works on slugs: uppercase ASCII letters only. Functions
accept any text-like value (``str``, ``bytes``, word list entries).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from .letter import lett_to_num_0
from .text import TextLike, as_str

SLUG_RE = re.compile(r"[^A-Z]")


def slugify(s: TextLike) -> str:
    """
    Removes spaces and punctuation from a string.

    Lowercase letters are removed too, so only use this with uppercase text:

        >>> slugify("ONE 2 THREE")
        'ONETHREE'
    """
    if not isinstance(s, str):
        s = as_str(s)
    return SLUG_RE.sub("", s)


def slug_len(s: TextLike) -> int:
    """Number of letters in the text, ignoring spaces and punctuation."""
    return sum(1 for c in as_str(s) if c.isascii() and c.isalpha())


def reversed_slug(s: TextLike) -> str:
    return slugify(s)[::-1]


def alphagram(s: TextLike) -> str:
    """Letters in sorted order; two words are anagrams iff their alphagrams match."""
    return "".join(sorted(as_str(s)))


def ciphergram(s: TextLike) -> str:
    """
    Relabel letters in order of first appearance: A, B, C, ...

    Two words have the same ciphergram iff a substitution cipher maps one
    onto the other (POTATO and UNEVEN are both ABCDCB).
    """
    seen = {}
    out = []
    for c in as_str(s):
        if c not in seen:
            seen[c] = chr(ord("A") + len(seen))
        out.append(seen[c])
    return "".join(out)


def all_unique_letters(s: TextLike) -> bool:
    text = as_str(s)
    return len(set(text)) == len(text)


def num_unique_letters(s: TextLike) -> int:
    return len(set(as_str(s)))


def is_addition(s: TextLike, t: TextLike, additions: int) -> bool:
    """True if ``t`` is ``s`` with exactly ``additions`` letters inserted anywhere."""
    short, long = as_str(s), as_str(t)
    if len(short) + additions != len(long):
        return False
    i = 0
    for c in long:
        if i < len(short) and short[i] == c:
            i += 1
        elif additions == 0:
            return False
        else:
            additions -= 1
    return additions == 0


def double_letters(s: TextLike) -> str:
    """Letters that appear twice in a row, in order: PUZZLETOOLS -> ZO."""
    text = as_str(s)
    return "".join(a for a, b in zip(text, text[1:]) if a == b)


def repeated_bigrams(s: TextLike) -> List[str]:
    """
    Bigrams seen more than once. A bigram that appears ``n`` times is
    listed ``n - 1`` times, in order of its repeat occurrences.
    """
    text = as_str(s)
    seen = set()
    repeated = []
    for a, b in zip(text, text[1:]):
        bigram = a + b
        if bigram in seen:
            repeated.append(bigram)
        seen.add(bigram)
    return repeated


def special_letter_block(s: TextLike, pred: Callable[[str], bool]) -> Optional[range]:
    """
    If the letters satisfying ``pred`` form exactly one contiguous block,
    return its positions as a range; otherwise None.
    """
    start = end = None
    text = as_str(s)
    for n, c in enumerate(text):
        if pred(c):
            if start is None:
                start = n
            elif end is not None:
                return None
        elif start is not None and end is None:
            end = n
    if start is None:
        return None
    return range(start, len(text) if end is None else end)


@dataclass(frozen=True)
class DeletedLetter:
    """A word with the letter at ``position`` taken out."""
    original: str
    position: int

    @property
    def deleted_char(self) -> str:
        return self.original[self.position]

    @property
    def text(self) -> str:
        return self.original[:self.position] + self.original[self.position + 1:]


def deleted_letters(s: TextLike) -> Iterator[DeletedLetter]:
    text = as_str(s)
    return (DeletedLetter(text, n) for n in range(len(text)))


def is_intertwine(s: TextLike, pat1: TextLike, pat2: TextLike) -> bool:
    """True if ``s`` interleaves ``pat1`` and ``pat2``, keeping the order of each."""
    s, pat1, pat2 = as_str(s), as_str(pat1), as_str(pat2)
    if len(s) != len(pat1) + len(pat2):
        return False
    # reachable[j]: first i + j letters of s are pat1[:i] interleaved with pat2[:j]
    reachable = [True] * (len(pat2) + 1)
    for j in range(1, len(pat2) + 1):
        reachable[j] = reachable[j - 1] and pat2[j - 1] == s[j - 1]
    for i in range(1, len(pat1) + 1):
        reachable[0] = reachable[0] and pat1[i - 1] == s[i - 1]
        for j in range(1, len(pat2) + 1):
            c = s[i + j - 1]
            reachable[j] = (reachable[j] and pat1[i - 1] == c) or (reachable[j - 1] and pat2[j - 1] == c)
    return reachable[len(pat2)]


def anagram_difference(s: TextLike, t: TextLike) -> Tuple[int, int]:
    """
    Letters of ``s`` missing from ``t`` and letters of ``t`` missing from ``s``.

        >>> anagram_difference("DIFFERENCE", "AIRDEFENCE")
        (1, 1)
    """
    counts = [0] * 26
    for c in as_str(s):
        counts[lett_to_num_0(c)] += 1
    for c in as_str(t):
        counts[lett_to_num_0(c)] -= 1
    only_s = sum(n for n in counts if n > 0)
    only_t = -sum(n for n in counts if n < 0)
    return only_s, only_t
