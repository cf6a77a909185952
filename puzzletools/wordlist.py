"""
Word lists: loading, exact lookup by slug, and pair searches.

A word list file is headerless CSV, one ``<text>,<frequency>`` record per
line, usually sorted by descending frequency::

    PAIRS,1
    AIRS,1

``wordlist_iter`` streams ``WordFreq`` records and is the cheapest way to
filter a corpus once. ``Wordlist`` loads everything into memory and adds
constant-time lookup by slug, which is what ``pairs``, ``pairs_filter``
and ``pairs_iter`` probe.
"""

from __future__ import annotations

import csv
import enum
import logging
import os
from dataclasses import dataclass
from typing import (
    Callable, Dict, Iterable, Iterator, List, NamedTuple, Optional, TextIO, Union,
)

from . import config
from .errors import CorpusNotFoundError, DuplicateSlugError, ParseError
from .text import TextLike, as_str
from .word import SLUG_RE, slug_len, slugify

logger = logging.getLogger(__name__)


# ============================================================================ #
#                              RECORDS                                         #
# ============================================================================ #

@dataclass(frozen=True)
class WordFreq:
    """
    One streamed word list record. The slug is recomputed on every access,
    so a single pass over the corpus allocates nothing it does not use.
    """
    word: str
    freq: int

    @property
    def slug(self) -> str:
        return slugify(self.word)

    @property
    def data(self) -> str:
        return self.word

    @property
    def score(self) -> int:
        return self.freq

    def as_bytes(self) -> bytes:
        return self.slug.encode("ascii")

    def __len__(self) -> int:
        return slug_len(self.word)

    def to_entry(self) -> WordlistEntry:
        return WordlistEntry(self.word, self.slug, self.freq)


@dataclass(frozen=True)
class WordlistEntry:
    """A word list record with its slug computed once, as stored in a ``Wordlist``."""
    # The word, including spaces and punctuation.
    word: str
    # The word with spaces and punctuation removed.
    slug: str
    freq: int

    def __post_init__(self) -> None:
        if SLUG_RE.search(self.slug):
            raise ValueError(f"slug must contain only A-Z: {self.slug!r}")

    @classmethod
    def from_word(cls, word: str, freq: int) -> WordlistEntry:
        return cls(word, slugify(word), freq)

    @property
    def data(self) -> str:
        return self.word

    @property
    def score(self) -> int:
        return self.freq

    def as_bytes(self) -> bytes:
        return self.slug.encode("ascii")

    def __len__(self) -> int:
        return len(self.slug)


Record = Union[WordFreq, WordlistEntry]


# ============================================================================ #
#                              LOADING                                         #
# ============================================================================ #

def _parse_freq(value: str, line: int) -> int:
    value = value.strip()
    if not value.isdigit() or not value.isascii():
        raise ParseError(f"frequency is not a non-negative integer: {value!r}", line)
    return int(value)


def wordlist_iter(stream: Iterable[str]) -> Iterator[WordFreq]:
    """
    Lazily parse ``<text>,<frequency>`` records.

    Raises:
        ParseError: On the first malformed record, oversized field or
            undecodable line; nothing after it is read
    """
    reader = csv.reader(stream)
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            raise ParseError(str(e), reader.line_num) from e
        except UnicodeDecodeError as e:
            # Decoding runs ahead of the reader, so the line is approximate.
            raise ParseError(f"invalid UTF-8: {e}", reader.line_num + 1) from e
        if not row:
            continue
        if len(row) != 2:
            raise ParseError(f"expected 2 fields, got {len(row)}: {row!r}", reader.line_num)
        word, freq = row
        yield WordFreq(word, _parse_freq(freq, reader.line_num))


def load_wordlist_file(name: Union[str, os.PathLike]) -> TextIO:
    """
    Open a word list, resolving ``name`` against ``WORDLIST_DIR``.

    Raises:
        CorpusNotFoundError: If the file does not exist or cannot be opened
        ConfigurationError: If ``WORDLIST_DIR`` is malformed
    """
    path = config.resolve_wordlist(name)
    try:
        handle = open(path, "r", encoding="utf-8", newline="")
    except OSError as e:
        raise CorpusNotFoundError(e.errno, f"Word list file not found: {path}", str(path)) from e
    logger.debug("Opened word list %s", path)
    return handle


class WordlistReader:
    """
    Records of an open word list file. The file is closed once the records
    run out, on the first error, on ``close()``, or when the reader is
    garbage collected.

        with load_wordlist_iter("combined.freq.txt") as records:
            first = next(records)
    """

    def __init__(self, handle: TextIO) -> None:
        self._handle = handle
        self._records = wordlist_iter(handle)

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __iter__(self) -> WordlistReader:
        return self

    def __next__(self) -> WordFreq:
        try:
            return next(self._records)
        except BaseException:
            self.close()
            raise

    def close(self) -> None:
        self._records.close()
        self._handle.close()

    def __enter__(self) -> WordlistReader:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()


def load_wordlist_iter(name: Union[str, os.PathLike]) -> WordlistReader:
    """Stream every record of a named word list. The file opens immediately."""
    return WordlistReader(load_wordlist_file(name))


# ============================================================================ #
#                              WORDLIST                                        #
# ============================================================================ #

class DuplicatePolicy(enum.Enum):
    """Which entry ``Wordlist.get`` returns when several share a slug."""
    KEEP_FIRST = "keep_first"
    KEEP_LAST = "keep_last"
    REJECT = "reject"


class Wordlist:
    """
    An immutable, in-memory word list with exact lookup by slug.

    Every entry is kept in load order for iteration. The lookup maps each
    slug to a position in that list; with duplicate slugs, ``policy``
    picks the position (``KEEP_FIRST`` keeps the most frequent entry of a
    frequency-sorted list).

    Entries returned by ``get`` are the stored objects themselves. They
    are frozen, and the list is never modified after construction; to
    change the contents, build a new ``Wordlist``.

    Example:
        >>> wl = Wordlist.load_from_reader(io.StringIO("TWO,2"))
        >>> wl.freq("TWO"), wl.freq("ONE")
        (2, 0)
    """

    def __init__(
        self,
        entries: Iterable[Record] = (),
        *,
        policy: DuplicatePolicy = DuplicatePolicy.KEEP_FIRST,
        progress: bool = False,
    ) -> None:
        if progress:
            entries = config.progress(entries, "Building word list")
        self._entries: List[WordlistEntry] = []
        self._lookup: Dict[str, int] = {}
        self.policy = policy
        duplicates = 0

        for n, item in enumerate(entries):
            entry = item.to_entry() if isinstance(item, WordFreq) else item
            self._entries.append(entry)
            if entry.slug not in self._lookup:
                self._lookup[entry.slug] = n
                continue
            duplicates += 1
            logger.debug("Duplicate slug %s (%s)", entry.slug, entry.word)
            if policy is DuplicatePolicy.REJECT:
                raise DuplicateSlugError(entry.slug)
            if policy is DuplicatePolicy.KEEP_LAST:
                self._lookup[entry.slug] = n

        logger.info("Built word list: %d entries, %d distinct slugs", len(self._entries), len(self._lookup))
        if duplicates:
            logger.info("%d duplicate slugs resolved with %s", duplicates, policy.value)

    @classmethod
    def build(cls, entries: Iterable[Record], **kwargs) -> Wordlist:
        return cls(entries, **kwargs)

    @classmethod
    def load_from_reader(cls, stream: Iterable[str], **kwargs) -> Wordlist:
        return cls(wordlist_iter(stream), **kwargs)

    @classmethod
    def load(cls, name: Union[str, os.PathLike] = config.DEFAULT_WORDLIST, **kwargs) -> Wordlist:
        with load_wordlist_file(name) as handle:
            return cls.load_from_reader(handle, **kwargs)

    def get(self, key: TextLike) -> Optional[WordlistEntry]:
        """The entry whose slug is exactly ``key``, or None."""
        try:
            slug = as_str(key)
        except UnicodeError:
            return None
        n = self._lookup.get(slug)
        return None if n is None else self._entries[n]

    def freq(self, key: TextLike) -> int:
        """Frequency of the slug ``key``, or 0 if it is not in the list."""
        entry = self.get(key)
        return 0 if entry is None else entry.freq

    def iter(self) -> Iterator[WordlistEntry]:
        return iter(self._entries)

    def __iter__(self) -> Iterator[WordlistEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        try:
            return self.get(key) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"<Wordlist {len(self._entries)} entries>"


# ============================================================================ #
#                              PAIR SEARCH                                     #
# ============================================================================ #

class Pair(NamedTuple):
    """A source item and the word list entry its transform matched."""
    first: Record
    second: WordlistEntry

    @property
    def data(self) -> str:
        return f"{self.first.word}, {self.second.word}"

    @property
    def score(self) -> int:
        return self.first.freq * self.second.freq


def pairs(
    source: Iterable[Record],
    target: Wordlist,
    trans: Callable[[Record], TextLike],
) -> Iterator[Pair]:
    """
    Pairs ``(w1, w2)`` with ``w1`` from ``source``, ``w2`` in ``target`` and
    ``w2.slug == trans(w1)``.

        >>> wl = Wordlist.load_from_reader(io.StringIO("AIRS,1\\nPAIRS,1"))
        >>> [p.data for p in pairs(wl, wl, lambda w: w.slug[1:])]
        ['PAIRS, AIRS']
    """
    for w1 in source:
        w2 = target.get(trans(w1))
        if w2 is not None:
            yield Pair(w1, w2)


def pairs_filter(
    source: Iterable[Record],
    target: Wordlist,
    trans: Callable[[Record], Optional[TextLike]],
) -> Iterator[Pair]:
    """Like ``pairs``, but ``trans`` may return None to skip a source item."""
    for w1 in source:
        candidate = trans(w1)
        if candidate is None:
            continue
        w2 = target.get(candidate)
        if w2 is not None:
            yield Pair(w1, w2)


def pairs_iter(
    source: Iterable[Record],
    target: Wordlist,
    trans: Callable[[Record], Iterable[TextLike]],
) -> Iterator[Pair]:
    """
    Like ``pairs``, but ``trans`` proposes any number of candidates per
    source item, and every candidate found in ``target`` yields a pair.
    """
    for w1 in source:
        for candidate in trans(w1):
            w2 = target.get(candidate)
            if w2 is not None:
                yield Pair(w1, w2)
