"""Data sets: the NATO alphabet and the chemical elements."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

from .code import read_table
from .text import TextLike, as_str

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class ChemicalElement:
    number: int
    symbol: str
    name: str


def map_by(items: Iterable[T], key: Callable[[T], K]) -> Dict[K, T]:
    """Index items by ``key``; later items replace earlier ones with the same key."""
    return {key(item): item for item in items}


@lru_cache(maxsize=None)
def nato_alphabet() -> Tuple[str, ...]:
    """ALFA, BRAVO, ... ZULU, indexed from 0."""
    return tuple(row[0] for row in read_table("nato_phonetic_alphabet.txt"))


@lru_cache(maxsize=None)
def chemical_elements() -> Tuple[ChemicalElement, ...]:
    return tuple(
        ChemicalElement(number=int(number), symbol=symbol, name=name)
        for number, symbol, name in read_table("elements.tsv")
    )


@lru_cache(maxsize=None)
def _elements_by_upper_symbol() -> Dict[str, ChemicalElement]:
    return map_by(chemical_elements(), lambda e: e.symbol.upper())


def parse_as_element_symbols(s: TextLike) -> Tuple[int, Optional[List[ChemicalElement]]]:
    """
    Split a slug into chemical element symbols.

    Returns the number of distinct ways to do it, and one such split (or
    None if there is none). Two-letter symbols are preferred when both
    lengths work at a position.

        >>> count, split = parse_as_element_symbols("THESOUTH")
        >>> count, [e.symbol for e in split]
        (1, ['Th', 'Es', 'O', 'U', 'Th'])
    """
    text = as_str(s)
    by_symbol = _elements_by_upper_symbol()
    # ways[i]: number of splits of text[i:]; step[i]: symbol length to take at i
    ways = [0] * (len(text) + 1)
    step = [0] * (len(text) + 1)
    ways[len(text)] = 1
    for i in range(len(text) - 1, -1, -1):
        for size in (2, 1):
            if i + size <= len(text) and text[i:i + size] in by_symbol:
                ways[i] += ways[i + size]
                if ways[i + size] and not step[i]:
                    step[i] = size
    if ways[0] == 0:
        return 0, None
    split = []
    i = 0
    while i < len(text):
        split.append(by_symbol[text[i:i + step[i]]])
        i += step[i]
    return ways[0], split
