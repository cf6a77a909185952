"""
Ranking search results.

A search result is anything with a ``data`` (what to print) and a
``score`` (how likely it is to be the answer). Word list records score by
frequency; ``Pair`` scores by the product of both frequencies.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable, Iterable, Iterator, List, Protocol, Tuple, TypeVar


class SearchResult(Protocol):
    @property
    def data(self) -> Any: ...

    @property
    def score(self) -> int: ...


R = TypeVar("R", bound=SearchResult)


def score_of(result: SearchResult) -> int:
    return result.score


def format_result(result: SearchResult) -> str:
    return f"{result.data}, {result.score}"


def print_result(result: SearchResult) -> None:
    print(format_result(result))


def sort_results(results: Iterable[R], key: Callable[[R], int] = score_of) -> Iterator[R]:
    """
    Yield ``results`` from highest to lowest score.

    The whole input is read into a heap before this returns, so memory is
    linear in the number of results; bound the input (``islice``) when the
    candidate stream is large. Equal scores come out in input order.
    """
    heap: List[Tuple[int, int, R]] = [(-key(r), n, r) for n, r in enumerate(results)]
    heapq.heapify(heap)

    def drain() -> Iterator[R]:
        while heap:
            yield heapq.heappop(heap)[2]

    return drain()


def top_results(results: Iterable[R], k: int, key: Callable[[R], int] = score_of) -> List[R]:
    """The ``k`` highest-scoring results, best first."""
    return list(itertools.islice(sort_results(results, key), k))
