"""Small helpers for iterables."""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

T = TypeVar("T")


def unique_element(items: Iterable[T]) -> Optional[T]:
    """The only element of ``items``, or None if there are zero or several."""
    it = iter(items)
    for first in it:
        for _ in it:
            return None
        return first
    return None
