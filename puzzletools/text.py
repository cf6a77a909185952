"""
Uniform access to text, whatever shape it comes in.

Puzzle predicates get handed ``str`` slugs, ``bytes`` buffers, slices of
either, or word list entries. ``as_bytes`` turns any of these into bytes,
and ``TextView`` offers 0-indexed and 1-indexed letter access over the
result (puzzle clues count letters from 1).

    >>> t = TextView("TEXT")
    >>> t.char(2), t.char_1(3), t.get_char_1(5)
    ('X', 'X', None)
"""

from __future__ import annotations

from typing import Iterator, Optional, Protocol, Union

from .errors import IndexOutOfRange


class SupportsAsBytes(Protocol):
    """Anything with an ``as_bytes()`` method counts as text."""

    def as_bytes(self) -> bytes: ...


TextLike = Union[str, bytes, bytearray, memoryview, SupportsAsBytes]


def as_bytes(s: TextLike) -> bytes:
    if isinstance(s, bytes):
        return s
    if isinstance(s, str):
        return s.encode("ascii", errors="strict")
    if isinstance(s, (bytearray, memoryview)):
        return bytes(s)
    method = getattr(s, "as_bytes", None)
    if callable(method):
        return method()
    raise TypeError(f"expected text, got {type(s).__name__}")


def as_str(s: TextLike) -> str:
    if isinstance(s, str):
        return s
    return as_bytes(s).decode("ascii")


class TextView:
    """Read-only letter access over any text-like value."""

    __slots__ = ("_data",)

    def __init__(self, s: TextLike) -> None:
        self._data = s._data if isinstance(s, TextView) else as_bytes(s)

    def as_bytes(self) -> bytes:
        return self._data

    def as_str(self) -> str:
        return self._data.decode("ascii")

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"TextView({self.as_str()!r})"

    def __str__(self) -> str:
        return self.as_str()

    def __eq__(self, other: object) -> bool:
        try:
            return self._data == as_bytes(other)  # type: ignore[arg-type]
        except (TypeError, UnicodeEncodeError):
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __contains__(self, sub: TextLike) -> bool:
        return as_bytes(sub) in self._data

    def startswith(self, prefix: TextLike) -> bool:
        return self._data.startswith(as_bytes(prefix))

    def endswith(self, suffix: TextLike) -> bool:
        return self._data.endswith(as_bytes(suffix))

    def bytes(self) -> Iterator[int]:
        return iter(self._data)

    def chars(self) -> Iterator[str]:
        return (chr(b) for b in self._data)

    def reversed(self) -> str:
        return self.as_str()[::-1]

    # -- 0-indexed ---------------------------------------------------------- #

    def byte(self, idx: int) -> int:
        if not 0 <= idx < len(self._data):
            raise IndexOutOfRange(f"index {idx} out of range for text of length {len(self._data)}")
        return self._data[idx]

    def char(self, idx: int) -> str:
        return chr(self.byte(idx))

    def get_byte(self, idx: int) -> Optional[int]:
        if 0 <= idx < len(self._data):
            return self._data[idx]
        return None

    def get_char(self, idx: int) -> Optional[str]:
        b = self.get_byte(idx)
        return None if b is None else chr(b)

    def byte_eq(self, idx: int, b: int) -> bool:
        return self.get_byte(idx) == b

    def char_eq(self, idx: int, c: str) -> bool:
        return self.get_char(idx) == c

    # -- 1-indexed ---------------------------------------------------------- #
    # Position 0 does not exist when counting from 1.

    def byte_1(self, idx: int) -> int:
        if idx < 1:
            raise IndexOutOfRange(f"1-indexed position must be at least 1, got {idx}")
        return self.byte(idx - 1)

    def char_1(self, idx: int) -> str:
        return chr(self.byte_1(idx))

    def get_byte_1(self, idx: int) -> Optional[int]:
        if idx < 1:
            return None
        return self.get_byte(idx - 1)

    def get_char_1(self, idx: int) -> Optional[str]:
        b = self.get_byte_1(idx)
        return None if b is None else chr(b)

    def byte_1_eq(self, idx: int, b: int) -> bool:
        return self.get_byte_1(idx) == b

    def char_1_eq(self, idx: int, c: str) -> bool:
        return self.get_char_1(idx) == c
