"""Exceptions raised by puzzletools.

A lookup miss is never an error: ``Wordlist.get`` returns ``None`` and
``Wordlist.freq`` returns 0. Everything below is terminal to the
operation that raised it.
"""

from __future__ import annotations

from typing import Optional


class PuzzleToolsError(Exception):
    """Base class for all puzzletools errors."""


class CorpusNotFoundError(PuzzleToolsError, FileNotFoundError):
    """A word list file could not be found or opened."""


class ParseError(PuzzleToolsError, ValueError):
    """A word list record is not ``<text>,<frequency>``."""

    def __init__(self, message: str, line: Optional[int] = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class IndexOutOfRange(PuzzleToolsError, IndexError):
    """A text position is outside the text."""


class ConfigurationError(PuzzleToolsError):
    """A configuration variable is malformed or a required one is missing."""


class DuplicateSlugError(PuzzleToolsError, ValueError):
    """Two entries share a slug and the index was built with REJECT."""

    def __init__(self, slug: str):
        super().__init__(f"duplicate slug in word list: {slug!r}")
        self.slug = slug
