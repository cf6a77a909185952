"""
puzzletools configuration.

Module-level settings plus the helpers that turn a word list name into a
path. The base directory comes from the ``WORDLIST_DIR`` environment
variable, which may also be set in a ``.env`` file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Optional

from dotenv import find_dotenv, load_dotenv
from tqdm import tqdm

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

WORDLIST_DIR_VAR = "WORDLIST_DIR"
SOLVERTOOLS_DIR_VAR = "SOLVERTOOLS_DIR"
DEFAULT_WORDLIST = "combined.freq.txt"

DEFAULT_TOP = 50
DEFAULT_CANDIDATE_LIMIT = 100000
DEFAULT_MIN_LENGTH = 1

WORDFREQ_LANG = "en"
WORDFREQ_LIST = "best"
WORDFREQ_N = 50000
# word_frequency() returns a proportion; scale it to an integer count.
WORDFREQ_SCALE = 10**9

PROGRESS_ASCII = " ▖▘▝▗▚▞█"
PROGRESS_FORMAT = "{desc}: |{bar:20}|"


# ============================================================================ #
#                              HELPERS                                         #
# ============================================================================ #

def progress(iterable: Iterable, desc: str = "", total: Optional[int] = None):
    return tqdm(iterable, desc=desc, total=total, ascii=PROGRESS_ASCII, bar_format=PROGRESS_FORMAT)


def _load_env() -> None:
    # Existing environment variables win over the .env file.
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)


def _env_dir(var: str) -> Optional[Path]:
    value = os.environ.get(var)
    if value is None:
        return None
    if not value.strip():
        raise ConfigurationError(f"{var} is set but empty")
    path = Path(value).expanduser()
    if path.exists() and not path.is_dir():
        raise ConfigurationError(f"{var} points at a file, not a directory: {path}")
    return path


def wordlist_dir() -> Path:
    """
    Base directory for word list files.

    Returns the directory named by ``WORDLIST_DIR``, or an empty path (the
    current working directory) when the variable is not set.

    Raises:
        ConfigurationError: If the variable is set but blank or names a file
    """
    _load_env()
    path = _env_dir(WORDLIST_DIR_VAR)
    if path is None:
        logger.debug("%s not set, resolving word lists from %s", WORDLIST_DIR_VAR, Path.cwd())
        return Path()
    return path


def resolve_wordlist(name: str | os.PathLike) -> Path:
    """Join a word list name onto ``wordlist_dir()``. Absolute names are kept."""
    return wordlist_dir() / Path(name)


def solvertools_dir() -> Path:
    """Directory of a solvertools checkout. Unlike ``WORDLIST_DIR`` this one is required."""
    _load_env()
    path = _env_dir(SOLVERTOOLS_DIR_VAR)
    if path is None:
        raise ConfigurationError(f"{SOLVERTOOLS_DIR_VAR} is not set")
    return path
