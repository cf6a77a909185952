"""
Word frequencies from the ``wordfreq`` package.

A fallback corpus for when no word list file is at hand: the top ``n``
words of a wordfreq list, uppercased, with integer frequencies scaled
from wordfreq's proportions.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterator

from wordfreq import top_n_list, word_frequency, zipf_frequency

from . import config
from .wordlist import WordFreq

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def zipf(word: str, lang: str = config.WORDFREQ_LANG) -> float:
    return zipf_frequency(word, lang)


def wordfreq_iter(
    lang: str = config.WORDFREQ_LANG,
    n: int = config.WORDFREQ_N,
    wordlist: str = config.WORDFREQ_LIST,
    scale: int = config.WORDFREQ_SCALE,
) -> Iterator[WordFreq]:
    """
    Stream the ``n`` most frequent words, most frequent first.

    Words with no letters at all (numbers, symbols) are skipped.
    """
    words = top_n_list(lang, n, wordlist=wordlist)
    logger.info("Loaded %d words from wordfreq (%s, %s)", len(words), lang, wordlist)
    for word in words:
        record = WordFreq(word.upper(), round(word_frequency(word, lang, wordlist=wordlist) * scale))
        if record.slug:
            yield record
