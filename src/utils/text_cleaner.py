"""Text normalization helpers shared by the analytics and filtering engines.

Two tokenizers live here on purpose: ``keyword_tokens`` feeds the keyword
frequency chart and strips punctuation, short words and stop words, while
``whitespace_tokens`` only lower-cases and splits. Sentiment scoring relies on
the latter; feeding it the former would change which lexicon entries match.
"""

from __future__ import annotations

import re
import unicodedata
from typing import AbstractSet, Iterator, List

_NON_WORD_RE = re.compile(r"[^\w\s]")

MIN_KEYWORD_LENGTH = 4


def keyword_tokens(text: str, stop_words: AbstractSet[str]) -> Iterator[str]:
    """Yield lower-cased content words of ``text`` in order of appearance.

    Punctuation is removed, the text is split on runs of whitespace and tokens
    shorter than ``MIN_KEYWORD_LENGTH`` or listed in ``stop_words`` are dropped.
    """

    cleaned = _NON_WORD_RE.sub("", (text or "").lower())
    for token in cleaned.split():
        if len(token) >= MIN_KEYWORD_LENGTH and token not in stop_words:
            yield token


def whitespace_tokens(text: str) -> List[str]:
    """Lower-case ``text`` and split it on whitespace, keeping punctuation."""

    return (text or "").lower().split()


def naive_word_count(text: str) -> int:
    """Count words by splitting on single spaces.

    An empty string counts as one word, as do the empty fragments produced by
    consecutive spaces.
    """

    return len((text or "").split(" "))


def search_terms(query: str, *, min_length: int = 1) -> List[str]:
    """Split a free-text query on whitespace into lower-cased terms."""

    return [term for term in (query or "").lower().split() if len(term) >= min_length]


def collation_key(value: str) -> tuple[str, str, str]:
    """Sort key approximating locale-aware, case-insensitive string ordering.

    Accents and case are ignored at the first level; ties fall back to the
    accented form and then put lowercase before uppercase.
    """

    text = unicodedata.normalize("NFKD", value or "")
    base = "".join(char for char in text if not unicodedata.combining(char))
    return base.casefold(), text.casefold(), text.swapcase()


__all__ = [
    "MIN_KEYWORD_LENGTH",
    "collation_key",
    "keyword_tokens",
    "naive_word_count",
    "search_terms",
    "whitespace_tokens",
]
