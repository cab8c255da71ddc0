"""Keyword frequency ranking over article titles and descriptions."""

from __future__ import annotations

from typing import AbstractSet, Dict, Iterable, List, Tuple

from src.analytics.lexicons import STOP_WORDS
from src.contracts import ArticleModel
from src.utils.text_cleaner import keyword_tokens

TOP_KEYWORDS = 20


def keyword_corpus(articles: Iterable[ArticleModel]) -> str:
    """Title and description of every article joined by single spaces."""

    parts: List[str] = []
    for article in articles:
        parts.append(article.title)
        parts.append(article.description)
    return " ".join(parts)


def top_keywords(
    articles: Iterable[ArticleModel],
    *,
    limit: int = TOP_KEYWORDS,
    stop_words: AbstractSet[str] = STOP_WORDS,
) -> List[Tuple[str, int]]:
    """Most frequent content words as ``(token, count)`` pairs.

    Ordered by descending count; equal counts keep the order in which the
    tokens first appear in the corpus.
    """

    counts: Dict[str, int] = {}
    first_seen: Dict[str, int] = {}
    for position, token in enumerate(keyword_tokens(keyword_corpus(articles), stop_words)):
        if token not in counts:
            counts[token] = 0
            first_seen[token] = position
        counts[token] += 1
    ranked = sorted(counts.items(), key=lambda item: (-item[1], first_seen[item[0]]))
    return ranked[:limit]


__all__ = ["TOP_KEYWORDS", "keyword_corpus", "top_keywords"]
