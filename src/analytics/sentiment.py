"""Lexicon-based sentiment classification."""

from __future__ import annotations

from typing import AbstractSet, Dict, Iterable, List, Tuple

from src.analytics.lexicons import (
    NEGATIVE,
    NEGATIVE_WORDS,
    NEUTRAL,
    POSITIVE,
    POSITIVE_WORDS,
)
from src.contracts import ArticleModel
from src.utils.text_cleaner import whitespace_tokens

SENTIMENT_ORDER: Tuple[str, ...] = (POSITIVE, NEUTRAL, NEGATIVE)


def score_text(
    text: str,
    positive_words: AbstractSet[str] = POSITIVE_WORDS,
    negative_words: AbstractSet[str] = NEGATIVE_WORDS,
) -> Tuple[int, int]:
    """Return ``(positive_hits, negative_hits)`` counted over exact token matches."""

    positive = negative = 0
    for token in whitespace_tokens(text):
        if token in positive_words:
            positive += 1
        if token in negative_words:
            negative += 1
    return positive, negative


def classify_sentiment(article: ArticleModel) -> str:
    positive, negative = score_text(f"{article.title} {article.description}")
    if positive > negative:
        return POSITIVE
    if negative > positive:
        return NEGATIVE
    return NEUTRAL


def sentiment_distribution(articles: Iterable[ArticleModel]) -> List[Tuple[str, int]]:
    """Counts per sentiment in Positive, Neutral, Negative order, zeros omitted."""

    counts: Dict[str, int] = dict.fromkeys(SENTIMENT_ORDER, 0)
    for article in articles:
        counts[classify_sentiment(article)] += 1
    return [(label, counts[label]) for label in SENTIMENT_ORDER if counts[label] > 0]


__all__ = [
    "SENTIMENT_ORDER",
    "classify_sentiment",
    "score_text",
    "sentiment_distribution",
]
