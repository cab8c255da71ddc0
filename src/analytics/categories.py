"""First-match-wins keyword categorization."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from src.analytics.lexicons import CATEGORY_TABLE, OTHER_CATEGORY
from src.contracts import ArticleModel

CategoryTable = Sequence[Tuple[str, Sequence[str]]]


def classify_category(article: ArticleModel, table: CategoryTable = CATEGORY_TABLE) -> str:
    """Label of the first category with a keyword occurring in title or description.

    Categories are tried in table order and the scan stops at the first hit,
    so an article mentioning both "software" and "market" is Technology.
    """

    text = f"{article.title} {article.description}".lower()
    for label, keywords in table:
        if any(keyword in text for keyword in keywords):
            return label
    return OTHER_CATEGORY


def category_distribution(
    articles: Iterable[ArticleModel], table: CategoryTable = CATEGORY_TABLE
) -> List[Tuple[str, int]]:
    """Counts per category in table order, ``Other`` last, zeros omitted."""

    labels = [label for label, _ in table] + [OTHER_CATEGORY]
    counts: Dict[str, int] = dict.fromkeys(labels, 0)
    for article in articles:
        counts[classify_category(article, table)] += 1
    return [(label, counts[label]) for label in labels if counts[label] > 0]


__all__ = ["classify_category", "category_distribution"]
