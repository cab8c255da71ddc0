"""Per-source article counts."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from src.contracts import ArticleModel

TOP_SOURCES = 8


def source_distribution(
    articles: Iterable[ArticleModel], *, limit: int = TOP_SOURCES
) -> List[Tuple[str, int]]:
    """The ``limit`` sources with most articles.

    Equal counts keep the order in which each source name first appears.
    """

    counts: Dict[str, int] = {}
    first_seen: Dict[str, int] = {}
    for article in articles:
        name = article.source.name
        if name not in counts:
            counts[name] = 0
            first_seen[name] = len(first_seen)
        counts[name] += 1
    ranked = sorted(counts.items(), key=lambda item: (-item[1], first_seen[item[0]]))
    return ranked[:limit]


__all__ = ["TOP_SOURCES", "source_distribution"]
