"""Stable ordering of an article working set."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from loguru import logger

from src.contracts import ArticleModel, SortSpecModel, coerce_articles, coerce_sort_spec
from src.utils.datetime_utils import parse_published_at
from src.utils.text_cleaner import collation_key


def relevance_score(article: ArticleModel, keywords: str) -> int:
    """Non-overlapping occurrences of the whole keyword string in the title."""

    needle = (keywords or "").strip().lower()
    if not needle:
        return 0
    return article.title.lower().count(needle)


def sort_articles(
    articles: Iterable[ArticleModel | Mapping[str, Any]],
    spec: SortSpecModel | Mapping[str, Any] | None = None,
    *,
    keywords: str = "",
    defaults: Optional[Mapping[str, Any]] = None,
) -> List[ArticleModel]:
    """Return a new list ordered by ``spec``.

    The sort is stable in both directions: articles that compare equal keep
    their input order. Under ``date`` ordering, articles whose timestamp
    cannot be parsed are placed after all dated articles, in input order.
    ``keywords`` is the active keyword filter and only affects ``relevance``.
    """

    items = coerce_articles(articles)
    sort_spec = coerce_sort_spec(spec, defaults=defaults)
    descending = sort_spec.sort_order == "desc"

    if sort_spec.sort_by == "date":
        dated = []
        undated = []
        for article in items:
            published = parse_published_at(article.published_at)
            if published is None:
                undated.append(article)
            else:
                dated.append((published, article))
        dated.sort(key=lambda pair: pair[0], reverse=descending)
        result = [article for _, article in dated] + undated
    elif sort_spec.sort_by == "source":
        result = sorted(
            items,
            key=lambda article: collation_key(article.source.name),
            reverse=descending,
        )
    else:
        result = sorted(
            items,
            key=lambda article: relevance_score(article, keywords),
            reverse=descending,
        )

    logger.debug(
        f"Sorted {len(result)} articles by {sort_spec.sort_by} ({sort_spec.sort_order})"
    )
    return result


__all__ = ["relevance_score", "sort_articles"]
