"""Conjunctive article filtering driven by user criteria."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence

from loguru import logger

from src.contracts import (
    ArticleModel,
    FilterCriteriaModel,
    coerce_articles,
    coerce_criteria,
)
from src.utils.datetime_utils import current_time, date_range_cutoff, parse_published_at
from src.utils.text_cleaner import naive_word_count, search_terms

ArticlePredicate = Callable[[ArticleModel], bool]

QUICK_SEARCH_MIN_TERM_LENGTH = 3


def search_text(article: ArticleModel) -> str:
    """Lower-cased haystack used by keyword searches."""

    return f"{article.title} {article.description} {article.source.name}".lower()


def matches_terms(terms: Sequence[str], text: str) -> bool:
    # all() is subsumed by any() for a non-empty term list; it only decides
    # the outcome when no term survived, in which case everything matches.
    return any(term in text for term in terms) or all(term in text for term in terms)


def article_word_count(article: ArticleModel) -> int:
    return naive_word_count(article.description) + naive_word_count(article.content)


def _published_on_or_after(cutoff: datetime) -> ArticlePredicate:
    def predicate(article: ArticleModel) -> bool:
        published = parse_published_at(article.published_at)
        return published is not None and published >= cutoff

    return predicate


def build_predicates(
    criteria: FilterCriteriaModel, *, now: Optional[datetime] = None
) -> List[ArticlePredicate]:
    """Predicates for every criterion that is set, in evaluation order."""

    predicates: List[ArticlePredicate] = []

    terms = search_terms(criteria.keywords)
    if terms:
        predicates.append(lambda article: matches_terms(terms, search_text(article)))

    if criteria.author:
        predicates.append(lambda article: article.author == criteria.author)

    if criteria.source:
        predicates.append(lambda article: article.source.name == criteria.source)

    if criteria.date_range != "all":
        cutoff = date_range_cutoff(criteria.date_range, now or current_time())
        if cutoff is not None:
            predicates.append(_published_on_or_after(cutoff))

    if criteria.has_image:
        predicates.append(lambda article: bool(article.url_to_image))

    if criteria.min_word_count > 0:
        predicates.append(
            lambda article: article_word_count(article) >= criteria.min_word_count
        )

    return predicates


def filter_articles(
    articles: Iterable[ArticleModel | Mapping[str, Any]],
    criteria: FilterCriteriaModel | Mapping[str, Any] | None = None,
    *,
    now: Optional[datetime] = None,
) -> List[ArticleModel]:
    """Articles satisfying every set criterion, in their original order.

    Returns a new list; the input collection is never modified. ``now`` anchors
    the date-range window and defaults to the current UTC instant.
    """

    items = coerce_articles(articles)
    spec = coerce_criteria(criteria)
    predicates = build_predicates(spec, now=now)
    result = [article for article in items if all(check(article) for check in predicates)]
    logger.debug(
        f"Filtered {len(items)} -> {len(result)} articles with {len(predicates)} active criteria"
    )
    return result


def quick_search(
    articles: Iterable[ArticleModel | Mapping[str, Any]], term: str
) -> List[ArticleModel]:
    """Dashboard search box: terms shorter than three characters are ignored."""

    items = coerce_articles(articles)
    if not (term or "").strip():
        return items
    terms = search_terms(term, min_length=QUICK_SEARCH_MIN_TERM_LENGTH)
    return [article for article in items if matches_terms(terms, search_text(article))]


def describe_active_filters(
    criteria: FilterCriteriaModel | Mapping[str, Any] | None,
) -> List[str]:
    """Short labels for each active criterion, for display as filter chips."""

    spec = coerce_criteria(criteria)
    active: List[str] = []
    if spec.keywords.strip():
        active.append(f"Keywords: {spec.keywords}")
    if spec.author:
        active.append(f"Author: {spec.author}")
    if spec.source:
        active.append(f"Source: {spec.source}")
    if spec.date_range != "all":
        active.append(f"Date: {spec.date_range}")
    if spec.has_image:
        active.append("Has Image")
    if spec.min_word_count > 0:
        active.append(f"Min {spec.min_word_count} words")
    return active


def filter_options(
    articles: Iterable[ArticleModel | Mapping[str, Any]],
) -> dict[str, List[str]]:
    """Sorted distinct sources and non-empty authors for selector widgets."""

    items = coerce_articles(articles)
    return {
        "sources": sorted({article.source.name for article in items}),
        "authors": sorted({article.author for article in items if article.author}),
    }


__all__ = [
    "article_word_count",
    "build_predicates",
    "describe_active_filters",
    "filter_articles",
    "filter_options",
    "matches_terms",
    "quick_search",
    "search_text",
]
