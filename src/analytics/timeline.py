"""Daily publication counts for the articles-over-time chart."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Tuple

from src.contracts import ArticleModel
from src.utils.datetime_utils import parse_published_at, utc_day


def daily_counts(articles: Iterable[ArticleModel]) -> List[Tuple[str, int]]:
    """``(YYYY-MM-DD, count)`` pairs ascending by UTC day; unparsable dates skipped."""

    days: Counter = Counter()
    for article in articles:
        published = parse_published_at(article.published_at)
        if published is not None:
            days[utc_day(published)] += 1
    return [(day.isoformat(), days[day]) for day in sorted(days)]


__all__ = ["daily_counts"]
