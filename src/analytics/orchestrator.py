"""Compose the individual aggregators into one chart-data bundle."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from loguru import logger

from src.analytics.categories import category_distribution
from src.analytics.keywords import TOP_KEYWORDS, top_keywords
from src.analytics.lexicons import SENTIMENT_COLORS, palette_color
from src.analytics.sentiment import sentiment_distribution
from src.analytics.sources import TOP_SOURCES, source_distribution
from src.analytics.timeline import daily_counts
from src.contracts import (
    ArticleModel,
    ChartDataModel,
    DashboardStatsModel,
    KeywordCount,
    LabelBucket,
    SourceSlice,
    TimelinePoint,
    coerce_articles,
)


def analyze(
    articles: Iterable[ArticleModel | Mapping[str, Any]],
    *,
    top_sources: int = TOP_SOURCES,
    top_keyword_count: int = TOP_KEYWORDS,
) -> ChartDataModel:
    """Build every chart series from the same article collection.

    Nothing is cached between calls; callers recompute whenever the filtered
    set changes.
    """

    items = coerce_articles(articles)
    if not items:
        return ChartDataModel()

    chart = ChartDataModel(
        source_data=[
            SourceSlice(name=name, count=count, color=palette_color(index))
            for index, (name, count) in enumerate(
                source_distribution(items, limit=top_sources)
            )
        ],
        sentiment_data=[
            LabelBucket(label=label, count=count, color=SENTIMENT_COLORS[label])
            for label, count in sentiment_distribution(items)
        ],
        category_data=[
            LabelBucket(label=label, count=count, color=palette_color(index))
            for index, (label, count) in enumerate(category_distribution(items))
        ],
        keyword_data=[
            KeywordCount(token=token, count=count)
            for token, count in top_keywords(items, limit=top_keyword_count)
        ],
        timeline_data=[
            TimelinePoint(date=day, count=count) for day, count in daily_counts(items)
        ],
    )
    logger.debug(
        f"Analyzed {len(items)} articles: {len(chart.source_data)} sources, "
        f"{len(chart.category_data)} categories, {len(chart.keyword_data)} keywords"
    )
    return chart


def dashboard_stats(
    articles: Iterable[ArticleModel | Mapping[str, Any]],
    chart_data: ChartDataModel | None = None,
) -> DashboardStatsModel:
    """Headline counters shown above the article list."""

    items = coerce_articles(articles)
    chart = chart_data if chart_data is not None else analyze(items)
    return DashboardStatsModel(
        total_articles=len(items),
        sources=len({article.source.name for article in items}),
        categories=len(chart.category_data),
    )


__all__ = ["analyze", "dashboard_stats"]
