"""Article analytics: keyword, sentiment, category, source and timeline aggregates."""

from .categories import category_distribution, classify_category
from .keywords import top_keywords
from .orchestrator import analyze, dashboard_stats
from .sentiment import classify_sentiment, sentiment_distribution
from .sources import source_distribution
from .timeline import daily_counts

__all__ = [
    "analyze",
    "category_distribution",
    "classify_category",
    "classify_sentiment",
    "daily_counts",
    "dashboard_stats",
    "sentiment_distribution",
    "source_distribution",
    "top_keywords",
]
