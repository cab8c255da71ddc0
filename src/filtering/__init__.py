"""Article filtering and ordering for the dashboard working set."""

from .filters import (
    describe_active_filters,
    filter_articles,
    filter_options,
    quick_search,
)
from .sorting import relevance_score, sort_articles

__all__ = [
    "describe_active_filters",
    "filter_articles",
    "filter_options",
    "quick_search",
    "relevance_score",
    "sort_articles",
]
