"""
News dashboard analytics and filtering engine.

Turns a raw article collection plus user criteria into a filtered, ordered
working set and chart-ready aggregate statistics.
"""

from config.version import PROJECT_VERSION, PYTHON_REQUIRES_SPECIFIER

from .analytics import analyze, dashboard_stats
from .contracts import (
    ArticleModel,
    ChartDataModel,
    FilterCriteriaModel,
    NewsResponseError,
    NewsResponseModel,
    SortSpecModel,
    load_news_response,
)
from .filtering import (
    describe_active_filters,
    filter_articles,
    filter_options,
    quick_search,
    sort_articles,
)
from .utils import get_logger, setup_logging

__version__ = PROJECT_VERSION

__package_info__ = {
    "name": "newsdash-analytics",
    "version": __version__,
    "description": "Filtering, sorting and chart analytics for a news dashboard",
    "python_requires": PYTHON_REQUIRES_SPECIFIER,
}

__all__ = [
    "ArticleModel",
    "ChartDataModel",
    "FilterCriteriaModel",
    "NewsResponseError",
    "NewsResponseModel",
    "SortSpecModel",
    "analyze",
    "dashboard_stats",
    "describe_active_filters",
    "filter_articles",
    "filter_options",
    "get_logger",
    "load_news_response",
    "quick_search",
    "setup_logging",
    "sort_articles",
]
