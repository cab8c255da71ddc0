"""Shared contracts for validated dashboard payloads."""

from .article import (
    ArticleModel,
    ArticlePayload,
    ArticleSource,
    NewsResponseError,
    NewsResponseModel,
    SourceModel,
    coerce_article,
    coerce_articles,
    load_news_response,
)
from .charts import (
    ChartDataModel,
    DashboardStatsModel,
    KeywordCount,
    LabelBucket,
    SourceSlice,
    TimelinePoint,
)
from .criteria import (
    FilterCriteriaModel,
    SortSpecModel,
    coerce_criteria,
    coerce_sort_spec,
)

__all__ = [
    "ArticleModel",
    "ArticlePayload",
    "ArticleSource",
    "ChartDataModel",
    "DashboardStatsModel",
    "FilterCriteriaModel",
    "KeywordCount",
    "LabelBucket",
    "NewsResponseError",
    "NewsResponseModel",
    "SortSpecModel",
    "SourceModel",
    "SourceSlice",
    "TimelinePoint",
    "coerce_article",
    "coerce_articles",
    "coerce_criteria",
    "coerce_sort_spec",
    "load_news_response",
]
