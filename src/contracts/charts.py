"""Contracts for chart-ready aggregates produced by the analytics engine."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class _ChartModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class SourceSlice(_ChartModel):
    name: str
    count: int = Field(ge=1)
    color: str


class LabelBucket(_ChartModel):
    """Sentiment or category bucket; zero-count buckets are never emitted."""

    label: str
    count: int = Field(ge=1)
    color: str


class KeywordCount(_ChartModel):
    token: str
    count: int = Field(ge=1)


class TimelinePoint(_ChartModel):
    date: str
    count: int = Field(ge=1)


class ChartDataModel(_ChartModel):
    """Bundle consumed by the rendering layer."""

    source_data: List[SourceSlice] = Field(default_factory=list, alias="sourceData")
    sentiment_data: List[LabelBucket] = Field(default_factory=list, alias="sentimentData")
    category_data: List[LabelBucket] = Field(default_factory=list, alias="categoryData")
    keyword_data: List[KeywordCount] = Field(default_factory=list, alias="keywordData")
    timeline_data: List[TimelinePoint] = Field(default_factory=list, alias="timelineData")


class DashboardStatsModel(_ChartModel):
    total_articles: int = Field(ge=0, alias="totalArticles")
    sources: int = Field(ge=0)
    categories: int = Field(ge=0)
