"""Contracts for user-supplied filter criteria and sort specifications."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DateRange = Literal["all", "today", "week", "month"]
SortKey = Literal["date", "source", "relevance"]
SortOrder = Literal["asc", "desc"]


class FilterCriteriaModel(BaseModel):
    """Conjunction of optional constraints; defaults mean "no constraint"."""

    keywords: str = ""
    author: str = ""
    source: str = ""
    date_range: DateRange = Field(default="all", alias="dateRange")
    has_image: bool = Field(default=False, alias="hasImage")
    min_word_count: int = Field(default=0, ge=0, alias="minWordCount")

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    @field_validator("keywords", "author", "source", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class SortSpecModel(BaseModel):
    """Sort key and direction applied after filtering."""

    sort_by: SortKey = Field(default="date", alias="sortBy")
    sort_order: SortOrder = Field(default="desc", alias="sortOrder")

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)


def coerce_criteria(
    criteria: FilterCriteriaModel | Mapping[str, Any] | None,
) -> FilterCriteriaModel:
    if criteria is None:
        return FilterCriteriaModel()
    if isinstance(criteria, FilterCriteriaModel):
        return criteria
    return FilterCriteriaModel.model_validate(criteria)


def coerce_sort_spec(
    spec: SortSpecModel | Mapping[str, Any] | None,
    *,
    defaults: Optional[Mapping[str, Any]] = None,
) -> SortSpecModel:
    if isinstance(spec, SortSpecModel):
        return spec
    merged = dict(defaults or {})
    merged.update(spec or {})
    return SortSpecModel.model_validate(merged)
