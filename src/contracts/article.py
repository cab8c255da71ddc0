"""Contracts for articles and the upstream news response."""

from __future__ import annotations

from typing import Any, Iterable, List, Literal, Mapping, Optional, TypedDict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArticleSource(TypedDict, total=False):
    id: Optional[str]
    name: str


class ArticlePayload(TypedDict, total=False):
    """Article as delivered by the news retrieval layer."""

    url: str
    title: str
    description: Optional[str]
    content: Optional[str]
    author: Optional[str]
    urlToImage: Optional[str]
    source: ArticleSource
    publishedAt: str


class SourceModel(BaseModel):
    """Publisher of an article; ``name`` is the aggregation key."""

    id: Optional[str] = None
    name: str = Field(min_length=1)

    model_config = ConfigDict(extra="allow", frozen=True)


class ArticleModel(BaseModel):
    """Read-only article accepted by the filtering and analytics engines.

    Optional text fields are normalized to ``""`` so downstream text
    operations never see ``None``. ``published_at`` keeps the raw upstream
    string; parsing happens where a comparison needs it.
    """

    url: str = ""
    title: str = Field(min_length=1)
    description: str = ""
    content: str = ""
    author: str = ""
    url_to_image: str = Field(default="", alias="urlToImage")
    source: SourceModel
    published_at: str = Field(default="", alias="publishedAt")

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    @field_validator(
        "url",
        "description",
        "content",
        "author",
        "url_to_image",
        "published_at",
        mode="before",
    )
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class NewsResponseModel(BaseModel):
    """Envelope returned by the news retrieval layer."""

    status: Literal["ok", "error"] = "ok"
    total_results: int = Field(default=0, ge=0, alias="totalResults")
    articles: List[ArticleModel] = Field(default_factory=list)
    code: Optional[str] = None
    message: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("articles", mode="before")
    @classmethod
    def none_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value


class NewsResponseError(ValueError):
    """Raised when the retrieval layer reports an error payload."""


def coerce_article(article: ArticleModel | Mapping[str, Any]) -> ArticleModel:
    """Validate a mapping into an ArticleModel; models pass through unchanged."""

    if isinstance(article, ArticleModel):
        return article
    return ArticleModel.model_validate(article)


def coerce_articles(
    articles: Iterable[ArticleModel | Mapping[str, Any]],
) -> List[ArticleModel]:
    """Return a new list of validated articles, preserving input order."""

    return [coerce_article(article) for article in articles]


def load_news_response(
    payload: NewsResponseModel | Mapping[str, Any],
    *,
    max_articles: Optional[int] = None,
) -> NewsResponseModel:
    """Validate an upstream payload, raising NewsResponseError on ``status: error``."""

    response = (
        payload
        if isinstance(payload, NewsResponseModel)
        else NewsResponseModel.model_validate(payload)
    )
    if response.status == "error":
        detail = response.message or response.code or "unknown error"
        raise NewsResponseError(f"News API error: {detail}")
    if max_articles is not None and len(response.articles) > max_articles:
        response = response.model_copy(
            update={"articles": response.articles[:max_articles]}
        )
    return response
