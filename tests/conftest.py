from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.contracts import ArticleModel


ArticleFactory = Callable[..., ArticleModel]


def build_article(
    title: str = "Untitled story",
    *,
    url: str | None = None,
    description: str | None = "",
    content: str | None = "",
    author: str | None = None,
    source: str = "Reuters",
    published_at: str = "2025-03-10T12:00:00Z",
    url_to_image: str | None = None,
) -> ArticleModel:
    payload: Dict[str, Any] = {
        "url": url or f"https://example.com/{abs(hash((title, source, published_at)))}",
        "title": title,
        "description": description,
        "content": content,
        "author": author,
        "source": {"id": None, "name": source},
        "publishedAt": published_at,
        "urlToImage": url_to_image,
    }
    return ArticleModel.model_validate(payload)


@pytest.fixture
def make_article() -> ArticleFactory:
    return build_article
