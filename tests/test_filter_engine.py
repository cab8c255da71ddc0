from datetime import datetime, timezone

import pytest

from src.contracts import FilterCriteriaModel
from src.filtering import (
    describe_active_filters,
    filter_articles,
    filter_options,
    quick_search,
)
from src.filtering.filters import article_word_count, matches_terms, search_text

NOW = datetime(2025, 3, 10, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def newsroom(make_article):
    return [
        make_article(
            "OpenAI ships new model",
            description="The release targets developers building assistants",
            author="Jane Doe",
            source="TechCrunch",
            published_at="2025-03-10T09:00:00Z",
            url_to_image="https://img.example.com/1.jpg",
        ),
        make_article(
            "Central bank holds rates",
            description="Policy makers paused again",
            author="John Roe",
            source="Reuters",
            published_at="2025-03-06T09:00:00Z",
        ),
        make_article(
            "Climate report warns of heat",
            description="",
            content="ok",
            source="BBC News",
            published_at="2025-02-20T09:00:00Z",
            url_to_image="https://img.example.com/3.jpg",
        ),
        make_article(
            "Archive piece with broken timestamp",
            description="Date field was mangled upstream",
            source="Reuters",
            published_at="not-a-date",
        ),
    ]


def _titles(articles):
    return [article.title for article in articles]


def test_empty_criteria_returns_everything_in_order(newsroom):
    result = filter_articles(newsroom, FilterCriteriaModel(), now=NOW)
    assert _titles(result) == _titles(newsroom)
    assert result is not newsroom


def test_keywords_match_any_term_across_title_description_and_source(newsroom):
    result = filter_articles(newsroom, {"keywords": "OPENAI climate"}, now=NOW)
    assert _titles(result) == ["OpenAI ships new model", "Climate report warns of heat"]

    by_source = filter_articles(newsroom, {"keywords": "reuters"}, now=NOW)
    assert [article.source.name for article in by_source] == ["Reuters", "Reuters"]


def test_keywords_are_substring_matches(newsroom):
    result = filter_articles(newsroom, {"keywords": "develop"}, now=NOW)
    assert _titles(result) == ["OpenAI ships new model"]


def test_whitespace_only_keywords_do_not_constrain(newsroom):
    result = filter_articles(newsroom, {"keywords": "   "}, now=NOW)
    assert len(result) == len(newsroom)


def test_author_and_source_require_exact_match(newsroom):
    assert _titles(filter_articles(newsroom, {"author": "Jane Doe"}, now=NOW)) == [
        "OpenAI ships new model"
    ]
    assert filter_articles(newsroom, {"author": "jane doe"}, now=NOW) == []
    assert filter_articles(newsroom, {"source": "BBC"}, now=NOW) == []
    assert len(filter_articles(newsroom, {"source": "Reuters"}, now=NOW)) == 2


@pytest.mark.parametrize(
    "date_range, expected",
    [
        ("today", ["OpenAI ships new model"]),
        ("week", ["OpenAI ships new model", "Central bank holds rates"]),
        (
            "month",
            [
                "OpenAI ships new model",
                "Central bank holds rates",
                "Climate report warns of heat",
            ],
        ),
    ],
)
def test_date_ranges_exclude_old_and_unparsable_articles(newsroom, date_range, expected):
    result = filter_articles(newsroom, {"dateRange": date_range}, now=NOW)
    assert _titles(result) == expected


def test_date_range_all_keeps_unparsable_articles(newsroom):
    result = filter_articles(newsroom, {"dateRange": "all"}, now=NOW)
    assert "Archive piece with broken timestamp" in _titles(result)


def test_has_image_requires_non_empty_image_url(newsroom):
    result = filter_articles(newsroom, {"hasImage": True}, now=NOW)
    assert _titles(result) == ["OpenAI ships new model", "Climate report warns of heat"]


def test_min_word_count_uses_naive_counts(make_article):
    short = make_article("Short", description="", content="ok")
    longer = make_article(
        "Longer", description="one two three four five six", content=""
    )
    assert article_word_count(short) == 2
    assert article_word_count(longer) == 7

    result = filter_articles([short, longer], {"minWordCount": 5}, now=NOW)
    assert _titles(result) == ["Longer"]


def test_zero_min_word_count_is_inactive(make_article):
    article = make_article("Bare", description="", content="")
    assert filter_articles([article], {"minWordCount": 0}, now=NOW) == [article]


def test_criteria_combine_conjunctively(newsroom):
    criteria = {"source": "Reuters", "dateRange": "week", "keywords": "bank"}
    assert _titles(filter_articles(newsroom, criteria, now=NOW)) == [
        "Central bank holds rates"
    ]
    criteria["hasImage"] = True
    assert filter_articles(newsroom, criteria, now=NOW) == []


def test_filtering_does_not_mutate_input(newsroom):
    snapshot = list(newsroom)
    filter_articles(newsroom, {"keywords": "climate", "hasImage": True}, now=NOW)
    assert newsroom == snapshot


def test_filtering_is_idempotent(newsroom):
    criteria = FilterCriteriaModel(keywords="reuters", date_range="month")
    once = filter_articles(newsroom, criteria, now=NOW)
    assert filter_articles(once, criteria, now=NOW) == once


def test_search_text_joins_title_description_and_source(make_article):
    article = make_article("Title", description="Desc", source="Wire")
    assert search_text(article) == "title desc wire"


def test_matches_terms_treats_empty_term_list_as_match():
    assert matches_terms([], "anything") is True
    assert matches_terms(["zzz"], "anything") is False
    assert matches_terms(["zzz", "thing"], "anything") is True


def test_quick_search_ignores_short_terms(newsroom):
    assert _titles(quick_search(newsroom, "of")) == _titles(newsroom)
    assert _titles(quick_search(newsroom, "of heat")) == ["Climate report warns of heat"]
    assert _titles(quick_search(newsroom, "")) == _titles(newsroom)


def test_describe_active_filters_lists_set_criteria_in_order():
    criteria = FilterCriteriaModel(
        keywords="ai chips",
        author="Jane Doe",
        source="Reuters",
        date_range="week",
        has_image=True,
        min_word_count=50,
    )
    assert describe_active_filters(criteria) == [
        "Keywords: ai chips",
        "Author: Jane Doe",
        "Source: Reuters",
        "Date: week",
        "Has Image",
        "Min 50 words",
    ]
    assert describe_active_filters(None) == []


def test_filter_options_are_sorted_and_distinct(newsroom):
    options = filter_options(newsroom)
    assert options["sources"] == ["BBC News", "Reuters", "TechCrunch"]
    assert options["authors"] == ["Jane Doe", "John Roe"]


@pytest.mark.parametrize("published_at", ["Tuesday", "23:59", "March"])
def test_today_excludes_timestamps_without_a_calendar_date(make_article, published_at):
    fragment = make_article("Fragment", published_at=published_at)
    dated = make_article("Dated", published_at="2025-03-10T10:00:00Z")
    result = filter_articles([fragment, dated], {"dateRange": "today"}, now=NOW)
    assert _titles(result) == ["Dated"]
