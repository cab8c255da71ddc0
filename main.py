# main.py
# Command-line runner for the news dashboard engine
# =================================================

"""
Reads an upstream news response (``{status, totalResults, articles}``) from a
JSON file, applies filter criteria and a sort spec, and prints the ordered
working set together with chart data, headline stats and active filter labels
as a JSON document on stdout.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import ValidationError

from newsdash.config_manager import Config, ConfigError, load_config
from src.analytics import analyze, dashboard_stats
from src.contracts import (
    FilterCriteriaModel,
    NewsResponseError,
    SortSpecModel,
    load_news_response,
)
from src.filtering import describe_active_filters, filter_articles, sort_articles
from src.utils.datetime_utils import current_time
from src.utils.logger import log_function_calls, setup_logging


class DashboardRunner:
    """Coordinates one filter, sort and analyze pass over a loaded response."""

    def __init__(self, config: Config):
        self.config = config

    @log_function_calls
    def run(
        self,
        payload: Dict[str, Any],
        criteria: FilterCriteriaModel,
        sort_spec: SortSpecModel,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        response = load_news_response(
            payload, max_articles=self.config.dashboard.max_articles
        )
        logger.info(
            f"Loaded {len(response.articles)} of {response.total_results} reported articles"
        )

        now = current_time(self.config.app.timezone)
        filtered = filter_articles(response.articles, criteria, now=now)
        ordered = sort_articles(filtered, sort_spec, keywords=criteria.keywords)
        chart = analyze(filtered)
        stats = dashboard_stats(filtered, chart)

        shown = ordered[:limit] if limit else ordered
        return {
            "articles": [article.model_dump(by_alias=True) for article in shown],
            "chartData": chart.model_dump(by_alias=True),
            "stats": stats.model_dump(by_alias=True),
            "activeFilters": describe_active_filters(criteria),
        }


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser(config: Config) -> argparse.ArgumentParser:
    dashboard = config.dashboard
    parser = argparse.ArgumentParser(description="News dashboard filtering and analytics")
    parser.add_argument("payload", type=Path, help="JSON file with a news API response")
    parser.add_argument("--keywords", default="", help="Space separated search terms")
    parser.add_argument("--author", default="", help="Exact author name")
    parser.add_argument("--source", default="", help="Exact source name")
    parser.add_argument(
        "--date-range",
        choices=["all", "today", "week", "month"],
        default=dashboard.default_date_range,
    )
    parser.add_argument("--has-image", action="store_true", help="Only articles with an image")
    parser.add_argument("--min-words", type=int, default=0, help="Minimum word count")
    parser.add_argument(
        "--sort-by",
        choices=["date", "source", "relevance"],
        default=dashboard.default_sort_by,
    )
    parser.add_argument(
        "--sort-order", choices=["asc", "desc"], default=dashboard.default_sort_order
    )
    parser.add_argument(
        "--limit", type=_non_negative_int, default=0, help="Articles to print (0 = all)"
    )
    return parser


def _config_path(argv: List[str]) -> Optional[Path]:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=Path)
    known, _ = pre.parse_known_args(argv)
    return known.config


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        config = load_config(_config_path(argv))
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    setup_logging(config.logging.sink_options(), debug=config.app.debug)

    parser = build_parser(config)
    parser.add_argument("--config", type=Path, help="Path to the TOML configuration file")
    args = parser.parse_args(argv)

    try:
        criteria = FilterCriteriaModel(
            keywords=args.keywords,
            author=args.author,
            source=args.source,
            date_range=args.date_range,
            has_image=args.has_image,
            min_word_count=args.min_words,
        )
    except ValidationError as exc:
        parser.error(str(exc))
    sort_spec = SortSpecModel(sort_by=args.sort_by, sort_order=args.sort_order)

    try:
        payload = json.loads(args.payload.read_text(encoding="utf-8"))
        result = DashboardRunner(config).run(payload, criteria, sort_spec, args.limit)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error(f"Could not read {args.payload}: {exc}")
        return 1
    except (NewsResponseError, ValidationError) as exc:
        logger.error(f"Invalid news payload: {exc}")
        return 1

    json.dump(result, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
