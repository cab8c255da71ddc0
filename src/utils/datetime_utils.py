from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as date_parser

# Two unrelated fill-in dates; a value parses identically under both only when
# it names its own year, month and day.
_FILL_IN_DEFAULTS = (datetime(2000, 1, 1), datetime(2011, 12, 31))

DATE_RANGE_WINDOWS = {
    "week": timedelta(days=7),
    "month": timedelta(days=30),
}


def parse_published_at(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse an article timestamp into an aware UTC datetime.

    Naive values are treated as UTC. Returns None for empty or unparsable
    input, and for fragments such as "Tuesday", "10:00" or "March" that lack
    an explicit calendar date, so the article never matches a date constraint.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            dt, other = (
                date_parser.parse(text, default=default) for default in _FILL_IN_DEFAULTS
            )
        except (ValueError, OverflowError):
            return None
        if dt.date() != other.date():
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def resolve_timezone(tz: Union[str, tzinfo, None]) -> tzinfo:
    """Return a tzinfo for a zoneinfo key, falling back to UTC."""
    if tz is None:
        return timezone.utc
    if isinstance(tz, tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def current_time(tz: Union[str, tzinfo, None] = None) -> datetime:
    """Current instant expressed in the requested timezone."""
    return datetime.now(resolve_timezone(tz))


def date_range_cutoff(date_range: str, now: datetime) -> Optional[datetime]:
    """
    Earliest publish instant admitted by a date-range window.

    ``today`` starts at midnight of ``now`` in its own timezone; ``week`` and
    ``month`` are rolling 7 and 30 day windows. ``all`` has no cutoff.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if date_range == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    window = DATE_RANGE_WINDOWS.get(date_range)
    if window is None:
        return None
    return now - window


def utc_day(dt: datetime) -> date:
    """Calendar day of an aware datetime in UTC."""
    return dt.astimezone(timezone.utc).date()


__all__ = [
    "DATE_RANGE_WINDOWS",
    "current_time",
    "date_range_cutoff",
    "parse_published_at",
    "resolve_timezone",
    "utc_day",
]
