from datetime import datetime, timedelta, timezone

import pytest

from src.utils.datetime_utils import (
    date_range_cutoff,
    parse_published_at,
    resolve_timezone,
    utc_day,
)


def test_parse_various_timestamp_forms():
    dt = parse_published_at("2025-03-10T12:00:00Z")
    assert dt == datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)

    offset = parse_published_at("2025-09-30T12:00:00-03:00")
    assert offset == datetime(2025, 9, 30, 15, 0, tzinfo=timezone.utc)

    rfc = parse_published_at("Tue, 15 Jan 2019 12:45:26 GMT")
    assert rfc is not None and rfc.tzinfo == timezone.utc

    naive = parse_published_at("2024-01-01 00:00:00")
    assert naive == datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2024-13-45T99:00:00Z"])
def test_unparsable_timestamps_return_none(value):
    assert parse_published_at(value) is None


@pytest.mark.parametrize("value", ["Tuesday", "10:00", "23:59", "5", "March", "10/03"])
def test_fragments_without_a_calendar_date_return_none(value):
    assert parse_published_at(value) is None


def test_date_without_time_is_midnight_utc():
    assert parse_published_at("2025-03-10") == datetime(2025, 3, 10, tzinfo=timezone.utc)
    assert parse_published_at("10 March 2025") == datetime(2025, 3, 10, tzinfo=timezone.utc)


def test_cutoffs_for_each_date_range():
    now = datetime(2025, 3, 10, 15, 30, 12, tzinfo=timezone.utc)
    assert date_range_cutoff("all", now) is None
    assert date_range_cutoff("today", now) == datetime(2025, 3, 10, tzinfo=timezone.utc)
    assert date_range_cutoff("week", now) == now - timedelta(days=7)
    assert date_range_cutoff("month", now) == now - timedelta(days=30)


def test_today_cutoff_uses_the_timezone_of_now():
    tz = resolve_timezone("America/New_York")
    if tz is timezone.utc:
        pytest.skip("ZoneInfo data for America/New_York not available")
    now = datetime(2025, 3, 10, 1, 0, tzinfo=timezone.utc).astimezone(tz)
    cutoff = date_range_cutoff("today", now)
    assert cutoff.date().isoformat() == "2025-03-09"
    assert (cutoff.hour, cutoff.minute) == (0, 0)


def test_unknown_timezone_falls_back_to_utc():
    assert resolve_timezone("Mars/Olympus_Mons") is timezone.utc
    assert resolve_timezone(None) is timezone.utc


def test_utc_day_converts_before_truncating():
    local = datetime(2025, 3, 10, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert utc_day(local).isoformat() == "2025-03-11"
