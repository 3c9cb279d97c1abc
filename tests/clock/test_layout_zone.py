from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from temporalis.clock import (
    DEFAULT_LAYOUT,
    TimezoneError,
    convert_timezone,
    format_time,
    instant,
    load_location,
    parse,
    parse_in_location,
    parse_time,
)

NY = ZoneInfo("America/New_York")


def test_format_time() -> None:
    t = datetime(2022, 5, 2, 10, 30)
    assert format_time(t, DEFAULT_LAYOUT) == "2022-05-02 10:30:00"
    assert format_time(t, "%d/%m/%Y") == "02/05/2022"


def test_parse() -> None:
    assert parse(DEFAULT_LAYOUT, "2022-05-02 10:30:00") == datetime(2022, 5, 2, 10, 30)


def test_parse_time_argument_order() -> None:
    assert parse_time("2022-05-02 10:30:00") == parse(DEFAULT_LAYOUT, "2022-05-02 10:30:00")


def test_parse_mismatch_raises() -> None:
    with pytest.raises(ValueError):
        parse(DEFAULT_LAYOUT, "02/05/2022")


def test_parse_with_offset_is_aware() -> None:
    t = parse("%Y-%m-%d %H:%M%z", "2022-05-02 10:30+0200")
    assert t.utcoffset() == timedelta(hours=2)


def test_parse_in_location_attaches_zone() -> None:
    t = parse_in_location(DEFAULT_LAYOUT, "2024-01-15 12:00:00", "America/New_York")
    assert t.tzinfo == NY
    assert t.utcoffset() == timedelta(hours=-5)


def test_parse_in_location_keeps_explicit_offset() -> None:
    t = parse_in_location("%Y-%m-%d %H:%M%z", "2024-01-15 12:00+0000", NY)
    assert t.utcoffset() == timedelta(0)


def test_load_location() -> None:
    assert load_location("Europe/Amsterdam") == ZoneInfo("Europe/Amsterdam")
    assert load_location("") is timezone.utc
    assert load_location("UTC") is timezone.utc
    assert load_location("Local") is not None


def test_unknown_zone_raises() -> None:
    with pytest.raises(TimezoneError) as info:
        load_location("Mars/Olympus_Mons")
    assert info.value.name == "Mars/Olympus_Mons"
    assert "Mars/Olympus_Mons" in str(info.value)


def test_timezone_error_is_key_error() -> None:
    with pytest.raises(KeyError):
        convert_timezone(datetime(2024, 1, 1), "UTC", "Nowhere/Special")


def test_convert_naive_reads_from_zone() -> None:
    t = convert_timezone(datetime(2024, 1, 15, 12, 0), "America/New_York", "UTC")
    assert (t.hour, t.utcoffset()) == (17, timedelta(0))


def test_convert_aware_keeps_instant() -> None:
    src = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)
    t = convert_timezone(src, "Europe/Amsterdam", "America/New_York")
    assert t == src
    assert t.hour == 8


def test_instant() -> None:
    t = instant(2024, 3, 10, 12, tz="America/New_York")
    assert t.utcoffset() == timedelta(hours=-4)
    assert instant(2024, 1, 1).tzinfo is None
    assert instant(2024, 1, 1, tz=timezone.utc).tzinfo is timezone.utc
