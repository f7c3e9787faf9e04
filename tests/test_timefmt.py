"""Tests for clock arithmetic and text formatting."""

import pytest
from datetime import datetime, time

from caffeine_dose.timefmt import (
    add_minutes,
    convert_to_24h,
    format_clock,
    format_duration,
    format_remaining,
    nearest_future,
)


@pytest.mark.parametrize("hour, marker, expected", [
    ("12", "a", 0),
    ("12", "AM", 0),
    ("12", "pm", 12),
    ("1", "p", 13),
    ("07", "AM", 7),
    ("07", "Pm", 19),
    ("00", "a", 0),
    (11, "p", 23),
    (15, "p", 15),
])
def test_convert_to_24h(hour, marker, expected):
    assert convert_to_24h(hour, marker) == expected


@pytest.mark.parametrize("hour, minute, now_hour, now_minute, expected", [
    (8, 0, 10, 0, 600),     # 8 AM passed, 8 PM ahead
    (11, 0, 10, 0, 60),     # 11 AM ahead
    (10, 0, 10, 0, 1440),   # exactly now rolls over to tomorrow
    (12, 0, 13, 0, 660),    # noon and midnight both passed: midnight tomorrow
    (12, 30, 11, 0, 90),    # 12:30 PM ahead
    (0, 30, 10, 0, 150),    # hour 0 read as 12:30 PM
    (20, 0, 21, 0, 1380),   # 24-hour hour already passed
    (9, 15, 9, 14, 1),
])
def test_nearest_future(hour, minute, now_hour, now_minute, expected):
    assert nearest_future(hour, minute, now_hour, now_minute) == expected


def test_nearest_future_always_ahead():
    for hour in range(24):
        for minute in (0, 1, 29, 59):
            for now_total in range(0, 1440, 7):
                now_hour, now_minute = divmod(now_total, 60)
                got = nearest_future(hour, minute, now_hour, now_minute)
                assert 0 < got <= 1440, (hour, minute, now_hour, now_minute, got)


@pytest.mark.parametrize("hour, minute, minutes, expected", [
    (10, 0, 30, (10, 30)),
    (23, 30, 45, (0, 15)),
    (10, 0, 1440, (10, 0)),
    (0, 0, 0, (0, 0)),
])
def test_add_minutes(hour, minute, minutes, expected):
    assert add_minutes(hour, minute, minutes) == expected


@pytest.mark.parametrize("value, include_seconds, use_24h, expected", [
    (time(20, 5), False, False, "8:05 PM"),
    (time(0, 0), False, False, "12:00 AM"),
    (time(12, 0), False, False, "12:00 PM"),
    (time(9, 30), False, False, "9:30 AM"),
    (time(8, 5), False, True, "08:05"),
    (time(0, 0), False, True, "00:00"),
    (datetime(2026, 10, 19, 20, 5, 9), True, False, "8:05:09 PM"),
    (datetime(2026, 10, 19, 20, 5, 9), True, True, "20:05:09"),
])
def test_format_clock(value, include_seconds, use_24h, expected):
    assert format_clock(value, include_seconds=include_seconds, use_24h=use_24h) == expected


@pytest.mark.parametrize("seconds, expected", [
    (0, "0s left"),
    (45, "45s left"),
    (60, "1m left"),
    (300, "5m left"),
    (330, "5m 30s left"),
    (3599, "59m 59s left"),
    (3600, "1h left"),
    (3601, "1h left"),
    (3660, "1h 1m left"),
    (7200 + 45 * 60 + 12, "2h 45m left"),
])
def test_format_remaining(seconds, expected):
    assert format_remaining(seconds, True) == expected + " - Display can sleep"
    assert format_remaining(seconds, False) == expected + " - Display stays awake"


@pytest.mark.parametrize("minutes, expected", [
    (0, "0 minutes"),
    (1, "1 minute"),
    (45, "45 minutes"),
    (60, "1 hour"),
    (90, "1 hour 30 minutes"),
    (121, "2 hours 1 minute"),
    (180, "3 hours"),
])
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected
