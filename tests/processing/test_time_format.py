import pytest

from homegate.processing.models import Interval
from homegate.processing.time_format import (
    activity_label,
    end_time,
    format_duration,
    format_timestamp,
    interval_label,
)


@pytest.mark.parametrize("minutes,expected", [
    (480, "8h 0m"),
    (45, "0h 45m"),
    (0, "0h 0m"),
    (135, "2h 15m"),
    (1440, "24h 0m"),
])
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


def test_format_duration_rejects_negative():
    with pytest.raises(ValueError):
        format_duration(-15)


@pytest.mark.parametrize("start,expected", [
    ("08:00", "08:15"),
    ("08:45", "09:00"),
    ("12:30", "12:45"),
    ("23:30", "23:45"),
    ("23:45", "00:00"),
])
def test_end_time(start, expected):
    assert end_time(start) == expected


def test_end_time_rolls_over_midnight():
    assert end_time("23:45") == "00:00"


@pytest.mark.parametrize("start", ["24:00", "12:60", "noon", ""])
def test_end_time_rejects_malformed_timestamps(start):
    with pytest.raises(ValueError):
        end_time(start)


@pytest.mark.parametrize("hour,quarter,expected", [(0, 0, "00:00"), (9, 3, "09:45"), (23, 3, "23:45")])
def test_format_timestamp(hour, quarter, expected):
    assert format_timestamp(hour, quarter) == expected


def test_tooltip_labels():
    active = Interval(id=95, hour=23, quarter=3, is_active=True, timestamp="23:45")
    idle = Interval(id=32, hour=8, quarter=0, is_active=False, timestamp="08:00")
    assert interval_label(active) == "23:45 - 00:00"
    assert activity_label(active) == "Active"
    assert interval_label(idle) == "08:00 - 08:15"
    assert activity_label(idle) == "Idle"
