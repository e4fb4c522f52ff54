from datetime import date

import pytest

from homegate.processing.models import DailyActivityRecord, Interval
from homegate.processing.time_format import format_timestamp


def build_record(active_count: int, quota_limit_minutes: int = 720, day: date = date(2025, 1, 6)) -> DailyActivityRecord:
    """A consistent record whose first `active_count` intervals are active."""
    intervals = tuple(
        Interval(
            id=i,
            hour=i // 4,
            quarter=i % 4,
            is_active=i < active_count,
            timestamp=format_timestamp(i // 4, i % 4),
        )
        for i in range(96)
    )
    return DailyActivityRecord(
        date=day,
        intervals=intervals,
        quota_limit_minutes=quota_limit_minutes,
        used_minutes=active_count * 15,
    )


@pytest.fixture
def make_record():
    return build_record
