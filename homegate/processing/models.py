"""
Core data model for a day of device activity.

A day is divided into 96 fixed 15-minute intervals. Records are immutable once
produced; a new date always means a new record.
"""

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from homegate.core.exceptions import MalformedRecordError

# Constants
INTERVAL_MINUTES = 15
INTERVALS_PER_HOUR = 4
HOURS_PER_DAY = 24
INTERVALS_PER_DAY = HOURS_PER_DAY * INTERVALS_PER_HOUR
MINUTES_PER_DAY = HOURS_PER_DAY * 60


@dataclass(frozen=True)
class Interval:
    """One 15-minute slice of a day."""
    id: int
    hour: int
    quarter: int
    is_active: bool
    timestamp: str


@dataclass(frozen=True)
class DailyActivityRecord:
    """All intervals for one calendar day plus the raw used-minute total."""
    date: date
    intervals: Tuple[Interval, ...]
    quota_limit_minutes: int
    used_minutes: int

    @property
    def active_count(self) -> int:
        return sum(1 for interval in self.intervals if interval.is_active)


@dataclass(frozen=True)
class HourBucket:
    """The four intervals of one hour, in quarter order."""
    hour_label: int
    intervals: Tuple[Interval, ...]


@dataclass(frozen=True)
class UsageSummary:
    usage_percentage: int
    is_over_quota: bool
    idle_minutes: int


def validate_record(record: DailyActivityRecord) -> None:
    """
    Check the structural invariants of a record.

    Raises:
        MalformedRecordError: If the interval sequence is not the contiguous
            96-interval day, or the used minutes disagree with it.
    """
    count = len(record.intervals)
    if count != INTERVALS_PER_DAY:
        raise MalformedRecordError(
            f"Expected {INTERVALS_PER_DAY} intervals, got {count}"
        )

    for index, interval in enumerate(record.intervals):
        if interval.id != index:
            raise MalformedRecordError(
                f"Interval at position {index} has id {interval.id}"
            )
        if interval.hour != index // INTERVALS_PER_HOUR or interval.quarter != index % INTERVALS_PER_HOUR:
            raise MalformedRecordError(
                f"Interval {index} has hour/quarter {interval.hour}/{interval.quarter}"
            )

    expected_used = record.active_count * INTERVAL_MINUTES
    if record.used_minutes != expected_used:
        raise MalformedRecordError(
            f"used_minutes is {record.used_minutes} but {record.active_count} "
            f"active intervals account for {expected_used}"
        )

    if record.quota_limit_minutes <= 0:
        raise MalformedRecordError(
            f"quota_limit_minutes must be positive, got {record.quota_limit_minutes}"
        )
