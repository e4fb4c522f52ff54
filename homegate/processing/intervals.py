"""
Interval generation for the device activity dashboard.

Produces the 96 intervals of a calendar day and marks each one active or idle
using a per-hour activation probability. The random source is seeded from the
date, so the same day always yields the same record for a given configuration.
"""

import logging
import random
import re
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from homegate.core.exceptions import InvalidDateError
from homegate.core.settings import DEFAULT_ACTIVITY_BANDS, ActivityBand, check_bands_disjoint
from homegate.processing.models import (
    INTERVAL_MINUTES,
    INTERVALS_PER_DAY,
    INTERVALS_PER_HOUR,
    DailyActivityRecord,
    Interval,
)
from homegate.processing.time_format import format_timestamp

log = logging.getLogger(__name__)

DEFAULT_QUOTA_LIMIT_MINUTES = 12 * 60
DEFAULT_SEED_SALT = "homegate"

DateInput = Union[date, datetime, str]
ISO_DAY_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_day(value: Optional[DateInput]) -> date:
    """
    Resolve a reference date to a calendar day.

    Accepts a date, a datetime (reduced to its date) or a YYYY-MM-DD string.

    Raises:
        InvalidDateError: If the value is missing or not a valid calendar day.
    """
    if value is None:
        raise InvalidDateError("A reference date is required.")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        error = InvalidDateError(f"Invalid date '{value}'. Please use YYYY-MM-DD.")
        if not ISO_DAY_RE.fullmatch(text):
            raise error
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise error
    raise InvalidDateError(f"Unsupported date value of type {type(value).__name__}.")


class IntervalGenerator:
    """Builds a DailyActivityRecord for a given day."""

    def __init__(
        self,
        quota_limit_minutes: int = DEFAULT_QUOTA_LIMIT_MINUTES,
        activity_bands: Sequence[ActivityBand] = DEFAULT_ACTIVITY_BANDS,
        seed_salt: str = DEFAULT_SEED_SALT,
    ):
        if quota_limit_minutes <= 0:
            raise ValueError(f"quota_limit_minutes must be positive, got {quota_limit_minutes}")
        check_bands_disjoint(activity_bands)
        self.quota_limit_minutes = quota_limit_minutes
        self.activity_bands: List[ActivityBand] = list(activity_bands)
        self.seed_salt = seed_salt

    def activation_probability(self, hour: int) -> float:
        """Probability that an interval in `hour` is active. Uncovered hours are idle."""
        for band in self.activity_bands:
            if band.covers(hour):
                return band.probability
        return 0.0

    def _rng_for(self, day: date) -> random.Random:
        return random.Random(f"{self.seed_salt}:{day.isoformat()}")

    def generate(self, day: Optional[DateInput]) -> DailyActivityRecord:
        """
        Generate the full interval sequence for a day.

        Args:
            day: The reference date.

        Returns:
            An immutable record with 96 intervals and the used-minute total.

        Raises:
            InvalidDateError: If `day` is missing or unparseable.
        """
        target_day = parse_day(day)
        rng = self._rng_for(target_day)

        intervals = []
        used_minutes = 0
        for i in range(INTERVALS_PER_DAY):
            hour, quarter = divmod(i, INTERVALS_PER_HOUR)
            # Always draw so each interval consumes one value regardless of band
            is_active = rng.random() < self.activation_probability(hour)
            if is_active:
                used_minutes += INTERVAL_MINUTES
            intervals.append(Interval(
                id=i,
                hour=hour,
                quarter=quarter,
                is_active=is_active,
                timestamp=format_timestamp(hour, quarter),
            ))

        log.debug(f"Generated {len(intervals)} intervals for {target_day}: {used_minutes} min used")
        return DailyActivityRecord(
            date=target_day,
            intervals=tuple(intervals),
            quota_limit_minutes=self.quota_limit_minutes,
            used_minutes=used_minutes,
        )

    @classmethod
    def from_settings(cls, settings, quota_limit_minutes: Optional[int] = None) -> "IntervalGenerator":
        return cls(
            quota_limit_minutes=quota_limit_minutes or settings.QUOTA_LIMIT_MINUTES,
            activity_bands=settings.ACTIVITY_BANDS,
            seed_salt=settings.SEED_SALT,
        )
