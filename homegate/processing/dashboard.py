"""
Dashboard assembly.

Combines the generated record, its usage summary and the hourly buckets into
the view model handed to renderers (the JSON API and the CLI). Holds the
currently displayed day, which is replaced wholesale on navigation.
"""

import logging
import threading
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from homegate import schemas
from homegate.core.exceptions import InvalidDateError
from homegate.core.settings import Settings
from homegate.processing.grouping import HourGrouper
from homegate.processing.intervals import DateInput, IntervalGenerator, parse_day
from homegate.processing.models import DailyActivityRecord, HourBucket, Interval, UsageSummary
from homegate.processing.policy import QuotaPolicy
from homegate.processing.time_format import activity_label, end_time, format_duration, interval_label
from homegate.processing.usage import UsageAggregator

log = logging.getLogger(__name__)

STATUS_WITHIN_LIMITS = "WITHIN LIMITS"
STATUS_QUOTA_EXCEEDED = "QUOTA EXCEEDED"


def clamp_percentage(value: int) -> int:
    return max(0, min(value, 100))


class DashboardService:
    """Builds dashboard views for a given day."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.policy: Optional[QuotaPolicy] = (
            QuotaPolicy.parse(settings.QUOTA_POLICY) if settings.QUOTA_POLICY else None
        )
        self.aggregator = UsageAggregator()
        self.grouper = HourGrouper()

    def quota_for(self, day: date) -> int:
        """Quota in minutes for `day`: the weekly policy if it covers the day, else the fixed limit."""
        if self.policy is not None:
            allowed = self.policy.allowed_on(day)
            if allowed is not None:
                return allowed
        return self.settings.QUOTA_LIMIT_MINUTES

    def generate_record(self, day: DateInput) -> DailyActivityRecord:
        target_day = parse_day(day)
        generator = IntervalGenerator.from_settings(self.settings, quota_limit_minutes=self.quota_for(target_day))
        return generator.generate(target_day)

    def build_view(self, day: DateInput) -> schemas.DashboardView:
        """
        Generate the record for `day` and assemble the full dashboard view.

        Raises:
            InvalidDateError: If `day` is missing or unparseable.
            MalformedRecordError: If the generated record fails validation.
        """
        record = self.generate_record(day)
        return self.view_for_record(record)

    def view_for_record(self, record: DailyActivityRecord) -> schemas.DashboardView:
        summary = self.aggregator.compute_usage(record)
        buckets = self.grouper.group(record)
        log.info(
            f"Dashboard for {record.date}: {record.used_minutes}/{record.quota_limit_minutes} min "
            f"({summary.usage_percentage}%), over quota: {summary.is_over_quota}"
        )
        return schemas.DashboardView(
            date=record.date,
            date_label=f"{record.date:%a, %b} {record.date.day}",
            device_name=self.settings.DEVICE_NAME,
            quota=self._quota_card(record, summary),
            hours=[self._hour_row(bucket) for bucket in buckets],
            active_interval_count=record.active_count,
        )

    def _quota_card(self, record: DailyActivityRecord, summary: UsageSummary) -> schemas.QuotaCard:
        return schemas.QuotaCard(
            used_minutes=record.used_minutes,
            quota_limit_minutes=record.quota_limit_minutes,
            idle_minutes=summary.idle_minutes,
            usage_percentage=summary.usage_percentage,
            progress_percent=clamp_percentage(summary.usage_percentage),
            is_over_quota=summary.is_over_quota,
            status_label=STATUS_QUOTA_EXCEEDED if summary.is_over_quota else STATUS_WITHIN_LIMITS,
            used_display=format_duration(record.used_minutes),
            limit_display=format_duration(record.quota_limit_minutes),
            idle_display=format_duration(summary.idle_minutes),
            reset_label=self.settings.QUOTA_RESET_LABEL,
        )

    def _hour_row(self, bucket: HourBucket) -> schemas.HourRow:
        return schemas.HourRow(
            hour_label=bucket.hour_label,
            intervals=[self._interval_view(interval) for interval in bucket.intervals],
        )

    @staticmethod
    def _interval_view(interval: Interval) -> schemas.IntervalView:
        return schemas.IntervalView(
            id=interval.id,
            hour=interval.hour,
            quarter=interval.quarter,
            is_active=interval.is_active,
            timestamp=interval.timestamp,
            end_time=end_time(interval.timestamp),
            state="active" if interval.is_active else "idle",
            tooltip=interval_label(interval),
            activity_label=activity_label(interval),
        )


class DashboardState:
    """The currently displayed day. Navigation replaces it, never mutates it."""

    def __init__(self, service: DashboardService, initial_day: DateInput):
        self.service = service
        self._lock = threading.Lock()
        self._view = service.build_view(initial_day)
        self._generated_at = datetime.now(timezone.utc)

    @property
    def current_date(self) -> date:
        with self._lock:
            return self._view.date

    def current(self) -> schemas.DashboardView:
        with self._lock:
            return self._view

    def show(self, day: DateInput) -> schemas.DashboardView:
        """Regenerate for `day` and make it the displayed day."""
        view = self.service.build_view(day)
        with self._lock:
            self._view = view
            self._generated_at = datetime.now(timezone.utc)
        return view

    def navigate(self, days: int) -> schemas.DashboardView:
        """Move the displayed day by `days` (negative moves back)."""
        with self._lock:
            current = self._view.date
        try:
            target = current + timedelta(days=days)
        except OverflowError:
            raise InvalidDateError(f"Cannot move {days} day(s) from {current}.")
        log.info(f"Navigating dashboard by {days} day(s) to {target}")
        return self.show(target)

    def status(self) -> schemas.DashboardStatus:
        with self._lock:
            view, generated_at = self._view, self._generated_at
        return schemas.DashboardStatus(
            date=view.date,
            used_minutes=view.quota.used_minutes,
            quota_limit_minutes=view.quota.quota_limit_minutes,
            is_over_quota=view.quota.is_over_quota,
            generated_at=generated_at,
        )
