"""Display strings for durations and interval times."""

from datetime import datetime, timedelta

from homegate.processing.models import INTERVAL_MINUTES, Interval

TIME_FORMAT = "%H:%M"


def format_timestamp(hour: int, quarter: int) -> str:
    return f"{hour:02d}:{quarter * INTERVAL_MINUTES:02d}"


def format_duration(minutes: int) -> str:
    """Format a minute count as "{h}h {m}m", e.g. 480 -> "8h 0m"."""
    if minutes < 0:
        raise ValueError(f"Duration cannot be negative: {minutes}")
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"


def end_time(start_timestamp: str) -> str:
    """
    Return the end of the interval starting at `start_timestamp`.

    The hour wraps past midnight, so "23:45" ends at "00:00".

    Raises:
        ValueError: If `start_timestamp` is not a valid "HH:MM" time.
    """
    start = datetime.strptime(start_timestamp, TIME_FORMAT)
    return (start + timedelta(minutes=INTERVAL_MINUTES)).strftime(TIME_FORMAT)


def interval_label(interval: Interval) -> str:
    return f"{interval.timestamp} - {end_time(interval.timestamp)}"


def activity_label(interval: Interval) -> str:
    return "Active" if interval.is_active else "Idle"
