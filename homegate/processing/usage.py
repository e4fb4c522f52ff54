from homegate.processing.models import (
    MINUTES_PER_DAY,
    DailyActivityRecord,
    UsageSummary,
    validate_record,
)


def round_half_up_percentage(numerator: int, denominator: int) -> int:
    """round(numerator / denominator * 100) with halves rounded up, in exact integer math."""
    return (numerator * 200 + denominator) // (denominator * 2)


class UsageAggregator:
    """Derives quota usage figures from a DailyActivityRecord."""

    @staticmethod
    def compute_usage(record: DailyActivityRecord) -> UsageSummary:
        """
        Compute usage percentage, over-quota flag and idle minutes.

        The percentage is not clamped and may exceed 100. Exactly reaching the
        quota is not over quota.

        Raises:
            MalformedRecordError: If the record violates its invariants.
        """
        validate_record(record)
        used = record.used_minutes
        quota = record.quota_limit_minutes
        return UsageSummary(
            usage_percentage=round_half_up_percentage(used, quota),
            is_over_quota=used > quota,
            idle_minutes=MINUTES_PER_DAY - used,
        )
