from typing import List

from homegate.processing.models import (
    HOURS_PER_DAY,
    INTERVALS_PER_HOUR,
    DailyActivityRecord,
    HourBucket,
    validate_record,
)


class HourGrouper:
    """Partitions a day's intervals into hourly buckets for display."""

    @staticmethod
    def group(record: DailyActivityRecord) -> List[HourBucket]:
        """
        Return 24 buckets; bucket h holds intervals 4h..4h+3 in source order.

        Raises:
            MalformedRecordError: If the record is not a full, contiguous day.
        """
        validate_record(record)
        return [
            HourBucket(
                hour_label=hour,
                intervals=record.intervals[hour * INTERVALS_PER_HOUR:(hour + 1) * INTERVALS_PER_HOUR],
            )
            for hour in range(HOURS_PER_DAY)
        ]
