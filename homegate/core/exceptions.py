"""Error taxonomy for the dashboard core."""


class DashboardError(Exception):
    """Base class for failures that must put the dashboard into an error state."""

    kind = "dashboard_error"


class InvalidDateError(DashboardError, ValueError):
    """The reference date is missing or cannot be parsed as a calendar day."""

    kind = "invalid_date"


class MalformedRecordError(DashboardError):
    """A DailyActivityRecord violates its structural invariants."""

    kind = "malformed_record"


class PolicyParseError(DashboardError, ValueError):
    """A weekly quota policy string contains no usable entries."""

    kind = "invalid_policy"
