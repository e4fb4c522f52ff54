"""
Weekly quota policies.

A policy string lists allowed minutes per weekday or inclusive weekday range,
for example "MO-TH90FR120SA-SU180": 90 minutes Monday to Thursday, 120 on
Friday and 180 on the weekend.
"""

import logging
import re
from datetime import date
from typing import Dict, Optional

from homegate.core.exceptions import PolicyParseError

log = logging.getLogger(__name__)

WEEKDAY_KEYS = ["MO", "TU", "WE", "TH", "FR", "SA", "SU"]
POLICY_ENTRY_RE = re.compile(r"([A-Z-]+)(\d+)")


class QuotaPolicy:
    """Allowed active minutes per weekday."""

    def __init__(self, allowed_by_weekday: Dict[int, int]):
        self.allowed_by_weekday = dict(allowed_by_weekday)

    @classmethod
    def parse(cls, policy_str: str) -> "QuotaPolicy":
        """
        Parse a policy string.

        Raises:
            PolicyParseError: If no valid entries are found, or an entry names
                an unknown weekday.
        """
        allowed: Dict[int, int] = {}
        for key, minutes in POLICY_ENTRY_RE.findall(policy_str or ""):
            if int(minutes) <= 0:
                raise PolicyParseError(f"Allowed minutes for '{key}' must be positive")
            for weekday in cls._expand_key(key):
                allowed[weekday] = int(minutes)

        if not allowed:
            raise PolicyParseError(f"No valid policy entries found in '{policy_str}'")
        log.debug(f"Parsed quota policy '{policy_str}': {allowed}")
        return cls(allowed)

    @staticmethod
    def _expand_key(key: str):
        parts = key.split("-")
        if len(parts) == 1:
            start = end = parts[0]
        elif len(parts) == 2:
            start, end = parts
        else:
            raise PolicyParseError(f"Invalid weekday range '{key}'")

        for day_key in (start, end):
            if day_key not in WEEKDAY_KEYS:
                raise PolicyParseError(f"Unknown weekday '{day_key}' in '{key}'")

        start_idx, end_idx = WEEKDAY_KEYS.index(start), WEEKDAY_KEYS.index(end)
        if start_idx > end_idx:
            raise PolicyParseError(f"Weekday range '{key}' runs backwards")
        return range(start_idx, end_idx + 1)

    def allowed_on(self, day: date) -> Optional[int]:
        """Allowed minutes for the weekday of `day`, or None if the policy does not cover it."""
        return self.allowed_by_weekday.get(day.weekday())

