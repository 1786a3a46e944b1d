"""
Shared utilities for Golden Content.

Common functionality used across contexts:
- Logger configuration
- Clock bucketing (time of day, day of week)
"""

from golden.utils.timestamp import detect_day_period, detect_time_of_day, now, session_stamp

__all__ = ["detect_day_period", "detect_time_of_day", "now", "session_stamp"]
