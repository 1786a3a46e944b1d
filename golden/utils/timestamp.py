"""Clock helpers: current time and the calendar buckets content is targeted by."""

from datetime import datetime
from typing import Optional

# Hour boundaries (inclusive start) for time-of-day buckets
MORNING_START = 5
AFTERNOON_START = 12
EVENING_START = 17
NIGHT_START = 22


def now() -> datetime:
    """Return the current local time."""
    return datetime.now()


def detect_time_of_day(moment: Optional[datetime] = None) -> str:
    """
    Bucket a moment into a time of day.

    Buckets (local hour):
        05:00-11:59 -> "morning"
        12:00-16:59 -> "afternoon"
        17:00-21:59 -> "evening"
        22:00-04:59 -> "night"

    Args:
        moment: Time to bucket (defaults to now)

    Returns:
        One of "morning", "afternoon", "evening", "night"
    """
    hour = (moment or now()).hour

    if MORNING_START <= hour < AFTERNOON_START:
        return "morning"
    elif AFTERNOON_START <= hour < EVENING_START:
        return "afternoon"
    elif EVENING_START <= hour < NIGHT_START:
        return "evening"
    else:
        return "night"


def detect_day_period(moment: Optional[datetime] = None) -> str:
    """
    Bucket a moment into its position in the (Sunday-first) week.

    Sunday & Monday    -> "start_of_week"
    Tuesday - Thursday -> "mid_week"
    Friday & Saturday  -> "weekend"

    Args:
        moment: Time to bucket (defaults to now)

    Returns:
        One of "start_of_week", "mid_week", "weekend"
    """
    # datetime.weekday(): Monday=0 ... Sunday=6
    weekday = (moment or now()).weekday()

    if weekday in (6, 0):
        return "start_of_week"
    elif weekday in (1, 2, 3):
        return "mid_week"
    else:
        return "weekend"


def format_clock(moment: Optional[datetime] = None) -> str:
    """Format a moment as HH:MM."""
    return (moment or now()).strftime("%H:%M")


def session_stamp(moment: Optional[datetime] = None) -> str:
    """Compact timestamp for log directory names (e.g., "20261019_101500")."""
    return (moment or now()).strftime("%Y%m%d_%H%M%S")
