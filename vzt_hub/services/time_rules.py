"""
Time rules.
Handles ISO parsing, calendar-day comparison and week boundaries in the
configured timezone.
"""
from datetime import datetime, timedelta

import pytz


def parse_iso(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp as written by the store or a browser.

    Naive timestamps are taken as UTC; a trailing ``Z`` is accepted.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=pytz.UTC)
    return dt


def is_same_day(
    time1: datetime,
    time2: datetime,
    timezone_str: str
) -> bool:
    """
    Check if two times are on the same day in the given timezone.

    Args:
        time1: First time (timezone-aware or naive UTC)
        time2: Second time (timezone-aware or naive UTC)
        timezone_str: Timezone string to use for day comparison

    Returns:
        True if both times are on the same calendar day
    """
    if time1.tzinfo is None:
        time1 = time1.replace(tzinfo=pytz.UTC)
    if time2.tzinfo is None:
        time2 = time2.replace(tzinfo=pytz.UTC)

    tz = pytz.timezone(timezone_str)
    return time1.astimezone(tz).date() == time2.astimezone(tz).date()


def week_start(now: datetime, timezone_str: str) -> datetime:
    """Midnight of the Monday of the week containing ``now``, in local time."""
    tz = pytz.timezone(timezone_str)
    local = now.astimezone(tz)
    monday = local.date() - timedelta(days=local.weekday())
    return tz.localize(datetime(monday.year, monday.month, monday.day))


def format_locale_timestamp(dt: datetime) -> str:
    """
    Format a datetime the way the Czech locale prints it, e.g.
    ``18. 10. 2026 9:05:03``.
    """
    return f"{dt.day}. {dt.month}. {dt.year} {dt.hour}:{dt.minute:02d}:{dt.second:02d}"


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600
