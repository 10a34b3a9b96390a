"""Day and week boundaries under the scheduler's fixed calendar (UTC, weeks start Monday)."""

from datetime import datetime, timedelta, timezone

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(days=7)


def as_utc(t: datetime) -> datetime:
    """Return t as an aware UTC datetime; naive values are taken to be UTC."""
    if t.tzinfo is None:
        return t.replace(tzinfo=timezone.utc)
    return t.astimezone(timezone.utc)


def start_of_day(t: datetime) -> datetime:
    """Midnight UTC on t's calendar date."""
    return as_utc(t).replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(t: datetime) -> datetime:
    """Midnight UTC on the Monday of t's week. Sunday belongs to the preceding Monday."""
    day = start_of_day(t)
    # Python: Monday=0, Sunday=6
    return day - timedelta(days=day.weekday())


def day_window(t: datetime) -> tuple[datetime, datetime]:
    """Half-open [start, end) window of t's calendar day."""
    start = start_of_day(t)
    return start, start + ONE_DAY


def week_window(t: datetime) -> tuple[datetime, datetime]:
    """Half-open [start, end) window of t's calendar week."""
    start = start_of_week(t)
    return start, start + ONE_WEEK
