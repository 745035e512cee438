"""Modification Timestamps — strictly advancing updated_at stamps."""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_modification_time(previous: datetime | None) -> datetime:
    """Current UTC time, bumped 1µs past `previous` if the clock has not moved."""
    now = utc_now()
    if previous is None:
        return now
    if previous.tzinfo is None:
        # SQLite hands back naive datetimes; they were written as UTC
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
