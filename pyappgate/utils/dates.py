"""Timezone handling for stored timestamps.

Timestamps without an offset are taken to be UTC.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Return an aware UTC datetime.

    Args:
        value: A naive (assumed UTC) or aware datetime.

    Returns:
        The same instant with a UTC offset attached.

    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def as_naive_utc(value: datetime) -> datetime:
    """Return the instant as a naive UTC datetime, the form query timestamps are stored in."""
    return as_utc(value).replace(tzinfo=None)
