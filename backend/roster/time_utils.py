"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def coerce_utc(value: datetime | None) -> datetime | None:
    """Return a UTC-normalized datetime, assuming naive values are already UTC."""

    if value is None:
        return None

    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)

    return value.astimezone(timezone.utc)


def assume_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values are returned unchanged.

    Unlike :func:`coerce_utc` this never shifts the value, so it cannot
    overflow at the edges of the datetime range.
    """

    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_epoch_millis(value: datetime) -> int:
    """Return ``value`` as whole milliseconds since the Unix epoch.

    Naive datetimes are interpreted as UTC. Exact integer arithmetic,
    floored like a millisecond clock.
    """

    return (assume_utc(value) - _EPOCH) // _ONE_MILLISECOND
