"""
UTC helpers for emission log timestamps.
"""
from datetime import datetime, timezone


def as_utc(moment: datetime) -> datetime:
    """Return ``moment`` in UTC. Naive datetimes are taken to already be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def to_iso_utc(moment: datetime) -> str:
    """Format as ISO-8601 with millisecond precision and a 'Z' suffix."""
    return as_utc(moment).isoformat(timespec="milliseconds").replace("+00:00", "Z")
