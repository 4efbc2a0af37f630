"""
Time helpers for step update timestamps.

All timestamps reported to the host are timezone-aware UTC datetimes.
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current wall-clock time as a UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(ts: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to UTC.

    Naive datetimes are assumed to already be in UTC.

    Args:
        ts: Datetime to normalize, or None

    Returns:
        UTC datetime, or None when ts is None
    """
    if ts is None:
        return None
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def format_timestamp(ts: Optional[datetime]) -> Optional[str]:
    """ISO-8601 representation of a timestamp in UTC, or None."""
    normalized = ensure_utc(ts)
    return normalized.isoformat() if normalized else None
