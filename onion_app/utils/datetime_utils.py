"""
Centralized DateTime Utilities
==============================

All persisted timestamps are timezone-aware UTC.

Functions:
- utc_now(): Returns the current UTC datetime
- ensure_utc(): Normalizes a datetime to timezone-aware UTC
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get current datetime in UTC.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Normalize a datetime to timezone-aware UTC.
    Naive values are assumed to already be UTC (storage drivers often drop tzinfo).
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
