"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the application.

Functions:
- utc_now(): Returns the current timezone-aware UTC datetime
- ensure_utc(): Normalize a datetime into UTC
- to_iso(): Convert datetime object to ISO 8601 string

Registration timestamps are always stamped in UTC.
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps stored on domain records.
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to an ISO 8601 UTC string.
    
    Args:
        dt: datetime object (naive values are taken as UTC)
    
    Returns:
        ISO 8601 formatted string with millisecond precision and a 'Z'
        suffix (e.g., "2025-12-24T10:30:00.123Z"), or None if dt is None
    """
    utc_dt = ensure_utc(dt)
    if utc_dt is None:
        return None
    return utc_dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
