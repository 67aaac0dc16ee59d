"""Timestamp helpers for model defaults."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current time in UTC as a timezone-aware datetime."""
    return datetime.now(timezone.utc)
