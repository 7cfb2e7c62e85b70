"""Utilities for datetime handling."""

from datetime import UTC, datetime


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def humanize_age(value: datetime, now: datetime | None = None) -> str:
    """
    Describe how long ago a datetime was, for display on cards.

    Example: 3 days before now -> "3 days ago"
    """
    if now is None:
        now = now_utc()
    seconds = int((now - value).total_seconds())

    # Clock skew or freshly created
    if seconds < 60:
        return "Just now"

    minutes = seconds // 60
    if minutes < 60:
        return f"{_plural(minutes, 'minute')} ago"

    hours = minutes // 60
    if hours < 24:
        return f"{_plural(hours, 'hour')} ago"

    return f"{_plural(hours // 24, 'day')} ago"
