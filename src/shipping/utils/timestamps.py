"""Timestamps inside the domain are timezone-aware and in UTC."""

from datetime import UTC, datetime


def as_utc(value: datetime | None) -> datetime | None:
    """Convert ``value`` to UTC, reading a naive value as UTC wall time."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
