"""Timestamp normalization shared by dated records."""

from __future__ import annotations

from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so naive and aware values compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
