"""UTC datetime utilities. All persisted timestamps are timezone-aware UTC."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def to_iso(dt: datetime | None) -> str | None:
    """Serialize a datetime for JSON cache payloads (None stays None)."""
    return dt.isoformat() if dt is not None else None
