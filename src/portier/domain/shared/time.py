"""UTC helpers. Every timestamp Portier stores or returns is tz-aware UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Tag a naive datetime as UTC; aware ones pass through untouched."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)
