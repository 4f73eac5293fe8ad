"""UTC datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def seconds_since(start: datetime, now: datetime) -> float:
    """Elapsed seconds between two aware datetimes; negative if the clock went backwards."""
    return (now - start).total_seconds()
