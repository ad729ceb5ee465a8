from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, the convention used by every DateTime column."""
    return datetime.now(UTC).replace(tzinfo=None)
