"""UTC helpers shared by models and services."""

from datetime import datetime, UTC


def utcnow() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime | None) -> datetime | None:
    """
    Normalise a datetime to aware UTC.

    SQLite returns naive datetimes even for timezone-aware columns, so naive
    values read back from the database are taken to be UTC already.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
