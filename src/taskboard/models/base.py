from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current UTC time without tzinfo.

    Timestamp columns are TIMESTAMP WITHOUT TIME ZONE and hold UTC.
    """
    return datetime.now(UTC).replace(tzinfo=None)
