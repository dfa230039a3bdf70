from datetime import datetime, timezone


def utcnow() -> datetime:
    # Columns are naive DateTime; store UTC without tzinfo.
    return datetime.now(timezone.utc).replace(tzinfo=None)
