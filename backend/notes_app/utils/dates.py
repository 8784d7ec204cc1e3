from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(s: str) -> datetime:
    """Parse an ISO-8601 timestamp; "Z" suffixes and naive values are read as UTC."""
    if not isinstance(s, str):
        raise TypeError("timestamp must be a string")
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_date(dt: datetime) -> str:
    # M/D/YYYY of the local calendar day, no zero padding
    local = dt.astimezone()
    return f"{local.month}/{local.day}/{local.year}"
