"""ISO-8601 timestamp helpers shared by extraction and manifest sorting"""

from datetime import date, datetime, timezone


def _as_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_timestamp(value: date | datetime) -> str:
    """Return a 'YYYY-MM-DDTHH:MM:SS.mmmZ' string; bare dates map to midnight UTC."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    iso = _as_utc(value).isoformat(timespec="milliseconds")
    return iso.replace("+00:00", "Z")


def utc_now() -> str:
    return format_timestamp(datetime.now(timezone.utc))


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 string (or bare date) into an aware UTC datetime, else None."""
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _as_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        return None
