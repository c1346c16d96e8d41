"""Date parsing shared by page assembly and index ordering."""

from datetime import date, datetime, timezone
from typing import Optional


def parse_datetime(value: str) -> Optional[datetime]:
    """Parse an ISO date, ISO datetime or ``YYYY/MM/DD`` string.

    Values without a UTC offset are taken as UTC, so every result can be
    compared with every other.

    Returns:
        Timezone-aware datetime, or None if the string is not a recognised date
    """
    if not value:
        return None
    text = str(value).strip()
    parsed: Optional[datetime] = None
    try:
        parsed = datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        for fmt in ('%Y-%m-%d', '%Y/%m/%d'):
            try:
                parsed = datetime.strptime(text[:10], fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value: str) -> Optional[date]:
    """Calendar date of :func:`parse_datetime`, as written in the value."""
    parsed = parse_datetime(value)
    return parsed.date() if parsed else None


def format_date(value: str) -> str:
    """Format a date for display as ``YYYY/MM/DD``.

    Unparsable values are returned unchanged.
    """
    if not value:
        return ""
    parsed = parse_date(value)
    if parsed is None:
        return str(value)
    return parsed.strftime('%Y/%m/%d')
