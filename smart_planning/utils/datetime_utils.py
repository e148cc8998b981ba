"""Date and time utilities."""

from datetime import date, datetime, timedelta
from typing import Optional, Union

MINUTES_PER_DAY = 24 * 60


def parse_time(time_str: str) -> int:
    """Parse "HH:MM" into minutes since midnight."""
    parts = str(time_str).split(':')
    if len(parts) != 2:
        raise ValueError(f"Invalid time of day: {time_str!r}")
    
    hours, minutes = int(parts[0]), int(parts[1])
    if not 0 <= hours < 24 or not 0 <= minutes < 60:
        raise ValueError(f"Invalid time of day: {time_str!r}")
    
    return hours * 60 + minutes


def format_time(minutes: int) -> str:
    """Format minutes since midnight as zero-padded "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def time_on_date(time_str: str, day: Union[date, datetime]) -> datetime:
    """Combine a time of day with the calendar date of ``day``."""
    if isinstance(day, datetime):
        midnight = day.replace(hour=0, minute=0, second=0, microsecond=0)
    else:
        midnight = datetime.combine(day, datetime.min.time())
    return midnight + timedelta(minutes=parse_time(time_str))


def is_same_day(moment: Union[date, datetime], reference: Union[date, datetime]) -> bool:
    """Check if two instants fall on the same calendar date."""
    return _as_date(moment) == _as_date(reference)


def parse_datetime(value) -> Optional[datetime]:
    """Parse an ISO-8601 string (trailing "Z" allowed); datetimes pass through."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    
    text = str(value)
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    return datetime.fromisoformat(text)


def to_local(value: datetime) -> datetime:
    """Convert an aware datetime to local time; naive ones are already local."""
    if value.tzinfo is not None:
        return value.astimezone()
    return value


def _as_date(value: Union[date, datetime]) -> date:
    return to_local(value).date() if isinstance(value, datetime) else value
