from __future__ import annotations

from datetime import date, datetime

from salon_planning.application.exceptions import TimeParseError


def parse_hour(value: str) -> int:
    """Return the hour of an "HH:MM" (or "HH:MM:SS") string.

    Raises TimeParseError on anything else; there is no default hour.
    """
    text = (value or "").strip() if isinstance(value, str) else ""
    hour_part, sep, rest = text.partition(":")
    if not sep or not hour_part.isdigit():
        raise TimeParseError(f"Invalid time {value!r}, expected HH:MM")
    minute_part = rest.split(":", 1)[0]
    if len(minute_part) != 2 or not minute_part.isdigit():
        raise TimeParseError(f"Invalid time {value!r}, expected HH:MM")

    hour = int(hour_part)
    if hour > 23 or int(minute_part) > 59:
        raise TimeParseError(f"Time out of range: {value!r}")
    return hour


def parse_calendar_date(value: str | date) -> date:
    """Naive calendar date of an ISO date or datetime string; any time or zone part is ignored."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = (value or "").strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError as e:
        raise ValueError(f"Invalid appointment date {value!r}") from e


def format_slot_time(hour: int) -> str:
    # unpadded, e.g. "9:00"
    return f"{hour}:00"
