"""Canonical date/time encodings for spreadsheet cells"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any

SPREADSHEET_EPOCH = date(1899, 12, 30)


def is_temporal(value: Any) -> bool:
    """True for date, datetime and time objects (pandas Timestamps included)"""
    return isinstance(value, (date, time))


def format_date(value: Any, shift_hours: int = 12) -> Any:
    """
    Encode a parsed date cell as ``YYYY-MM-DD``.

    Spreadsheet dates arrive as midnight in an ambiguous zone, so the instant
    is moved forward by ``shift_hours`` before the calendar day is read.
    A bare time (a time-only cell) has no day of its own and is read on the
    spreadsheet epoch day, 1899-12-30, so it is shifted like any other cell.
    Other values are returned unchanged.
    """
    if isinstance(value, time):
        value = datetime.combine(SPREADSHEET_EPOCH, value)
    if isinstance(value, datetime):
        shifted = value + timedelta(hours=shift_hours)
        return f"{shifted.year:04d}-{shifted.month:02d}-{shifted.day:02d}"
    if isinstance(value, date):
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    return value


def format_time(value: Any) -> Any:
    """
    Encode a parsed time cell as 24-hour ``HH:MM``.

    Always reads the original value; the date shift would corrupt the hour.
    """
    if isinstance(value, (datetime, time)):
        return f"{value.hour:02d}:{value.minute:02d}"
    if isinstance(value, date):
        return "00:00"
    return value


def format_timestamp(value: datetime) -> str:
    """
    Encode a stored timestamp as UTC ``YYYY-MM-DDTHH:MM:SS.ffffffZ``.

    Fixed width, so stored timestamps sort chronologically as text. Naive
    values are taken as UTC.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.%fZ")
