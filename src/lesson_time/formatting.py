"""Formatters from structured dates/times to display and wire strings.

Formatters trust their input: anything reaching them has already been through
a parser, so there is no error path here.
"""

from src.lesson_time.models import (
    CalendarDate,
    ClockTime,
    DisplayDateString,
    DisplayTimeString,
    WireDate,
    WireTime,
)


def _to_12h(hour: int) -> tuple[int, str]:
    """Map a 24-hour hour to (1-12 hour, meridiem)."""
    meridiem = "PM" if hour >= 12 else "AM"
    return hour % 12 or 12, meridiem


def format_wire_date(value: CalendarDate) -> WireDate:
    """CalendarDate -> "yyyy-mm-dd"."""
    return f"{value.year:04d}-{value.month + 1:02d}-{value.day:02d}"


def format_wire_time(value: ClockTime) -> WireTime:
    """ClockTime -> "HH:MM" (24-hour)."""
    return f"{value.hour:02d}:{value.minute:02d}"


def format_display_date(value: CalendarDate) -> DisplayDateString:
    """CalendarDate -> zero-padded "mm/dd/yyyy"."""
    return f"{value.month + 1:02d}/{value.day:02d}/{value.year}"


def format_display_time_12h(value: ClockTime) -> DisplayTimeString:
    """ClockTime -> "hh:mm AM|PM", the inverse of parse_display_time."""
    hour, meridiem = _to_12h(value.hour)
    return f"{hour:02d}:{value.minute:02d} {meridiem}"


def format_session_time(value: WireTime) -> str:
    """Compact card label for a wire time: "14:05" -> "2:05 PM".

    Hour is not padded and any seconds are ignored. Empty input gives "".
    """
    if not value:
        return ""
    hours, minutes = value.split(":")[:2]
    hour, meridiem = _to_12h(int(hours))
    return f"{hour}:{minutes} {meridiem}"


def normalize_wire_time(value: str) -> WireTime:
    """Strip trailing seconds from a stored time: "18:00:00" -> "18:00".

    Values that are already "HH:MM" come back unchanged.
    """
    parts = value.split(":")
    if len(parts) == 3:
        return f"{parts[0]}:{parts[1]}"
    return value
