"""Parsers for display and wire date/time strings.

Every parser returns either the structured value or a ParseError; none of
them raise on bad input. Display strings come from form fields typed or
picked by the user, wire strings come back from the backend.
"""

import re
from datetime import date

from src.lesson_time.errors import ParseError, ParseErrorKind
from src.lesson_time.logging import get_logger
from src.lesson_time.models import CalendarDate, ClockTime

log = get_logger(__name__)

# "9:30 PM", "09:30pm", "12:00 AM"
DISPLAY_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)", re.IGNORECASE | re.ASCII)

# "14:00" or "14:00:00" as stored by the backend
WIRE_TIME_PATTERN = re.compile(r"(\d{2}):(\d{2})(?::\d{2})?", re.ASCII)

# Leading "yyyy-mm-dd" of a wire date or timestamp
WIRE_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def _format_error(value: str, message: str) -> ParseError:
    return ParseError(kind=ParseErrorKind.INVALID_FORMAT, value=value, message=message)


def _to_calendar_date(
    value: str, year: int, month_number: int, day: int
) -> CalendarDate | ParseError:
    """Build a CalendarDate from a 1-based month, rejecting impossible days.

    datetime.date refuses Feb 30 outright instead of rolling it into March,
    so a ValueError here is exactly the "not a real date" case.
    """
    try:
        checked = date(year, month_number, day)
    except ValueError:
        log.debug("date_rejected", value=value, reason="not_a_calendar_date")
        return ParseError(
            kind=ParseErrorKind.INVALID_DATE,
            value=value,
            message=f"{value!r} is not a real calendar date",
        )
    return CalendarDate(year=checked.year, month=checked.month - 1, day=checked.day)


def parse_display_date(value: str) -> CalendarDate | ParseError:
    """Parse a "mm/dd/yyyy" form value.

    Padding is optional on input ("1/5/2026" is accepted).

    Returns:
        CalendarDate, or ParseError(INVALID_FORMAT) when the value is not three
        numeric groups, or ParseError(INVALID_DATE) when the groups name a day
        that does not exist (e.g. 02/30/2026).
    """
    parts = value.split("/")
    if len(parts) != 3 or not all(part.isascii() and part.isdigit() for part in parts):
        log.debug("display_date_rejected", value=value, reason="bad_shape")
        return _format_error(value, f"{value!r} is not in mm/dd/yyyy format")

    month_number, day, year = (int(part) for part in parts)
    return _to_calendar_date(value, year, month_number, day)


def parse_display_time(value: str) -> ClockTime | ParseError:
    """Parse an "hh:mm AM|PM" form value into 24-hour time.

    12 AM is midnight (hour 0), 12 PM is noon (hour 12), 1-11 PM add 12.

    Returns:
        ClockTime, or ParseError(INVALID_FORMAT) for any other shape,
        including an hour outside 1-12 or a minute above 59.
    """
    match = DISPLAY_TIME_PATTERN.fullmatch(value)
    if match is None:
        log.debug("display_time_rejected", value=value, reason="bad_shape")
        return _format_error(value, f"{value!r} is not in hh:mm AM/PM format")

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = match.group(3).upper()
    if not 1 <= hour <= 12 or minute > 59:
        log.debug("display_time_rejected", value=value, reason="out_of_range")
        return _format_error(value, f"{value!r} is not a valid 12-hour time")

    if meridiem == "PM" and hour != 12:
        hour += 12
    elif meridiem == "AM" and hour == 12:
        hour = 0
    return ClockTime(hour=hour, minute=minute)


def parse_wire_time(value: str) -> ClockTime | ParseError:
    """Parse a backend "HH:MM" or "HH:MM:SS" time; seconds are dropped."""
    match = WIRE_TIME_PATTERN.fullmatch(value)
    if match is None:
        log.debug("wire_time_rejected", value=value, reason="bad_shape")
        return _format_error(value, f"{value!r} is not in HH:MM format")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        log.debug("wire_time_rejected", value=value, reason="out_of_range")
        return _format_error(value, f"{value!r} is not a valid 24-hour time")
    return ClockTime(hour=hour, minute=minute)


def parse_wire_date(value: str) -> CalendarDate | ParseError:
    """Parse the date portion of a wire date or timestamp.

    Everything from the "T" separator on is discarded without any timezone
    conversion, so "2026-01-01T00:00:00.000000Z" is Jan 1 on every host.
    """
    date_part = value.split("T", 1)[0]
    match = WIRE_DATE_PATTERN.fullmatch(date_part)
    if match is None:
        log.debug("wire_date_rejected", value=value, reason="bad_shape")
        return _format_error(value, f"{value!r} is not in yyyy-mm-dd format")

    year, month_number, day = (int(group) for group in match.groups())
    return _to_calendar_date(value, year, month_number, day)
