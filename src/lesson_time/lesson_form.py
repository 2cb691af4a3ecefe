"""Lesson create/edit form flow built on the parsers and formatters.

build_lesson_slot() turns the raw date/time fields of the form into the wire
fields of the request body. lesson_form_values() goes the other way, filling
an edit form from a stored session.
"""

from src.lesson_time.config import get_config
from src.lesson_time.duration import add_duration, duration_between, match_duration_option
from src.lesson_time.errors import ParseError
from src.lesson_time.formatting import (
    format_display_date,
    format_display_time_12h,
    format_wire_date,
    format_wire_time,
)
from src.lesson_time.logging import get_logger
from src.lesson_time.models import LessonFormValues, LessonSlot, SessionRecord
from src.lesson_time.parsing import (
    parse_display_date,
    parse_display_time,
    parse_wire_date,
    parse_wire_time,
)

log = get_logger(__name__)


def build_lesson_slot(
    display_date: str, display_time: str, duration_hours: float
) -> LessonSlot | ParseError:
    """Date, start and end wire fields for a lesson request.

    Args:
        display_date: Date field, "mm/dd/yyyy".
        display_time: Start time field, "hh:mm AM|PM".
        duration_hours: One of the DURATION_OPTIONS values.

    Returns:
        LessonSlot, or the ParseError of the first field that failed (date is
        checked before time).
    """
    parsed_date = parse_display_date(display_date.strip())
    if isinstance(parsed_date, ParseError):
        return parsed_date
    start = parse_display_time(display_time.strip())
    if isinstance(start, ParseError):
        return start

    end = add_duration(start, duration_hours)
    if end.minutes_since_midnight < start.minutes_since_midnight:
        log.debug(
            "lesson_crosses_midnight",
            start=format_wire_time(start),
            end=format_wire_time(end),
        )
    return LessonSlot(
        date=format_wire_date(parsed_date),
        start_time=format_wire_time(start),
        end_time=format_wire_time(end),
    )


def lesson_form_values(session: SessionRecord) -> LessonFormValues | ParseError:
    """Prefill values for editing a stored session.

    A start/end pair that matches no duration option leaves duration_hours
    as None. A session with no end time gets the configured default.
    """
    stored_date = parse_wire_date(session.date)
    if isinstance(stored_date, ParseError):
        return stored_date
    start = parse_wire_time(session.start_time or "00:00")
    if isinstance(start, ParseError):
        return start

    if session.end_time:
        end = parse_wire_time(session.end_time)
        if isinstance(end, ParseError):
            return end
        duration = match_duration_option(duration_between(start, end))
    else:
        duration = get_config().default_duration_hours

    return LessonFormValues(
        date=format_display_date(stored_date),
        start_time=format_display_time_12h(start),
        duration_hours=duration,
    )


def session_type_for(student_ids: list[int]) -> str:
    """Session type sent with the lesson: "group" for 2+ students, else "1:1"."""
    return "group" if len(student_ids) > 1 else "1:1"
