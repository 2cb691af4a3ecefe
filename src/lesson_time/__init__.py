"""Lesson scheduling time engine for the tutoring platform client.

Pure functions for turning form input into backend wire fields, computing
lesson end times, and laying out a month of sessions on a calendar grid.
"""

from src.lesson_time.duration import (
    DURATION_OPTIONS,
    add_duration,
    duration_between,
    format_duration,
    match_duration_option,
)
from src.lesson_time.errors import (
    InvalidDateError,
    InvalidFormatError,
    ParseError,
    ParseErrorKind,
    unwrap,
)
from src.lesson_time.formatting import (
    format_display_date,
    format_display_time_12h,
    format_wire_date,
    format_wire_time,
)
from src.lesson_time.lesson_form import build_lesson_slot, lesson_form_values
from src.lesson_time.models import CalendarDate, ClockTime, LessonSlot, SessionRecord
from src.lesson_time.month_grid import (
    MonthCalendar,
    bucket_sessions_by_day,
    build_month_grid,
    date_key,
    sessions_for_day,
)
from src.lesson_time.parsing import parse_display_date, parse_display_time

__all__ = [
    "CalendarDate",
    "ClockTime",
    "SessionRecord",
    "LessonSlot",
    "ParseError",
    "ParseErrorKind",
    "InvalidFormatError",
    "InvalidDateError",
    "unwrap",
    "parse_display_date",
    "parse_display_time",
    "format_wire_date",
    "format_wire_time",
    "format_display_date",
    "format_display_time_12h",
    "DURATION_OPTIONS",
    "add_duration",
    "duration_between",
    "format_duration",
    "match_duration_option",
    "MonthCalendar",
    "build_month_grid",
    "date_key",
    "bucket_sessions_by_day",
    "sessions_for_day",
    "build_lesson_slot",
    "lesson_form_values",
]
