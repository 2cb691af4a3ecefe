"""Lesson duration arithmetic on minutes since midnight.

Durations are picked from DURATION_OPTIONS by the lesson form. add_duration
and duration_between do not validate that; they work on any number of hours.
"""

from src.lesson_time.models import ClockTime

# (hours, label shown in the duration control)
DURATION_OPTIONS: tuple[tuple[float, str], ...] = (
    (0.5, "30 minutes"),
    (1, "1 hour"),
    (1.5, "1.5 hours"),
    (2, "2 hours"),
)

DURATION_VALUES: tuple[float, ...] = tuple(hours for hours, _ in DURATION_OPTIONS)


def add_duration(start: ClockTime, hours: float) -> ClockTime:
    """Return the end time of a lesson starting at `start`.

    Wraps past midnight without moving the date: 23:00 + 2h is 01:00. Callers
    that care about cross-midnight lessons have to detect end < start
    themselves.
    """
    total_minutes = start.minutes_since_midnight + round(hours * 60)
    return ClockTime(
        hour=(total_minutes // 60) % 24,
        minute=total_minutes % 60,
    )


def duration_between(start: ClockTime, end: ClockTime) -> float:
    """Hours from start to end on the same day.

    No wraparound correction: an end before the start gives a negative
    result, which matches no duration option.
    """
    return (end.minutes_since_midnight - start.minutes_since_midnight) / 60


def match_duration_option(hours: float) -> float | None:
    """The duration option equal to `hours`, or None if there is none."""
    for value in DURATION_VALUES:
        if value == hours:
            return value
    return None


def duration_label(hours: float) -> str | None:
    for value, label in DURATION_OPTIONS:
        if value == hours:
            return label
    return None


def format_duration(start_time: str, end_time: str) -> str:
    """Session card label for a wire start/end pair: "1h 30m", "2h", "45m".

    An end before the start is read as the next day, the way add_duration
    wraps late lessons. Returns "" when either time is missing.
    """
    if not start_time or not end_time:
        return ""
    start_hours, start_minutes = (int(part) for part in start_time.split(":")[:2])
    end_hours, end_minutes = (int(part) for part in end_time.split(":")[:2])
    total = (end_hours * 60 + end_minutes) - (start_hours * 60 + start_minutes)
    if total < 0:
        total += 24 * 60

    hours, minutes = divmod(total, 60)
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h"
    return f"{minutes}m"
