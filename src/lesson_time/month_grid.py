"""Month calendar grid and per-day session buckets.

The sessions screen renders a 7-column grid (Sunday first) for one month and
shows, for each cell, the sessions that fall on that day.

Every date-to-string conversion goes through date_key(), which pads integers
directly. Nothing here formats a timezone-aware datetime, so a session stored
as "2026-01-01T00:00:00.000000Z" lands on Jan 1 whatever the host timezone.
"""

from calendar import monthrange
from datetime import date
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from src.lesson_time.logging import get_logger
from src.lesson_time.models import (
    CalendarDate,
    CalendarGrid,
    DayBucketMap,
    SessionRecord,
    WireDate,
)

log = get_logger(__name__)

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def date_key(year: int, month: int, day: int) -> str:
    """Bucket key for a day: (2026, 0, 5) -> "2026-01-05". Month is 0-based."""
    return f"{year}-{month + 1:02d}-{day:02d}"


def days_in_month(year: int, month: int) -> int:
    """Number of days in a 0-based month, leap Februaries included (up to 9999-12)."""
    return monthrange(year, month + 1)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of the month, 0 = Sunday through 6 = Saturday."""
    # monthrange counts Monday as 0
    return (monthrange(year, month + 1)[0] + 1) % 7


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move `delta` months forward (or back) from a 0-based (year, month)."""
    new_year, new_month = divmod(year * 12 + month + delta, 12)
    return new_year, new_month


def month_date_range(year: int, month: int) -> tuple[WireDate, WireDate]:
    """First and last day of the month as (date_from, date_to) query bounds."""
    return date_key(year, month, 1), date_key(year, month, days_in_month(year, month))


def build_month_grid(year: int, month: int) -> CalendarGrid:
    """Cells for a Sunday-first month view.

    Leading None cells fill the days before the 1st, then day numbers follow,
    then trailing None cells complete the last week row.
    """
    grid: CalendarGrid = [None] * first_weekday(year, month)
    grid.extend(range(1, days_in_month(year, month) + 1))
    if len(grid) % 7:
        grid.extend([None] * (7 - len(grid) % 7))
    return grid


def bucket_sessions_by_day(sessions: Iterable[SessionRecord]) -> DayBucketMap:
    """Group sessions under the date part of their `date` field.

    The key is the text before "T", taken as-is. Sessions without a date are
    left out.
    """
    buckets: DayBucketMap = {}
    skipped = 0
    for session in sessions:
        key = session.date.split("T", 1)[0] if session.date else ""
        if not key:
            skipped += 1
            continue
        buckets.setdefault(key, []).append(session)

    log.debug("sessions_bucketed", days=len(buckets), skipped=skipped)
    return buckets


class MonthCalendar(BaseModel):
    """One render pass of the sessions calendar: grid cells plus day buckets.

    Build with MonthCalendar.build(); rebuild when the month or the fetched
    session list changes.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    grid: CalendarGrid
    buckets: DayBucketMap

    @classmethod
    def build(
        cls, year: int, month: int, sessions: Iterable[SessionRecord] = ()
    ) -> "MonthCalendar":
        return cls(
            year=year,
            month=month,
            grid=build_month_grid(year, month),
            buckets=bucket_sessions_by_day(sessions),
        )

    @property
    def title(self) -> str:
        return f"{MONTH_NAMES[self.month]} {self.year}"

    def weeks(self) -> list[CalendarGrid]:
        return [self.grid[i : i + 7] for i in range(0, len(self.grid), 7)]

    def key_for(self, day: int) -> str:
        return date_key(self.year, self.month, day)

    def sessions_for_day(self, day: int | None) -> list[SessionRecord]:
        if day is None:
            return []
        return list(self.buckets.get(self.key_for(day), []))

    def is_selected(self, day: int | None, selected: CalendarDate | None) -> bool:
        if day is None or selected is None:
            return False
        return self.key_for(day) == date_key(
            selected.year, selected.month, selected.day
        )

    def is_today(self, day: int | None, today: date | None = None) -> bool:
        """Whether the cell is today's date on the host's local calendar."""
        if day is None:
            return False
        if today is None:
            today = date.today()
        return self.key_for(day) == date_key(today.year, today.month - 1, today.day)

    def selected_day_sessions(self, selected: CalendarDate) -> list[SessionRecord]:
        """Sessions for the selected date, which may lie outside this month."""
        return list(
            self.buckets.get(date_key(selected.year, selected.month, selected.day), [])
        )


def sessions_for_day(calendar: MonthCalendar, day: int | None) -> list[SessionRecord]:
    """Sessions on a grid cell; [] for pad cells and days without sessions."""
    return calendar.sessions_for_day(day)
