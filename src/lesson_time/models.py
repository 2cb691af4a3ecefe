"""Pydantic models for lesson dates, times and sessions.

All value types are frozen pydantic v2 models: they are rebuilt on every
form submission or render pass and never mutated in place.
"""

from pydantic import BaseModel, ConfigDict, Field

# String forms exchanged with the UI and the backend.
DisplayDateString = str  # "01/05/2026"
DisplayTimeString = str  # "09:00 AM"
WireDate = str  # "2026-01-05"
WireTime = str  # "09:00"


class CalendarDate(BaseModel):
    """A calendar day with a zero-based month (January is 0).

    Only the parser builds these from user text, and it rejects days that do
    not exist, so a CalendarDate never names Feb 30.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=0, le=11)
    day: int = Field(ge=1, le=31)


class ClockTime(BaseModel):
    """A wall-clock time in 24-hour form."""

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)

    @property
    def minutes_since_midnight(self) -> int:
        return self.hour * 60 + self.minute


class SessionStudent(BaseModel):
    """Student attached to a session, as listed by the sessions endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str | None = None


class SessionRecord(BaseModel):
    """A lesson session fetched from the backend.

    The engine only reads it. `date` is either a bare wire date
    ("2026-01-01") or a full timestamp ("2026-01-01T00:00:00.000000Z").
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    date: str = ""
    start_time: WireTime = ""  # "14:00" or "14:00:00"
    end_time: WireTime = ""
    subject: str = ""
    location: str | None = None  # "online", "student's home", "centre"
    session_type: str | None = None  # "1:1" or "group"
    status: str | None = None
    color: str | None = None  # Card colour, e.g. "#4A90D9"
    students: list[SessionStudent] = Field(default_factory=list)


class LessonSlot(BaseModel):
    """Date and time fields of a create/update lesson request body."""

    model_config = ConfigDict(frozen=True)

    date: WireDate
    start_time: WireTime
    end_time: WireTime


class LessonFormValues(BaseModel):
    """Values an edit form is prefilled with for a stored lesson.

    duration_hours is None when the stored start/end pair does not match any
    of the duration options; the form decides what to preselect then.
    """

    model_config = ConfigDict(frozen=True)

    date: DisplayDateString
    start_time: DisplayTimeString
    duration_hours: float | None = None


# Day key ("yyyy-mm-dd") -> sessions on that day, in fetch order.
DayBucketMap = dict[str, list[SessionRecord]]

# Month grid cells: None pads, then day numbers 1..n. Length is a multiple of 7.
CalendarGrid = list[int | None]
