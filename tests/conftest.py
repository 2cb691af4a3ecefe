"""Shared fixtures for the lesson time tests."""

import os
import time

import pytest

from src.lesson_time.config import reset_config
from src.lesson_time.models import SessionRecord


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch):
    """Give every test its own config read, free of LESSON_TIME_* leftovers."""
    for name in list(os.environ):
        if name.upper().startswith("LESSON_TIME_"):
            monkeypatch.delenv(name)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def host_timezone(monkeypatch: pytest.MonkeyPatch):
    """Switch the process-local timezone; returns a setter taking a TZ name."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def make_session():
    """Factory for SessionRecord with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(date: str, start: str = "09:00", end: str = "10:00", **extra):
        return SessionRecord(
            id=extra.pop("id", next(counter)),
            date=date,
            start_time=start,
            end_time=end,
            subject=extra.pop("subject", "Maths"),
            **extra,
        )

    return _make


@pytest.fixture
def january_payload() -> list[dict]:
    """Sessions as the list endpoint returns them, mixing dates and timestamps."""
    return [
        {
            "id": 1,
            "date": "2026-01-01T00:00:00.000000Z",
            "start_time": "09:00:00",
            "end_time": "10:30:00",
            "subject": "Maths",
            "location": "online",
            "session_type": "1:1",
            "color": "#4A90D9",
            "students": [{"id": 7, "name": "Ava"}],
        },
        {
            "id": 2,
            "date": "2026-01-01",
            "start_time": "14:00",
            "end_time": "15:00",
            "subject": "English",
            "location": "centre",
            "session_type": "group",
            "students": [{"id": 7, "name": "Ava"}, {"id": 8, "name": "Noah"}],
        },
        {
            "id": 3,
            "date": "2026-01-31T23:30:00.000000Z",
            "start_time": "17:00",
            "end_time": "18:00",
            "subject": "Physics",
            "students": [],
            "attendance_marked": False,
        },
    ]


@pytest.fixture
def january_sessions(january_payload) -> list[SessionRecord]:
    return [SessionRecord.model_validate(item) for item in january_payload]
