"""Lay out a month of lesson sessions as a calendar table or day-bucket JSON.

Standalone CLI script for checking how fetched sessions land on the month
grid. Reads a JSON list of session records (as returned by the sessions
endpoint) from a file or stdin.

Run with: python scripts/month_calendar.py sessions.json
Table:    python scripts/month_calendar.py sessions.json --table
Month:    python scripts/month_calendar.py sessions.json --month 2026-01
Stdin:    cat sessions.json | python scripts/month_calendar.py -

Exit codes:
  0 = success (JSON or table on stdout)
  1 = error (message on stderr)
"""

import argparse
import json
import os
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.lesson_time.config import get_config  # noqa: E402
from src.lesson_time.duration import format_duration  # noqa: E402
from src.lesson_time.formatting import format_session_time  # noqa: E402
from src.lesson_time.logging import get_logger, setup_logging  # noqa: E402
from src.lesson_time.models import SessionRecord  # noqa: E402
from src.lesson_time.month_grid import (  # noqa: E402
    WEEKDAY_LABELS,
    MonthCalendar,
    month_date_range,
)

CELL_WIDTH = 6


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        description="Lay out lesson sessions on a month calendar.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "sessions",
        type=str,
        help="Path to a JSON list of session records, or '-' for stdin.",
    )
    parser.add_argument(
        "--month",
        type=str,
        default=None,
        help="Month to show as YYYY-MM (default: current month).",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Output a human-readable month table instead of JSON.",
    )
    return parser.parse_args(argv)


def _parse_month(value: str | None, today: date | None = None) -> tuple[int, int]:
    """Turn "YYYY-MM" into a (year, 0-based month) pair.

    Raises:
        ValueError: If the value is not a valid YYYY-MM month.
    """
    if value is None:
        today = today or date.today()
        return today.year, today.month - 1

    parts = value.split("-")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"--month must be YYYY-MM, got {value!r}")
    year, month_number = int(parts[0]), int(parts[1])
    if not 1 <= month_number <= 12:
        raise ValueError(f"--month has no month {month_number}")
    return year, month_number - 1


def _load_sessions(source: str) -> list[SessionRecord]:
    if source == "-":
        raw = json.load(sys.stdin)
    else:
        raw = json.loads(Path(source).read_text(encoding="utf-8"))

    # The sessions endpoint wraps its list in {"data": [...]}
    if isinstance(raw, dict):
        raw = raw.get("data", [])
    if not isinstance(raw, list):
        raise ValueError("Expected a JSON list of session records")
    return [SessionRecord.model_validate(item) for item in raw]


def _format_table(calendar: MonthCalendar) -> str:
    """Render the grid as fixed-width text, with per-day session counts.

    A day with sessions shows as "12*3" (3 sessions on the 12th). Each
    session of the month is then listed under the grid in day order.
    """
    lines = [calendar.title.center(CELL_WIDTH * 7).rstrip()]
    lines.append("".join(label.ljust(CELL_WIDTH) for label in WEEKDAY_LABELS).rstrip())

    for week in calendar.weeks():
        cells = []
        for day in week:
            if day is None:
                cells.append("".ljust(CELL_WIDTH))
                continue
            count = len(calendar.sessions_for_day(day))
            label = f"{day}*{count}" if count else str(day)
            cells.append(label.ljust(CELL_WIDTH))
        lines.append("".join(cells).rstrip())

    for day in calendar.grid:
        if day is None:
            continue
        for session in calendar.sessions_for_day(day):
            start = format_session_time(session.start_time)
            end = format_session_time(session.end_time)
            length = format_duration(session.start_time, session.end_time)
            lines.append(
                f"{calendar.key_for(day)}  {start}-{end} ({length})  {session.subject}"
            )

    return "\n".join(lines)


def main(args: argparse.Namespace) -> None:
    config = get_config()
    setup_logging(config=config)
    log = get_logger(__name__)

    year, month = _parse_month(args.month)
    sessions = _load_sessions(args.sessions)
    calendar = MonthCalendar.build(year, month, sessions)

    date_from, date_to = month_date_range(year, month)
    in_month = sum(len(calendar.sessions_for_day(day)) for day in calendar.grid)
    _log(
        f"  {len(sessions)} sessions loaded, {in_month} between {date_from} and {date_to}"
    )
    log.info("month_calendar_built", month=calendar.title, sessions=in_month)

    if args.table:
        print(_format_table(calendar))
    else:
        output = {
            "month": calendar.title,
            "date_from": date_from,
            "date_to": date_to,
            "grid": calendar.grid,
            "days": {
                key: [session.model_dump(mode="json") for session in day_sessions]
                for key, day_sessions in calendar.buckets.items()
                if date_from <= key <= date_to
            },
        }
        print(json.dumps(output, indent=2))


if __name__ == "__main__":
    args = _parse_args()
    try:
        main(args)
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
