from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator

from ..core.constants import TIME_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), TIME_FORMAT).time()


def format_hhmm(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def sunday_based_weekday(value: date) -> int:
    """Day of week with 0 = Sunday .. 6 = Saturday."""
    return (value.weekday() + 1) % 7


def day_bounds(start: date, end: date) -> tuple[datetime, datetime]:
    """Half-open datetime window [start 00:00, day after end 00:00)."""
    return datetime.combine(start, time.min), datetime.combine(end + timedelta(days=1), time.min)
