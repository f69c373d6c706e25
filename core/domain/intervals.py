from __future__ import annotations

from datetime import date, datetime
from typing import Any

# "Unbounded" end of any open-ended range. Callers must not rely on the value.
FAR_FUTURE = date(2030, 12, 31)


def start_of_day(value: date | datetime) -> date:
    """Truncate a date or datetime to whole-day granularity."""
    if isinstance(value, datetime):
        return value.date()
    return value


def today() -> date:
    return start_of_day(datetime.now())


def overlaps(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """Closed-interval overlap: the ranges share at least one day."""
    return a_start <= b_end and a_end >= b_start


def clamp_range_start(a: date, b: date) -> date:
    return max(a, b)


def clamp_range_end(a: date, b: date) -> date:
    return min(a, b)


def days_between(start: date, end: date) -> int:
    """Inclusive number of days in [start, end]; 0 for an empty range."""
    if end < start:
        return 0
    return (end - start).days + 1


def parse_date(value: Any) -> date:
    """
    Accept a date, a datetime or an ISO-8601 string and return a whole day.
    Raises ValueError for anything else.
    """
    if isinstance(value, (date, datetime)):
        return start_of_day(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Empty date value")
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return start_of_day(datetime.fromisoformat(text))
    raise ValueError(f"Unsupported date value: {value!r}")


__all__ = [
    "FAR_FUTURE",
    "start_of_day",
    "today",
    "overlaps",
    "clamp_range_start",
    "clamp_range_end",
    "days_between",
    "parse_date",
]
