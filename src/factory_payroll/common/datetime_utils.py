from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError

SUNDAY = 6


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


def parse_month(value: str) -> date:
    """Parse a YYYY-MM month key into the first day of that month."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m").date()
    except ValueError:
        raise ValidationError(f"Invalid month {value!r} (expected YYYY-MM)")


def month_key(day: date) -> str:
    return day.strftime("%Y-%m")


def days_in_month(month: str) -> int:
    first = parse_month(month)
    return calendar.monthrange(first.year, first.month)[1]


def month_bounds(month: str) -> tuple[date, date]:
    first = parse_month(month)
    return first, first.replace(day=days_in_month(month))


def iter_days(start: date, end: date) -> Iterator[date]:
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def is_sunday(day: date) -> bool:
    return day.weekday() == SUNDAY


def minutes_of(value: time) -> int:
    """Minutes since midnight; seconds are ignored like the punch clock does."""
    return value.hour * 60 + value.minute


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start to end, never negative."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return max(months, 0)
