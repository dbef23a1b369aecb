"""
Calendar Date Helpers

All dates in the rules engine are UTC calendar days carried as ``YYYY-MM-DD``
strings. Day arithmetic goes through ``datetime.date`` so month, year and
leap-year boundaries are handled by the calendar rather than by elapsed time.
"""

import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from ..models.errors import InvalidDate

_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')

EPOCH = date(2022, 1, 1)


def parse_date(value: str) -> date:
    if not isinstance(value, str) or not _DATE_PATTERN.match(value):
        raise InvalidDate(value)
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise InvalidDate(value)


def format_date(day: date) -> str:
    return day.strftime('%Y-%m-%d')


def is_next_day(previous: str, current: str) -> bool:
    """True when ``current`` is exactly the calendar day after ``previous``."""
    return parse_date(previous) + timedelta(days=1) == parse_date(current)


def today_utc(now: Optional[datetime] = None) -> str:
    """Today's UTC calendar day; this is the only place the clock is read."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return format_date(now.date())


def day_number(value: str) -> int:
    """Days elapsed since 2022-01-01, used as the puzzle number."""
    return (parse_date(value) - EPOCH).days
