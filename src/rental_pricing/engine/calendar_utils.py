"""
Calendar helpers - date coercion, season/weekend classification and
whole-day arithmetic.

All arithmetic happens on `datetime.date`, so time-of-day and timezone never
shift a rental day. Strings are parsed with pandas.
"""
from datetime import date, datetime, timedelta
from typing import Any, Optional

import pandas as pd

# April through October inclusive
HIGH_SEASON_MONTHS = frozenset(range(4, 11))

# date.weekday(): Saturday = 5, Sunday = 6
WEEKEND_DAYS = frozenset({5, 6})


def to_calendar_date(value: Any) -> Optional[date]:
    """
    Coerce a date-like value to a calendar date.

    Accepts date, datetime, pandas Timestamp or any string pandas can parse.
    Returns None when the value cannot be interpreted as a date.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    try:
        parsed = pd.to_datetime(value, errors='coerce')
    except (TypeError, ValueError, OverflowError):
        return None

    # NaT is not a Timestamp instance; collections come back as indexes
    if not isinstance(parsed, pd.Timestamp):
        return None
    return parsed.date()


def _require_date(value: Any) -> date:
    day = to_calendar_date(value)
    if day is None:
        raise ValueError(f"Not a calendar date: {value!r}")
    return day


def days_between_inclusive(start: Any, end: Any) -> list[date]:
    """
    List every calendar date from start to end, both included.

    Empty when start is after end or either bound is not a date.
    """
    start_day = to_calendar_date(start)
    end_day = to_calendar_date(end)
    if start_day is None or end_day is None or start_day > end_day:
        return []

    span = (end_day - start_day).days
    return [start_day + timedelta(days=offset) for offset in range(span + 1)]


def is_weekend(value: Any) -> bool:
    """True for Saturdays and Sundays."""
    return _require_date(value).weekday() in WEEKEND_DAYS


def is_high_season(value: Any) -> bool:
    """True for dates in April through October."""
    return _require_date(value).month in HIGH_SEASON_MONTHS


def years_between(start: Any, end: Any) -> int:
    """
    Whole years elapsed from start to end, counted like an age.

    The anniversary itself completes a year; the day before it does not.
    """
    a = _require_date(start)
    b = _require_date(end)
    years = b.year - a.year
    if (b.month, b.day) < (a.month, a.day):
        years -= 1
    return years
