from __future__ import annotations
import calendar
from datetime import date, datetime, timedelta

SUNDAY = 6  # date.weekday() convention: 0=Mon..6=Sun


def as_date(d: date) -> date:
    """Reduce a datetime to its calendar date; dates pass through."""
    if isinstance(d, datetime):
        return d.date()
    return d

def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)

def is_sunday(d: date) -> bool:
    return d.weekday() == SUNDAY

def sunday_on_or_after(d: date) -> date:
    return add_days(d, (SUNDAY - d.weekday()) % 7)

def weeks_between(start: date, d: date) -> int:
    """Whole weeks elapsed from start to d, floored."""
    return (d - start).days // 7

def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]
