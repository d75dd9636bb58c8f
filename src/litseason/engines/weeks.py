"""
litseason.engines.weeks
-----------------------
Resolves a (year, month, week-of-month) selection to a concrete Sunday.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from litseason.core.errors import InvalidOrdinalError
from litseason.core.time import add_days, days_in_month, sunday_on_or_after


def nth_sunday(year: int, month: int, n: int) -> Optional[date]:
    """
    The n-th Sunday of the month, or None when the month has fewer than n
    Sundays. A missing week is an ordinary outcome, not an error.
    """
    if n < 1:
        raise InvalidOrdinalError(f"week ordinal must be >= 1, got {n}")
    first = sunday_on_or_after(date(year, month, 1))
    day = first.day + (n - 1) * 7
    if day > days_in_month(year, month):
        return None
    return add_days(first, (n - 1) * 7)
