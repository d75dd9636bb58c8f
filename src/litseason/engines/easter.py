"""
litseason.engines.easter
------------------------
Gregorian computus. The only movable feast the season engine needs; every
other movable boundary (Ash Wednesday, Pentecost, Trinity) is a fixed
offset from it.
"""

from __future__ import annotations

from datetime import date


def compute_easter(year: int) -> date:
    """
    Date of Easter Sunday in the Gregorian calendar.

    Anonymous Gregorian algorithm (Meeus/Jones/Butcher). Integer arithmetic
    only; valid for every year `datetime.date` can represent.
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)
