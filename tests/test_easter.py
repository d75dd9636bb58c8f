# tests/test_easter.py

import pytest
from datetime import date

from litseason.engines.easter import compute_easter


@pytest.mark.parametrize("year,expected", [
    (2000, date(2000, 4, 23)),
    (2008, date(2008, 3, 23)),
    (2019, date(2019, 4, 21)),
    (2024, date(2024, 3, 31)),
    (2025, date(2025, 4, 20)),
    (2026, date(2026, 4, 5)),
    (2038, date(2038, 4, 25)),
])
def test_known_easter_dates(year, expected):
    assert compute_easter(year) == expected

def test_easter_window_1900_2100():
    """
    Gregorian Easter always falls on a Sunday between March 22 and April 25.
    """
    for year in range(1900, 2101):
        e = compute_easter(year)
        assert e.weekday() == 6, year
        assert date(year, 3, 22) <= e <= date(year, 4, 25), year

def test_extreme_dates():
    # Earliest and latest possible Easter
    assert compute_easter(1818) == date(1818, 3, 22)
    assert compute_easter(2285) == date(2285, 3, 22)
    assert compute_easter(1943) == date(1943, 4, 25)
