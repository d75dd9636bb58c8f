# tests/test_labels.py

import pytest

from litseason.core.types import COLORS, SEASON_KEYS
from litseason.engines.labels import HEX_COLORS, ORDINALS, SEASONS, format_ordinal, season_title

@pytest.mark.parametrize("n,expected", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
    (11, "11th"), (12, "12th"), (13, "13th"),
    (21, "21st"), (22, "22nd"), (23, "23rd"), (30, "30th"),
    (31, "31st"), (101, "101st"), (111, "111th"),
])
def test_format_ordinal(n, expected):
    assert format_ordinal(n) == expected

def test_ordinal_vocabulary():
    assert len(ORDINALS) == 30
    assert ORDINALS[-1] == "30th"

def test_season_table_covers_keys():
    assert set(SEASONS) == set(SEASON_KEYS)
    assert {s.color for s in SEASONS.values()} <= set(COLORS)
    assert set(HEX_COLORS) == set(COLORS)

def test_tables_are_read_only():
    with pytest.raises(TypeError):
        SEASONS["LENT"] = SEASONS["ADVENT"]

def test_season_title():
    assert season_title("ADVENT") == "대림절 (Advent)"
    assert season_title("ORDINARY") == "창조절 (평주일) (Season after Pentecost)"
