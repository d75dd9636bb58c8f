"""
litseason.engines.labels
------------------------
Read-only season table and label formatting. Nothing here is mutated after
import.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from litseason.core.time import is_sunday


@dataclass(frozen=True)
class SeasonInfo:
    name: str      # short English name
    name_ko: str   # Korean name, used in the bilingual title
    color: str
    theme: str     # devotional themes shown under the title


SEASONS: Mapping[str, SeasonInfo] = MappingProxyType({
    "ADVENT":    SeasonInfo("Advent", "대림절", "purple", "기다림, 회개, 왕의 오심"),
    "CHRISTMAS": SeasonInfo("Christmastide", "성탄절", "white", "기쁨, 빛, 순결, 축제"),
    "EPIPHANY":  SeasonInfo("Epiphany", "주현절", "green", "세상에 나타나심, 성장과 선교"),
    "LENT":      SeasonInfo("Lent", "사순절", "purple", "회개, 절제, 고난"),
    "EASTER":    SeasonInfo("Easter", "부활절", "white", "승리, 기쁨, 영생"),
    "PENTECOST": SeasonInfo("Pentecost", "성령강림절", "red", "성령의 불, 열정, 순교, 교회"),
    "ORDINARY":  SeasonInfo("Season after Pentecost", "창조절 (평주일)", "green", "신앙의 성장, 소망, 성숙"),
})

# Display palette for presentation layers (background colours)
HEX_COLORS: Mapping[str, str] = MappingProxyType({
    "purple": "#6b21a8",
    "white": "#f0f9ff",
    "green": "#15803d",
    "red": "#dc2626",
})

# Special-day labels
CHRISTMAS_DAY = "Christmas Day"
CHRISTMAS_WEEKDAY = "Christmastide, weekday"
EPIPHANY_DAY = "Epiphany"
EASTER_DAY = "Easter Day"
PENTECOST_DAY = "Day of Pentecost"
TRINITY_SUNDAY = "Trinity Sunday"
TRINITY_WEEK = "Trinity week"
PENTECOST_WEEKDAY = "Season after Pentecost, weekday"

_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def _suffix(n: int) -> str:
    if 10 <= n % 100 <= 20:
        return "th"
    return _SUFFIXES.get(n % 10, "th")


ORDINALS = tuple(f"{n}{_suffix(n)}" for n in range(1, 31))


def format_ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 1 <= n <= len(ORDINALS):
        return ORDINALS[n - 1]
    return f"{n}{_suffix(n)}"


def season_title(key: str) -> str:
    info = SEASONS[key]
    return f"{info.name_ko} ({info.name})"


def week_label(key: str, d: date, week: Optional[int]) -> str:
    """'Lent, 3rd Sunday' on Sundays, 'Lent, 3rd week' on weekdays."""
    name = SEASONS[key].name
    if week is None:
        return name
    unit = "Sunday" if is_sunday(d) else "week"
    return f"{name}, {format_ordinal(week)} {unit}"
