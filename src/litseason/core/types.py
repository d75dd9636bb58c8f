from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple

SeasonKey = Literal["ADVENT", "CHRISTMAS", "EPIPHANY", "LENT", "EASTER", "PENTECOST", "ORDINARY"]
Color = Literal["purple", "white", "green", "red"]

SEASON_KEYS: Tuple[str, ...] = (
    "ADVENT", "CHRISTMAS", "EPIPHANY", "LENT", "EASTER", "PENTECOST", "ORDINARY",
)
COLORS: Tuple[str, ...] = ("purple", "white", "green", "red")

@dataclass(frozen=True)
class SeasonDescriptor:
    civil_date: date
    season_key: SeasonKey
    display_name: str
    color: Color
    full_label: str
    season_title: str
    week: Optional[int] = None  # None on days without an ordinal
    attributes: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class YearAnchors:
    """Season boundaries of one civil year."""
    year: int
    easter: date
    ash_wednesday: date
    pentecost: date
    trinity: date
    christmas: date
    epiphany: date
    advent1: date

@dataclass(frozen=True)
class SeasonSpan:
    season_key: SeasonKey
    start: date
    end: date  # inclusive

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1
