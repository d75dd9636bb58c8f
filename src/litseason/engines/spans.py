"""
litseason.engines.spans
-----------------------
Season table of one liturgical year: contiguous, inclusive date spans from
the First Sunday of Advent of the previous civil year up to the eve of the
next Advent.
"""

from __future__ import annotations

from datetime import date
from typing import List

from litseason.core.time import add_days
from litseason.core.types import SeasonSpan
from litseason.engines.anchors import advent_start, year_anchors


def season_spans(year: int) -> List[SeasonSpan]:
    a = year_anchors(year)
    prev_advent = advent_start(year - 1)
    return [
        SeasonSpan("ADVENT", prev_advent, date(year - 1, 12, 24)),
        SeasonSpan("CHRISTMAS", date(year - 1, 12, 25), add_days(a.epiphany, -1)),
        SeasonSpan("EPIPHANY", a.epiphany, add_days(a.ash_wednesday, -1)),
        SeasonSpan("LENT", a.ash_wednesday, add_days(a.easter, -1)),
        SeasonSpan("EASTER", a.easter, add_days(a.pentecost, -1)),
        SeasonSpan("PENTECOST", a.pentecost, a.pentecost),
        SeasonSpan("ORDINARY", add_days(a.pentecost, 1), add_days(a.advent1, -1)),
    ]
