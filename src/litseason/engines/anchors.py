"""
litseason.engines.anchors
-------------------------
Derives the season boundaries (anchors) of one civil year. Computed on
demand and never cached; every call is a pure function of the year.
"""

from __future__ import annotations

import logging
from datetime import date

from litseason.core.time import add_days, sunday_on_or_after
from litseason.core.types import YearAnchors
from litseason.engines.easter import compute_easter

logger = logging.getLogger(__name__)

# Offsets from Easter Sunday, in days
ASH_WEDNESDAY_OFFSET = -46
PENTECOST_OFFSET = 49
TRINITY_OFFSET = PENTECOST_OFFSET + 7

# Earliest possible First Sunday of Advent; the latest is Dec 3
ADVENT_EARLIEST = (11, 27)


def advent_start(year: int) -> date:
    """First Sunday of Advent: the Sunday falling in [Nov 27, Dec 3]."""
    return sunday_on_or_after(date(year, *ADVENT_EARLIEST))


def year_anchors(year: int) -> YearAnchors:
    easter = compute_easter(year)
    anchors = YearAnchors(
        year=year,
        easter=easter,
        ash_wednesday=add_days(easter, ASH_WEDNESDAY_OFFSET),
        pentecost=add_days(easter, PENTECOST_OFFSET),
        trinity=add_days(easter, TRINITY_OFFSET),
        christmas=date(year, 12, 25),
        epiphany=date(year, 1, 6),
        advent1=advent_start(year),
    )
    logger.debug("anchors for %d: easter=%s advent1=%s", year, anchors.easter, anchors.advent1)
    return anchors
