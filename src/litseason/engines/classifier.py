"""
litseason.engines.classifier
----------------------------
Maps a civil date to its liturgical season.

The season intervals of a year are expressed as an ordered list of rules.
Each rule pairs a predicate with a descriptor builder; rules are evaluated
in order and the first match wins, so the order resolves ties on boundary
days. Taken together the predicates partition the year, including the
December/January wrap of the Christmas season.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Tuple

from litseason.core.time import SUNDAY, as_date, is_sunday, weeks_between
from litseason.core.types import SeasonDescriptor, YearAnchors
from litseason.engines import labels
from litseason.engines.anchors import year_anchors

logger = logging.getLogger(__name__)

Predicate = Callable[[date, YearAnchors], bool]
Builder = Callable[[date, YearAnchors], SeasonDescriptor]


@dataclass(frozen=True)
class SeasonRule:
    name: str
    matches: Predicate
    build: Builder


def _descriptor(
    d: date,
    key: str,
    *,
    label: Optional[str] = None,
    week: Optional[int] = None,
    color: Optional[str] = None,
) -> SeasonDescriptor:
    info = labels.SEASONS[key]
    return SeasonDescriptor(
        civil_date=d,
        season_key=key,
        display_name=info.name,
        color=color or info.color,
        full_label=label or labels.week_label(key, d, week),
        season_title=labels.season_title(key),
        week=week,
    )


# ---------------------------------------------------------
# Advent: [advent1, Dec 24]
# ---------------------------------------------------------

def _in_advent(d: date, a: YearAnchors) -> bool:
    return a.advent1 <= d and (d.month, d.day) <= (12, 24)

def _build_advent(d: date, a: YearAnchors) -> SeasonDescriptor:
    return _descriptor(d, "ADVENT", week=weeks_between(a.advent1, d) + 1)


# ---------------------------------------------------------
# Christmas: [Dec 25 of Y, Jan 6 of Y+1)
# ---------------------------------------------------------

def _in_christmas(d: date, a: YearAnchors) -> bool:
    return (d.month == 12 and d.day >= 25) or (d.month == 1 and d.day < 6)

def _christmas_offsets(d: date) -> Tuple[int, int]:
    """
    Days since the Christmas that opened d's span, and days from that
    Christmas to the first Sunday strictly after it (1..7).

    January dates belong to the previous year's Christmas. Jan 1 is exactly
    one week after Dec 25, so the weekday of that Christmas is the weekday
    of Jan 1 and no date in the previous year has to be constructed.
    """
    if d.month == 12:
        christmas = d.replace(day=25)
        elapsed = (d - christmas).days
    else:
        christmas = d.replace(day=1)
        elapsed = d.day + 6
    # Christmas Day itself is never the first Sunday after Christmas
    to_sunday = (SUNDAY - christmas.weekday()) % 7 or 7
    return elapsed, to_sunday

def _build_christmas(d: date, a: YearAnchors) -> SeasonDescriptor:
    elapsed, to_sunday = _christmas_offsets(d)
    if elapsed == 0:
        return _descriptor(d, "CHRISTMAS", label=labels.CHRISTMAS_DAY)
    if elapsed < to_sunday:
        return _descriptor(d, "CHRISTMAS", label=labels.CHRISTMAS_WEEKDAY)
    return _descriptor(d, "CHRISTMAS", week=(elapsed - to_sunday) // 7 + 1)


# ---------------------------------------------------------
# Epiphany: [Jan 6, Ash Wednesday)
# ---------------------------------------------------------

def _in_epiphany(d: date, a: YearAnchors) -> bool:
    return a.epiphany <= d < a.ash_wednesday

def _build_epiphany(d: date, a: YearAnchors) -> SeasonDescriptor:
    if d == a.epiphany:
        return _descriptor(d, "EPIPHANY", label=labels.EPIPHANY_DAY, color="white")
    return _descriptor(d, "EPIPHANY", week=weeks_between(a.epiphany, d) + 1)


# ---------------------------------------------------------
# Lent: [Ash Wednesday, Easter)
# ---------------------------------------------------------

def _in_lent(d: date, a: YearAnchors) -> bool:
    return a.ash_wednesday <= d < a.easter

def _build_lent(d: date, a: YearAnchors) -> SeasonDescriptor:
    return _descriptor(d, "LENT", week=weeks_between(a.ash_wednesday, d) + 1)


# ---------------------------------------------------------
# Easter: [Easter, Pentecost]
# ---------------------------------------------------------

def _in_easter(d: date, a: YearAnchors) -> bool:
    return a.easter <= d <= a.pentecost

def _build_easter(d: date, a: YearAnchors) -> SeasonDescriptor:
    if d == a.easter:
        return _descriptor(d, "EASTER", label=labels.EASTER_DAY)
    if d == a.pentecost:
        return _descriptor(d, "PENTECOST", label=labels.PENTECOST_DAY)
    return _descriptor(d, "EASTER", week=weeks_between(a.easter, d) + 1)


# ---------------------------------------------------------
# Season after Pentecost: (Pentecost, advent1)
# ---------------------------------------------------------

def _after_pentecost(d: date, a: YearAnchors) -> bool:
    return a.pentecost < d < a.advent1

def _build_after_pentecost(d: date, a: YearAnchors) -> SeasonDescriptor:
    week = weeks_between(a.pentecost, d)
    if week == 0:
        return _descriptor(d, "ORDINARY", label=labels.PENTECOST_WEEKDAY)
    if week == 1:
        label = labels.TRINITY_SUNDAY if is_sunday(d) else labels.TRINITY_WEEK
        return _descriptor(d, "ORDINARY", label=label, week=1, color="white")
    return _descriptor(d, "ORDINARY", week=week)


RULES: Tuple[SeasonRule, ...] = (
    SeasonRule("advent", _in_advent, _build_advent),
    SeasonRule("christmas", _in_christmas, _build_christmas),
    SeasonRule("epiphany", _in_epiphany, _build_epiphany),
    SeasonRule("lent", _in_lent, _build_lent),
    SeasonRule("easter", _in_easter, _build_easter),
    SeasonRule("after_pentecost", _after_pentecost, _build_after_pentecost),
)

FALLBACK = "fallback"


def _match(d: date) -> Tuple[Optional[SeasonRule], YearAnchors]:
    anchors = year_anchors(d.year)
    for rule in RULES:
        if rule.matches(d, anchors):
            return rule, anchors
    return None, anchors


def match_rule(d: date) -> str:
    """Name of the first rule matching d, or 'fallback'."""
    rule, _ = _match(as_date(d))
    return rule.name if rule is not None else FALLBACK


def classify(d: date) -> SeasonDescriptor:
    d = as_date(d)
    rule, anchors = _match(d)
    if rule is None:
        logger.warning("no season rule matched %s; using generic label", d)
        return _descriptor(d, "ORDINARY")
    logger.debug("%s matched rule %r", d, rule.name)
    return rule.build(d, anchors)
