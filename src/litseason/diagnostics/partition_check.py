"""
Walks every day of a range of years and checks that the season rules
partition the calendar: each date is claimed by exactly one rule, the first
match agrees with the season table of its liturgical year, and the fallback
rule is never reached.
"""

from __future__ import annotations

import argparse
import logging
from datetime import date, timedelta
from typing import List, Tuple

from litseason.engines.classifier import FALLBACK, RULES, classify
from litseason.engines.anchors import advent_start, year_anchors
from litseason.engines.spans import season_spans

logger = logging.getLogger(__name__)


def _spans_for(d: date):
    # Dates from Advent onward belong to the next liturgical year
    year = d.year + 1 if d >= advent_start(d.year) else d.year
    return season_spans(year)


def check_range(start: date, end: date) -> List[Tuple[date, str]]:
    """Return (date, problem) pairs; empty when the partition holds."""
    problems: List[Tuple[date, str]] = []
    d = start
    while d <= end:
        anchors = year_anchors(d.year)
        hits = [r.name for r in RULES if r.matches(d, anchors)]
        if len(hits) != 1:
            problems.append((d, f"matched {hits or [FALLBACK]}"))
        else:
            key = classify(d).season_key
            span = next(s for s in _spans_for(d) if s.start <= d <= s.end)
            if span.season_key != key:
                problems.append((d, f"classified {key}, season table says {span.season_key}"))
        d += timedelta(days=1)
    logger.debug("checked %s..%s, %d problems", start, end, len(problems))
    return problems


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check that the season rules partition every year.")
    p.add_argument("--from-year", type=int, default=1900)
    p.add_argument("--to-year", type=int, default=2100)
    args = p.parse_args(argv)

    problems = check_range(date(args.from_year, 1, 1), date(args.to_year, 12, 31))
    for d, msg in problems[:50]:
        print(f"{d.isoformat()}  {msg}")
    total = (date(args.to_year, 12, 31) - date(args.from_year, 1, 1)).days + 1
    print(f"{total} days checked, {len(problems)} problems")
    return 1 if problems else 0


if __name__ == "__main__":
    raise SystemExit(main())
