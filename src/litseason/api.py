from __future__ import annotations

from dataclasses import asdict, replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .core.time import as_date
from .core.types import SeasonDescriptor, SeasonSpan, YearAnchors
from .attributes.registry import compute_attributes, list_attributes as _list_attributes
from .engines import classifier as _classifier
from .engines.anchors import advent_start as _advent_start, year_anchors as _year_anchors
from .engines.easter import compute_easter as _compute_easter
from .engines.labels import format_ordinal as _format_ordinal
from .engines.spans import season_spans as _season_spans
from .engines.weeks import nth_sunday as _nth_sunday


def compute_easter(year: int) -> date:
    return _compute_easter(year)

def advent_start(year: int) -> date:
    return _advent_start(year)

def year_anchors(year: int) -> YearAnchors:
    return _year_anchors(year)

def classify(d: date, *, attributes: Sequence[str] = ()) -> SeasonDescriptor:
    desc = _classifier.classify(d)
    if attributes:
        attrs = compute_attributes(desc, attributes)
        desc = replace(desc, attributes=attrs)
    return desc

def nth_sunday(year: int, month: int, n: int) -> Optional[date]:
    return _nth_sunday(year, month, n)

def season_spans(year: int) -> List[SeasonSpan]:
    return _season_spans(year)

def format_ordinal(n: int) -> str:
    return _format_ordinal(n)

def list_attributes() -> List[str]:
    return _list_attributes()

def explain(d: date) -> Dict[str, Any]:
    """Anchors, matched rule and descriptor fields for one date."""
    d = as_date(d)
    desc = _classifier.classify(d)
    out = asdict(desc)
    out.pop("attributes")
    out["rule"] = _classifier.match_rule(d)
    out["anchors"] = asdict(_year_anchors(d.year))
    return out
