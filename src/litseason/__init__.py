"""litseason public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard attributes on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    classify,
    explain,
    compute_easter,
    advent_start,
    year_anchors,
    nth_sunday,
    season_spans,
    format_ordinal,
    list_attributes,
)
from .core.errors import LitseasonError, InvalidOrdinalError
from .core.types import SeasonDescriptor, SeasonSpan, YearAnchors

__all__ = [
    "classify",
    "explain",
    "compute_easter",
    "advent_start",
    "year_anchors",
    "nth_sunday",
    "season_spans",
    "format_ordinal",
    "list_attributes",
    "LitseasonError",
    "InvalidOrdinalError",
    "SeasonDescriptor",
    "SeasonSpan",
    "YearAnchors",
]
