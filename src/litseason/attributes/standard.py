from __future__ import annotations
import calendar
from typing import Any, Dict

from ..engines.labels import HEX_COLORS, SEASONS
from .registry import register_attribute

def theme(desc) -> Dict[str, Any]:
    return {"theme": SEASONS[desc.season_key].theme}

def hex_color(desc) -> Dict[str, Any]:
    return {"hex": HEX_COLORS[desc.color]}

def weekday(desc) -> Dict[str, Any]:
    # 0=Mon..6=Sun
    wd = desc.civil_date.weekday()
    return {"weekday": wd, "weekday_name": calendar.day_name[wd]}

register_attribute("theme", theme)
register_attribute("hex", hex_color)
register_attribute("weekday", weekday)
