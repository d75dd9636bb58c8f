# tests/test_api.py

import pytest
from datetime import date

import litseason

def test_public_surface():
    for name in litseason.__all__:
        assert hasattr(litseason, name)

def test_classify_without_attributes():
    desc = litseason.classify(date(2024, 3, 31))
    assert desc.attributes is None
    assert desc.full_label == "Easter Day"

def test_classify_with_attributes():
    desc = litseason.classify(date(2024, 3, 3), attributes=("theme", "hex", "weekday"))
    assert desc.attributes == {
        "theme": "회개, 절제, 고난",
        "hex": "#6b21a8",
        "weekday": 6,
        "weekday_name": "Sunday",
    }

def test_unknown_attribute():
    with pytest.raises(KeyError, match="Unknown attribute 'moon'"):
        litseason.classify(date(2024, 3, 3), attributes=("moon",))

def test_list_attributes():
    assert litseason.list_attributes() == ["hex", "theme", "weekday"]

def test_explain():
    out = litseason.explain(date(2025, 6, 8))
    assert out["rule"] == "easter"
    assert out["season_key"] == "PENTECOST"
    assert out["civil_date"] == date(2025, 6, 8)
    assert out["anchors"]["pentecost"] == date(2025, 6, 8)
    assert out["anchors"]["easter"] == date(2025, 4, 20)
    assert "attributes" not in out

def test_nth_sunday_then_classify():
    d = litseason.nth_sunday(2026, 3, 5)
    assert d == date(2026, 3, 29)
    # Easter 2026 is Apr 5, so Mar 29 is the last Sunday of Lent
    desc = litseason.classify(d)
    assert desc.season_key == "LENT"
    assert desc.full_label == "Lent, 6th Sunday"

def test_reexports():
    assert litseason.compute_easter(2025) == date(2025, 4, 20)
    assert litseason.advent_start(2026) == date(2026, 11, 29)
    assert litseason.year_anchors(2026).easter == date(2026, 4, 5)
    assert litseason.format_ordinal(2) == "2nd"
    assert litseason.season_spans(2026)[0].start == date(2025, 11, 30)
