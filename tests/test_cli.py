# tests/test_cli.py

import pytest

from litseason.cli import main
from litseason.diagnostics.partition_check import check_range
from datetime import date

def test_day(capsys):
    assert main(["day", "2024-03-31"]) == 0
    out = capsys.readouterr().out
    assert "2024-03-31  Easter Day" in out
    assert "부활절 (Easter) [EASTER]" in out
    assert "color  : white" in out

def test_day_shorthand_with_attrs(capsys):
    assert main(["2024-12-01", "--attr", "hex", "--attr", "theme"]) == 0
    out = capsys.readouterr().out
    assert "Advent, 1st Sunday" in out
    assert "#6b21a8" in out
    assert "기다림, 회개, 왕의 오심" in out

def test_day_debug(capsys):
    assert main(["day", "2025-06-08", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "rule: easter" in out
    assert "season_key: PENTECOST" in out

def test_day_bad_date():
    with pytest.raises(SystemExit) as exc:
        main(["day", "2025-02-30"])
    assert exc.value.code == 2

def test_sunday(capsys):
    assert main(["sunday", "2026", "1", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("2026-01-04  Christmastide, 2nd Sunday")

def test_sunday_not_found(capsys):
    assert main(["sunday", "2026", "2", "5"]) == 1
    assert "no such week" in capsys.readouterr().out

def test_easter(capsys):
    assert main(["easter", "2025"]) == 0
    out = capsys.readouterr().out
    assert "Easter Day       2025-04-20" in out
    assert "Advent Sunday    2025-11-30" in out

def test_year(capsys):
    assert main(["year", "2025"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert lines[0].startswith("2024-12-01 .. 2024-12-24")
    assert lines[5].startswith("2025-06-08 .. 2025-06-08     1d  red")

def test_easter_table(capsys):
    assert main(["easter-table", "--from-year", "2024", "--to-year", "2025", "--dates", "iso"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert "2024-03-31" in lines[1]
    assert "2025-11-30" in lines[2]

def test_partition_check(capsys):
    assert main(["partition-check", "--from-year", "2020", "--to-year", "2030"]) == 0
    assert "0 problems" in capsys.readouterr().out

def test_check_range_long():
    assert check_range(date(1900, 1, 1), date(2100, 12, 31)) == []
