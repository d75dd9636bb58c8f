from __future__ import annotations

import argparse
from datetime import date

import litseason


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Easter, Ash Wednesday, Pentecost and Advent Sunday for a range of years."
    )
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2035)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    fmt = mmdd if args.dates == "mmdd" else date.isoformat
    cols = ("Ash Wed", "Easter", "Pentecost", "Advent 1")
    width = 10 if args.dates == "iso" else 9
    print("Year  " + "".join(f"{c:<{width + 2}}" for c in cols))
    for y in range(args.from_year, args.to_year + 1):
        a = litseason.year_anchors(y)
        row = (a.ash_wednesday, a.easter, a.pentecost, a.advent1)
        print(f"{y:<6}" + "".join(f"{fmt(d):<{width + 2}}" for d in row))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
