from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    try:
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {s!r}: {e}") from e


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_descriptor(desc) -> None:
    print(f"{desc.civil_date.isoformat()}  {desc.full_label}")
    print(f"  season : {desc.season_title} [{desc.season_key}]")
    print(f"  color  : {desc.color}")
    if desc.attributes:
        for k, v in desc.attributes.items():
            print(f"  {k:<7}: {v}")


def cmd_day(argv: list[str]) -> int:
    import litseason

    p = argparse.ArgumentParser(prog="litseason day", description="Liturgical season of a date")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--debug", action="store_true", help="print anchors and the matched rule")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    if args.debug:
        for k, v in litseason.explain(args.date).items():
            print(f"{k}: {v}")
        return 0

    try:
        desc = litseason.classify(args.date, attributes=tuple(args.attr))
    except KeyError as e:
        p.error(str(e))
    _print_descriptor(desc)
    return 0


def cmd_sunday(argv: list[str]) -> int:
    import litseason

    p = argparse.ArgumentParser(prog="litseason sunday", description="Classify the n-th Sunday of a month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, choices=range(1, 13), metavar="MONTH")
    p.add_argument("n", type=int, choices=range(1, 6), metavar="N", help="week of month, 1..5")
    args = p.parse_args(argv)

    d = litseason.nth_sunday(args.year, args.month, args.n)
    if d is None:
        print(f"no such week: {args.year}-{args.month:02d} has fewer than {args.n} Sundays")
        return 1
    _print_descriptor(litseason.classify(d))
    return 0


def cmd_easter(argv: list[str]) -> int:
    import litseason

    p = argparse.ArgumentParser(prog="litseason easter", description="Movable anchors of a year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    a = litseason.year_anchors(args.year)
    print(f"Easter Day       {a.easter.isoformat()}")
    print(f"Ash Wednesday    {a.ash_wednesday.isoformat()}")
    print(f"Pentecost        {a.pentecost.isoformat()}")
    print(f"Trinity Sunday   {a.trinity.isoformat()}")
    print(f"Advent Sunday    {a.advent1.isoformat()}")
    return 0


def cmd_year(argv: list[str]) -> int:
    import litseason
    from litseason.engines.labels import SEASONS

    p = argparse.ArgumentParser(
        prog="litseason year",
        description="Season table of the liturgical year ending before Advent of YEAR",
    )
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    for span in litseason.season_spans(args.year):
        info = SEASONS[span.season_key]
        print(f"{span.start.isoformat()} .. {span.end.isoformat()}  {span.days:>4}d  {info.color:<6}  {info.name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `litseason YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="litseason", description="Liturgical season calculator CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Liturgical season of a date")
    sub.add_parser("sunday", help="Classify the n-th Sunday of a month")
    sub.add_parser("easter", help="Easter and the movable anchors of a year")
    sub.add_parser("year", help="Season table of a liturgical year")

    # diagnostics
    sub.add_parser("easter-table", help="Print Easter and Advent dates for a range of years")
    sub.add_parser("partition-check", help="Check that every date falls in exactly one season")

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "sunday":
        return cmd_sunday(rest)

    if args.cmd == "easter":
        return cmd_easter(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "easter-table":
        return _run_module_main("litseason.diagnostics.easter_table", rest)

    if args.cmd == "partition-check":
        return _run_module_main("litseason.diagnostics.partition_check", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
