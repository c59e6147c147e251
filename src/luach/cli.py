from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from luach.core.errors import LuachError


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")
_HEB_RE = re.compile(r"^(\d{1,4})-([A-Za-z_]+)-(\d{1,2})$")

logger = logging.getLogger(__name__)


def _parse_ymd(s: str):
    from luach import GregorianDate
    y, m, d = map(int, s.rsplit("-", 2))
    return GregorianDate(y, m, d)


def _parse_event(s: str):
    """ISO Gregorian date, or a Hebrew date written YEAR-MONTHNAME-DAY (5776-ADAR_I-30)."""
    from luach import HebrewDate, HebrewMonth
    m = _HEB_RE.match(s)
    if m:
        return HebrewDate(int(m.group(1)), HebrewMonth.parse(m.group(2)), int(m.group(3)))
    if _DATE_RE.match(s):
        return _parse_ymd(s)
    raise SystemExit(f"Cannot parse date '{s}' (use YYYY-MM-DD or YEAR-MONTHNAME-DAY)")


def _parse_month(s: str, year: int):
    from luach import HebrewMonth, is_leap_year
    if s.isdigit():
        return HebrewMonth.of_civil(int(s), is_leap_year(year))
    return HebrewMonth.parse(s)


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


def cmd_day(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach day", description="Gregorian -> Hebrew day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = luach.day_info(_parse_ymd(args.date), attributes=tuple(args.attr), debug=args.debug)
    print(f"{info.gregorian}  ->  {info.hebrew}")
    print(f"  JDN = {info.jdn}")
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")
    if info.debug:
        for k, v in info.debug.items():
            print(f"  [debug] {k} = {v}")
    return 0


def cmd_gregorian(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach gregorian", description="Hebrew -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", help="month name (e.g. ADAR_II) or civil number (TISHRI = 1)")
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    h = luach.HebrewDate(args.year, _parse_month(args.month, args.year), args.day)
    print(f"{h}  ->  {luach.to_gregorian(h)}")
    return 0


def cmd_year(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach year", description="Leap status, length and months of a Hebrew year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    info = luach.year_info(args.year)
    kind = "leap" if info["leap_year"] else "common"
    print(f"AM {info['Y']}: {kind}, {info['year_type']}, {info['year_length']} days, begins {info['new_year']}")
    print()
    print("civ  bib  month     len  first day")
    for rec in info["months"]:
        first = luach.first_day_of_month(args.year, rec["month"])
        print(f"{rec['civil']:>3}  {rec['biblical']:>3}  {rec['month'].name:<8}  {rec['length']:>3}  {first}")
    return 0


def cmd_anniversary(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach anniversary", description="Birthday / yahrzeit of an event date")
    p.add_argument("date", help="event date: YYYY-MM-DD (Gregorian) or YEAR-MONTHNAME-DAY (Hebrew)")
    p.add_argument("--rule", choices=[r.value for r in luach.Anniversary], default="birthday")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--hebrew-year", type=int, help="target Hebrew year")
    g.add_argument("--gregorian-year", type=int, help="target Gregorian year")
    args = p.parse_args(argv)

    event = _parse_event(args.date)
    h = luach.to_hebrew(event)
    print(f"event: {h}  ({luach.to_gregorian(h)})")

    if args.hebrew_year is not None:
        a = luach.resolve_anniversary(args.rule, h, args.hebrew_year)
        print(f"{args.rule} in AM {args.hebrew_year}: {a}  ({luach.to_gregorian(a)})")
        return 0

    dates = luach.anniversaries_in_gregorian_year(args.rule, h, args.gregorian_year)
    print(f"{args.rule} in {args.gregorian_year}: {len(dates)} occurrence(s)")
    for d in dates:
        print(f"  {d}  ({luach.to_hebrew(d)})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `luach YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="luach", description="Hebrew calendar and anniversary toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Hebrew day label")
    sub.add_parser("gregorian", help="Hebrew -> Gregorian date")
    sub.add_parser("year", help="Hebrew year summary")
    sub.add_parser("anniversary", help="Birthday / yahrzeit in a Hebrew or Gregorian year")

    # diagnostics
    sub.add_parser("pretty-month", help="Print a Hebrew month as a weekly grid (diagnostics)")
    sub.add_parser("new-years", help="Print Rosh Hashanah table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-types", "anniversary-table"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    logger.debug("command %s, args %s", args.cmd, rest)

    commands = {
        "day": cmd_day,
        "gregorian": cmd_gregorian,
        "year": cmd_year,
        "anniversary": cmd_anniversary,
    }
    modules = {
        "pretty-month": "luach.diagnostics.pretty_month",
        "new-years": "luach.diagnostics.new_years_table",
    }
    tool_map = {
        "round-trip": "luach.diagnostics.round_trip",
        "year-types": "luach.diagnostics.year_types",
        "anniversary-table": "luach.diagnostics.anniversary_table",
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd in modules:
            return _run_module_main(modules[args.cmd], rest)
        if args.cmd == "diag":
            return _run_module_main(tool_map[args.tool], rest)
    except LuachError as e:
        print(f"luach: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
