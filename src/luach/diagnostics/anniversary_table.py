from __future__ import annotations

import argparse
from typing import List, Optional

import luach


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Gregorian dates of an anniversary over a range of Gregorian years."
    )
    p.add_argument("year", type=int, help="event Hebrew year")
    p.add_argument("month", help="event Hebrew month name")
    p.add_argument("day", type=int, help="event Hebrew day")
    p.add_argument("--rule", choices=[r.value for r in luach.Anniversary], default="yahrzeit")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2040)
    args = p.parse_args(argv)

    event = luach.HebrewDate(args.year, luach.HebrewMonth.parse(args.month), args.day)
    print(f"{args.rule} of {event} ({luach.to_gregorian(event)})")
    print()

    counts = {0: 0, 1: 0, 2: 0}
    for gy in range(args.from_year, args.to_year + 1):
        dates = luach.anniversaries_in_gregorian_year(args.rule, event, gy)
        counts[len(dates)] += 1
        cols = [f"{d} = {luach.to_hebrew(d)}" for d in dates] or ["-"]
        print(f"{gy}  " + "   ".join(cols))

    print()
    print("occurrences per Gregorian year: " + ", ".join(f"{k}: {v}" for k, v in counts.items()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
