from __future__ import annotations

import argparse

import luach
from luach.core.time import weekday

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Rosh Hashanah (1 Tishri) dates with year length and type."
    )
    p.add_argument("--from-year", type=int, default=5780)
    p.add_argument("--to-year", type=int, default=5800)
    p.add_argument(
        "--list-month",
        type=int,
        default=0,
        help="After the table, list the new years that fall in this Gregorian month (default: off).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "1 Tishri", "Dow", "Days", "Type", "Leap"]
    colw = [5, 11, 4, 5, 10, 5]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits = []
    for Y in range(Y0, Y1 + 1):
        ny = luach.new_year_day(Y)
        d = ny["date"]
        row = [
            str(Y),
            d.isoformat(),
            _WEEKDAYS[weekday(ny["jdn"])],
            str(luach.year_length(Y)),
            luach.year_type(Y).value,
            "yes" if luach.is_leap_year(Y) else "",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if d.month == args.list_month:
            hits.append((d, Y))

    if args.list_month:
        print(f"\nNew years in month={args.list_month:02d}:")
        if not hits:
            print("(none)")
        for d, Y in hits:
            print(f"{d.isoformat()}  (AM {Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
