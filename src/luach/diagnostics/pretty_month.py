from __future__ import annotations

import argparse

import luach
from luach.core.time import weekday


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def hebrew_month_calendar(Y: int, M: luach.HebrewMonth) -> None:
    rows = luach.days_in_month(Y, M)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(weekday(rows[0]["jdn"])):
        wk.append(cell("", ""))
    for r in rows:
        g = r["date"]
        wk.append(cell(f"{r['day']:2d}", f"{g.month:02d}-{g.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    title = f"AM {Y} {M.name}  ({rows[0]['date']} .. {rows[-1]['date']})"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print Hebrew months as weekly grids with Gregorian dates.")
    p.add_argument("year", type=int)
    p.add_argument("months", nargs="*", help="month names (default: the whole year)")
    args = p.parse_args(argv)

    months = [luach.HebrewMonth.parse(m) for m in args.months] if args.months else [
        rec["month"] for rec in luach.months_in_year(args.year)
    ]
    for M in months:
        hebrew_month_calendar(args.year, M)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
