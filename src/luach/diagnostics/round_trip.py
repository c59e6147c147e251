from __future__ import annotations

import argparse
import random
from typing import Optional, List

import luach
from luach.core.time import gregorian_to_jdn


def roundtrip_test(N: int, start_year: int, end_year: int, seed: int, *, max_failures: int) -> int:
    """
    Gregorian -> Hebrew -> Gregorian over random days, plus the JDN round trip
    of the Hebrew side.
    """
    random.seed(seed)
    failures = 0
    j0 = gregorian_to_jdn(start_year, 1, 1)
    j1 = gregorian_to_jdn(end_year, 12, 31)

    for _ in range(N):
        g0 = luach.GregorianDate.from_jdn(random.randint(j0, j1))
        h = luach.to_hebrew(g0)
        g1 = luach.to_gregorian(h)
        if g1 != g0 or h.to_jdn() != g0.to_jdn():
            failures += 1
            print("\nFAIL")
            print("g0:", g0)
            print("heb:", h)
            print("back:", g1)
            print("day_info(debug=True):", luach.day_info(g0, debug=True))
            if failures >= max_failures:
                return failures
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip check of the Hebrew/Gregorian converter.")
    p.add_argument("--n", type=int, default=20000)
    p.add_argument("--start-year", type=int, default=1)
    p.add_argument("--end-year", type=int, default=6000)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    fails = roundtrip_test(args.n, args.start_year, args.end_year, args.seed, max_failures=args.max_failures)
    print(f"round trip: {args.n} samples, {fails} failure(s)")
    return 1 if fails else 0


if __name__ == "__main__":
    raise SystemExit(main())
