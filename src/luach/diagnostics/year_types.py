#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import luach


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "luach[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "luach[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 16.0


STYLES: Dict[str, Style] = {
    "deficient": Style("Deficient (353/383)", "tab:red", "v"),
    "regular": Style("Regular (354/384)", "0.35", "o"),
    "complete": Style("Complete (355/385)", "tab:blue", "^"),
}


def days_since_september_1(d: luach.GregorianDate) -> int:
    """Rosh Hashanah always falls between early September and early October."""
    return d.to_jdn() - luach.GregorianDate(d.year, 9, 1).to_jdn() + 1


def build_series(np, start_year: int, end_year: int) -> Dict[Tuple[str, bool], Tuple["np.ndarray", "np.ndarray"]]:
    """(year_type, leap) -> (gregorian years, days since Sep 1) of each Rosh Hashanah."""
    pts: Dict[Tuple[str, bool], Tuple[List[int], List[int]]] = {}
    for Y in range(start_year, end_year + 1):
        d = luach.new_year_day(Y)["date"]
        key = (luach.year_type(Y).value, luach.is_leap_year(Y))
        xs, ys = pts.setdefault(key, ([], []))
        xs.append(d.year)
        ys.append(days_since_september_1(d))
    return {k: (np.array(xs, dtype=int), np.array(ys, dtype=int)) for k, (xs, ys) in pts.items()}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Rosh Hashanah dates by year type.")
    p.add_argument("--start-year", type=int, default=5700)
    p.add_argument("--end-year", type=int, default=5900)
    p.add_argument("--outbase", default="year_types", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("1 Tishri, days since Sep 1 (Sep 1 = 1)")
    ax.set_title("Rosh Hashanah by year type (hollow = leap year)")

    series = build_series(np, args.start_year, args.end_year)
    for (kind, leap), (x, y) in sorted(series.items()):
        st = STYLES[kind]
        label = st.label + (", leap" if leap else "")
        if leap:
            ax.scatter(x, y, s=st.size * 1.6, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=1.0, alpha=0.7, label=label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, alpha=0.5, label=label)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
