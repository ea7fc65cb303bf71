#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

from pardis.core.time import jdn_to_date
from pardis.engines.jalali import is_leap_jalali_year, j2d


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "pardis[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "pardis[diagnostics]"') from e


def rolling_median(np, y, win: int = 33):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Gregorian year, March day of Nowruz, and leap flag per Jalali year."""
    jys = np.arange(start_year, end_year + 1, dtype=int)
    gy = np.empty_like(jys)
    march_day = np.empty_like(jys, dtype=float)
    leap = np.zeros_like(jys, dtype=bool)

    for i, jy in enumerate(jys):
        d = jdn_to_date(j2d(int(jy), 1, 1))
        gy[i] = d.year
        march_day[i] = float(d.day)
        leap[i] = is_leap_jalali_year(int(jy))

    return gy, march_day, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian March day of Nowruz across Jalali years.")
    p.add_argument("--start-year", type=int, default=1200)
    p.add_argument("--end-year", type=int, default=1600)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=33, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    x, y, leap = build_series(np, args.start_year, args.end_year)

    ax.scatter(x[~leap], y[~leap], s=12, marker="o", c="tab:blue", alpha=0.45, label="common year")
    ax.scatter(x[leap], y[leap], s=22, marker="o", facecolors="none", edgecolors="tab:red",
               linewidths=1.0, alpha=0.8, label="leap year")

    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="0.3", linewidth=1.8)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day of March")
    ax.set_title("Nowruz (1 Farvardin) in the Gregorian calendar")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
