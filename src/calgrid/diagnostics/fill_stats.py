#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import calgrid


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calgrid[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calgrid[diagnostics]"') from e


METRICS = ("leading", "trailing", "weeks")


def build_table(np, calendar: str, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", List[str]]:
    """
    Rows: first weekday 1..7. Columns: every month from start_year-01 to end_year-12.
    Cell: the chosen per-month count.
    """
    if metric not in METRICS:
        raise ValueError(f"metric must be one of {METRICS}")
    system = calgrid.get_calendar(calendar)
    start = system.date_from(start_year, 1, 1)
    end = system.date_from(end_year, 12, 1)

    labels: List[str] = []
    rows = []
    for fw in range(1, 8):
        config = calgrid.make_configuration(start, end, calendar=system, first_weekday=fw, fill_next_month_dates=True)
        months = calgrid.generate_months(config, today=start)
        if not labels:
            labels = [f"{m.year}-{m.number:02d}" for m in months]
        if metric == "leading":
            rows.append([m.metadata.leading_fill for m in months])
        elif metric == "trailing":
            rows.append([len(m.trailing_days) for m in months])
        else:
            rows.append([m.number_of_weeks for m in months])

    return np.asarray(rows, dtype=int), labels


def summarize(np, table: "np.ndarray") -> List[str]:
    out = []
    for i, row in enumerate(table):
        counts = np.bincount(row, minlength=7)
        hist = " ".join(f"{k}:{int(c)}" for k, c in enumerate(counts) if c)
        out.append(f"{calgrid.Weekday(i + 1).short}  min={row.min()} max={row.max()} mean={row.mean():.3f}  {hist}")
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Fill-day and week-count statistics per first weekday.")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--start-year", type=int, default=date.today().year)
    p.add_argument("--end-year", type=int, default=None, help="Default: start year + 3")
    p.add_argument("--metric", choices=METRICS, default="leading")
    p.add_argument("--plot", action="store_true", help="Write a heatmap (.png and .pdf)")
    p.add_argument("--outbase", default="fill_stats", help="Output base name for --plot")
    args = p.parse_args(argv)

    end_year = args.end_year if args.end_year is not None else args.start_year + 3
    np = _need_numpy()
    table, labels = build_table(np, args.calendar, args.start_year, end_year, metric=args.metric)

    print(f"{args.calendar} {args.metric}  {labels[0]} .. {labels[-1]}  ({len(labels)} months)")
    for line in summarize(np, table):
        print(line)

    if args.plot:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(max(6.0, 0.18 * len(labels)), 3.2), constrained_layout=True)
        im = ax.imshow(table, aspect="auto", cmap="viridis", interpolation="nearest")
        ax.set_yticks(range(7))
        ax.set_yticklabels(calgrid.weekday_symbols(1))
        ax.set_ylabel("first weekday")
        step = max(1, len(labels) // 12)
        ax.set_xticks(range(0, len(labels), step))
        ax.set_xticklabels(labels[::step], rotation=60, ha="right")
        ax.set_title(f"{args.calendar}: {args.metric} per month")
        fig.colorbar(im, ax=ax)
        fig.savefig(f"{args.outbase}.png", dpi=200)
        fig.savefig(f"{args.outbase}.pdf")
        print(f"wrote {args.outbase}.png, {args.outbase}.pdf")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
