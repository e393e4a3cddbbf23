#!/usr/bin/env python3
"""
Summarize runner CSVs and plot per-depth curves.
- Reads one or more results CSVs (runner.py schema)
- Prints mean/std/count of moves, expanded, generated, time_sec per depth
- Saves one errorbar figure per metric to --save
"""
import argparse, os, sys
from pathlib import Path
from typing import List, Sequence

import numpy as np
import pandas as pd
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["moves", "expanded", "generated", "time_sec"]
GROUP = ["algorithm", "tie_break", "n", "depth"]

def load_results(paths: Sequence) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = os.path.basename(str(p))
        dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=GROUP + METRICS)
    df = pd.concat(dfs, ignore_index=True, sort=False)

    # Keep clean rows only
    term = df["termination"] if "termination" in df.columns else pd.Series("ok", index=df.index)
    df = df[term.fillna("ok") == "ok"].copy()

    for c in ("n", "depth", "seed") + tuple(METRICS):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    if "tie_break" in df.columns:
        df["tie_break"] = df["tie_break"].fillna("")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """One row per (algorithm, tie_break, n, depth) with <metric>_mean/_std/_count."""
    keys = [c for c in GROUP if c in df.columns]
    metrics = [m for m in METRICS if m in df.columns]
    agg = df.groupby(keys)[metrics].agg(["mean", "std", "count"])
    agg.columns = [f"{m}_{stat}" for m, stat in agg.columns]
    agg = agg.reset_index()
    std_cols = [c for c in agg.columns if c.endswith("_std")]
    # single-sample groups have no spread
    agg[std_cols] = agg[std_cols].fillna(0.0)
    return agg.sort_values(keys).reset_index(drop=True)

def plot_summary(summary: pd.DataFrame, outdir: Path, base: str = "results") -> List[Path]:
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    saved: List[Path] = []
    series_keys = [c for c in ("algorithm", "tie_break", "n") if c in summary.columns]
    for metric in METRICS:
        if f"{metric}_mean" not in summary.columns:
            continue
        fig, ax = plt.subplots(figsize=(8, 6))
        for key, grp in summary.groupby(series_keys):
            key = key if isinstance(key, tuple) else (key,)
            label = " | ".join(str(k) for k in key)
            xs = grp["depth"].to_numpy()
            ys = grp[f"{metric}_mean"].to_numpy()
            es = grp[f"{metric}_std"].to_numpy()
            ax.errorbar(xs, ys, yerr=es, marker="o", capsize=3, label=label)
        if metric != "moves" and (summary[f"{metric}_mean"] > 0).all():
            spread = np.log10(summary[f"{metric}_mean"].max() / summary[f"{metric}_mean"].min())
            if spread > 2:
                ax.set_yscale("log")
        ax.set_xlabel("Depth")
        ax.set_ylabel(metric)
        ax.set_title(f"{metric} vs Depth (mean ± std)")
        ax.grid(True)
        ax.legend()
        fig.tight_layout()
        path = outdir / f"{base}_{metric}.png"
        fig.savefig(path, dpi=200, bbox_inches="tight")
        plt.close(fig)
        saved.append(path)
    return saved

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize and plot runner CSVs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--summary_out", type=Path, default=None, help="Also write the summary table as CSV")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return 0

    summary = summarize(df)
    with pd.option_context("display.max_columns", None, "display.width", 160):
        print(summary.to_string(index=False))
    if args.summary_out is not None:
        args.summary_out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.summary_out, index=False)
        print(f"Saved: {args.summary_out}")

    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    for p in plot_summary(summary, Path(args.save), base):
        print(f"Saved: {p}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
