#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("p8 verified", "python -m npuzzle.experiments.runner --n 3 --depths 4 8 12 16 --per_depth 10 --verify --include_unsolvable --out results/p8_h.csv")
    run("p8 fifo ties", "python -m npuzzle.experiments.runner --n 3 --depths 4 8 12 16 --per_depth 10 --tie_break fifo --out results/p8_fifo.csv")
    run("p8 closed set", "python -m npuzzle.experiments.runner --n 3 --depths 4 8 12 16 --per_depth 10 --closed --out results/p8_closed.csv")
    run("p15 shallow", "python -m npuzzle.experiments.runner --n 4 --depths 4 8 12 --per_depth 5 --out results/p15_h.csv")
    run("Plots", "python -m npuzzle.experiments.analyze results/p8_h.csv results/p8_fifo.csv results/p8_closed.csv results/p15_h.csv --save results/plots --summary_out results/summary.csv")

if __name__ == "__main__":
    main()
