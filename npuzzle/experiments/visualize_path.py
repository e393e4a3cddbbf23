#!/usr/bin/env python3
import argparse, os, re
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.domains.puzzle_state import PuzzleState, scramble
from npuzzle.search.solver import Solver, TIE_BREAKS

def parse_board(text: str) -> PuzzleState:
    """Board from row-major values separated by whitespace and/or commas."""
    values = [int(tok) for tok in re.split(r"[\s,]+", text.strip()) if tok]
    return PuzzleState.from_sequence(values)

def format_solution(solver: Solver) -> str:
    lines = []
    for i, s in enumerate(solver.solution()):
        lines.append(f"Step {i}:")
        lines.append(str(s))
    lines.append(f"This solution took {solver.moves()} moves.")
    return "\n".join(lines)

def draw_board(state: PuzzleState, out_path: Path):
    n = state.size()
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    for idx, t in enumerate(state.tiles):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one board, print the path and save board images along it.")
    p.add_argument("--board", default=None, help='Row-major tiles, e.g. "1 2 3 0 7 6 5 4 8"')
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    p.add_argument("--closed", action="store_true")
    p.add_argument("--text_only", action="store_true", help="Print the path without drawing frames")
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    start = parse_board(args.board) if args.board else scramble(args.n, args.depth, args.seed)
    try:
        solver = Solver(start, tie_break=args.tie_break, prune_duplicates=args.closed)
    except ValueError as e:
        print(f"Cannot solve board: {e}")
        print(start)
        return 1

    print(format_solution(solver))
    if args.text_only:
        return 0

    outdir = Path(args.outdir)
    for i, s in enumerate(solver.solution()):
        draw_board(s, outdir / f"step_{i:03d}.png")
    print(f"Saved {len(solver.solution())} frames to {outdir}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
