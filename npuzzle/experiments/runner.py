from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from npuzzle.domains.puzzle_state import PuzzleState, scramble, make_unsolvable_variant
from npuzzle.search.solver import Solver, TIE_BREAKS
from npuzzle.search.bfs import bfs

HEADER = [
    "algorithm","n","depth","seed",
    "moves","expanded","generated","peak_open","time_sec",
    "tie_break","termination","solvable","bfs_moves",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: PuzzleState

def generate_instances(n: int, depths: Sequence[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(n, d, seed)
            attempts += 1
            if s.is_solvable():
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def solve_row(inst: Instance, n: int, tie_break: str, closed: bool, verify: bool) -> dict:
    solver = Solver(inst.state, tie_break=tie_break, prune_duplicates=closed)
    st = solver.stats()
    row = {
        "algorithm": st["algorithm"], "n": n, "depth": inst.depth, "seed": inst.seed,
        "moves": st["moves"], "expanded": st["expanded"], "generated": st["generated"],
        "peak_open": st["peak_open"], "time_sec": f"{st['time']:.6f}",
        "tie_break": tie_break, "termination": "ok", "solvable": 1, "bfs_moves": "",
    }
    if verify:
        row["bfs_moves"] = bfs(inst.state)["g"]
    return row

def unsolvable_row(inst: Instance, n: int, tie_break: str, closed: bool) -> dict:
    u = make_unsolvable_variant(inst.state)
    row = {k: "" for k in HEADER}
    row.update({
        "algorithm": "A* (closed)" if closed else "A*", "n": n, "depth": inst.depth, "seed": inst.seed,
        "tie_break": tie_break, "solvable": 0,
    })
    try:
        Solver(u, tie_break=tie_break, prune_duplicates=closed)
    except ValueError:
        row["termination"] = "unsolvable"
    else:
        raise RuntimeError(f"variant of seed={inst.seed} was expected to be unsolvable")
    return row

def main(argv: Optional[Sequence[str]] = None):
    ap = argparse.ArgumentParser(description="A* N-puzzle experiment runner")
    ap.add_argument("--n", type=int, default=3, help="Board size (N×N)")
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--closed", action="store_true", help="Never expand a board twice (closed set)")
    ap.add_argument("--verify", action="store_true", help="Also solve with BFS and record its length")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also check parity-flipped variants")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    if args.n < 2:
        ap.error("--n must be at least 2")

    insts = generate_instances(args.n, args.depths, args.per_depth, args.start_seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    mismatches = 0
    with args.out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        for inst in insts:
            row = solve_row(inst, args.n, args.tie_break, args.closed, args.verify)
            if args.verify and row["bfs_moves"] != row["moves"]:
                mismatches += 1
                print(f"MISMATCH seed={inst.seed} depth={inst.depth}: A*={row['moves']} BFS={row['bfs_moves']}")
            w.writerow(row)
            if args.include_unsolvable:
                w.writerow(unsolvable_row(inst, args.n, args.tie_break, args.closed))

    print(f"Wrote {args.out} ({len(insts)} instances)")
    return 1 if mismatches else 0

if __name__ == "__main__":
    raise SystemExit(main())
