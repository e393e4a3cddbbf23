from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple
import heapq
from time import perf_counter
import math
import itertools

from npuzzle.domains.puzzle_state import PuzzleState

TIE_BREAKS = ("h", "g", "fifo", "lifo")


@dataclass(frozen=True)
class SearchNode:
    state: PuzzleState
    moves: int
    priority: int
    parent: Optional[int] = None  # index into the solver's node arena


class Solver:
    """
    A* over PuzzleState boards with Manhattan distance as the heuristic.

    The search runs to completion inside the constructor; results are read
    back through moves(), solution() and stats().

    tie_break decides the order of equal-priority frontier nodes:
      "h"    lower heuristic first (default)
      "g"    more moves first
      "fifo" insertion order
      "lifo" reverse insertion order
    Insertion order always breaks any remaining tie.

    By default only the parent's board is filtered out of a node's children.
    prune_duplicates=True adds a closed set so no board is expanded twice.
    """

    def __init__(
        self,
        initial: PuzzleState,
        tie_break: str = "h",
        prune_duplicates: bool = False,
    ):
        if initial is None:
            raise TypeError("Solver requires an initial PuzzleState, got None")
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}; expected one of {TIE_BREAKS}")
        if not initial.is_solvable():
            raise ValueError("initial board is not solvable")

        self.tie_break = tie_break
        self.prune_duplicates = prune_duplicates
        self._nodes: List[SearchNode] = []
        self._expanded = 0
        self._generated = 0
        self._peak_open = 0
        self._time = 0.0

        goal_idx = self._search(initial)
        self._moves = self._nodes[goal_idx].moves
        self._solution = self._reconstruct_path(goal_idx)

    def _priority_tuple(self, f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
        if self.tie_break == "h":   return (f, h, ctr)
        if self.tie_break == "g":   return (f, -g, ctr)
        if self.tie_break == "fifo":return (f, 0,  ctr)
        return (f, 0, -ctr)

    def _push(self, open_heap: list, counter, node: SearchNode) -> None:
        self._nodes.append(node)
        idx = len(self._nodes) - 1
        h = node.priority - node.moves
        pr = self._priority_tuple(node.priority, node.moves, h, next(counter))
        heapq.heappush(open_heap, (pr, idx))

    def _search(self, initial: PuzzleState) -> int:
        """Run A* and return the arena index of the first goal node popped."""
        t0 = perf_counter()
        open_heap: List[Tuple[Tuple[int, int, int], int]] = []
        counter = itertools.count()

        self._push(open_heap, counter, SearchNode(initial, 0, initial.manhattan(), None))

        closed: Set[PuzzleState] = set()
        best_g: Dict[PuzzleState, int] = {initial: 0}

        while open_heap:
            self._peak_open = max(self._peak_open, len(open_heap))
            _, idx = heapq.heappop(open_heap)
            node = self._nodes[idx]

            if self.prune_duplicates:
                if node.state in closed:
                    continue

            if node.state.is_goal():
                self._time = perf_counter() - t0
                return idx

            if self.prune_duplicates:
                closed.add(node.state)
            self._expanded += 1

            prev = self._nodes[node.parent].state if node.parent is not None else None
            g2 = node.moves + 1
            for s2 in node.state.neighbors():
                if prev is not None and s2 == prev:
                    continue
                if self.prune_duplicates:
                    if s2 in closed or g2 >= best_g.get(s2, math.inf):
                        continue
                    best_g[s2] = g2
                self._generated += 1
                self._push(open_heap, counter, SearchNode(s2, g2, g2 + s2.manhattan(), idx))

        raise RuntimeError("frontier exhausted before reaching the goal")

    def _reconstruct_path(self, idx: Optional[int]) -> Tuple[PuzzleState, ...]:
        path: List[PuzzleState] = []
        while idx is not None:
            node = self._nodes[idx]
            path.append(node.state)
            idx = node.parent
        path.reverse()
        return tuple(path)

    # ---------- results ----------
    def moves(self) -> int:
        """Minimum number of slides from the initial board to the goal."""
        return self._moves

    def solution(self) -> Tuple[PuzzleState, ...]:
        """Boards from the initial one to the goal, inclusive."""
        return self._solution

    def stats(self) -> dict:
        return {
            "algorithm": "A* (closed)" if self.prune_duplicates else "A*",
            "tie_break": self.tie_break,
            "moves": self._moves,
            "expanded": self._expanded,
            "generated": self._generated,
            "peak_open": self._peak_open,
            "time": self._time,
        }
