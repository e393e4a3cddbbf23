from collections import deque
from time import perf_counter
from typing import Dict, List, Optional, Set

from npuzzle.domains.puzzle_state import PuzzleState


def bfs(start: PuzzleState, timeout_sec: float | None = None):
    """Breadth-first search with a full seen-set; shortest path by construction."""
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[PuzzleState, Optional[PuzzleState]] = {start: None}
    expanded = generated = 0
    seen: Set[PuzzleState] = {start}
    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return {"path": None, "g": None, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "timeout"}
        s = q.popleft()
        if s.is_goal():
            path: List[PuzzleState] = []
            node: Optional[PuzzleState] = s
            while node is not None:
                path.append(node); node = parent[node]
            path.reverse()
            return {"path": path, "g": len(path) - 1, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        for s2 in s.neighbors():
            generated += 1
            if s2 in seen: continue
            seen.add(s2); parent[s2] = s; q.append(s2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}
