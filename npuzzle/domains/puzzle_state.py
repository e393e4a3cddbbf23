from __future__ import annotations
from functools import lru_cache
from math import isqrt
from typing import Dict, Iterable, List, Sequence, Tuple
import random

Tiles = Tuple[int, ...]


@lru_cache(maxsize=None)
def _blank_moves(n: int) -> Dict[int, Tuple[int, ...]]:
    """Cells the blank can slide into from each cell: up, down, left, right."""
    nei: Dict[int, Tuple[int, ...]] = {}
    for i in range(n * n):
        r, c = divmod(i, n)
        moves = []
        if r > 0:       moves.append(i - n)
        if r < n - 1:   moves.append(i + n)
        if c > 0:       moves.append(i - 1)
        if c < n - 1:   moves.append(i + 1)
        nei[i] = tuple(moves)
    return nei


class PuzzleState:
    """Immutable N×N sliding-tile board (0 is the blank), stored row-major."""

    __slots__ = ("_tiles", "_n", "_manhattan")

    def __init__(self, tiles: Sequence[Sequence[int]]):
        rows = [tuple(int(v) for v in row) for row in tiles]
        n = len(rows)
        if n < 2:
            raise ValueError(f"board must be at least 2x2, got {n} row(s)")
        for r, row in enumerate(rows):
            if len(row) != n:
                raise ValueError(f"board is not square: row {r} has {len(row)} tiles, expected {n}")
        flat = tuple(v for row in rows for v in row)
        if sorted(flat) != list(range(n * n)):
            raise ValueError(f"tiles must be a permutation of 0..{n * n - 1}")
        self._tiles: Tiles = flat
        self._n = n
        self._manhattan = self._compute_manhattan()

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> "PuzzleState":
        flat = [int(v) for v in values]
        n = isqrt(len(flat))
        if n * n != len(flat):
            raise ValueError(f"{len(flat)} tiles do not form a square board")
        return cls([flat[r * n:(r + 1) * n] for r in range(n)])

    @classmethod
    def _from_tiles(cls, tiles: Tiles, n: int) -> "PuzzleState":
        # trusted path for boards derived from an already valid one
        obj = cls.__new__(cls)
        obj._tiles = tiles
        obj._n = n
        obj._manhattan = obj._compute_manhattan()
        return obj

    # ---------- accessors ----------
    @property
    def tiles(self) -> Tiles:
        return self._tiles

    def size(self) -> int:
        return self._n

    def tile_at(self, row: int, col: int) -> int:
        """Tile at (row, col), 0 for the blank."""
        n = self._n
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"({row}, {col}) is outside a {n}x{n} board")
        return self._tiles[row * n + col]

    def blank_index(self) -> int:
        return self._tiles.index(0)

    # ---------- heuristics ----------
    def _compute_manhattan(self) -> int:
        n = self._n
        dist = 0
        for idx, tile in enumerate(self._tiles):
            if tile == 0:
                continue
            r, c = divmod(idx, n)
            gr, gc = divmod(tile - 1, n)
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def hamming(self) -> int:
        """Number of non-blank positions holding the wrong tile."""
        return sum(1 for i, t in enumerate(self._tiles[:-1]) if t != i + 1)

    def manhattan(self) -> int:
        return self._manhattan

    def is_goal(self) -> bool:
        return self._manhattan == 0

    def is_solvable(self) -> bool:
        """Solvability rules:
           - N odd: inversions must be even
           - N even: (inversions + blank row) must be ODD
             (row index is 0-based from the top)
        """
        arr = [x for x in self._tiles if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self._n % 2 == 1:
            return (inv % 2) == 0
        blank_row = self.blank_index() // self._n
        return ((inv + blank_row) % 2) == 1

    # ---------- transitions ----------
    def neighbors(self) -> List["PuzzleState"]:
        """Boards reachable by sliding one tile into the blank."""
        z = self.blank_index()
        out: List[PuzzleState] = []
        for j in _blank_moves(self._n)[z]:
            lst = list(self._tiles)
            lst[z], lst[j] = lst[j], lst[z]
            out.append(PuzzleState._from_tiles(tuple(lst), self._n))
        return out

    # ---------- value semantics ----------
    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self._n == other._n and self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash((self._n, self._tiles))

    def rows(self) -> List[Tiles]:
        n = self._n
        return [self._tiles[r * n:(r + 1) * n] for r in range(n)]

    def __str__(self) -> str:
        lines = [str(self._n)]
        for row in self.rows():
            lines.append(" ".join(f"{t:2d}" for t in row))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"PuzzleState({[list(row) for row in self.rows()]})"


def goal_state(n: int) -> PuzzleState:
    return PuzzleState.from_sequence(list(range(1, n * n)) + [0])


def scramble(n: int, depth: int, seed: int) -> PuzzleState:
    """Depth-limited random walk from the goal with no immediate backtrack."""
    rng = random.Random(seed)
    nei = _blank_moves(n)
    s = list(goal_state(n).tiles)
    last_blank = None
    for _ in range(depth):
        z = s.index(0)
        cand = list(nei[z])
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        s[z], s[j] = s[j], s[z]
        last_blank = z
    return PuzzleState._from_tiles(tuple(s), n)


def make_unsolvable_variant(state: PuzzleState) -> PuzzleState:
    """Swap the first two non-blank tiles; flips inversion parity, blank stays put."""
    lst = list(state.tiles)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return PuzzleState._from_tiles(tuple(lst), state.size())
