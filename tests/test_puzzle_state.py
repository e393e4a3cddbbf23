"""Tests for the immutable board: heuristics, parity, neighbours and value semantics."""

import pytest

from npuzzle.domains.puzzle_state import (
    PuzzleState,
    goal_state,
    make_unsolvable_variant,
    scramble,
)


class TestConstruction:

    def test_round_trip_tile_at(self, mixed_4x4):
        grid = [[6, 5, 11, 4], [10, 13, 2, 1], [9, 15, 7, 3], [14, 12, 0, 8]]
        for i in range(4):
            for j in range(4):
                assert mixed_4x4.tile_at(i, j) == grid[i][j]

    def test_size(self, goal_3x3, mixed_4x4):
        assert goal_3x3.size() == 3
        assert mixed_4x4.size() == 4

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
    def test_tile_at_out_of_range(self, goal_3x3, row, col):
        with pytest.raises(IndexError):
            goal_3x3.tile_at(row, col)

    @pytest.mark.parametrize("tiles", [
        [[0]],                          # 1x1
        [[1, 2, 3], [4, 5, 6]],         # not square
        [[1, 2], [3, 3]],               # duplicate, no blank
        [[1, 2], [3, 4]],               # out of range
    ])
    def test_invalid_grid_rejected(self, tiles):
        with pytest.raises(ValueError):
            PuzzleState(tiles)

    def test_from_sequence(self, mixed_3x3):
        assert PuzzleState.from_sequence([0, 1, 2, 5, 6, 3, 4, 7, 8]) == mixed_3x3

    def test_from_sequence_not_square(self):
        with pytest.raises(ValueError):
            PuzzleState.from_sequence(range(8))

    def test_str_matches_board_listing(self):
        s = PuzzleState([[1, 2], [3, 0]])
        assert str(s) == "2\n 1  2\n 3  0\n"


class TestHeuristics:

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_goal_has_zero_distance(self, n):
        g = goal_state(n)
        assert g.is_goal()
        assert g.hamming() == 0
        assert g.manhattan() == 0

    def test_mixed_3x3(self, mixed_3x3):
        assert mixed_3x3.hamming() == 8
        assert mixed_3x3.manhattan() == 8
        assert not mixed_3x3.is_goal()

    def test_swapped_pair(self, unsolvable_3x3):
        assert unsolvable_3x3.hamming() == 2
        assert unsolvable_3x3.manhattan() == 2

    def test_mixed_4x4(self, mixed_4x4):
        assert mixed_4x4.hamming() == 13
        assert mixed_4x4.manhattan() == 29

    @pytest.mark.parametrize("seed", range(20))
    def test_zero_distances_coincide_with_goal(self, seed):
        s = scramble(3, seed % 6, seed)
        assert (s.manhattan() == 0) == (s.hamming() == 0) == s.is_goal()


class TestSolvability:

    def test_unsolvable_odd(self, unsolvable_3x3):
        assert not unsolvable_3x3.is_solvable()

    def test_solvable_odd(self, mixed_3x3, goal_3x3):
        assert mixed_3x3.is_solvable()
        assert goal_3x3.is_solvable()

    def test_even_width(self, mixed_4x4):
        assert goal_state(4).is_solvable()
        assert mixed_4x4.is_solvable()
        # 14 and 15 swapped: one inversion + blank row 3 is even
        assert not PuzzleState([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 15, 14, 0]]).is_solvable()

    def test_even_width_depends_on_blank_row(self):
        # same tile order, blank one row higher
        assert PuzzleState([[1, 2], [0, 3]]).is_solvable()
        assert not PuzzleState([[0, 1], [2, 3]]).is_solvable()

    @pytest.mark.parametrize("n", [2, 3, 4])
    @pytest.mark.parametrize("seed", range(5))
    def test_scramble_is_solvable_and_variant_is_not(self, n, seed):
        s = scramble(n, 15, seed)
        assert s.is_solvable()
        u = make_unsolvable_variant(s)
        assert not u.is_solvable()
        assert u.blank_index() == s.blank_index()


class TestNeighbors:

    @pytest.mark.parametrize("tiles,expected", [
        ([[0, 1, 2], [3, 4, 5], [6, 7, 8]], 2),   # corner
        ([[1, 0, 2], [3, 4, 5], [6, 7, 8]], 3),   # edge
        ([[1, 2, 3], [4, 0, 5], [6, 7, 8]], 4),   # centre
        ([[1, 2, 3], [4, 5, 6], [7, 8, 0]], 2),
        ([[1, 2, 3], [4, 5, 0], [7, 8, 6]], 3),
    ])
    def test_cardinality_3x3(self, tiles, expected):
        assert len(PuzzleState(tiles).neighbors()) == expected

    @pytest.mark.parametrize("blank", range(4))
    def test_2x2_always_two(self, blank):
        vals = [1, 2, 3]
        vals.insert(blank, 0)
        assert len(PuzzleState.from_sequence(vals).neighbors()) == 2

    def test_blank_moves_one_step(self, mixed_4x4):
        z = mixed_4x4.blank_index()
        for nb in mixed_4x4.neighbors():
            z2 = nb.blank_index()
            r, c = divmod(z, 4)
            r2, c2 = divmod(z2, 4)
            assert abs(r - r2) + abs(c - c2) == 1
            diff = [i for i in range(16) if nb.tiles[i] != mixed_4x4.tiles[i]]
            assert sorted(diff) == sorted([z, z2])

    def test_neighbor_order_up_down_left_right(self):
        s = PuzzleState([[1, 2, 3], [4, 0, 5], [6, 7, 8]])
        assert [nb.blank_index() for nb in s.neighbors()] == [1, 7, 3, 5]

    def test_neighbors_are_new_boards(self, mixed_3x3):
        before = mixed_3x3.tiles
        nbs = mixed_3x3.neighbors()
        assert mixed_3x3.tiles == before
        assert all(nb is not mixed_3x3 for nb in nbs)
        for nb in nbs:
            assert mixed_3x3 in nb.neighbors()

    def test_neighbor_heuristic_is_cached_and_consistent(self, mixed_3x3):
        for nb in mixed_3x3.neighbors():
            assert abs(nb.manhattan() - mixed_3x3.manhattan()) == 1
            assert nb.manhattan() == PuzzleState.from_sequence(nb.tiles).manhattan()


class TestEquality:

    def test_reflexive_and_symmetric(self, mixed_3x3):
        other = PuzzleState([[0, 1, 2], [5, 6, 3], [4, 7, 8]])
        assert mixed_3x3 == mixed_3x3
        assert mixed_3x3 == other and other == mixed_3x3
        assert hash(mixed_3x3) == hash(other)

    def test_different_tiles(self, mixed_3x3, goal_3x3):
        assert mixed_3x3 != goal_3x3
        assert goal_3x3 != mixed_3x3

    def test_size_sensitive(self, goal_3x3):
        assert goal_3x3 != goal_state(2)
        assert goal_3x3 != goal_state(4)

    def test_not_equal_to_none_or_other_types(self, goal_3x3):
        assert goal_3x3 != None  # noqa: E711
        assert goal_3x3 != goal_3x3.tiles
        assert goal_3x3 != [[1, 2, 3], [4, 5, 6], [7, 8, 0]]

    def test_tiles_are_immutable(self, goal_3x3):
        assert isinstance(goal_3x3.tiles, tuple)
        with pytest.raises(AttributeError):
            goal_3x3.tiles = (0,) * 9
