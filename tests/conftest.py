"""Pytest fixtures shared by the puzzle and solver tests."""

import pytest

from npuzzle.domains.puzzle_state import PuzzleState


@pytest.fixture
def goal_3x3():
    """Solved 3x3 board."""
    return PuzzleState([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


@pytest.fixture
def mixed_3x3():
    """Solvable 3x3 board with the blank in the top-left corner (8 moves from goal)."""
    return PuzzleState([[0, 1, 2], [5, 6, 3], [4, 7, 8]])


@pytest.fixture
def unsolvable_3x3():
    """Goal with 7 and 8 swapped: one inversion, odd width."""
    return PuzzleState([[1, 2, 3], [4, 5, 6], [8, 7, 0]])


@pytest.fixture
def mixed_4x4():
    return PuzzleState([[6, 5, 11, 4], [10, 13, 2, 1], [9, 15, 7, 3], [14, 12, 0, 8]])
