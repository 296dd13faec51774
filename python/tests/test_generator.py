"""Board generator tests."""

from __future__ import annotations

import random

import pytest

from slidecore.engine.gamegenerator import BoardGenerator
from slidecore.models.board import Board


def test_solved_is_goal() -> None:
    assert BoardGenerator.solved(4) == Board.solved(4)
    assert BoardGenerator.solved(4).is_goal()


def test_scramble_zero_depth_returns_board() -> None:
    board = Board.solved(3)

    assert BoardGenerator.scramble(board, 0, random.Random(1)) is board


def test_scramble_never_backtracks_immediately() -> None:
    # On a 2×2 board the only non-backtracking walk goes round the ring,
    # which returns to the start after exactly 12 slides.
    goal = Board.solved(2)

    assert BoardGenerator.scramble(goal, 12, random.Random(0)) == goal
    assert BoardGenerator.scramble(goal, 6, random.Random(0)) != goal


def test_generate_is_reproducible() -> None:
    a = BoardGenerator.generate(4, depth=30, seed=42)
    b = BoardGenerator.generate(4, depth=30, seed=42)

    assert a == b


@pytest.mark.parametrize("size", [2, 3, 4])
def test_generate_never_returns_goal(size: int) -> None:
    for seed in range(10):
        board = BoardGenerator.generate(size, depth=12, seed=seed)
        assert not board.is_goal()
        assert board.manhattan() <= 12


def test_generate_unsolvable_is_a_twin() -> None:
    board = BoardGenerator.generate_unsolvable(3, depth=8, seed=5)

    assert board.twin() == BoardGenerator.generate(3, depth=8, seed=5)
