"""Generates sliding puzzle boards by scrambling from the solved state."""

from __future__ import annotations

import random

from slidecore.models.board import Board


class BoardGenerator:
    """Creates boards with random walks from the goal board."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(board: Board, depth: int, rng: random.Random) -> Board:
        """Return *board* after *depth* random slides.

        A slide never immediately undoes the previous one, unless it is the
        only slide available.
        """
        previous: Board | None = None
        for _ in range(depth):
            neighbors = board.neighbors()
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(size: int, depth: int = 20, seed: int | None = None) -> Board:
        """Return a random *solvable* board of the given size.

        The board is never the goal itself when *depth* is positive.
        """
        rng = random.Random(seed)
        goal = BoardGenerator.solved(size)
        board = BoardGenerator.scramble(goal, depth, rng)

        # A walk can come back to the goal; on a 2×2 board every 12th does.
        if depth > 0 and board.is_goal():
            board = rng.choice(board.neighbors())

        return board

    @staticmethod
    def generate_unsolvable(
        size: int, depth: int = 20, seed: int | None = None
    ) -> Board:
        """Return a random board that cannot reach the goal."""
        twin = BoardGenerator.generate(size, depth, seed).twin()
        assert twin is not None
        return twin
