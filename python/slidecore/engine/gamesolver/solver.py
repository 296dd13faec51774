"""Sliding puzzle solver.

Runs a best-first (A*) search on the board and, in lock-step, on its
twin: the board with two tiles swapped.  Exactly one of the two can reach
the goal, so whichever search gets there first decides solvability.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from slidecore.engine.gamesolver.node import Frontier, SearchNode
from slidecore.models.board import Board, Direction

logger = logging.getLogger(__name__)

UNSOLVABLE = -1


@dataclass
class SearchStats:
    """Counters collected while a search run advances."""

    expanded: int = 0
    generated: int = 0
    peak_frontier: int = 0


class SearchRun:
    """A single best-first search advanced one expansion at a time."""

    def __init__(self, root: Board) -> None:
        self.frontier = Frontier()
        self.frontier.push(SearchNode(root))
        self.stats = SearchStats(peak_frontier=1)

    def step(self) -> SearchNode | None:
        """Expand the best node; return it if it holds the goal board."""
        node = self.frontier.pop()
        if node.board.is_goal():
            return node

        parent_board = node.previous.board if node.previous else None
        for neighbor in node.board.neighbors():
            # Only the move that undoes the last one is pruned.
            if neighbor == parent_board:
                continue
            self.frontier.push(node.child(neighbor))
            self.stats.generated += 1

        self.stats.expanded += 1
        self.stats.peak_frontier = max(self.stats.peak_frontier, len(self.frontier))
        return None


class Solver:
    """Finds a minimum-length slide sequence for *initial*, if one exists.

    All the work happens in the constructor; afterwards the instance only
    answers queries.
    """

    def __init__(self, initial: Board) -> None:
        if initial is None:
            raise ValueError("Solver requires an initial board, got None.")

        self._initial = initial
        self._moves = UNSOLVABLE
        self._solution: list[Board] | None = None

        run = SearchRun(initial)
        twin = initial.twin()
        if twin is None:
            raise ValueError("Solver requires a board with at least two tiles.")
        twin_run = SearchRun(twin)

        logger.debug(
            "Solving %d×%d board (manhattan=%d, hamming=%d)",
            initial.dimension(),
            initial.dimension(),
            initial.manhattan(),
            initial.hamming(),
        )

        while True:
            goal = run.step()
            if goal is not None:
                self._moves = goal.depth
                self._solution = goal.path()
                break
            if twin_run.step() is not None:
                break

        self.stats = run.stats
        if self._solution is None:
            logger.debug(
                "Twin reached the goal first; board is unsolvable "
                "(%d nodes expanded)",
                run.stats.expanded,
            )
        else:
            logger.debug(
                "Solved in %d moves (%d nodes expanded, %d generated, "
                "peak frontier %d)",
                self._moves,
                run.stats.expanded,
                run.stats.generated,
                run.stats.peak_frontier,
            )

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._moves != UNSOLVABLE

    def moves_to_solve(self) -> int:
        """Minimum number of moves, or ``UNSOLVABLE``."""
        return self._moves

    def solution(self) -> list[Board] | None:
        """Boards from the initial board to the goal, or ``None`` if unsolvable."""
        if self._solution is None:
            return None
        return list(self._solution)

    def directions(self) -> list[Direction]:
        """Tile directions along the solution; ``[]`` if there is nothing to do."""
        boards = self._solution or []
        return [a.direction_to(b) for a, b in zip(boards, boards[1:])]
