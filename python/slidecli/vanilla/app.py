"""Vanilla terminal frontend, standard library only.

Prints the solver's answer in the plain format::

    Minimum number of moves = 4
    3
    0 1 3
    ...
"""

from __future__ import annotations

from slidecore.engine.gamesolver import Solver
from slidecore.io.boardfile import format_board
from slidecore.models.board import Board


def render_result(solver: Solver) -> str:
    """Return the full text report for a finished solver."""
    solution = solver.solution()
    if solution is None:
        return "No solution possible"

    lines: list[str] = [f"Minimum number of moves = {solver.moves_to_solve()}"]
    for board in solution:
        lines.append(format_board(board))
        lines.append("")
    return "\n".join(lines).rstrip("\n")


# -- entry point --------------------------------------------------------------


def run(board: Board) -> Solver:
    solver = Solver(board)
    print(render_result(solver))
    return solver
