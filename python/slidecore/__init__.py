"""Optimal solver for the n×n sliding-tile puzzle."""

from slidecore.engine.gamesolver import UNSOLVABLE, Solver
from slidecore.models import Board, Direction

__all__ = ["Board", "Direction", "Solver", "UNSOLVABLE"]
