from slidecore.engine.gamesolver.node import Frontier, SearchNode
from slidecore.engine.gamesolver.solver import (
    UNSOLVABLE,
    SearchRun,
    SearchStats,
    Solver,
)

__all__ = [
    "Frontier",
    "SearchNode",
    "SearchRun",
    "SearchStats",
    "Solver",
    "UNSOLVABLE",
]
