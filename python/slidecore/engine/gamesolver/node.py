"""Search tree nodes and the priority frontier they are expanded from."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field

from slidecore.models.board import Board


@dataclass(frozen=True, eq=False)
class SearchNode:
    """One board in the search tree, with its depth and parent link."""

    board: Board
    previous: SearchNode | None = None
    depth: int = field(init=False)

    def __post_init__(self) -> None:
        if self.board is None:
            raise ValueError("SearchNode requires a board, got None.")
        depth = 0 if self.previous is None else self.previous.depth + 1
        object.__setattr__(self, "depth", depth)

    @property
    def manhattan(self) -> int:
        return self.board.manhattan()

    @property
    def priority(self) -> int:
        return self.depth + self.board.manhattan()

    @property
    def sort_key(self) -> tuple[int, int]:
        """Priority first; on a tie, the node closer to the goal wins."""
        return self.priority, self.manhattan

    def child(self, board: Board) -> SearchNode:
        return SearchNode(board, previous=self)

    def path(self) -> list[Board]:
        """Boards from the root of the tree down to this node."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.previous
        boards.reverse()
        return boards


class Frontier:
    """Min-priority queue of search nodes ordered by ``SearchNode.sort_key``.

    Nodes with equal keys leave in insertion order, so a run is
    reproducible.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[tuple[int, int], int, SearchNode]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.sort_key, next(self._counter), node))

    def pop(self) -> SearchNode:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]
