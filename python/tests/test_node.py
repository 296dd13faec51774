"""Search node and frontier ordering tests."""

from __future__ import annotations

import pytest

from slidecore.engine.gamesolver.node import Frontier, SearchNode
from slidecore.models.board import Board


# -- search nodes -------------------------------------------------------------


def test_search_node_rejects_missing_board() -> None:
    with pytest.raises(ValueError):
        SearchNode(None)


def test_child_depth_and_path() -> None:
    root = SearchNode(Board.from_grid([[1, 2, 3], [4, 5, 6], [0, 7, 8]]))
    child = root.child(root.board.neighbors()[-1])
    grandchild = child.child(child.board.neighbors()[-1])

    assert (root.depth, child.depth, grandchild.depth) == (0, 1, 2)
    assert grandchild.path() == [root.board, child.board, grandchild.board]
    assert grandchild.board.is_goal()


def test_priority_is_depth_plus_manhattan() -> None:
    root = SearchNode(Board.from_grid([[0, 1, 3], [4, 2, 5], [7, 8, 6]]))
    child = root.child(root.board.neighbors()[0])

    assert root.priority == 4
    assert child.priority == child.depth + child.board.manhattan()
    assert child.sort_key == (child.priority, child.board.manhattan())


# -- frontier -----------------------------------------------------------------


def test_frontier_pops_lowest_priority_first() -> None:
    far = SearchNode(Board.from_grid([[0, 1, 3], [4, 2, 5], [7, 8, 6]]))
    near = SearchNode(Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 0, 8]]))
    frontier = Frontier()
    frontier.push(far)
    frontier.push(near)

    assert frontier.pop() is near
    assert frontier.pop() is far
    assert len(frontier) == 0


def test_frontier_breaks_priority_ties_by_manhattan() -> None:
    # Depth 0, manhattan 2 against depth 1, manhattan 1: both priority 2.
    deep_root = SearchNode(Board.from_grid([[1, 2, 3], [4, 5, 6], [0, 7, 8]]))
    shallow = SearchNode(Board.from_grid([[1, 2, 3], [4, 5, 6], [0, 7, 8]]))
    deeper = deep_root.child(Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 0, 8]]))
    assert shallow.priority == deeper.priority == 2
    assert shallow.manhattan > deeper.manhattan

    frontier = Frontier()
    frontier.push(shallow)
    frontier.push(deeper)

    assert frontier.pop() is deeper
    assert frontier.pop() is shallow


def test_frontier_keeps_insertion_order_for_equal_keys() -> None:
    board = Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    nodes = [SearchNode(board) for _ in range(5)]
    frontier = Frontier()
    for node in nodes:
        frontier.push(node)

    assert [frontier.pop() for _ in nodes] == nodes


def test_frontier_pop_when_empty() -> None:
    with pytest.raises(IndexError):
        Frontier().pop()
