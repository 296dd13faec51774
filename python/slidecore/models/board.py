"""Board model for the sliding puzzle solver.

A ``Board`` is an immutable value: sliding a tile or swapping a pair of
tiles always produces a new ``Board``.  Heuristic distances are computed
once at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterable, Sequence

Grid = tuple[tuple[int, ...], ...]

# Blank offsets in neighbour order: up, down, left, right.
_BLANK_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Blank offset -> direction of the tile that moved into the old blank cell.
_TILE_DIRECTION: dict[tuple[int, int], Direction] = {
    (1, 0): Direction.UP,
    (-1, 0): Direction.DOWN,
    (0, 1): Direction.LEFT,
    (0, -1): Direction.RIGHT,
}


@dataclass(frozen=True)
class Board:
    """Represents one configuration of the sliding puzzle.

    Tiles are stored as a tuple of row tuples. 0 represents the blank space.
    Equality and hashing compare the size and every cell, nothing else.
    """

    size: int
    tiles: Grid
    blank_pos: tuple[int, int] = field(compare=False)
    _hamming: int = field(init=False, repr=False, compare=False)
    _manhattan: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}.")
        if len(self.tiles) != self.size or any(
            len(row) != self.size for row in self.tiles
        ):
            raise ValueError(
                f"Tiles do not form a {self.size}×{self.size} grid."
            )
        br, bc = self.blank_pos
        in_grid = 0 <= br < self.size and 0 <= bc < self.size
        if not in_grid or self.tiles[br][bc] != 0:
            raise ValueError(f"Blank position {self.blank_pos} does not hold 0.")
        object.__setattr__(self, "_hamming", self._calculate_hamming())
        object.__setattr__(self, "_manhattan", self._calculate_manhattan())

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> Board:
        """Create a board from nested rows, e.g. ``[[1, 2], [3, 0]]``."""
        if grid is None:
            raise ValueError("Board grid must not be None.")
        size = len(grid)
        for r, row in enumerate(grid):
            if len(row) != size:
                raise ValueError(
                    f"Row {r} has {len(row)} tiles; expected {size} "
                    f"for a {size}×{size} board."
                )
        return cls.from_flat(size, [v for row in grid for v in row])

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        flat = [int(v) for v in flat]
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        try:
            blank = flat.index(0)
        except ValueError:
            raise ValueError("Board has no blank tile (0).") from None
        tiles = tuple(
            tuple(flat[r * size : (r + 1) * size]) for r in range(size)
        )
        return cls(size=size, tiles=tiles, blank_pos=divmod(blank, size))

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def hamming(self) -> int:
        """Number of cells, other than the blank's goal cell, holding the wrong value."""
        return self._hamming

    def manhattan(self) -> int:
        """Sum of row and column distances of every tile to its goal cell."""
        return self._manhattan

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def is_goal(self) -> bool:
        """Check that every cell, the last one included, holds its goal value."""
        n = self.size
        solved = True
        for r in range(n):
            for c in range(n):
                solved &= self.tiles[r][c] == self._goal_value(r, c)
        return solved

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.tiles[row][col] == self._goal_value(row, col)

    # -- derived boards -------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Boards reachable by sliding one tile into the blank.

        Ordered by where the blank goes: up, down, left, right.
        """
        br, bc = self.blank_pos
        result: list[Board] = []
        for dr, dc in _BLANK_STEPS:
            nr, nc = br + dr, bc + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                result.append(self._swapped((br, bc), (nr, nc)))
        return result

    def twin(self) -> Board | None:
        """Return this board with its first two non-blank tiles swapped.

        Returns ``None`` when fewer than two non-blank tiles exist.
        """
        first: tuple[int, int] | None = None
        for r in range(self.size):
            for c in range(self.size):
                if self.tiles[r][c] == 0:
                    continue
                if first is None:
                    first = (r, c)
                else:
                    return self._swapped(first, (r, c))
        return None

    def direction_to(self, other: Board) -> Direction | None:
        """Direction of the tile slide that turns this board into *other*.

        Returns ``None`` if *other* is not exactly one slide away.
        """
        if other.size != self.size:
            return None
        br, bc = self.blank_pos
        nr, nc = other.blank_pos
        direction = _TILE_DIRECTION.get((nr - br, nc - bc))
        if direction is None or self._swapped((br, bc), (nr, nc)) != other:
            return None
        return direction

    # -- helpers --------------------------------------------------------------

    def _goal_value(self, row: int, col: int) -> int:
        if row == self.size - 1 and col == self.size - 1:
            return 0
        return row * self.size + col + 1

    def _swapped(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        blank_pos = self.blank_pos
        if blank_pos == a:
            blank_pos = b
        elif blank_pos == b:
            blank_pos = a
        return Board(
            size=self.size,
            tiles=tuple(tuple(row) for row in rows),
            blank_pos=blank_pos,
        )

    def _calculate_hamming(self) -> int:
        n = self.size
        return sum(
            1
            for r in range(n)
            for c in range(n)
            if (r, c) != (n - 1, n - 1) and self.tiles[r][c] != r * n + c + 1
        )

    def _calculate_manhattan(self) -> int:
        n = self.size
        total = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val != 0:
                    goal_r, goal_c = divmod(val - 1, n)
                    total += abs(r - goal_r) + abs(c - goal_c)
        return total

    # -- formatting -----------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.size)]
        lines.extend(" ".join(str(v) for v in row) for row in self.tiles)
        return "\n".join(lines)
