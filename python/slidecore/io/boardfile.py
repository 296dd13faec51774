"""Reading and writing boards in the plain-text puzzle format.

The format is whitespace separated: the board size ``n`` followed by the
``n * n`` tiles in row-major order, 0 standing for the blank::

    3
    0 1 3
    4 2 5
    7 8 6
"""

from __future__ import annotations

import logging
from pathlib import Path

from slidecore.models.board import Board

logger = logging.getLogger(__name__)


class BoardFormatError(ValueError):
    """Raised when board text does not describe a valid puzzle."""


def parse_board(text: str) -> Board:
    tokens = text.split()
    if not tokens:
        raise BoardFormatError("Board text is empty.")

    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise BoardFormatError(f"Board text contains a non-integer token: {exc}") from exc

    size, tiles = values[0], values[1:]
    if size < 2:
        raise BoardFormatError(f"Board size must be at least 2, got {size}.")
    if len(tiles) != size * size:
        raise BoardFormatError(
            f"Expected {size * size} tiles for a {size}×{size} board, "
            f"got {len(tiles)}."
        )

    seen: set[int] = set()
    for v in tiles:
        if not 0 <= v < size * size:
            raise BoardFormatError(
                f"Tile {v} is out of range 0..{size * size - 1}."
            )
        if v in seen:
            raise BoardFormatError(f"Tile {v} appears more than once.")
        seen.add(v)

    return Board.from_flat(size, tiles)


def read_board(path: Path | str) -> Board:
    path = Path(path)
    board = parse_board(path.read_text())
    logger.debug("Read %d×%d board from %s", board.size, board.size, path)
    return board


def format_board(board: Board) -> str:
    """Canonical text of *board*, which ``parse_board`` accepts back."""
    return str(board)


def write_board(board: Board, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_board(board) + "\n")
