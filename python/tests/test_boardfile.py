"""Board file parsing and writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from slidecore.io.boardfile import (
    BoardFormatError,
    format_board,
    parse_board,
    read_board,
    write_board,
)
from slidecore.models.board import Board

BOARDS_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures" / "boards"


def test_read_board_file() -> None:
    board = read_board(BOARDS_DIR / "puzzle3x3-04.txt")

    assert board == Board.from_grid([[0, 1, 3], [4, 2, 5], [7, 8, 6]])


def test_parse_ignores_layout() -> None:
    board = parse_board("  2\n1 2\n\t3   0 \n")

    assert board.is_goal()


@pytest.mark.parametrize(
    "name, message",
    [
        ("malformed-duplicate.txt", "more than once"),
        ("malformed-short.txt", "Expected 9 tiles"),
        ("malformed-token.txt", "non-integer"),
    ],
)
def test_malformed_files(name: str, message: str) -> None:
    with pytest.raises(BoardFormatError, match=message):
        read_board(BOARDS_DIR / name)


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty"),
        ("1\n0", "at least 2"),
        ("2\n1 2\n3 4", "out of range"),
        ("2\n1 2\n3 -1", "out of range"),
    ],
    ids=["empty", "too-small", "no-blank", "negative"],
)
def test_malformed_text(text: str, message: str) -> None:
    with pytest.raises(BoardFormatError, match=message):
        parse_board(text)


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_board("3\n1 2 3")


def test_write_then_read(tmp_path: Path) -> None:
    board = Board.from_grid([[5, 0, 2], [1, 8, 3], [4, 7, 6]])
    target = tmp_path / "out" / "board.txt"

    write_board(board, target)

    assert target.read_text() == "3\n5 0 2\n1 8 3\n4 7 6\n"
    assert read_board(target) == board
    assert parse_board(format_board(board)) == board
