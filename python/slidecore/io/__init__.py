from slidecore.io.boardfile import (
    BoardFormatError,
    format_board,
    parse_board,
    read_board,
    write_board,
)

__all__ = [
    "BoardFormatError",
    "format_board",
    "parse_board",
    "read_board",
    "write_board",
]
