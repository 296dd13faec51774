#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    slidesolve puzzle.txt              # plain report
    slidesolve puzzle.txt -f rich      # Rich terminal
    slidesolve -s 3 -d 25 --seed 7     # solve a generated 3×3 board
    slidesolve puzzle.txt -vv          # with debug logging
"""

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from slidecore.engine.gamegenerator import BoardGenerator
from slidecore.io.boardfile import BoardFormatError, read_board

logger = logging.getLogger("slidesolve")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "slidecli.vanilla.app",
    Frontend.rich: "slidecli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: int, level_name: Optional[str]) -> None:
    if level_name:
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise typer.BadParameter(f"Unknown log level: {level_name}")
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        exists=True, dir_okay=False, readable=True,
        help="Board file: size n followed by n*n tiles, 0 is the blank.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="SLIDESOLVE_FRONTEND",
        help="How to print the result.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Grid size of the generated board when no file is given.",
    ),
    depth: int = typer.Option(
        20, "-d", "--depth",
        min=0,
        help="Scramble length of the generated board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for the generated board.",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose",
        count=True,
        help="Log progress (-v) or search details (-vv) to stderr.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level",
        envvar="SLIDESOLVE_LOG_LEVEL",
        help="Explicit log level; overrides -v.",
    ),
) -> None:
    """Find the shortest solution of a sliding puzzle."""
    _configure_logging(verbose, log_level)

    if path is None:
        board = BoardGenerator.generate(size, depth, seed)
        logger.info("Generated %d×%d board with %d scramble moves", size, size, depth)
    else:
        try:
            board = read_board(path)
        except BoardFormatError as exc:
            typer.echo(f"Invalid board file {path}: {exc}", err=True)
            raise typer.Exit(code=1)
        logger.info("Loaded %d×%d board from %s", board.size, board.size, path)

    mod = importlib.import_module(_RUNNERS[frontend])
    solver = mod.run(board)
    logger.info(
        "Search expanded %d nodes (peak frontier %d)",
        solver.stats.expanded,
        solver.stats.peak_frontier,
    )


if __name__ == "__main__":
    app()
