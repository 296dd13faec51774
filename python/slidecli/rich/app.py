"""Rich terminal frontend with styled tables and panels.

Uses the ``rich`` library for styled output of the same report the
vanilla frontend prints: the move count and every board on the way to
the goal.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidecore.engine.gamesolver import Solver
from slidecore.models.board import Board, Direction

console = Console()

_ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


# -- board rendering ----------------------------------------------------------


def _tile_cell(board: Board, row: int, col: int, width: int) -> Text:
    val = board.get_tile(row, col)
    if val == 0:
        return Text("·", style="dim")
    style = "bold green" if board.is_tile_correct(row, col) else "bold white"
    return Text(f"{val:>{width}}", style=style)


def _render_board(board: Board) -> Table:
    """Return a Rich Table of the grid; tiles already in place are green."""
    n = board.dimension()
    width = len(str(n * n - 1))
    table = Table(
        show_header=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(n):
        table.add_column(width=width + 1, justify="center")

    for r in range(n):
        table.add_row(*(_tile_cell(board, r, c, width) for c in range(n)))

    return table


def _render_step(index: int, board: Board, direction: Direction | None) -> Panel:
    if direction is None:
        title = "[bold cyan]start[/bold cyan]"
    else:
        title = f"[bold cyan]{index}[/bold cyan] {_ARROWS[direction]} {direction.value}"
    return Panel(
        Align.center(_render_board(board)),
        title=title,
        subtitle=f"[dim]manhattan {board.manhattan()}[/dim]",
        border_style="cyan",
        padding=(0, 1),
    )


# -- report -------------------------------------------------------------------


def render_result(solver: Solver) -> Panel:
    """Return a Rich renderable with the solver's answer."""
    solution = solver.solution()
    if solution is None:
        return Panel(
            Text("No solution possible", style="bold red"),
            title="[bold]Sliding Puzzle[/bold]",
            border_style="red",
            padding=(1, 2),
        )

    directions: list[Direction | None] = [None, *solver.directions()]
    steps = [
        _render_step(i, board, direction)
        for i, (board, direction) in enumerate(zip(solution, directions))
    ]

    summary = Text()
    summary.append("Minimum number of moves = ", style="dim")
    summary.append(str(solver.moves_to_solve()), style="bold yellow")
    summary.append(
        f"    ({solver.stats.expanded} nodes expanded, "
        f"peak frontier {solver.stats.peak_frontier})",
        style="dim",
    )

    size = solution[0].size
    return Panel(
        Group(summary, Text(""), Columns(steps)),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )


# -- entry point --------------------------------------------------------------


def run(board: Board) -> Solver:
    with console.status("[cyan]Solving…[/cyan]"):
        solver = Solver(board)
    console.print(render_result(solver))
    return solver
