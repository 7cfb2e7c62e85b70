"""Rich output helpers for printing a board without the TUI."""

from datetime import datetime

from rich.console import Console
from rich.table import Table

from ..models import Board

EMPTY_CELL = "[dim]-[/]"


def build_board_table(board: Board, now: datetime | None = None) -> Table:
    """Lay out a board as a table: one column per board column, one row per position."""
    table = Table(title="Board", show_lines=True, expand=True)
    for column in board.columns:
        table.add_column(f"{column.title} [dim]({column.case_count})[/]", overflow="fold")

    depth = max((column.case_count for column in board.columns), default=0)
    for row in range(depth):
        cells: list[str] = []
        for column in board.columns:
            if row < column.case_count:
                case = column.cases[row]
                cells.append(f"[bold]{case.title}[/]\n[dim]Updated {case.updated_label(now)}[/]")
            else:
                cells.append("")
        table.add_row(*cells)

    if depth == 0 and board.columns:
        table.add_row(*[EMPTY_CELL for _ in board.columns])
    return table


def print_board(board: Board, console: Console | None = None) -> None:
    """Print a board to the terminal."""
    console = console or Console()
    if not board.columns:
        console.print("[yellow]•[/] Board has no columns")
        return
    console.print(build_board_table(board))
