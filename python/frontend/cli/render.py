"""Rich renderables for boards and solutions."""

from __future__ import annotations

import rich.box
from rich.table import Table
from rich.text import Text

from backend.models.board import Board, Move

BLANK_GLYPH = "■"

_ARROWS = {
    Move.UP: "↑",
    Move.DOWN: "↓",
    Move.LEFT: "←",
    Move.RIGHT: "→",
}


def render_board(board: Board, title: str | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        title=title,
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"[dim]{BLANK_GLYPH}[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_moves(moves: list[Move]) -> Text:
    """Arrow listing of *moves*, one arrow per tile slide."""
    text = Text()
    if not moves:
        text.append("(no moves)", style="dim")
        return text
    for i, move in enumerate(moves):
        if i:
            text.append(" ")
        text.append(_ARROWS[move], style="bold cyan")
    return text
