#!/usr/bin/env python3
"""N-Puzzle Solver.

Usage::

    npuzzle                          # solve a random 3×3 board
    npuzzle -s 4 --seed 7            # reproducible random 4×4 board
    npuzzle puzzles/hard.txt         # solve a board from a file
    npuzzle --greedy --show-moves    # faster, not necessarily shortest
"""

import logging
import random
import time
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from backend.engine.generator import GameGenerator
from backend.engine.heuristics import Heuristic
from backend.engine.search import Solver
from backend.errors import NPuzzleError
from backend.models.board import Board
from backend.models.puzzle_file import load_board
from frontend.cli.render import render_board, render_moves

console = Console()


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_or_generate(file: Optional[Path], size: int, seed: Optional[int]) -> Board:
    if file is not None:
        return load_board(file)
    return GameGenerator.generate(size, rng=random.Random(seed))


def _print_stats(moves: int, elapsed: float, expanded: int, peak: int) -> None:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{elapsed:.3f}s", style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(expanded), style="bold yellow")
    stats.append("    Peak frontier: ", style="dim")
    stats.append(str(peak), style="bold yellow")
    console.print(stats)


def _solve(
    file: Optional[Path],
    size: int,
    optimal: bool,
    heuristic: Heuristic,
    seed: Optional[int],
    show_moves: bool,
) -> None:
    solver = Solver(heuristic, optimal=optimal)
    board = _load_or_generate(file, size, seed)
    console.print(render_board(board, title="Puzzle"))

    start = time.perf_counter()
    result = solver.search(board)
    elapsed = time.perf_counter() - start

    solved = Solver.check_solution(board, result.moves)
    console.print(render_board(solved, title="Solved"))
    if show_moves:
        console.print(render_moves(result.moves))
    _print_stats(len(result.moves), elapsed, result.expanded, result.peak_frontier)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    file: Optional[Path] = typer.Argument(
        None,
        help="Puzzle file to solve. Omit to solve a random board.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        envvar="NPUZZLE_SIZE",
        help="Size of the random board (2-8). Ignored when FILE is given.",
    ),
    optimal: bool = typer.Option(
        True, "--optimal/--greedy",
        help="Find a shortest solution, or search greedily on the heuristic.",
    ),
    heuristic: Heuristic = typer.Option(
        Heuristic.MANHATTAN, "-H", "--heuristic",
        envvar="NPUZZLE_HEURISTIC",
        help="Distance estimate guiding the search.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the random board.",
    ),
    show_moves: bool = typer.Option(
        False, "--show-moves",
        help="Print the solution as arrows (direction each tile slides).",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="NPUZZLE_LOG_LEVEL",
        case_sensitive=False,
        help="Verbosity of log output on stderr.",
    ),
) -> None:
    """N-Puzzle Solver."""
    _configure_logging(log_level)
    try:
        _solve(file, size, optimal, heuristic, seed, show_moves)
    except NPuzzleError as exc:
        console.print(Text.assemble((f"{type(exc).__name__}: ", "bold red"), str(exc)))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
