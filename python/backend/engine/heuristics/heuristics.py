"""Admissible distance estimates from a board to the goal."""

from __future__ import annotations

from enum import StrEnum
from typing import Callable

from backend.errors import UnsupportedHeuristicError
from backend.models.board import Board

HeuristicFn = Callable[[Board], int]


def manhattan_distance(size: int, index: int, goal_index: int) -> int:
    """Grid (L1) distance between two flat indices on a *size*-wide board."""
    row, col = divmod(index, size)
    goal_row, goal_col = divmod(goal_index, size)
    return abs(row - goal_row) + abs(col - goal_col)


def total_manhattan_distance(board: Board) -> int:
    """Sum of every tile's Manhattan distance to its goal cell.

    The blank is not counted, which keeps the estimate admissible and
    consistent: one move changes the sum by exactly one.
    """
    total = 0
    for value in range(1, board.size * board.size):
        index = board.find_tile_index(value)
        total += manhattan_distance(board.size, index, value - 1)
    return total


class Heuristic(StrEnum):
    MANHATTAN = "manhattan-distance"
    MISPLACED = "misplaced-tiles"

    def get_heuristic_fn(self) -> HeuristicFn:
        """Return the evaluator for this heuristic.

        Raises ``UnsupportedHeuristicError`` for heuristics that are
        listed but not implemented.
        """
        if self is Heuristic.MANHATTAN:
            return total_manhattan_distance
        raise UnsupportedHeuristicError(
            f"Heuristic {self.value!r} is not implemented; "
            f"use {Heuristic.MANHATTAN.value!r}."
        )
