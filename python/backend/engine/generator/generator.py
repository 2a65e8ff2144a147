"""Generates random puzzle boards."""

from __future__ import annotations

import random

from backend.models.board import Board, Move


class GameGenerator:
    """Creates random boards, either uniformly or by walking from the goal."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def generate(
        size: int, solvable: bool = True, rng: random.Random | None = None
    ) -> Board:
        """Return a uniformly shuffled board with the requested solvability.

        A shuffle with the wrong parity is fixed by swapping two
        non-blank tiles, which flips the inversion count by one.
        """
        rng = rng or random.Random()
        cells = list(range(size * size))
        rng.shuffle(cells)

        board = Board.from_flat(size, cells)
        if board.is_solvable() != solvable:
            if cells[0] != 0 and cells[1] != 0:
                cells[0], cells[1] = cells[1], cells[0]
            else:
                cells[-1], cells[-2] = cells[-2], cells[-1]
            board = Board.from_flat(size, cells)
        return board

    @staticmethod
    def scramble(size: int, depth: int, rng: random.Random | None = None) -> Board:
        """Walk *depth* random moves from the goal without stepping straight back.

        The result is always solvable, in at most *depth* moves.
        """
        rng = rng or random.Random()
        board = Board.goal(size)
        prev: Move | None = None

        for _ in range(depth):
            moves = board.legal_moves()
            if prev is not None and prev.inverse in moves and len(moves) > 1:
                moves.remove(prev.inverse)
            prev = rng.choice(moves)
            board = board.apply_move(prev)
        return board
