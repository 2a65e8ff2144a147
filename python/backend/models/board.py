"""Board model for the N-puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from backend.errors import InvalidMoveError


class Move(StrEnum):
    """Direction the *tile* slides into the blank.

    ``Move.UP`` moves the tile **below** the blank upward, so the blank
    itself shifts down one row.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def inverse(self) -> Move:
        return _INVERSE[self]


_INVERSE = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

# Offset from the blank to the tile that slides into it.
# UP    → tile at (br+1, bc) moves up    → blank shifts down
# DOWN  → tile at (br-1, bc) moves down  → blank shifts up
# LEFT  → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT → tile at (br, bc-1) moves right → blank shifts left
_OFFSETS = {
    Move.UP: (1, 0),
    Move.DOWN: (-1, 0),
    Move.LEFT: (0, 1),
    Move.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """An immutable puzzle configuration.

    Tiles are stored as a flat row-major tuple. 0 represents the blank.
    ``blank_pos`` is derived from ``cells`` and takes no part in
    equality or hashing.
    """

    size: int
    cells: tuple[int, ...]
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}.")
        cells = tuple(self.cells)
        if len(cells) != self.size * self.size:
            raise ValueError(
                f"Expected {self.size * self.size} tiles for a "
                f"{self.size}×{self.size} board, got {len(cells)}."
            )
        if sorted(cells) != list(range(self.size * self.size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{self.size * self.size - 1}."
            )
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "blank_pos", divmod(cells.index(0), self.size))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(size=size, cells=tuple(flat))

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        return cls(size=len(rows), cells=tuple(v for row in rows for v in row))

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board: tiles in order, blank bottom-right."""
        return cls(size=size, cells=tuple(range(1, size * size)) + (0,))

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * self.size + col]

    @property
    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.cells[r * n : (r + 1) * n] for r in range(n)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.cells) - 1
        return self.cells[last] == 0 and all(
            v == i + 1 for i, v in enumerate(self.cells[:last])
        )

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    def find_tile_index(self, value: int) -> int | None:
        """Return the flat index holding *value*, or ``None``."""
        for i, v in enumerate(self.cells):
            if v == value:
                return i
        return None

    def inversion_count(self) -> int:
        """Count out-of-order pairs among the non-blank tiles."""
        flat = [v for v in self.cells if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions

    def is_solvable(self) -> bool:
        """Return True if the board can reach the goal state.

        Odd sizes need an even inversion count. For even sizes the
        parity of the blank's row (counted from the top) decides: an
        even row needs an odd inversion count, an odd row an even one.
        """
        inversions = self.inversion_count()
        if self.size % 2 == 1:
            return inversions % 2 == 0
        if self.blank_pos[0] % 2 == 0:
            return inversions % 2 == 1
        return inversions % 2 == 0

    # -- moves ----------------------------------------------------------------

    def can_move(self, move: Move) -> bool:
        br, bc = self.blank_pos
        last = self.size - 1
        if move is Move.UP:
            return br != last
        if move is Move.DOWN:
            return br != 0
        if move is Move.LEFT:
            return bc != last
        return bc != 0

    def legal_moves(self) -> list[Move]:
        return [m for m in Move if self.can_move(m)]

    def apply_move(self, move: Move) -> Board:
        """Return the board reached by sliding a tile in *move*'s direction.

        Raises ``InvalidMoveError`` if no tile can slide that way.
        """
        if not self.can_move(move):
            raise InvalidMoveError(
                f"Cannot move {move.value} with the blank at {self.blank_pos}."
            )
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[move]
        blank = br * self.size + bc
        target = (br + dr) * self.size + bc + dc

        cells = list(self.cells)
        cells[blank], cells[target] = cells[target], cells[blank]
        return Board(size=self.size, cells=tuple(cells))

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join("·".rjust(width) if v == 0 else str(v).rjust(width) for v in row)
            for row in self.rows
        )
