"""Search nodes for the A* frontier."""

from __future__ import annotations

from dataclasses import dataclass

from backend.engine.heuristics import HeuristicFn
from backend.models.board import Board, Move


@dataclass(frozen=True, eq=False)
class Node:
    """A board plus its path cost ``g``, estimate ``h`` and incoming move.

    Two nodes are equal iff their boards are equal; ``g``, ``h`` and
    ``move`` are ignored. Ordering is ascending by ``f = g + h`` with
    ``h`` as the tie-breaker.
    """

    board: Board
    g: int
    h: int
    move: Move | None = None

    @property
    def f(self) -> int:
        return self.g + self.h

    def __lt__(self, other: Node) -> bool:
        return (self.f, self.h) < (other.f, other.h)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.board.cells == other.board.cells

    def __hash__(self) -> int:
        return hash(self.board.cells)

    # -- expansion ------------------------------------------------------------

    def successor(self, move: Move, heuristic_fn: HeuristicFn) -> Node | None:
        if not self.board.can_move(move):
            return None
        board = self.board.apply_move(move)
        return Node(board=board, g=self.g + 1, h=heuristic_fn(board), move=move)

    def successors(self, heuristic_fn: HeuristicFn) -> list[Node]:
        """Return a child node for every legal move from this board."""
        children: list[Node] = []
        for move in Move:
            child = self.successor(move, heuristic_fn)
            if child is not None:
                children.append(child)
        return children
