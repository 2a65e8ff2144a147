"""A* solver for the N-puzzle."""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass

from backend.engine.heuristics import Heuristic
from backend.engine.search.node import Node
from backend.errors import (
    InvalidMoveError,
    PathReconstructionError,
    SearchExhaustedError,
    UnsolvableError,
    VerificationError,
)
from backend.models.board import Board, Move

logger = logging.getLogger(__name__)

# Board cells → the move that first settled that board (None for the root).
ClosedSet = dict[tuple[int, ...], Move | None]


@dataclass(frozen=True)
class SearchResult:
    moves: list[Move]
    expanded: int
    generated: int
    peak_frontier: int
    closed: int


class Solver:
    """Best-first graph search over board states.

    Holds nothing but the heuristic and the mode flag, so one instance
    can solve any number of independent boards.

    With ``optimal=True`` the frontier is ordered by ``f = g + h`` and
    the returned solution is a shortest one. With ``optimal=False`` it
    is ordered by ``h`` alone (greedy best-first): usually far fewer
    expansions, no guarantee on length.
    """

    def __init__(
        self,
        heuristic: Heuristic | str = Heuristic.MANHATTAN,
        optimal: bool = True,
    ) -> None:
        self.heuristic = Heuristic(heuristic)
        self.optimal = optimal
        self._heuristic_fn = self.heuristic.get_heuristic_fn()

    def _priority(self, node: Node) -> tuple[int, int]:
        if self.optimal:
            return (node.f, node.h)
        return (node.h, node.g)

    # -- search ---------------------------------------------------------------

    def search(self, board: Board) -> SearchResult:
        """Solve *board* and return the moves together with search counters.

        Raises ``UnsolvableError`` before any expansion if the board
        fails the parity check.
        """
        if not board.is_solvable():
            raise UnsolvableError(
                f"Puzzle is not solvable ({board.inversion_count()} inversions, "
                f"blank on row {board.blank_pos[0]})."
            )

        root = Node(board=board, g=0, h=self._heuristic_fn(board))
        frontier: list[tuple[tuple[int, int], Node]] = [(self._priority(root), root)]
        closed: ClosedSet = {}
        expanded = generated = 0
        peak_frontier = 1

        logger.debug(
            "searching %d×%d board, h=%d, heuristic=%s, optimal=%s",
            board.size, board.size, root.h, self.heuristic.value, self.optimal,
        )

        while frontier:
            _, node = heapq.heappop(frontier)
            cells = node.board.cells
            if cells in closed:
                continue
            closed[cells] = node.move

            if node.h == 0:
                moves = self._reconstruct_path(closed, node.board)
                result = SearchResult(
                    moves=moves,
                    expanded=expanded,
                    generated=generated,
                    peak_frontier=peak_frontier,
                    closed=len(closed),
                )
                logger.info(
                    "solved in %d moves (%d expanded, %d generated, peak frontier %d)",
                    len(moves), expanded, generated, peak_frontier,
                )
                return result

            expanded += 1
            for child in node.successors(self._heuristic_fn):
                generated += 1
                if child.board.cells not in closed:
                    heapq.heappush(frontier, (self._priority(child), child))
            peak_frontier = max(peak_frontier, len(frontier))

        logger.error(
            "frontier exhausted after %d expansions on a board that passed "
            "the parity check", expanded,
        )
        raise SearchExhaustedError(
            f"Goal not reached after settling {len(closed)} boards."
        )

    def solve(self, board: Board) -> list[Move]:
        """Return a move sequence that takes *board* to the goal."""
        return self.search(board).moves

    def hint(self, board: Board) -> Move | None:
        """Return the first move of a solution, or ``None`` if already solved."""
        if board.is_solved():
            return None
        return self.solve(board)[0]

    # -- path reconstruction --------------------------------------------------

    @staticmethod
    def _reconstruct_path(closed: ClosedSet, goal: Board) -> list[Move]:
        """Walk back from *goal* by undoing each recorded move."""
        path: list[Move] = []
        board = goal
        while True:
            try:
                move = closed[board.cells]
            except KeyError:
                logger.error("board missing from closed set after %d steps", len(path))
                raise PathReconstructionError(
                    f"Predecessor board not settled:\n{board}"
                ) from None
            if move is None:
                break
            if len(path) >= len(closed):
                raise PathReconstructionError("Closed set contains a cycle.")
            path.append(move)
            try:
                board = board.apply_move(move.inverse)
            except InvalidMoveError as exc:
                raise PathReconstructionError(str(exc)) from exc
        path.reverse()
        return path

    # -- verification ---------------------------------------------------------

    @staticmethod
    def check_solution(board: Board, moves: list[Move]) -> Board:
        """Replay *moves* on *board* and return the final (goal) board.

        Raises ``VerificationError`` if a move is illegal at replay time
        or the final board is not the goal.
        """
        current = board
        for i, move in enumerate(moves):
            try:
                current = current.apply_move(move)
            except InvalidMoveError as exc:
                raise VerificationError(f"Move {i} ({move.value}) is illegal: {exc}") from exc

        if current != Board.goal(board.size):
            raise VerificationError(
                f"Solution of {len(moves)} moves does not lead to the goal board."
            )
        return current
