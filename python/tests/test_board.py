"""Board model: construction, move semantics, solvability parity."""

from __future__ import annotations

import itertools
import random

import pytest

from backend.engine.generator import GameGenerator
from backend.errors import InvalidMoveError
from backend.models.board import Board, Move


# -- construction -------------------------------------------------------------


def test_goal_board_layout() -> None:
    assert Board.goal(3).cells == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert Board.goal(4).cells[-1] == 0
    assert Board.goal(4).blank_pos == (3, 3)


def test_from_rows_matches_from_flat() -> None:
    rows = [[1, 2, 3], [4, 0, 6], [7, 5, 8]]
    board = Board.from_rows(rows)
    assert board == Board.from_flat(3, [1, 2, 3, 4, 0, 6, 7, 5, 8])
    assert board.blank_pos == (1, 1)
    assert board.rows == [(1, 2, 3), (4, 0, 6), (7, 5, 8)]


@pytest.mark.parametrize(
    "size, flat",
    [
        (3, [1, 2, 3, 4, 5, 6, 7, 0]),
        (3, [1, 2, 3, 4, 5, 6, 7, 8, 8]),
        (2, [1, 2, 3, 4]),
        (1, [0]),
    ],
    ids=["short", "duplicate", "no-blank", "too-small"],
)
def test_invalid_board_rejected(size: int, flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(size, flat)


def test_boards_hash_by_contents() -> None:
    a = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    b = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert a == b
    assert len({a, b}) == 1


# -- queries ------------------------------------------------------------------


def test_is_solved_and_tile_correct() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert Board.goal(3).is_solved()
    assert not board.is_solved()
    assert board.is_tile_correct(0, 0)
    assert not board.is_tile_correct(2, 1)
    assert not board.is_tile_correct(2, 2)


def test_find_tile_index() -> None:
    board = Board.from_flat(3, [8, 1, 2, 0, 4, 3, 7, 6, 5])
    assert board.find_tile_index(8) == 0
    assert board.find_tile_index(0) == 3
    assert board.find_tile_index(9) is None


def test_str_shows_blank_glyph() -> None:
    text = str(Board.goal(3))
    assert text.splitlines()[0] == "1 2 3"
    assert text.splitlines()[-1] == "7 8 ·"


# -- moves --------------------------------------------------------------------


def test_can_move_from_goal_corner() -> None:
    goal = Board.goal(3)
    assert not goal.can_move(Move.UP)
    assert not goal.can_move(Move.LEFT)
    assert goal.can_move(Move.DOWN)
    assert goal.can_move(Move.RIGHT)
    assert set(goal.legal_moves()) == {Move.DOWN, Move.RIGHT}


def test_can_move_from_top_left() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 7, 8])
    assert board.legal_moves() == [Move.UP, Move.LEFT]


def test_move_names_the_tile_direction() -> None:
    # LEFT slides the tile right of the blank into it.
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.apply_move(Move.LEFT) == Board.goal(3)

    # DOWN slides the tile above the blank down.
    moved = Board.goal(3).apply_move(Move.DOWN)
    assert moved.cells == (1, 2, 3, 4, 5, 0, 7, 8, 6)
    assert moved.blank_pos == (1, 2)

    # UP slides the tile below the blank up.
    assert moved.apply_move(Move.UP) == Board.goal(3)


def test_apply_move_does_not_mutate() -> None:
    goal = Board.goal(3)
    goal.apply_move(Move.RIGHT)
    assert goal.cells == (1, 2, 3, 4, 5, 6, 7, 8, 0)


def test_illegal_move_raises() -> None:
    goal = Board.goal(3)
    with pytest.raises(InvalidMoveError):
        goal.apply_move(Move.UP)
    with pytest.raises(InvalidMoveError):
        goal.apply_move(Move.LEFT)
    assert goal.is_solved()


def test_inverse_pairs() -> None:
    assert Move.UP.inverse is Move.DOWN
    assert Move.DOWN.inverse is Move.UP
    assert Move.LEFT.inverse is Move.RIGHT
    assert Move.RIGHT.inverse is Move.LEFT


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_moves_are_reversible(size: int) -> None:
    rng = random.Random(size)
    for _ in range(25):
        board = GameGenerator.scramble(size, 40, rng)
        for move in board.legal_moves():
            assert board.apply_move(move).apply_move(move.inverse) == board


# -- solvability --------------------------------------------------------------


def test_inversion_count() -> None:
    assert Board.goal(3).inversion_count() == 0
    assert Board.from_flat(3, [2, 1, 3, 4, 5, 6, 7, 8, 0]).inversion_count() == 1
    assert Board.from_flat(3, [8, 7, 6, 5, 4, 3, 2, 1, 0]).inversion_count() == 28


def test_adjacent_swap_is_unsolvable() -> None:
    assert not Board.from_flat(3, [2, 1, 3, 4, 5, 6, 7, 8, 0]).is_solvable()


def test_parity_matches_bfs_2x2(distances_2x2: dict) -> None:
    for perm in itertools.permutations(range(4)):
        board = Board.from_flat(2, list(perm))
        assert board.is_solvable() == (perm in distances_2x2), perm


def test_parity_matches_bfs_3x3(distances_3x3: dict) -> None:
    rng = random.Random(42)
    cells = list(range(9))
    for _ in range(2000):
        rng.shuffle(cells)
        board = Board.from_flat(3, cells)
        assert board.is_solvable() == (tuple(cells) in distances_3x3), cells


def test_parity_4x4() -> None:
    assert Board.goal(4).is_solvable()
    # Sam Loyd's 14-15 puzzle.
    loyd = list(range(1, 14)) + [15, 14, 0]
    assert not Board.from_flat(4, loyd).is_solvable()

    rng = random.Random(4)
    for _ in range(200):
        board = GameGenerator.scramble(4, rng.randrange(1, 200), rng)
        assert board.is_solvable()

        # Swapping two tiles moves the board into the other parity class.
        cells = list(board.cells)
        i, j = [k for k, v in enumerate(cells) if v != 0][:2]
        cells[i], cells[j] = cells[j], cells[i]
        assert not Board.from_flat(4, cells).is_solvable()
