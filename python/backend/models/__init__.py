from backend.models.board import Board, Move
from backend.models.puzzle_file import load_board, parse_board

__all__ = ["Board", "Move", "load_board", "parse_board"]
