"""Reading puzzle boards from text files.

File format::

    # comments start with '#'
    3
    1 2 3
    4 0 6   # trailing comments are fine
    7 5 8

The first data line holds the board size ``N`` (only its first token
is read). The next ``N`` data lines each hold ``N`` whitespace-separated
tiles. ``0`` marks the blank.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backend.errors import ParseError
from backend.models.board import Board

logger = logging.getLogger(__name__)


def _data_lines(text: str) -> list[tuple[int, str]]:
    """Return ``(line_number, content)`` for each non-empty, comment-stripped line."""
    out: list[tuple[int, str]] = []
    for number, raw in enumerate(text.splitlines(), 1):
        data = raw.split("#", 1)[0].strip()
        if data:
            out.append((number, data))
    return out


def _parse_int(token: str, line: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ParseError(f"not an integer: {token!r}", line) from None
    if value < 0:
        raise ParseError(f"negative tile value: {value}", line)
    return value


def parse_board(text: str) -> Board:
    """Parse the puzzle file format into a ``Board``."""
    lines = _data_lines(text)
    if not lines:
        raise ParseError("missing board size")

    size_line, size_data = lines[0]
    size = _parse_int(size_data.split()[0], size_line)
    if size < 2:
        raise ParseError(f"board size must be at least 2, got {size}", size_line)

    rows = lines[1:]
    if len(rows) < size:
        raise ParseError(f"expected {size} rows, got {len(rows)}")
    if len(rows) > size:
        raise ParseError(f"unexpected data after {size} rows", rows[size][0])

    cells: list[int] = []
    for number, data in rows:
        values = [_parse_int(token, number) for token in data.split()]
        if len(values) != size:
            raise ParseError(
                f"row has {len(values)} values, expected {size}", number
            )
        cells.extend(values)

    if 0 not in cells:
        raise ParseError("no blank tile (0) in puzzle")

    try:
        board = Board(size=size, cells=tuple(cells))
    except ValueError as exc:
        raise ParseError(str(exc)) from exc

    logger.debug("parsed %d×%d board", size, size)
    return board


def load_board(path: Path | str) -> Board:
    """Read and parse the puzzle file at *path*."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ParseError(f"cannot read {path}: {exc.strerror or exc}") from exc
    return parse_board(text)
