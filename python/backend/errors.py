"""Exception hierarchy shared by the models, the engine and the CLI."""

from __future__ import annotations


class NPuzzleError(Exception):
    """Base class for every error raised by the solver package."""


class ParseError(NPuzzleError):
    """A puzzle file could not be turned into a board."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class InvalidMoveError(NPuzzleError):
    """A move would push the blank off the board."""


class UnsolvableError(NPuzzleError):
    """The board fails the parity check and cannot reach the goal."""


class SearchError(NPuzzleError):
    """The search broke an internal invariant."""


class SearchExhaustedError(SearchError):
    """The frontier emptied without reaching the goal."""


class PathReconstructionError(SearchError):
    """The closed set could not be walked back to the root."""


class VerificationError(NPuzzleError):
    """Replaying a solution did not end on the goal board."""


class UnsupportedHeuristicError(NPuzzleError):
    """The selected heuristic has no implementation."""
