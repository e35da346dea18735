"""Exception hierarchy for the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle engine."""


class InvalidConfigError(PuzzleError, ValueError):
    """Bad size or seed supplied when starting a session."""


class InvalidGridError(PuzzleError, ValueError):
    """A placement list that cannot describe a valid grid."""


class OutOfBoundsError(PuzzleError, IndexError):
    """A cell position outside the grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside the {size}×{size} grid."
        )
        self.row = row
        self.col = col
        self.size = size


class IllegalMoveError(PuzzleError):
    """A move whose target is not the blank or not adjacent to the origin."""
