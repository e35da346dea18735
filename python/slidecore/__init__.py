"""Sliding tile puzzle engine: grid model, shuffle generator, controller."""

from slidecore.config import PuzzleConfig
from slidecore.engine.gamegenerator import ShuffleGenerator
from slidecore.engine.gameplay import PuzzleController, PuzzleListener
from slidecore.engine.gamestate import Phase
from slidecore.errors import (
    IllegalMoveError,
    InvalidConfigError,
    InvalidGridError,
    OutOfBoundsError,
    PuzzleError,
)
from slidecore.models import Grid

__all__ = [
    "Grid",
    "IllegalMoveError",
    "InvalidConfigError",
    "InvalidGridError",
    "OutOfBoundsError",
    "Phase",
    "PuzzleConfig",
    "PuzzleController",
    "PuzzleError",
    "PuzzleListener",
    "ShuffleGenerator",
]
