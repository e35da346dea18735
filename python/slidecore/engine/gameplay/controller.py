"""Core gameplay logic: routes activations to moves and checks the win."""

from __future__ import annotations

import logging
import random

from slidecore.config import DEFAULT_SIZE, PuzzleConfig, Seed
from slidecore.engine.gamegenerator import ShuffleGenerator
from slidecore.engine.gamestate import GameState, Phase
from slidecore.engine.gameplay.events import PuzzleListener
from slidecore.errors import IllegalMoveError
from slidecore.models.grid import Grid, deal

logger = logging.getLogger(__name__)


class PuzzleController:
    """Owns one puzzle session at a time and drives it from activations."""

    def __init__(self, listener: PuzzleListener | None = None) -> None:
        self.listener = listener or PuzzleListener()
        self.state: GameState | None = None

    # -- session --------------------------------------------------------------

    def start_session(
        self,
        size: int = DEFAULT_SIZE,
        seed: Seed = None,
        rng: random.Random | None = None,
    ) -> Grid:
        """Shuffle and lay out a fresh grid.

        *rng* overrides the random source built from *seed*.  A layout that
        comes out already solved is reshuffled from the same source.
        """
        config = PuzzleConfig(size=size, seed=seed)
        if rng is None:
            rng = config.random_source()

        grid = deal(size, ShuffleGenerator.generate(size, rng))
        while grid.is_solved():
            logger.debug("Dealt a solved %dx%d grid, reshuffling", size, size)
            grid = deal(size, ShuffleGenerator.generate(size, rng))

        self.state = GameState(grid)
        logger.info("Puzzle generated (size=%d, seed=%r)", size, seed)
        self.listener.on_tiles_placed(grid.placements())
        return grid

    # -- input ----------------------------------------------------------------

    def on_activate(self, row: int, col: int) -> bool:
        """Slide the tile at (row, col) into the blank if they are adjacent.

        Returns True if a tile moved.  Clicking a tile that cannot move is
        not an error.
        """
        state = self.state
        if state is None or not state.accepts_input:
            return False

        grid = state.grid
        target = grid.adjacent_blank(row, col)
        state.phase = Phase.PLAYING
        if target is None:
            logger.debug("Ignored activation at (%d, %d)", row, col)
            return False

        try:
            identity = grid.move(row, col, *target)
        except IllegalMoveError:
            logger.debug("Illegal move attempted: (%d, %d)", row, col)
            return False

        state.record_move()
        logger.debug("Tile %d moved: (%d, %d) -> %s", identity, row, col, target)
        self.listener.on_tile_moved(identity, (row, col), target)

        if grid.is_solved():
            state.mark_won()
            logger.info("Puzzle solved in %d moves", state.moves)
            self.listener.on_won()
        return True

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid | None:
        return self.state.grid if self.state else None

    @property
    def phase(self) -> Phase:
        return self.state.phase if self.state else Phase.IDLE

    @property
    def is_won(self) -> bool:
        return self.phase is Phase.WON

    @property
    def move_count(self) -> int:
        return self.state.moves if self.state else 0

    @property
    def elapsed_time(self) -> float:
        return self.state.elapsed_time if self.state else 0.0
