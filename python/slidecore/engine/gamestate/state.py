"""Tracks the mutable state of a puzzle session."""

from __future__ import annotations

import time
from enum import StrEnum

from slidecore.models.grid import Grid


class Phase(StrEnum):
    IDLE = "idle"
    SHUFFLED = "shuffled"
    PLAYING = "playing"
    WON = "won"


class GameState:
    """Holds the current grid, phase, move counter, and elapsed time."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.phase: Phase = Phase.SHUFFLED
        self.moves: int = 0
        self._start_time: float = time.monotonic()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.monotonic() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.monotonic() - self._start_time
            self._running = False

    # -- phase ----------------------------------------------------------------

    @property
    def accepts_input(self) -> bool:
        return self.phase in (Phase.SHUFFLED, Phase.PLAYING)

    def record_move(self) -> None:
        self.moves += 1

    def mark_won(self) -> None:
        self.phase = Phase.WON
        self.pause()
