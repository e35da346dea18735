"""Signals the puzzle controller sends to its presentation layer."""

from __future__ import annotations

from collections.abc import Sequence

from slidecore.models.grid import Placement, Position


class PuzzleListener:
    """Receives controller signals.  Every hook is a no-op by default.

    Subclass and override the hooks a front end cares about.
    """

    def on_tiles_placed(self, placements: Sequence[Placement]) -> None:
        """Called after a new session lays out its tiles."""

    def on_tile_moved(self, identity: int, from_pos: Position, to_pos: Position) -> None:
        """Called after each legal move, once the grid is already updated."""

    def on_won(self) -> None:
        """Called once, when the session is first solved."""
