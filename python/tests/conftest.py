"""Shared fixtures and search helpers for the puzzle test suite."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

import pytest

from slidecore.engine.gameplay import PuzzleController, PuzzleListener
from slidecore.models.grid import Grid, Placement, Position

State = tuple[int | None, ...]


class RecordingListener(PuzzleListener):
    """Keeps every signal it receives, in order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def on_tiles_placed(self, placements: Sequence[Placement]) -> None:
        self.events.append(("placed", list(placements)))

    def on_tile_moved(self, identity: int, from_pos: Position, to_pos: Position) -> None:
        self.events.append(("moved", identity, from_pos, to_pos))

    def on_won(self) -> None:
        self.events.append(("won",))

    def kinds(self) -> list[str]:
        return [e[0] for e in self.events]


# -- state-space helpers ------------------------------------------------------


def flatten(grid: Grid) -> State:
    return tuple(val for row in grid.tiles for val in row)


def _neighbours(state: State, size: int) -> list[tuple[State, int]]:
    """States one slide away, paired with the flat index of the tile moved."""
    blank = state.index(None)
    br, bc = divmod(blank, size)
    out: list[tuple[State, int]] = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = br + dr, bc + dc
        if 0 <= nr < size and 0 <= nc < size:
            j = nr * size + nc
            nxt = list(state)
            nxt[blank], nxt[j] = nxt[j], nxt[blank]
            out.append((tuple(nxt), j))
    return out


def reachable_from_solved(size: int) -> set[State]:
    """Every state reachable from the goal by legal slides (small sizes only)."""
    start = flatten(Grid.solved(size))
    seen = {start}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        for nxt, _ in _neighbours(state, size):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def solution_cells(grid: Grid) -> list[Position]:
    """Breadth-first list of cells to activate to solve *grid*."""
    size = grid.size
    start = flatten(grid)
    goal = flatten(Grid.solved(size))
    parents: dict[State, tuple[State, int] | None] = {start: None}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        if state == goal:
            break
        for nxt, moved in _neighbours(state, size):
            if nxt not in parents:
                parents[nxt] = (state, moved)
                queue.append(nxt)
    else:
        raise AssertionError("grid is not solvable")

    cells: list[Position] = []
    state = goal
    while parents[state] is not None:
        state, moved = parents[state]
        cells.append(divmod(moved, size))
    return cells[::-1]


# -- fixtures -----------------------------------------------------------------


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def controller(listener: RecordingListener) -> PuzzleController:
    return PuzzleController(listener)


@pytest.fixture(scope="session")
def reachable_3x3() -> set[State]:
    return reachable_from_solved(3)
