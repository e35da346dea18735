"""Grid model for the sliding tile puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from slidecore.errors import IllegalMoveError, InvalidGridError, OutOfBoundsError

Position = tuple[int, int]
Placement = tuple[int, Position]

# Neighbour offsets in lookup order: up, down, left, right.
_OFFSETS: tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def blank_identity(size: int) -> int:
    """Identity reserved for the blank: the top-right cell index."""
    return size - 1


@dataclass
class Grid:
    """The N×N puzzle grid.

    Each cell holds a tile identity (the row-major index of the tile's
    home cell) or ``None`` for the blank.  The blank's home is the
    top-right cell, so identity ``size - 1`` never appears on a tile.
    """

    size: int
    tiles: list[list[int | None]]
    blank_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def initialize(cls, size: int, identities: Sequence[int]) -> Grid:
        """Fill a grid row-major from *identities*, skipping the blank's home.

        Example::

            Grid.initialize(3, [0, 1, 3, 4, 5, 6, 7, 8])   # solved 3×3
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 2:
            raise InvalidGridError(f"Grid size must be an integer ≥ 2, got {size!r}.")

        identities = list(identities)
        expected = size * size - 1
        if len(identities) != expected:
            raise InvalidGridError(
                f"Expected {expected} tiles for a {size}×{size} grid, "
                f"got {len(identities)}."
            )

        blank = blank_identity(size)
        seen: set[int] = set()
        for ident in identities:
            if isinstance(ident, bool) or not isinstance(ident, int):
                raise InvalidGridError(f"Tile identity {ident!r} is not an integer.")
            if not 0 <= ident < size * size or ident == blank:
                raise InvalidGridError(
                    f"Tile identity {ident} is out of range for a "
                    f"{size}×{size} grid."
                )
            if ident in seen:
                raise InvalidGridError(f"Tile identity {ident} appears twice.")
            seen.add(ident)

        blank_pos = (0, size - 1)
        pending = iter(identities)
        tiles: list[list[int | None]] = []
        for r in range(size):
            row: list[int | None] = []
            for c in range(size):
                row.append(None if (r, c) == blank_pos else next(pending))
            tiles.append(row)
        return cls(size=size, tiles=tiles, blank_pos=blank_pos)

    @classmethod
    def solved(cls, size: int) -> Grid:
        """Return the goal-state grid (every tile home, blank top-right)."""
        blank = blank_identity(size)
        return cls.initialize(size, [i for i in range(size * size) if i != blank])

    # -- queries --------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.size)

    def tile_at(self, row: int, col: int) -> int | None:
        self._check_bounds(row, col)
        return self.tiles[row][col]

    def is_blank(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return self.tiles[row][col] is None

    def home_of(self, identity: int) -> Position:
        return divmod(identity, self.size)

    def adjacent_blank(self, row: int, col: int) -> Position | None:
        """Return the blank's position if it neighbours (row, col), else None."""
        self._check_bounds(row, col)
        for dr, dc in _OFFSETS:
            nr, nc = row + dr, col + dc
            if self.in_bounds(nr, nc) and self.tiles[nr][nc] is None:
                return (nr, nc)
        return None

    def movable_cells(self) -> list[Position]:
        """Cells whose tile can slide into the blank right now."""
        br, bc = self.blank_pos
        return [
            (br + dr, bc + dc)
            for dr, dc in _OFFSETS
            if self.in_bounds(br + dr, bc + dc)
        ]

    def is_solved(self) -> bool:
        """Check if every cell holds its home identity."""
        for r in range(self.size):
            for c in range(self.size):
                val = self.tiles[r][c]
                if val is None:
                    if (r, c) != (0, self.size - 1):
                        return False
                elif val != r * self.size + c:
                    return False
        return True

    def is_tile_home(self, row: int, col: int) -> bool:
        """Check if the occupant of (row, col) is in its home position."""
        val = self.tile_at(row, col)
        if val is None:
            return (row, col) == (0, self.size - 1)
        return self.home_of(val) == (row, col)

    def placements(self) -> list[Placement]:
        """Every non-blank tile with its current cell, row-major."""
        return [
            (val, (r, c))
            for r, row in enumerate(self.tiles)
            for c, val in enumerate(row)
            if val is not None
        ]

    def as_rows(self) -> list[list[int | None]]:
        return [row[:] for row in self.tiles]

    def copy(self) -> Grid:
        return Grid(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )

    # -- mutation -------------------------------------------------------------

    def move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> int:
        """Slide the tile at (from) into the blank at (to).

        Returns the identity of the tile that moved.
        """
        if not (self.in_bounds(from_row, from_col) and self.in_bounds(to_row, to_col)):
            raise IllegalMoveError(
                f"Move ({from_row}, {from_col}) -> ({to_row}, {to_col}) "
                f"leaves the {self.size}×{self.size} grid."
            )
        if self.tiles[to_row][to_col] is not None:
            raise IllegalMoveError(f"Target ({to_row}, {to_col}) is not blank.")
        if abs(from_row - to_row) + abs(from_col - to_col) != 1:
            raise IllegalMoveError(
                f"({from_row}, {from_col}) is not adjacent to the blank at "
                f"({to_row}, {to_col})."
            )

        identity = self.tiles[from_row][from_col]
        assert identity is not None
        self.tiles[to_row][to_col] = identity
        self.tiles[from_row][from_col] = None
        self.blank_pos = (from_row, from_col)
        return identity


def deal(size: int, pile: Iterable[int]) -> Grid:
    """Lay a draw pile onto a fresh grid, drawing from the top (the end).

    The first cell filled gets the last identity in *pile*.
    """
    return Grid.initialize(size, list(reversed(list(pile))))
