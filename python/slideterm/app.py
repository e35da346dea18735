"""Rich terminal front end for the sliding tile puzzle.

Draws the grid with ``rich`` and feeds cell activations to the
``PuzzleController``.  A cursor stands in for the mouse: the arrow keys
move it and Space/Enter activates the tile under it.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidecore.config import PuzzleConfig
from slidecore.engine.gameplay import PuzzleController, PuzzleListener
from slidecore.models.grid import Grid, Placement, Position
from slideterm.input_handler import get_key, get_key_timeout

console = Console()

_CURSOR_STEPS: dict[str, Position] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def step_cursor(cursor: Position, action: str, size: int) -> Position:
    """Move *cursor* one cell in the direction of *action*, clamped to the grid."""
    dr, dc = _CURSOR_STEPS[action]
    r, c = cursor
    return (min(max(r + dr, 0), size - 1), min(max(c + dc, 0), size - 1))


# -- grid rendering -----------------------------------------------------------


def render_grid(grid: Grid, cursor: Position | None = None) -> Table:
    """Return a Rich Table showing each tile's identity.

    Tiles already home are green; the cursor cell is reversed.
    """
    width = len(str(grid.size * grid.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(grid.tiles):
        cells: list[Text] = []
        for c, val in enumerate(row):
            if val is None:
                cell = Text("·", style="dim")
            elif grid.is_tile_home(r, c):
                cell = Text(f"{val:>{width}}", style="bold green")
            else:
                cell = Text(f"{val:>{width}}", style="bold white")
            if (r, c) == cursor:
                cell.stylize("reverse")
            cells.append(cell)
        table.add_row(*cells)

    return table


# -- controller signals -------------------------------------------------------


class TerminalListener(PuzzleListener):
    """Turns controller signals into a one-line status message."""

    def __init__(self) -> None:
        self.status = ""

    def on_tiles_placed(self, placements: Sequence[Placement]) -> None:
        self.status = f"[yellow]Shuffled {len(placements)} tiles.[/yellow]"

    def on_tile_moved(self, identity: int, from_pos: Position, to_pos: Position) -> None:
        self.status = f"[cyan]Tile {identity}[/cyan] slid to {to_pos}"

    def on_won(self) -> None:
        self.status = "[bold green]Solved![/bold green]"


# -- screens ------------------------------------------------------------------


def _draw_game(controller: PuzzleController, cursor: Position, status: str) -> None:
    console.clear()

    grid = controller.grid
    assert grid is not None
    size = grid.size

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(controller.move_count), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(controller.elapsed_time), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(render_grid(grid, cursor)),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save the cursor right before the stats line so _update_time() can
    # repaint only that line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(controller: PuzzleController) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    dim, yellow, reset = "\033[2m", "\033[33;1m", "\033[0m"
    moves = controller.move_count
    clock = _format_time(controller.elapsed_time)
    stats_raw = (
        f"{dim}Moves: {reset}{yellow}{moves}{reset}"
        f"    {dim}Time: {reset}{yellow}{clock}{reset}"
    )
    visible_len = len(f"Moves: {moves}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_win(controller: PuzzleController) -> None:
    console.clear()

    grid = controller.grid
    assert grid is not None

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(controller.move_count), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(controller.elapsed_time), style="bold yellow")

    panel = Panel(
        Group(Align.center(render_grid(grid)), Align.center(congrats), Align.center(stats)),
        title=f"[bold green]Sliding Puzzle  {grid.size}×{grid.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to quit.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play(controller: PuzzleController, listener: TerminalListener, config: PuzzleConfig) -> bool:
    """Play one session.  Returns True if the player asked for another."""
    controller.start_session(config.size, config.seed)
    cursor: Position = (0, 0)

    while not controller.is_won:
        _draw_game(controller, cursor, listener.status)

        # Short timeout so the clock keeps ticking.
        while True:
            key = get_key_timeout(0.5)
            if key is not None:
                break
            _update_time(controller)

        if key in _CURSOR_STEPS:
            cursor = step_cursor(cursor, key, config.size)
        elif key == "activate":
            controller.on_activate(*cursor)
        elif key == "restart":
            return True
        elif key == "quit":
            return False

    _draw_win(controller)
    while True:
        key = get_key()
        if key == "restart":
            return True
        if key == "quit":
            return False


def show(config: PuzzleConfig) -> Grid:
    """Deal one grid and print it without entering the game loop."""
    controller = PuzzleController()
    grid = controller.start_session(config.size, config.seed)
    console.print(render_grid(grid))
    return grid


# -- public entry point -------------------------------------------------------


def run(config: PuzzleConfig) -> None:
    """Launch the interactive terminal game."""
    listener = TerminalListener()
    controller = PuzzleController(listener)
    # An unseeded config reshuffles on every restart; a seeded one repeats.
    while _play(controller, listener, config):
        pass
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
