"""Terminal front end tests: CLI options, grid rendering, key mapping."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console
from typer.testing import CliRunner

from main import app
from slidecore.config import PuzzleConfig
from slidecore.errors import InvalidConfigError
from slidecore.models.grid import Grid
from slideterm.app import TerminalListener, render_grid, step_cursor
from slideterm.input_handler import resolve

runner = CliRunner()


# -- helpers ------------------------------------------------------------------


def _plain(renderable: object) -> str:
    console = Console(file=StringIO(), width=60, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


# -- CLI ----------------------------------------------------------------------


def test_show_prints_dealt_grid() -> None:
    result = runner.invoke(app, ["--show", "--seed", "7", "-s", "3"])
    assert result.exit_code == 0, result.output
    assert "·" in result.output
    for identity in (0, 1, 3, 4, 5, 6, 7, 8):
        assert str(identity) in result.output


def test_show_is_reproducible_for_a_seed() -> None:
    first = runner.invoke(app, ["--show", "--seed", "abc", "-s", "4"])
    second = runner.invoke(app, ["--show", "--seed", "abc", "-s", "4"])
    assert first.exit_code == 0, first.output
    assert first.output == second.output


def test_size_and_seed_from_environment() -> None:
    by_option = runner.invoke(app, ["--show", "--seed", "3", "-s", "2"])
    by_env = runner.invoke(
        app, ["--show"], env={"SLIDE_PUZZLE_SIZE": "2", "SLIDE_PUZZLE_SEED": "3"}
    )
    assert by_env.exit_code == 0, by_env.output
    assert by_env.output == by_option.output


@pytest.mark.parametrize("size", ["1", "0", "-4"])
def test_too_small_size_is_a_usage_error(size: str) -> None:
    result = runner.invoke(app, ["--show", "-s", size])
    assert result.exit_code == 2


# -- rendering ----------------------------------------------------------------


def test_render_grid_shows_identities_and_blank() -> None:
    text = _plain(render_grid(Grid.solved(3)))
    assert "·" in text
    for identity in (0, 1, 3, 4, 5, 6, 7, 8):
        assert str(identity) in text
    assert "2" not in text


@pytest.mark.parametrize(
    "cursor, action, expected",
    [
        ((0, 0), "up", (0, 0)),
        ((0, 0), "down", (1, 0)),
        ((1, 1), "left", (1, 0)),
        ((2, 2), "right", (2, 2)),
        ((2, 1), "right", (2, 2)),
    ],
)
def test_step_cursor_clamps_to_grid(
    cursor: tuple[int, int], action: str, expected: tuple[int, int]
) -> None:
    assert step_cursor(cursor, action, 3) == expected


def test_terminal_listener_tracks_last_signal() -> None:
    listener = TerminalListener()
    listener.on_tiles_placed(Grid.solved(3).placements())
    assert "8 tiles" in listener.status
    listener.on_tile_moved(4, (1, 1), (0, 1))
    assert "Tile 4" in listener.status
    listener.on_won()
    assert "Solved" in listener.status


# -- input mapping ------------------------------------------------------------


@pytest.mark.parametrize(
    "ch, action",
    [
        ("w", "up"),
        ("S", "down"),
        (" ", "activate"),
        ("\r", "activate"),
        ("r", "restart"),
        ("Q", "quit"),
        ("\x03", "quit"),
        ("x", ""),
    ],
)
def test_resolve_maps_keys(ch: str, action: str) -> None:
    assert resolve(ch) == action


# -- config -------------------------------------------------------------------


def test_config_defaults_and_seeded_source() -> None:
    config = PuzzleConfig()
    assert config.size == 3
    assert config.seed is None
    assert PuzzleConfig(seed=5).random_source().random() == PuzzleConfig(seed=5).random_source().random()


def test_config_rejects_bad_values() -> None:
    with pytest.raises(InvalidConfigError):
        PuzzleConfig(size=1)
    with pytest.raises(ValueError):
        PuzzleConfig(seed=2.0)  # type: ignore[arg-type]
