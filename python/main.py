#!/usr/bin/env python3
"""Sliding Tile Puzzle.

Usage::

    python main.py                   # play a 3×3 puzzle in the terminal
    python main.py -s 4 --seed 7     # reproducible 4×4 puzzle
    python main.py --show --seed 7   # print the dealt grid and exit
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidecore.config import DEFAULT_SIZE, PuzzleConfig  # noqa: E402
from slidecore.errors import InvalidConfigError  # noqa: E402


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _parse_seed(raw: Optional[str]) -> int | str | None:
    """Numeric seeds are used as ints so ``--seed 7`` and ``seed=7`` agree."""
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return raw


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        envvar="SLIDE_PUZZLE_SIZE",
        help="Grid size (at least 2).",
    ),
    seed: Optional[str] = typer.Option(
        None, "--seed",
        envvar="SLIDE_PUZZLE_SEED",
        help="Seed for a reproducible shuffle.",
    ),
    show: bool = typer.Option(
        False, "--show",
        help="Print the dealt grid and exit.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Sliding Tile Puzzle."""
    _configure_logging(log_level)

    try:
        config = PuzzleConfig(size=size, seed=_parse_seed(seed))
    except InvalidConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--size' / '--seed'") from exc

    from slideterm import app as terminal

    if show:
        terminal.show(config)
        return

    terminal.run(config)


if __name__ == "__main__":
    app()
