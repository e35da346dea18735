"""Session configuration: grid size and optional random seed."""

from __future__ import annotations

import random
from dataclasses import dataclass

from slidecore.errors import InvalidConfigError

DEFAULT_SIZE = 3
MIN_SIZE = 2

Seed = int | str | None


@dataclass(frozen=True)
class PuzzleConfig:
    """Validated inputs for a puzzle session.

    ``seed`` makes the shuffle reproducible; ``None`` draws from system
    entropy.
    """

    size: int = DEFAULT_SIZE
    seed: Seed = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        validate_size(self.size)
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, (int, str))
        ):
            raise InvalidConfigError(
                f"Seed must be an int or a string, got {type(self.seed).__name__}."
            )

    def random_source(self) -> random.Random:
        return random.Random(self.seed)


def validate_size(size: object) -> int:
    """Return *size* if it is a usable grid size, else raise."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidConfigError(
            f"Grid size must be an integer, got {type(size).__name__}."
        )
    if size < MIN_SIZE:
        raise InvalidConfigError(
            f"Grid size must be at least {MIN_SIZE}, got {size}."
        )
    return size
