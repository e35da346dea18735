"""Generates solvable tile permutations for the sliding puzzle."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from slidecore.config import validate_size
from slidecore.models.grid import blank_identity

logger = logging.getLogger(__name__)


def count_inversions(sequence: Sequence[int]) -> int:
    """Number of pairs i < j with ``sequence[i] > sequence[j]``."""
    inversions = 0
    for i in range(len(sequence) - 1):
        for j in range(i + 1, len(sequence)):
            if sequence[i] > sequence[j]:
                inversions += 1
    return inversions


def is_solvable_sequence(size: int, sequence: Sequence[int]) -> bool:
    """Apply the parity rule to a generated pile.

    Odd grids need an even inversion count, even grids an odd one.
    """
    return bool(size % 2) != bool(count_inversions(sequence) % 2)


class ShuffleGenerator:
    """Creates solvable piles by shuffling and correcting inversion parity."""

    @staticmethod
    def identities(size: int) -> list[int]:
        """All tile identities for *size*, with the blank's home removed."""
        blank = blank_identity(size)
        return [i for i in range(size * size) if i != blank]

    @staticmethod
    def shuffle(items: list[int], rng: random.Random) -> None:
        """Fisher–Yates shuffle of *items* in-place."""
        for i in range(len(items) - 1, 0, -1):
            j = rng.randrange(i + 1)
            items[i], items[j] = items[j], items[i]

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> list[int]:
        """Return a shuffled, solvability-corrected pile of N²−1 identities."""
        validate_size(size)
        if rng is None:
            rng = random.Random()

        pile = ShuffleGenerator.identities(size)
        ShuffleGenerator.shuffle(pile, rng)

        if not is_solvable_sequence(size, pile):
            # Swapping two neighbours changes the inversion count by one.
            pile[0], pile[1] = pile[1], pile[0]
            logger.debug("Parity corrected by swapping %d and %d", pile[1], pile[0])

        return pile
