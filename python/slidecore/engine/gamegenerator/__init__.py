from slidecore.engine.gamegenerator.generator import (
    ShuffleGenerator,
    count_inversions,
    is_solvable_sequence,
)

__all__ = ["ShuffleGenerator", "count_inversions", "is_solvable_sequence"]
