from slidecore.engine.gameplay.controller import PuzzleController
from slidecore.engine.gameplay.events import PuzzleListener

__all__ = ["PuzzleController", "PuzzleListener"]
