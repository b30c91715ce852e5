"""2048 puzzle: game engine, turn controller and Matplotlib board."""

from .controller import GameController, MoveOutcome
from .core import Direction, InvalidBoardError, OutOfRangeError
from .envs import NumbersGame

__all__ = ["Direction", "GameController", "InvalidBoardError", "MoveOutcome", "NumbersGame", "OutOfRangeError"]
