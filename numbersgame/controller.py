"""
Turn controller turning directional inputs into game commands.
"""

import logging
from enum import Enum
from typing import Callable

from numbersgame.core.direction import Direction
from numbersgame.envs import NumbersGame

# ##>: Module logger.
_logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]


class MoveOutcome(Enum):
    """Result of one directional input."""

    WON = "won"
    LOST = "lost"
    MOVED = "moved"
    IGNORED = "ignored"


def log_notification(title: str, message: str) -> None:
    """Default notifier: report the notification through the module logger."""
    _logger.info('%s: %s', title, message)


class GameController:
    """
    Apply player inputs to a game, one turn at a time.

    Parameters
    ----------
    game : NumbersGame, optional
        Game to drive. A new one is created when omitted.
    notify : Callable[[str, str], None], optional
        Called with a title and a message when the game is won or lost.
    """

    def __init__(self, game: NumbersGame | None = None, notify: Notifier | None = None):
        self.game = game if game is not None else NumbersGame()
        self._notify = notify if notify is not None else log_notification

    def on_move(self, direction: Direction | int) -> MoveOutcome:
        """
        Play one turn.

        Parameters
        ----------
        direction : Direction or int
            Direction requested by the player.

        Returns
        -------
        MoveOutcome
            - ``WON`` if the board already holds a 2048 tile; nothing is moved.
            - ``LOST`` if no direction can change the board.
            - ``MOVED`` if the move was applied and a new tile spawned.
            - ``IGNORED`` if the requested move would not change the board.
        """
        direction = Direction(direction)

        if self.game.has_won():
            self._notify('Congratulation', 'You won!')
            return MoveOutcome.WON

        moves = self.game.valid_moves()
        if not moves:
            self._notify('Fail', 'Game is over')
            return MoveOutcome.LOST

        if direction not in moves:
            _logger.debug('Ignored %s, valid moves are %s', direction.name, sorted(move.name for move in moves))
            return MoveOutcome.IGNORED

        self.game.move(direction)
        self.game.add_new_tile()
        return MoveOutcome.MOVED

    def reset(self, seed: int | None = None) -> NumbersGame:
        """
        Start a new game.

        Parameters
        ----------
        seed : int, optional
            Seed of the new game's random source.

        Returns
        -------
        NumbersGame
            The new game.
        """
        self.game = NumbersGame(seed=seed)
        return self.game
