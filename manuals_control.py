# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from typing import Any

from numbersgame import Direction, GameController, MoveOutcome
from numbersgame.utils import WindowBoard


def redraw(window: WindowBoard, controller: GameController):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    controller: GameController
        Controller holding the game to draw
    """
    window.show_board(controller.game)


def reset(controller: GameController, window: WindowBoard, seed: int | None = None):
    """
    Start a new game and redraw the game board.

    Parameters
    ----------
    controller: GameController
        The turn controller

    window: WindowBoard
        Class to draw the game board

    seed: int, optional
        Seed of the new game
    """
    # ##: Reset the game.
    controller.reset(seed=seed)

    # ##: Redraw the game board.
    redraw(window, controller)


def step(controller: GameController, window: WindowBoard, direction: Direction):
    """
    Apply a direction to the game.

    Parameters
    ----------
    controller: GameController
        The turn controller

    window: WindowBoard
        Class to draw the game board

    direction: Direction
        Direction to apply
    """
    outcome = controller.on_move(direction)
    logging.debug("outcome=%s", outcome.value)

    # ##: Notifications are drawn by the controller callback.
    if outcome is MoveOutcome.MOVED:
        redraw(window, controller)


def key_handler(controller: GameController, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    controller: GameController
        The turn controller

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    logging.debug("pressed %s", event.key)

    # ##>: Modifier-only presses carry no key name.
    if event.key is None:
        return None

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(controller, window)
        return None

    try:
        direction = Direction.from_key(event.key)
    except KeyError:
        return None
    step(controller, window, direction)
    return None


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Play 2048 with the arrow keys.")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile spawner")
    parser.add_argument("--verbose", action="store_true", help="Log every move")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    window_board = WindowBoard()
    game_controller = GameController(notify=window_board.show_message)
    window_board.register_key_handler(lambda event: key_handler(game_controller, window_board, event))

    reset(game_controller, window_board, seed=args.seed)

    # Blocking event loop
    window_board.show(block=True)
