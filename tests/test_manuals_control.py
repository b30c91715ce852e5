"""
Tests for the keyboard handling of the play script.
"""

from types import SimpleNamespace
from unittest import TestCase, main

import numpy as np

from manuals_control import key_handler
from numbersgame.controller import GameController
from numbersgame.envs.numbersgame import NumbersGame


class RecordingWindow:
    """Window stand-in recording what the handler asks it to do."""

    def __init__(self):
        self.boards = []
        self.closed = False

    def show_board(self, game):
        self.boards.append(game.board)

    def close(self):
        self.closed = True


def make_handler_state(board) -> tuple[GameController, RecordingWindow]:
    """Controller over ``board`` and an empty recording window."""
    game = NumbersGame.from_board(np.array(board))
    return GameController(game=game, notify=lambda title, message: None), RecordingWindow()


class TestKeyHandler(TestCase):
    """Test key dispatch."""

    def test_key_without_name_is_ignored(self):
        """A press with no key name, like a lone modifier, changes nothing."""
        board = [[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]
        controller, window = make_handler_state(board)

        self.assertIsNone(key_handler(controller, window, SimpleNamespace(key=None)))
        np.testing.assert_array_equal(controller.game.board, board)
        self.assertEqual(window.boards, [])
        self.assertFalse(window.closed)

    def test_arrow_key_moves_and_redraws(self):
        """An arrow key plays a turn and redraws the board."""
        controller, window = make_handler_state([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4])

        key_handler(controller, window, SimpleNamespace(key="left"))

        self.assertEqual(controller.game.get_value_at(0), 4)
        self.assertEqual(len(window.boards), 1)

    def test_unknown_key_is_ignored(self):
        """Keys without a binding leave the game alone."""
        board = [[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]
        controller, window = make_handler_state(board)

        key_handler(controller, window, SimpleNamespace(key="space"))

        np.testing.assert_array_equal(controller.game.board, board)
        self.assertEqual(window.boards, [])

    def test_escape_closes_window(self):
        """Escape closes the window."""
        controller, window = make_handler_state([[2, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])

        key_handler(controller, window, SimpleNamespace(key="escape"))

        self.assertTrue(window.closed)


if __name__ == "__main__":
    main()
