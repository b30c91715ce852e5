from unittest import TestCase, main

from numpy import array, zeros

from numbersgame.core.direction import Direction
from numbersgame.core.gamemove import can_move, invalid_moves, is_done, valid_moves


class TestGameMove(TestCase):
    def test_invalid_moves(self):
        """
        Test if invalid moves are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(invalid_moves(board), {Direction.LEFT})

    def test_valid_moves(self):
        """
        Test if valid moves are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(valid_moves(board), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_tile_in_corner(self):
        """
        A lone tile in the top-right corner cannot move right nor up.
        """
        board = array([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertFalse(can_move(board, Direction.RIGHT))
        self.assertEqual(valid_moves(board), {Direction.LEFT, Direction.DOWN})

    def test_empty_board(self):
        """
        No direction changes an empty board.
        """
        board = zeros((4, 4), dtype=int)
        self.assertEqual(valid_moves(board), set())
        self.assertTrue(is_done(board))

    def test_full_board_without_merge(self):
        """
        A full board without equal neighbours is lost.
        """
        board = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(valid_moves(board), set())
        self.assertEqual(invalid_moves(board), set(Direction))
        self.assertTrue(is_done(board))

    def test_full_board_with_merge(self):
        """
        A full board with one vertical pair can only move vertically.
        """
        board = array([[2, 4, 2, 4], [2, 8, 4, 2], [4, 2, 8, 4], [8, 4, 2, 8]])
        self.assertEqual(valid_moves(board), {Direction.UP, Direction.DOWN})
        self.assertFalse(is_done(board))

    def test_board_untouched(self):
        """
        Checking moves never modifies the board.
        """
        board = array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 4], [0, 0, 0, 4]])
        original = board.copy()
        valid_moves(board)
        self.assertTrue((board == original).all())


if __name__ == '__main__':
    main()
