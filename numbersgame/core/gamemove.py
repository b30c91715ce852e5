"""
Game move utilities for the 2048 game, providing functions for determining valid and invalid moves.
"""

from numpy import array_equal, ndarray

from numbersgame.core.direction import Direction
from numbersgame.core.gameboard import latent_state


def can_move(board: ndarray, direction: Direction | int) -> bool:
    """
    Check if a move changes the board.

    Parameters
    ----------
    board : ndarray
        The game board to check.
    direction : Direction or int
        Direction to check.

    Returns
    -------
    bool
        True if at least one cell differs after the move, False otherwise.

    Notes
    -----
    The move is simulated on a copy of the board, the original is never modified.
    """
    return not array_equal(board, latent_state(board, direction))


def valid_moves(board: ndarray) -> set[Direction]:
    """
    Determine the moves that change the current game board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    set[Direction]
        Directions whose move would modify at least one cell.
    """
    return {direction for direction in Direction if can_move(board, direction)}


def invalid_moves(board: ndarray) -> set[Direction]:
    """
    Determine the moves that leave the current game board unchanged.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    set[Direction]
        Directions whose move would be a no-op.
    """
    return set(Direction) - valid_moves(board)


def is_done(board: ndarray) -> bool:
    """
    Check if the game is lost: no move changes the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if no direction is valid.
    """
    return not any(can_move(board, direction) for direction in Direction)
