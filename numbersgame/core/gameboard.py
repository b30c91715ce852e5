"""
Core board functions for the 2048 game: line compaction, merging and board validation.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import asarray, flatnonzero, int64, ndarray, rot90, zeros_like

from numbersgame.core.direction import Direction
from numbersgame.core.errors import InvalidBoardError

# ##>: The board is always a 4x4 grid.
BOARD_SIZE = 4

# ##>: Reaching this tile wins the game; play may continue past it.
WIN_TILE = 2048

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def compact_line(line: ndarray) -> ndarray:
    """
    Slide every tile of a line toward its start, keeping their relative order.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row or column, near edge first.

    Returns
    -------
    ndarray
        A new line with all non-zero values at the start and zeros after them.

    Notes
    -----
    This is a stable partition, not a sort: ``[0, 4, 0, 2]`` becomes ``[4, 2, 0, 0]``.
    """
    result = zeros_like(line)
    non_zero = line[line != 0]
    result[: len(non_zero)] = non_zero
    return result


def merge_line(line: ndarray) -> ndarray:
    """
    Merge adjacent equal tiles of a compacted line, from its start toward its end.

    Parameters
    ----------
    line : ndarray
        A 1D compacted line, near edge first.

    Returns
    -------
    ndarray
        A new line where each merged pair holds the doubled value at the near cell and zero at the far cell.

    Notes
    -----
    - The far cell of a merge is zeroed, so it can never take part in a second merge during the same pass.
    - Gaps left by merges are not closed here; run ``compact_line`` afterwards.
    """
    result = line.copy()
    for i in range(len(result) - 1):
        if result[i] > 0 and result[i] == result[i + 1]:
            result[i] *= 2
            result[i + 1] = 0
    return result


def slide_line(line: ndarray) -> ndarray:
    """
    Apply a full move to one line: compact, merge, then compact again.

    Parameters
    ----------
    line : ndarray
        A 1D line, near edge first.

    Returns
    -------
    ndarray
        The line after the move.
    """
    return compact_line(merge_line(compact_line(line)))


def slide_and_merge(board: ndarray) -> ndarray:
    """
    Slide the game board to the left and merge adjacent tiles.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    ndarray
        The updated game board after sliding and merging.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    for i, row in enumerate(board):
        result[i] = slide_line(row)
    return result


def latent_state(board: ndarray, direction: Direction | int) -> ndarray:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. Left untouched.
    direction : Direction or int
        The direction to push the tiles to.

    Returns
    -------
    ndarray
        A new board holding the result of the move.

    Raises
    ------
    ValueError
        If ``direction`` is not a valid direction value.
    """
    turns = Direction(direction).value
    updated_board = slide_and_merge(rot90(board, k=turns))
    return rot90(updated_board, k=-turns).copy()


def empty_cells(board: ndarray) -> ndarray:
    """
    Linear indices of the empty cells, in row-major order.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    ndarray
        Ascending indices ``i`` such that the cell ``(i // size, i % size)`` is empty.
    """
    return flatnonzero(board == 0)


def has_tile(board: ndarray, value: int) -> bool:
    """Check whether at least one cell holds exactly ``value``."""
    return bool(np_any(board == value))


def validate_board(board) -> ndarray:
    """
    Check that a board describes a legal grid and return it as an int64 array.

    Parameters
    ----------
    board : array_like
        Candidate board.

    Returns
    -------
    ndarray
        A new ``(BOARD_SIZE, BOARD_SIZE)`` int64 array.

    Raises
    ------
    InvalidBoardError
        If the board has the wrong shape, or holds a value that is neither 0 nor a positive power of two.
    """
    state = asarray(board)
    if state.shape != (BOARD_SIZE, BOARD_SIZE):
        raise InvalidBoardError(f'Expected a {BOARD_SIZE}x{BOARD_SIZE} board, got shape {state.shape}')

    if state.dtype.kind not in 'iu':
        raise InvalidBoardError(f'Expected integer cells, got dtype {state.dtype}')

    state = state.astype(int64)
    if not np_all(state >= 0) or np_any(state & (state - 1)):
        raise InvalidBoardError('Every cell must be 0 or a positive power of two')
    return state
