"""2048 game engine driven by a renderer and an input controller."""

import logging

from numpy import array_equal, int64, ndarray, zeros

from numbersgame.core.direction import Direction
from numbersgame.core.errors import OutOfRangeError
from numbersgame.core.gameboard import BOARD_SIZE, WIN_TILE, empty_cells, has_tile, latent_state, validate_board
from numbersgame.core.gamemove import is_done, valid_moves
from numbersgame.core.spawner import RandomTileSpawner, TileSpawner

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class NumbersGame:
    """
    2048 game engine.

    This class owns the 4x4 grid and the random source used to spawn tiles. It exposes queries for the
    renderer (cell values, win and loss state) and commands for the input controller (move, spawn).

    Parameters
    ----------
    spawner : TileSpawner, optional
        Random source used to spawn new tiles. Defaults to a ``RandomTileSpawner``.
    seed : int, optional
        Seed of the default spawner. Ignored when ``spawner`` is given.

    Notes
    -----
    - A new game starts with exactly one tile.
    - ``move`` neither spawns a tile nor checks for a win or a loss; callers chain ``move`` and
      ``add_new_tile`` themselves after consulting ``valid_moves``.
    """

    def __init__(self, spawner: TileSpawner | None = None, seed: int | None = None):
        self.size = BOARD_SIZE
        self._spawner = spawner if spawner is not None else RandomTileSpawner(seed=seed)
        self._current_state: ndarray = zeros((self.size, self.size), dtype=int64)
        self.add_new_tile()

    @classmethod
    def from_board(cls, board, spawner: TileSpawner | None = None) -> 'NumbersGame':
        """
        Build a game from an explicit board, without spawning any tile.

        Parameters
        ----------
        board : array_like
            A 4x4 grid of zeros and powers of two.
        spawner : TileSpawner, optional
            Random source used for later spawns.

        Returns
        -------
        NumbersGame
            A game whose grid is a copy of ``board``.

        Raises
        ------
        InvalidBoardError
            If the board has the wrong shape or holds an illegal value.
        """
        game = cls.__new__(cls)
        game.size = BOARD_SIZE
        game._spawner = spawner if spawner is not None else RandomTileSpawner()
        game._current_state = validate_board(board)
        return game

    @property
    def board(self) -> ndarray:
        """A copy of the current grid."""
        return self._current_state.copy()

    @property
    def is_finished(self) -> bool:
        """True if no move can change the board anymore."""
        return is_done(self._current_state)

    def get_value_at(self, index: int) -> int:
        """
        Get the value of a cell from its row-major index.

        Parameters
        ----------
        index : int
            Linear index in ``[0, 16)``; the cell is ``(index // 4, index % 4)``.

        Returns
        -------
        int
            The tile value, 0 when the cell is empty.

        Raises
        ------
        OutOfRangeError
            If the index is outside the board.
        """
        cells = self.size * self.size
        if not 0 <= index < cells:
            raise OutOfRangeError(index, cells)

        row, col = divmod(index, self.size)
        return int(self._current_state[row, col])

    def move(self, direction: Direction | int) -> None:
        """
        Slide and merge every tile toward a direction, in place.

        Parameters
        ----------
        direction : Direction or int
            Direction to push the tiles to.

        Notes
        -----
        A move that changes nothing is allowed and leaves the grid untouched.
        """
        direction = Direction(direction)
        self._current_state[:, :] = latent_state(self._current_state, direction)
        _logger.debug('Moved %s', direction.name)

    def add_new_tile(self) -> int | None:
        """
        Spawn a 2 (90%) or a 4 (10%) in a random empty cell.

        Returns
        -------
        int or None
            The index of the filled cell, or None when the board is full.

        Notes
        -----
        On a full board this is a no-op.
        """
        cells = empty_cells(self._current_state)
        if len(cells) == 0:
            return None

        slot, value = self._spawner.sample(len(cells))
        index = int(cells[slot])
        self._current_state.flat[index] = value
        _logger.debug('Spawned %d at cell %d', value, index)
        return index

    def valid_moves(self) -> set[Direction]:
        """
        Directions that would change the board.

        Returns
        -------
        set[Direction]
            Empty when the game is lost.
        """
        return valid_moves(self._current_state)

    def has_won(self) -> bool:
        """
        Check if a 2048 tile is on the board.

        Returns
        -------
        bool
            True if any cell equals 2048. Play can go on past this point.
        """
        return has_tile(self._current_state, WIN_TILE)

    def copy(self, spawner: TileSpawner | None = None) -> 'NumbersGame':
        """
        Copy the game with an independent grid.

        Parameters
        ----------
        spawner : TileSpawner, optional
            Random source of the copy. Defaults to a new unseeded ``RandomTileSpawner``.

        Returns
        -------
        NumbersGame
            The copy.
        """
        return NumbersGame.from_board(self._current_state, spawner=spawner)

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(self)
        print()

    def __str__(self) -> str:
        lines = []
        for row in self._current_state.tolist():
            lines.append(''.join(('-' if value == 0 else str(value)).rjust(3) + ' ' for value in row))
        return '\n'.join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NumbersGame):
            return NotImplemented
        return bool(array_equal(self._current_state, other._current_state))

    # ##>: The grid is mutable, so games cannot be hashed.
    __hash__ = None
