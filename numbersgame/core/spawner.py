"""
Random source used to spawn new tiles on the board.
"""

from typing import Protocol

from numpy.random import PCG64DXSM, Generator, default_rng

from numbersgame.core.gameboard import TILE_SPAWN_PROBS

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS.keys())
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


class TileSpawner(Protocol):
    """Capability choosing where a new tile lands and which value it carries."""

    def sample(self, num_empty: int) -> tuple[int, int]:
        """
        Choose an empty slot and a tile value.

        Parameters
        ----------
        num_empty : int
            Number of empty cells on the board. Must be > 0.

        Returns
        -------
        tuple[int, int]
            The position of the chosen slot among the empty cells, in ``[0, num_empty)``, and the tile value.
        """
        ...


class RandomTileSpawner:
    """
    Tile spawner backed by a NumPy random generator.

    The generator is created once per spawner, so a given seed always yields the same sequence of tiles.

    Parameters
    ----------
    seed : int, optional
        Random number generator seed for reproducibility.
    """

    def __init__(self, seed: int | None = None):
        self._rng: Generator = default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

    def sample(self, num_empty: int) -> tuple[int, int]:
        """
        Choose an empty slot uniformly and a tile value (90% for 2, 10% for 4).

        Parameters
        ----------
        num_empty : int
            Number of empty cells on the board. Must be > 0.

        Returns
        -------
        tuple[int, int]
            The slot among the empty cells and the tile value.

        Raises
        ------
        ValueError
            If num_empty <= 0 (no empty cells to place a tile).
        """
        if num_empty <= 0:
            raise ValueError(f'num_empty must be > 0, got {num_empty}')

        value = int(self._rng.choice(_TILE_VALUES, p=_TILE_PROBS))
        slot = int(self._rng.integers(num_empty))
        return slot, value
