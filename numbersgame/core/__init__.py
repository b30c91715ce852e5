# -*- coding: utf-8 -*-
"""
This module provides utility functions for managing game states and moves in a 2048 game.

It includes the move directions, functions for compacting and merging lines, sliding a whole board,
checking valid and invalid moves, checking if the game is done, and the random source used to spawn tiles.
"""

from .direction import Direction
from .errors import InvalidBoardError, OutOfRangeError
from .gameboard import (
    BOARD_SIZE,
    TILE_SPAWN_PROBS,
    WIN_TILE,
    compact_line,
    empty_cells,
    has_tile,
    latent_state,
    merge_line,
    slide_and_merge,
    slide_line,
    validate_board,
)
from .gamemove import can_move, invalid_moves, is_done, valid_moves
from .spawner import RandomTileSpawner, TileSpawner

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "WIN_TILE",
    "Direction",
    "InvalidBoardError",
    "OutOfRangeError",
    "RandomTileSpawner",
    "TileSpawner",
    "can_move",
    "compact_line",
    "empty_cells",
    "has_tile",
    "invalid_moves",
    "is_done",
    "latent_state",
    "merge_line",
    "slide_and_merge",
    "slide_line",
    "valid_moves",
    "validate_board",
]
